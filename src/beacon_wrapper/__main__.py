"""
Beacon API wrapper CLI entry point.

Run a wrapper in front of a beacon node that emulates blob pruning for
archiver test suites.

Usage::

    python -m beacon_wrapper -b http://localhost:3500 -p 3600 -r 4096
    beacon-wrapper --beacon-endpoint http://localhost:5052 --retention-epochs 3

Options:
    -b, --beacon-endpoint   Base URL of the upstream beacon API
    -p, --port              Port to listen on (default: 3600)
    -r, --retention-epochs  Epochs of blob history to retain (default: 4096)
    --host                  Address to bind (default: 0.0.0.0)
    --upstream-timeout      Timeout for upstream requests in seconds
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal
import sys
from time import time as wall_time
from typing import Callable

from beacon_wrapper.api import WrapperServer, fetch_genesis_time
from beacon_wrapper.api.client import DEFAULT_TIMEOUT
from beacon_wrapper.chain import SlotClock
from beacon_wrapper.config import (
    DEFAULT_BEACON_ENDPOINT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_RETENTION_EPOCHS,
    WrapperConfig,
)
from beacon_wrapper.exceptions import GenesisFetchError
from beacon_wrapper.retention import RetentionPolicy

logger = logging.getLogger(__name__)

EXIT_OK = 0
"""Clean shutdown."""

EXIT_FAILURE = 1
"""Startup failed: genesis unavailable or port not bindable."""


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = f"{self.CYAN}{self.formatTime(record, self.datefmt)}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{timestamp} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure root logging with optional colors."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if no_color:
        formatter: logging.Formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)

    # httpx logs every request at INFO, which would double our own request log.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _install_signal_handlers(stop_event: asyncio.Event) -> list[signal.Signals]:
    """Set `stop_event` on SIGINT/SIGTERM. Returns the signals handled."""
    loop = asyncio.get_running_loop()
    installed = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
        except NotImplementedError:
            # Event loops without signal support (Windows); Ctrl+C still
            # raises KeyboardInterrupt there.
            continue
        installed.append(sig)
    return installed


async def run_wrapper(
    config: WrapperConfig,
    *,
    time_fn: Callable[[], float] = wall_time,
    stop_event: asyncio.Event | None = None,
) -> int:
    """
    Run the wrapper until stopped.

    The genesis time is fetched before the listener is bound. If it cannot
    be fetched the wrapper never starts serving.

    Args:
        config: Process configuration.
        time_fn: Wall-clock source for the slot clock.
        stop_event: Event that stops the server. Signal handlers for
            SIGINT/SIGTERM are installed when omitted.

    Returns:
        Process exit code.
    """
    bootstrap_timeout = config.upstream_timeout or DEFAULT_TIMEOUT
    try:
        genesis_time = await fetch_genesis_time(config.beacon_endpoint, timeout=bootstrap_timeout)
    except GenesisFetchError as e:
        logger.error("Failed to fetch genesis time: %s", e)
        return EXIT_FAILURE

    policy = RetentionPolicy(
        clock=SlotClock(genesis_time=genesis_time, time_fn=time_fn),
        retention_epochs=config.retention_epochs,
    )
    logger.info(
        "Retention window is %d epochs (%d slots)",
        config.retention_epochs,
        policy.window_slots,
    )

    installed: list[signal.Signals] = []
    if stop_event is None:
        stop_event = asyncio.Event()
        installed = _install_signal_handlers(stop_event)

    server = WrapperServer(config=config, policy=policy)
    try:
        await server.run(stop_event)
    except OSError as e:
        logger.error("Failed to listen on %s:%d: %s", config.host, config.port, e)
        return EXIT_FAILURE
    finally:
        loop = asyncio.get_running_loop()
        for sig in installed:
            loop.remove_signal_handler(sig)

    logger.info("Server exiting")
    return EXIT_OK


def _non_negative_int(value: str) -> int:
    """Argparse type for unsigned integers."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from e
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="beacon-wrapper",
        description="Beacon API wrapper that emulates blob pruning",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-b",
        "--beacon-endpoint",
        default=DEFAULT_BEACON_ENDPOINT,
        help=f"Base URL of the upstream beacon API (default: {DEFAULT_BEACON_ENDPOINT})",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=_non_negative_int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "-r",
        "--retention-epochs",
        type=_non_negative_int,
        default=DEFAULT_RETENTION_EPOCHS,
        help=f"Epochs of blob history to retain (default: {DEFAULT_RETENTION_EPOCHS})",
    )
    parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Address to bind (default: {DEFAULT_HOST})",
    )
    parser.add_argument(
        "--upstream-timeout",
        type=float,
        default=None,
        help="Timeout for upstream requests in seconds (default: none)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = WrapperConfig(
            host=args.host,
            port=args.port,
            beacon_endpoint=args.beacon_endpoint,
            retention_epochs=args.retention_epochs,
            upstream_timeout=args.upstream_timeout,
        )
    except ValueError as e:
        parser.error(str(e))

    setup_logging(args.verbose, args.no_color)

    try:
        exit_code = asyncio.run(run_wrapper(config))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        exit_code = EXIT_OK

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
