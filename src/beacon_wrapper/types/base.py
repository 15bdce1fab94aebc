"""Base model for parsing Beacon API payloads."""

from pydantic import BaseModel, ConfigDict


class BeaconApiModel(BaseModel):
    """
    An immutable pydantic model for Beacon API JSON bodies.

    Beacon nodes add fields over time, so unknown keys are ignored rather
    than rejected. Field names match the snake_case wire format.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        validate_default=True,
    )
