"""Fixed-width unsigned integer types."""

from __future__ import annotations

from typing import Any, ClassVar, SupportsInt

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


class BaseUint(int):
    """
    A base class for fixed-width unsigned integers that inherits from `int`.

    Arithmetic is closed over the concrete type: mixing with a plain `int`
    or a different width is a `TypeError`, and any result outside the
    representable range is an `OverflowError`. Comparisons fall back to
    plain integer semantics.
    """

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: SupportsInt) -> Self:
        """
        Create and validate a new unsigned integer.

        Raises:
            OverflowError: If `value` is outside [0, 2**BITS - 1].
        """
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    def _check_operand(self, other: Any, op_symbol: str) -> None:
        if not isinstance(other, BaseUint) or other.BITS != self.BITS:
            raise TypeError(
                f"Unsupported operand type(s) for {op_symbol}: "
                f"'{type(self).__name__}' and '{type(other).__name__}'"
            )

    def __add__(self, other: Any) -> Self:
        self._check_operand(other, "+")
        return type(self)(int(self) + int(other))

    def __sub__(self, other: Any) -> Self:
        self._check_operand(other, "-")
        return type(self)(int(self) - int(other))

    def __mul__(self, other: Any) -> Self:
        self._check_operand(other, "*")
        return type(self)(int(self) * int(other))

    def __floordiv__(self, other: Any) -> Self:
        self._check_operand(other, "//")
        return type(self)(int(self) // int(other))

    def __mod__(self, other: Any) -> Self:
        self._check_operand(other, "%")
        return type(self)(int(self) % int(other))

    __radd__ = __add__
    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return str(int(self))

    def __hash__(self) -> int:
        return int.__hash__(self)


class Uint64(BaseUint):
    """A type representing a 64-bit unsigned integer (uint64)."""

    BITS = 64
