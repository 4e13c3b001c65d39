from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise, so `0.1` becomes
    `Decimal("0.1")` and not its binary approximation. Strings are stripped of surrounding
    whitespace before conversion.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    if isinstance(value, str):
        return Decimal(value.strip())

    return Decimal(str(value))


def is_positive_int(value: object) -> bool:
    """Return True if $value is an int (not bool) greater than zero."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_non_negative_int(value: object) -> bool:
    """Return True if $value is an int (not bool) greater than or equal to zero."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
