from __future__ import annotations

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)
from enum import Enum

from precise_amount.errors import UnknownRoundingModeError


class RoundingMode(Enum):
    """Rule for choosing the neighbouring value when precision is reduced.

    Values use the Intl spelling.

    Members:
        CEIL: Toward +infinity.
        FLOOR: Toward -infinity.
        EXPAND: Away from zero.
        TRUNC: Toward zero (drop digits, no adjustment).
        HALF_CEIL: Nearest; ties toward +infinity.
        HALF_FLOOR: Nearest; ties toward -infinity.
        HALF_EXPAND: Nearest; ties away from zero.
        HALF_TRUNC: Nearest; ties toward zero.
        HALF_EVEN: Nearest; ties to the even last retained digit (default).
    """

    CEIL = "ceil"
    FLOOR = "floor"
    EXPAND = "expand"
    TRUNC = "trunc"
    HALF_CEIL = "halfCeil"
    HALF_FLOOR = "halfFloor"
    HALF_EXPAND = "halfExpand"
    HALF_TRUNC = "halfTrunc"
    HALF_EVEN = "halfEven"

    @classmethod
    def from_str(cls, name: RoundingMode | str) -> RoundingMode:
        """Resolve a rounding mode from its Intl value, member name or long spelling.

        Matching ignores case, '-' and '_', so "halfEven", "HALF_EVEN", "half-even"
        and "half-to-even" all resolve to `HALF_EVEN`.

        Args:
            name: RoundingMode or its textual name.

        Returns:
            RoundingMode: The matching member.

        Raises:
            UnknownRoundingModeError: If $name matches no member.
        """
        if isinstance(name, RoundingMode):
            return name

        # Raise: only strings can name a rounding mode
        if not isinstance(name, str):
            raise UnknownRoundingModeError(f"Cannot call `RoundingMode.from_str` because $name has unsupported type '{type(name).__name__}'")

        key = name.strip().replace("-", "").replace("_", "").lower()
        mode = _ROUNDING_MODE_ALIASES.get(key)

        # Raise: unknown names are never guessed
        if mode is None:
            supported = [m.value for m in cls]
            raise UnknownRoundingModeError(f"Cannot call `RoundingMode.from_str` because $name ('{name}') is not a rounding mode. Supported modes: {supported}")

        return mode

    def __str__(self) -> str:
        return self.value


DEFAULT_ROUNDING_MODE = RoundingMode.HALF_EVEN

_ROUNDING_MODE_ALIASES: dict[str, RoundingMode] = {
    "ceil": RoundingMode.CEIL,
    "ceiling": RoundingMode.CEIL,
    "floor": RoundingMode.FLOOR,
    "expand": RoundingMode.EXPAND,
    "trunc": RoundingMode.TRUNC,
    "truncate": RoundingMode.TRUNC,
    "halfceil": RoundingMode.HALF_CEIL,
    "halfceiling": RoundingMode.HALF_CEIL,
    "halffloor": RoundingMode.HALF_FLOOR,
    "halfexpand": RoundingMode.HALF_EXPAND,
    "halftrunc": RoundingMode.HALF_TRUNC,
    "halftruncate": RoundingMode.HALF_TRUNC,
    "halfeven": RoundingMode.HALF_EVEN,
    "halftoeven": RoundingMode.HALF_EVEN,
}


def to_decimal_rounding(mode: RoundingMode, is_negative: bool) -> str:
    """Return the `decimal` rounding constant that implements $mode for a value of given sign.

    `decimal` has no sign-aware tie-breakers, so HALF_CEIL and HALF_FLOOR pick
    ROUND_HALF_UP (ties away from zero) or ROUND_HALF_DOWN (ties toward zero) by sign.

    Args:
        mode: Rounding mode to apply.
        is_negative: True if the value being rounded is negative.

    Returns:
        str: One of the `decimal.ROUND_*` constants.
    """
    if mode is RoundingMode.HALF_CEIL:
        return ROUND_HALF_DOWN if is_negative else ROUND_HALF_UP
    if mode is RoundingMode.HALF_FLOOR:
        return ROUND_HALF_UP if is_negative else ROUND_HALF_DOWN
    return _SIGN_INDEPENDENT_ROUNDING[mode]


_SIGN_INDEPENDENT_ROUNDING = {
    RoundingMode.CEIL: ROUND_CEILING,
    RoundingMode.FLOOR: ROUND_FLOOR,
    RoundingMode.EXPAND: ROUND_UP,
    RoundingMode.TRUNC: ROUND_DOWN,
    RoundingMode.HALF_EXPAND: ROUND_HALF_UP,
    RoundingMode.HALF_TRUNC: ROUND_HALF_DOWN,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
}
