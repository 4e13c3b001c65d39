from __future__ import annotations

import logging
from decimal import Context, Decimal, MAX_EMAX, MIN_EMIN
from enum import Enum
from typing import NamedTuple

from precise_amount.domain.decimal_value import DecimalValue
from precise_amount.domain.rounding_mode import DEFAULT_ROUNDING_MODE, RoundingMode, to_decimal_rounding
from precise_amount.errors import InvalidPrecisionError
from precise_amount.utils.numeric_tools import is_non_negative_int, is_positive_int

logger = logging.getLogger(__name__)

# Upper bound for requested digit counts; keeps zero-padding bounded
MAX_DIGITS = 1000


class Precision(NamedTuple):
    """Significant and fractional digit counts attached to a value.

    The two counts answer different questions (total precision vs. decimal places) and
    are stored side by side; neither is derived from the other once explicitly set.
    """

    significant_digits: int
    fraction_digits: int

    @classmethod
    def natural(cls, value: DecimalValue) -> Precision:
        """Return the precision $value carries as written."""
        return cls(value.natural_significant_digits(), value.natural_fraction_digits())


class PrecisionChange(Enum):
    """Direction of a precision change on one dimension.

    Members:
        UPGRADE: More digits requested; zeros are appended, the rounding mode is not used.
        DOWNGRADE: Fewer digits requested; digits are dropped and the rounding mode decides.
        UNCHANGED: Same number of digits.
    """

    UPGRADE = "UPGRADE"
    DOWNGRADE = "DOWNGRADE"
    UNCHANGED = "UNCHANGED"


def classify_precision_change(current: int, target: int) -> PrecisionChange:
    """Classify the move from $current to $target digits on a single dimension."""
    if target > current:
        return PrecisionChange.UPGRADE
    if target < current:
        return PrecisionChange.DOWNGRADE
    return PrecisionChange.UNCHANGED


def validate_precision(significant_digits: int | None, fraction_digits: int | None) -> None:
    """Check requested digit counts.

    Args:
        significant_digits: None, or an int in [1, MAX_DIGITS].
        fraction_digits: None, or an int in [0, MAX_DIGITS].

    Raises:
        InvalidPrecisionError: If a provided count is out of range or not an int.
    """
    # Raise: significant digits must be a positive int
    if significant_digits is not None and not (is_positive_int(significant_digits) and significant_digits <= MAX_DIGITS):
        raise InvalidPrecisionError(f"Cannot set precision because $significant_digits ({significant_digits!r}) is not an int in range 1..{MAX_DIGITS}")

    # Raise: fraction digits must be a non-negative int
    if fraction_digits is not None and not (is_non_negative_int(fraction_digits) and fraction_digits <= MAX_DIGITS):
        raise InvalidPrecisionError(f"Cannot set precision because $fraction_digits ({fraction_digits!r}) is not an int in range 0..{MAX_DIGITS}")


def round_to_precision(
    value: DecimalValue,
    *,
    significant_digits: int | None = None,
    fraction_digits: int | None = None,
    rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE,
) -> tuple[DecimalValue, Precision]:
    """Round $value to the requested precision and return it with the resulting metadata.

    Rules:
        - Nothing requested: $value is returned unchanged with its natural precision.
        - Only $fraction_digits: the value is cut or padded at that decimal place;
          significant digits are counted from the result.
        - Only $significant_digits: the value is cut or padded after that many digits
          counted from the most significant one; fraction digits follow from the result.
        - Both: $fraction_digits places the decimal point and both counts are kept verbatim.

    Padding (upgrade) never consults $rounding_mode; only dropping digits (downgrade) does.

    Args:
        value: Exact value to round.
        significant_digits: Requested significant digits, or None.
        fraction_digits: Requested fractional digits, or None.
        rounding_mode: Mode applied when digits are dropped.

    Returns:
        tuple[DecimalValue, Precision]: Rounded value and its precision.

    Raises:
        InvalidPrecisionError: If a requested count is invalid.
    """
    validate_precision(significant_digits, fraction_digits)

    if significant_digits is None and fraction_digits is None:
        return value, Precision.natural(value)

    if fraction_digits is not None:
        target_exponent = -fraction_digits
    else:
        target_exponent = _leading_position(value) - significant_digits + 1

    natural = Precision.natural(value)
    logger.debug(
        f"Rounding {value!r} with mode {rounding_mode}: "
        f"fraction {_describe_change(natural.fraction_digits, fraction_digits)}, "
        f"significant {_describe_change(natural.significant_digits, significant_digits)}"
    )

    result = _requantize(value, target_exponent, rounding_mode)

    # A carry (9.99 -> 10.0) adds a leading digit; drop the extra trailing zero to keep the count
    if fraction_digits is None and not result.is_zero and result.adjusted > _leading_position(value):
        target_exponent += 1
        result = _requantize(result, target_exponent, rounding_mode)

    # Significant-digit rounding can leave a positive exponent (1.23E+5); store it as written digits
    result = result.in_plain_form()

    if fraction_digits is not None and significant_digits is not None:
        return result, Precision(significant_digits, fraction_digits)
    if fraction_digits is not None:
        return result, Precision(result.natural_significant_digits(), fraction_digits)
    return result, Precision(significant_digits, max(0, -target_exponent))


def _leading_position(value: DecimalValue) -> int:
    # Zero counts its significant digits from the ones place
    return 0 if value.is_zero else value.adjusted


def _describe_change(current: int, target: int | None) -> str:
    if target is None:
        return "derived"
    return classify_precision_change(current, target).value


def _requantize(value: DecimalValue, exponent: int, rounding_mode: RoundingMode) -> DecimalValue:
    """Move $value to $exponent: pad with zeros (upgrade) or round (downgrade)."""
    parts = value.decimal.as_tuple()

    # Upgrade: append zeros, magnitude unchanged
    if exponent <= parts.exponent:
        padding = (0,) * (parts.exponent - exponent)
        return DecimalValue(Decimal((parts.sign, parts.digits + padding, exponent)))

    # Downgrade: drop digits and let the rounding mode decide the last kept digit
    context = Context(prec=len(parts.digits) + 2, Emax=MAX_EMAX, Emin=MIN_EMIN)
    rounding = to_decimal_rounding(rounding_mode, value.sign < 0)
    quantum = Decimal((0, (1,), exponent))
    return DecimalValue(value.decimal.quantize(quantum, rounding=rounding, context=context))
