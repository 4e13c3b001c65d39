from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from precise_amount.errors import InvalidNumericLiteralError
from precise_amount.utils.numeric_tools import as_decimal

# Signed decimal numeral with optional fraction and optional exponent
_NUMERAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class DecimalValue:
    """Exact decimal number kept as sign, digit sequence and exponent.

    Wraps a finite `Decimal` and never goes through binary floating point, so trailing
    zeros are preserved: `DecimalValue.parse("1.20")` keeps 2 fractional digits.

    Positive exponents from exponent notation are expanded into written zeros at parse
    time (`"1.5e3"` reads as `"1500"`).

    Attributes:
        sign (int): 1 or -1. Zero keeps the sign it was written with.
        digits (tuple[int, ...]): Coefficient digits, most significant first.
        exponent (int): Power of ten applied to the coefficient.
    """

    # Guards the expansion of exponent notation into written digits
    MAX_ABS_EXPONENT = 1000

    __slots__ = ("_decimal",)

    def __init__(self, value: Decimal):
        """Initialize from a finite Decimal. Use `parse` for untrusted input.

        Args:
            value (Decimal): Finite decimal number.

        Raises:
            InvalidNumericLiteralError: If $value is not a finite Decimal.
        """
        # Raise: only finite Decimals carry a digit sequence
        if not isinstance(value, Decimal) or not value.is_finite():
            raise InvalidNumericLiteralError(f"Cannot call `DecimalValue.__init__` because $value ({value!r}) is not a finite Decimal")

        self._decimal = value

    # region Construction

    @classmethod
    def parse(cls, value: DecimalValue | Decimal | str | int | float) -> DecimalValue:
        """Parse a numeric literal or decimal-literal string into a DecimalValue.

        Floats are converted through `str(...)`, so `0.1` parses as `"0.1"`.

        Args:
            value: Decimal-literal string, int, float, Decimal or DecimalValue.

        Returns:
            DecimalValue: Exact value in plain decimal form.

        Raises:
            InvalidNumericLiteralError: If $value is not a valid signed decimal numeral.
        """
        if isinstance(value, DecimalValue):
            return value

        # Raise: bool is an int subclass but not a numeric literal
        if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
            raise InvalidNumericLiteralError(f"Cannot call `DecimalValue.parse` because $value has unsupported type '{type(value).__name__}'")

        if isinstance(value, Decimal):
            decimal_value = value
        elif isinstance(value, int):
            # Ints convert exactly without the int-to-str digit limit
            decimal_value = Decimal(value)
        else:
            text = value.strip() if isinstance(value, str) else str(value)

            # Raise: reject anything outside the plain numeral grammar (NaN, Infinity, '1_000', ...)
            if _NUMERAL_PATTERN.fullmatch(text) is None:
                raise InvalidNumericLiteralError(f"Cannot call `DecimalValue.parse` because $value ('{value}') is not a valid decimal numeral")

            try:
                decimal_value = as_decimal(text)
            except InvalidOperation as e:
                raise InvalidNumericLiteralError(f"Cannot call `DecimalValue.parse` because $value ('{value}') cannot be converted to Decimal") from e

        # Raise: NaN and Infinity have no digit sequence
        if not decimal_value.is_finite():
            raise InvalidNumericLiteralError(f"Cannot call `DecimalValue.parse` because $value ('{value}') is not finite")

        exponent = decimal_value.as_tuple().exponent

        # Raise: keep exponent expansion bounded
        if abs(exponent) > cls.MAX_ABS_EXPONENT:
            raise InvalidNumericLiteralError(f"Cannot call `DecimalValue.parse` because exponent of $value ('{value}') exceeds {cls.MAX_ABS_EXPONENT}")

        return cls(decimal_value).in_plain_form()

    def in_plain_form(self) -> DecimalValue:
        """Return this value with a positive exponent rewritten as written zeros (15E+2 -> 1500)."""
        parts = self._decimal.as_tuple()
        if parts.exponent <= 0:
            return self

        digits = parts.digits + (0,) * parts.exponent
        return self.__class__(Decimal((parts.sign, digits, 0)))

    # endregion

    # region Properties

    @property
    def decimal(self) -> Decimal:
        """Get the wrapped Decimal (exact, same digits and exponent)."""
        return self._decimal

    @property
    def sign(self) -> int:
        """Get the sign as 1 or -1."""
        return -1 if self._decimal.is_signed() else 1

    @property
    def digits(self) -> tuple[int, ...]:
        """Get the coefficient digits, most significant first."""
        return self._decimal.as_tuple().digits

    @property
    def exponent(self) -> int:
        """Get the power of ten applied to the coefficient."""
        return self._decimal.as_tuple().exponent

    @property
    def is_zero(self) -> bool:
        return self._decimal.is_zero()

    @property
    def adjusted(self) -> int:
        """Get the position of the most significant digit (0 for the ones place)."""
        return self._decimal.adjusted()

    # endregion

    # region Natural precision

    def natural_fraction_digits(self) -> int:
        """Return the count of digits after the decimal point as written.

        Trailing zeros count: "1.20" has 2 fractional digits.
        """
        return max(0, -self.exponent)

    def natural_significant_digits(self) -> int:
        """Return the count of digits without leading zeros.

        Trailing zeros count when written: "100" has 3 and "1.20" has 3. Zero has 1.
        """
        if self.is_zero:
            return 1
        return len(self.digits)

    # endregion

    # region Rendering

    def to_plain_string(self, fraction_digits: int | None = None) -> str:
        """Return the plain (non-exponent) digit string.

        When $fraction_digits is given, zeros are appended or trailing zeros removed until
        exactly that many fractional digits remain. This only re-displays the value; it
        never rounds.

        Args:
            fraction_digits: Exact count of fractional digits to show, or None for natural.

        Returns:
            str: Plain decimal string like "-123.4500".

        Raises:
            ValueError: If removing fractional digits would drop a non-zero digit.
        """
        text = format(self._decimal, "f")
        if fraction_digits is None:
            return text

        current = self.natural_fraction_digits()
        if fraction_digits > current:
            separator = "." if current == 0 else ""
            return f"{text}{separator}{'0' * (fraction_digits - current)}"

        if fraction_digits < current:
            integer_part, fraction_part = text.split(".")
            kept, dropped = fraction_part[:fraction_digits], fraction_part[fraction_digits:]

            # Raise: display must never change the represented value
            if dropped.strip("0"):
                raise ValueError(f"Cannot call `to_plain_string` because $fraction_digits ({fraction_digits}) would drop non-zero digits of {text}")

            return f"{integer_part}.{kept}" if kept else integer_part

        return text

    # endregion

    # region Value semantics

    def __eq__(self, other) -> bool:
        """Check exact equality: same sign, digits and exponent ("1.2" != "1.20")."""
        if not isinstance(other, DecimalValue):
            return False
        return self._decimal.as_tuple() == other._decimal.as_tuple()

    def __hash__(self) -> int:
        return hash(self._decimal.as_tuple())

    def __str__(self) -> str:
        return self.to_plain_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.to_plain_string()}')"

    # endregion

