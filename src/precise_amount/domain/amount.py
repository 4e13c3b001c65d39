from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Any

from precise_amount.config import get_settings
from precise_amount.domain.decimal_value import DecimalValue
from precise_amount.domain.precision import Precision, round_to_precision
from precise_amount.domain.rounding_mode import DEFAULT_ROUNDING_MODE, RoundingMode
from precise_amount.domain.unit_style import UnitStyle, classify_unit
from precise_amount.errors import InvalidNumericLiteralError
from precise_amount.rendering.display_unit import DisplayUnit
from precise_amount.rendering.locale_formatter.babel_impl import BabelLocaleFormatter
from precise_amount.rendering.locale_formatter.protocol import LocaleFormatter
from precise_amount.rendering.renderer import UNIT_UNIT, render, render_localized

logger = logging.getLogger(__name__)

# Marks keyword arguments of `with_` that were not passed
_MISSING: Any = object()

# Rendered form: number, optionally followed by "[unit]"
_RENDERED_PATTERN = re.compile(r"\s*(?P<number>[^\[\]\s]+)\s*(?:\[(?P<unit>[^\[\]]+)\])?\s*")


class Amount:
    """Immutable number with explicit precision and an optional unit or currency tag.

    The value is exact (see `DecimalValue`); the precision is kept as two independent
    counts, significant digits and fraction digits. When no precision is requested
    both are read from the value as written, so `Amount("1.20")` keeps its trailing zero.
    When one is requested the value is rounded once, at construction, using $rounding_mode.

    Derivations (`with_`) always return a new Amount; the receiver never changes.

    Attributes:
        value (DecimalValue): Exact (already rounded) value.
        unit (str | None): Unit or currency identifier, stored verbatim.
        significant_digits (int): Significant digits.
        fraction_digits (int): Digits after the decimal point.
        rounding_mode (RoundingMode): Mode this Amount was built with; inherited by `with_`.
    """

    __slots__ = (
        "_value",
        "_unit",
        "_significant_digits",
        "_fraction_digits",
        "_rounding_mode",
    )

    def __init__(
        self,
        value: DecimalValue | Decimal | str | int | float,
        *,
        unit: str | None = None,
        fraction_digits: int | None = None,
        significant_digits: int | None = None,
        rounding_mode: RoundingMode | str = DEFAULT_ROUNDING_MODE,
    ) -> None:
        """Initialize a new Amount.

        Args:
            value: Numeric literal or decimal-literal string like "-12.340".
            unit: Unit or currency identifier (e.g. "kg", "EUR"). Not validated against any
                registry; only the locale-aware renderer checks it.
            fraction_digits: Digits after the decimal point. Decides where the value is
                cut or padded and wins over $significant_digits for the decimal point.
            significant_digits: Significant digits. Kept verbatim when both counts are given.
            rounding_mode: Mode used when digits are dropped. Defaults to HALF_EVEN.

        Raises:
            InvalidNumericLiteralError: If $value is not a signed decimal numeral.
            InvalidPrecisionError: If a digit count is not a valid int.
            UnknownRoundingModeError: If $rounding_mode is not a known mode.
            TypeError: If $unit is not a string.
            ValueError: If $unit is an empty string.
        """
        decimal_value = DecimalValue.parse(value)
        mode = RoundingMode.from_str(rounding_mode)

        _check_unit(unit)

        rounded, precision = round_to_precision(
            decimal_value,
            significant_digits=significant_digits,
            fraction_digits=fraction_digits,
            rounding_mode=mode,
        )

        self._value = rounded
        self._unit = unit
        self._significant_digits = precision.significant_digits
        self._fraction_digits = precision.fraction_digits
        self._rounding_mode = mode

    @classmethod
    def _from_parts(cls, value: DecimalValue, unit: str | None, precision: Precision, rounding_mode: RoundingMode) -> Amount:
        """Build an Amount from already rounded parts, skipping parsing and rounding."""
        amount = cls.__new__(cls)
        amount._value = value
        amount._unit = unit
        amount._significant_digits = precision.significant_digits
        amount._fraction_digits = precision.fraction_digits
        amount._rounding_mode = rounding_mode
        return amount

    @classmethod
    def from_str(cls, text: str) -> Amount:
        """Parse an Amount from its rendered form like "1.23[kg]".

        The unit token "1" means "no unit". Precision is read from the digits as written.

        This inverts `to_string()` except for two kinds of unit: an Amount whose unit is
        literally "1" reads back without a unit, and a unit containing "[" or "]" renders
        as text this method rejects.

        Args:
            text: Rendered Amount.

        Returns:
            Amount: Parsed Amount.

        Raises:
            InvalidNumericLiteralError: If $text is not a number optionally followed by "[unit]".
        """
        # Raise: only strings carry a rendered Amount
        if not isinstance(text, str):
            raise InvalidNumericLiteralError(f"Cannot call `Amount.from_str` because $text is not str (got type '{type(text).__name__}')")

        match = _RENDERED_PATTERN.fullmatch(text)

        # Raise: text must look like "number" or "number[unit]"
        if match is None:
            raise InvalidNumericLiteralError(f"Cannot call `Amount.from_str` because $text ('{text}') is not in format 'number[unit]'")

        unit = match.group("unit")
        if unit == UNIT_UNIT:
            unit = None

        return cls(match.group("number"), unit=unit)

    # region Properties

    @property
    def value(self) -> DecimalValue:
        """Get the exact value."""
        return self._value

    @property
    def unit(self) -> str | None:
        """Get the unit or currency identifier."""
        return self._unit

    @property
    def significant_digits(self) -> int:
        return self._significant_digits

    @property
    def fraction_digits(self) -> int:
        return self._fraction_digits

    @property
    def precision(self) -> Precision:
        """Get both digit counts as a Precision."""
        return Precision(self._significant_digits, self._fraction_digits)

    @property
    def rounding_mode(self) -> RoundingMode:
        """Get the rounding mode this Amount was built with."""
        return self._rounding_mode

    @property
    def unit_style(self) -> UnitStyle:
        """Get the display style selected by the shape of the unit."""
        return classify_unit(self._unit)

    @property
    def currency(self) -> str | None:
        """Get the unit if it looks like a currency code, else None."""
        return self._unit if self.unit_style is UnitStyle.CURRENCY else None

    # endregion

    # region Derivation

    def with_(
        self,
        *,
        unit: str | None = _MISSING,
        fraction_digits: int | None = _MISSING,
        significant_digits: int | None = _MISSING,
        rounding_mode: RoundingMode | str = _MISSING,
    ) -> Amount:
        """Return a new Amount with some options replaced.

        Omitted options are taken from this Amount. When neither digit count is passed the
        value is kept as is and both counts are inherited without rounding again. Passing
        only $fraction_digits keeps the inherited significant digits; passing
        $significant_digits re-derives the fraction digits from the rounded value (unless
        both are passed). Only counts passed here are validated. Pass `unit=None` to drop
        the unit.

        Args:
            unit: New unit, None to drop it.
            fraction_digits: New fraction digits.
            significant_digits: New significant digits.
            rounding_mode: Mode used when digits are dropped.

        Returns:
            Amount: New Amount; this one is unchanged.

        Raises:
            InvalidPrecisionError: If a passed digit count is not a valid int.
            UnknownRoundingModeError: If $rounding_mode is not a known mode.
            TypeError: If $unit is not a string.
            ValueError: If $unit is an empty string.
        """
        unit = self._unit if unit is _MISSING else unit
        mode = self._rounding_mode if rounding_mode is _MISSING else RoundingMode.from_str(rounding_mode)
        _check_unit(unit)

        if fraction_digits is _MISSING and significant_digits is _MISSING:
            result = self._from_parts(self._value, unit, self.precision, mode)
        elif significant_digits is _MISSING:
            rounded, precision = round_to_precision(self._value, fraction_digits=fraction_digits, rounding_mode=mode)
            inherited = Precision(self._significant_digits, precision.fraction_digits)
            result = self._from_parts(rounded, unit, inherited, mode)
        else:
            result = self.__class__(
                self._value,
                unit=unit,
                fraction_digits=None if fraction_digits is _MISSING else fraction_digits,
                significant_digits=significant_digits,
                rounding_mode=mode,
            )

        logger.debug(f"Derived {result!r} from {self!r}")
        return result

    # endregion

    # region Rendering

    def to_string(self, display_unit: DisplayUnit | str = DisplayUnit.AUTO) -> str:
        """Return the locale-independent form like "1.23[kg]". See `render`."""
        return render(self, display_unit)

    def to_locale_string(
        self,
        locale: str | None = None,
        formatter: LocaleFormatter | None = None,
        display_unit: DisplayUnit | str = DisplayUnit.AUTO,
        **display_options: Any,
    ) -> str:
        """Return the locale-aware form produced by a locale formatter. See `render_localized`.

        Args:
            locale: Locale tag; defaults to `AmountSettings.default_locale`.
            formatter: Locale formatter; defaults to `BabelLocaleFormatter`.
            display_unit: Whether the unit takes part in formatting.
            **display_options: Passed through to the formatter (e.g. `unitDisplay="long"`).

        Raises:
            UnsupportedUnitError: If the formatter does not know the unit.
            UnsupportedLocaleError: If the formatter has no data for $locale.
        """
        locale = get_settings().default_locale if locale is None else locale
        formatter = BabelLocaleFormatter() if formatter is None else formatter
        return render_localized(self, locale, formatter, display_unit, **display_options)

    # endregion

    # region Value semantics

    def __eq__(self, other) -> bool:
        """Check equality of exact value, unit and both digit counts."""
        if not isinstance(other, Amount):
            return False
        return (
            self._value == other._value
            and self._unit == other._unit
            and self._significant_digits == other._significant_digits
            and self._fraction_digits == other._fraction_digits
        )

    def __hash__(self) -> int:
        return hash((self._value, self._unit, self._significant_digits, self._fraction_digits))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        unit_part = f", unit='{self._unit}'" if self._unit is not None else ""
        return f"{self.__class__.__name__}('{self._value}'{unit_part}, significant_digits={self._significant_digits}, fraction_digits={self._fraction_digits})"

    # endregion


def _check_unit(unit: str | None) -> None:
    # Raise: unit is either absent or a non-empty string
    if unit is not None and not isinstance(unit, str):
        raise TypeError(f"Cannot use $unit because it is not str (got type '{type(unit).__name__}')")
    if unit is not None and not unit:
        raise ValueError("Cannot use $unit because it is empty. Pass None for no unit")
