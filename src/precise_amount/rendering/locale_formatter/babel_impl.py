from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from babel import Locale, UnknownLocaleError
from babel.numbers import NumberPattern, UnknownCurrencyError, format_currency, format_decimal, parse_pattern, validate_currency
from babel.units import UnknownUnitError, format_unit

from precise_amount.config import UNIT_DISPLAY_LENGTHS, get_settings
from precise_amount.errors import UnsupportedLocaleError, UnsupportedUnitError
from precise_amount.rendering.locale_formatter.protocol import FormatStyle, LocaleFormatter, PrecisionHints

logger = logging.getLogger(__name__)

CURRENCY_DISPLAYS = ("symbol", "code", "name")
_KNOWN_OPTIONS = {"unitDisplay", "currencyDisplay", "useGrouping"}


class BabelLocaleFormatter(LocaleFormatter):
    """Default implementation of `LocaleFormatter` backed by Babel (CLDR data).

    Maps styles to Babel calls:
    - DECIMAL → `babel.numbers.format_decimal`
    - CURRENCY → `babel.numbers.format_currency` (`currencyDisplay`: symbol, code, name)
    - UNIT → `babel.units.format_unit` (`unitDisplay`: long, short, narrow)

    The locale's number pattern is copied and its fraction precision pinned to the
    fraction hints, so trailing zeros are kept and Babel never re-rounds the value.
    """

    def __init__(self, unit_display: str | None = None):
        """Initialize the formatter.

        Args:
            unit_display: Default `unitDisplay` when the caller passes none. Falls back
                to `AmountSettings.unit_display`.

        Raises:
            ValueError: If $unit_display is not long, short or narrow.
        """
        unit_display = get_settings().unit_display if unit_display is None else unit_display

        # Raise: unit labels only come in three lengths
        if unit_display not in UNIT_DISPLAY_LENGTHS:
            raise ValueError(f"$unit_display must be one of {list(UNIT_DISPLAY_LENGTHS)}, but provided value is: '{unit_display}'")

        self._unit_display = unit_display

    @property
    def unit_display(self) -> str:
        """Get the default unit label length."""
        return self._unit_display

    def format(
        self,
        locale: str,
        value: Decimal,
        style: FormatStyle,
        unit: str | None,
        precision_hints: PrecisionHints,
        display_options: Mapping[str, Any],
    ) -> str:
        """Implements: LocaleFormatter.format

        Format $value for $locale using Babel.

        Raises:
            UnsupportedLocaleError: If Babel has no data for $locale.
            UnsupportedUnitError: If $unit is not a known currency (CURRENCY) or unit (UNIT).
            ValueError: If a display option has an unsupported value.
        """
        babel_locale = _parse_locale(locale)

        unknown = set(display_options) - _KNOWN_OPTIONS
        if unknown:
            logger.debug(f"BabelLocaleFormatter ignores display options {sorted(unknown)}")

        group_separator = bool(display_options.get("useGrouping", True))
        fraction_digits = _resolve_fraction_digits(value, precision_hints)

        if style is FormatStyle.DECIMAL:
            pattern = _pin_fraction_digits(babel_locale.decimal_formats[None], fraction_digits)
            return format_decimal(value, format=pattern, locale=babel_locale, group_separator=group_separator)

        # Raise: currency and unit styles need an identifier
        if unit is None:
            raise ValueError(f"Cannot call `BabelLocaleFormatter.format` because $unit is None for style '{style.value}'")

        if style is FormatStyle.CURRENCY:
            return self._format_currency(babel_locale, value, unit, fraction_digits, display_options, group_separator)

        return self._format_unit(babel_locale, value, unit, fraction_digits, display_options)

    def _format_currency(
        self,
        babel_locale: Locale,
        value: Decimal,
        currency: str,
        fraction_digits: int,
        display_options: Mapping[str, Any],
        group_separator: bool,
    ) -> str:
        currency_display = display_options.get("currencyDisplay", "symbol")

        # Raise: only the documented currency displays are supported
        if currency_display not in CURRENCY_DISPLAYS:
            raise ValueError(f"$currencyDisplay must be one of {list(CURRENCY_DISPLAYS)}, but provided value is: {currency_display!r}")

        try:
            validate_currency(currency, babel_locale)
        except UnknownCurrencyError as e:
            logger.error(f"Babel does not know currency '{currency}' for locale '{babel_locale}'")
            raise UnsupportedUnitError(currency, FormatStyle.CURRENCY.value) from e

        if currency_display == "name":
            pattern = _pin_fraction_digits(babel_locale.decimal_formats[None], fraction_digits)
            return format_currency(value, currency, format=pattern, locale=babel_locale, currency_digits=False, format_type="name", group_separator=group_separator)

        base_pattern = babel_locale.currency_formats["standard"]
        if currency_display == "code":
            base_pattern = parse_pattern(base_pattern.pattern.replace("¤", "¤¤"))
        pattern = _pin_fraction_digits(base_pattern, fraction_digits)
        return format_currency(value, currency, format=pattern, locale=babel_locale, currency_digits=False, group_separator=group_separator)

    def _format_unit(
        self,
        babel_locale: Locale,
        value: Decimal,
        unit: str,
        fraction_digits: int,
        display_options: Mapping[str, Any],
    ) -> str:
        length = display_options.get("unitDisplay", self._unit_display)

        # Raise: unit labels only come in three lengths
        if length not in UNIT_DISPLAY_LENGTHS:
            raise ValueError(f"$unitDisplay must be one of {list(UNIT_DISPLAY_LENGTHS)}, but provided value is: {length!r}")

        pattern = _pin_fraction_digits(babel_locale.decimal_formats[None], fraction_digits)
        try:
            return format_unit(value, unit, length=length, format=pattern, locale=babel_locale)
        except UnknownUnitError as e:
            logger.error(f"Babel does not know unit '{unit}' for locale '{babel_locale}'")
            raise UnsupportedUnitError(unit, FormatStyle.UNIT.value) from e


def _parse_locale(locale: str) -> Locale:
    """Parse a BCP 47 ("zh-CN") or POSIX-style ("zh_CN") tag into a Babel Locale."""
    # Raise: locale must be a non-empty tag
    if not isinstance(locale, str) or not locale.strip():
        raise UnsupportedLocaleError(str(locale))

    try:
        return Locale.parse(locale.strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        logger.error(f"Babel has no data for locale '{locale}'")
        raise UnsupportedLocaleError(locale) from e


def _resolve_fraction_digits(value: Decimal, precision_hints: PrecisionHints) -> int:
    # Without a hint, show the fractional digits the value carries
    if precision_hints.max_fraction_digits is not None:
        return precision_hints.max_fraction_digits
    if precision_hints.min_fraction_digits is not None:
        return precision_hints.min_fraction_digits
    return max(0, -value.as_tuple().exponent)


def _pin_fraction_digits(pattern: NumberPattern, fraction_digits: int) -> NumberPattern:
    # Locale patterns are shared Babel data; never mutate them in place
    pinned = copy.copy(pattern)
    pinned.frac_prec = (fraction_digits, fraction_digits)
    return pinned
