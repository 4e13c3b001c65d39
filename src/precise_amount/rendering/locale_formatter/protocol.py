from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, NamedTuple, Protocol, runtime_checkable


class FormatStyle(Enum):
    """Style of locale-aware number formatting.

    Members:
        DECIMAL: Plain localized number.
        CURRENCY: Number with a currency symbol, code or name.
        UNIT: Number with a measurement-unit label.
    """

    DECIMAL = "decimal"
    CURRENCY = "currency"
    UNIT = "unit"


class PrecisionHints(NamedTuple):
    """Minimum/maximum digit counts passed to the formatter.

    A None field means "no constraint on this dimension".
    """

    min_fraction_digits: int | None = None
    max_fraction_digits: int | None = None
    min_significant_digits: int | None = None
    max_significant_digits: int | None = None


@runtime_checkable
class LocaleFormatter(Protocol):
    """Protocol for turning an exact decimal into a locale-appropriate string.

    Purpose:
        Keep locale data (digit grouping, numbering systems, unit names, plural rules,
        currency symbols) out of the value types. The renderer hands over the exact
        Decimal, never a float, so trailing zeros and arbitrary precision survive.

    Notes:
        - Implementations raise `UnsupportedLocaleError` for locales they have no data for.
        - Implementations raise `UnsupportedUnitError` when $unit is unknown for $style.
        - $display_options carries caller options such as `unitDisplay`; unknown keys may be ignored.
    """

    def format(
        self,
        locale: str,
        value: Decimal,
        style: FormatStyle,
        unit: str | None,
        precision_hints: PrecisionHints,
        display_options: Mapping[str, Any],
    ) -> str:
        """Format $value for $locale.

        Args:
            locale: Locale tag like "en", "de-DE" or "zh_CN".
            value: Exact decimal value; already rounded, must not be re-rounded.
            style: Formatting style.
            unit: Currency code for CURRENCY, unit identifier for UNIT, None for DECIMAL.
            precision_hints: Digit-count hints derived from the Amount.
            display_options: Caller display options.

        Returns:
            Localized string.
        """
        ...
