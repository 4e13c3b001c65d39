from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from precise_amount.domain.unit_style import UnitStyle, classify_unit
from precise_amount.rendering.display_unit import DisplayUnit
from precise_amount.rendering.locale_formatter.protocol import FormatStyle, LocaleFormatter, PrecisionHints

if TYPE_CHECKING:
    from precise_amount.domain.amount import Amount

logger = logging.getLogger(__name__)

# Stands in for a missing unit when the unit must be shown
UNIT_UNIT = "1"

_FORMAT_STYLE_BY_UNIT_STYLE = {
    UnitStyle.NONE: FormatStyle.DECIMAL,
    UnitStyle.CURRENCY: FormatStyle.CURRENCY,
    UnitStyle.UNIT: FormatStyle.UNIT,
}


def render(amount: Amount, display_unit: DisplayUnit | str = DisplayUnit.AUTO) -> str:
    """Return the locale-independent string form of $amount.

    The number shows exactly `amount.fraction_digits` fractional digits; the unit, when
    shown, follows in square brackets: "1.23[kg]".

    Args:
        amount: Amount to render.
        display_unit: AUTO shows the unit if present, NEVER hides it, ALWAYS shows it
            and uses "1" when the Amount has no unit.

    Returns:
        str: Rendered Amount.

    Raises:
        ValueError: If $display_unit is not a known option.
    """
    mode = DisplayUnit.from_str(display_unit)
    number = amount.value.to_plain_string(amount.fraction_digits)

    if mode is DisplayUnit.NEVER:
        return number
    if amount.unit is not None:
        return f"{number}[{amount.unit}]"
    if mode is DisplayUnit.ALWAYS:
        return f"{number}[{UNIT_UNIT}]"
    return number


def render_localized(
    amount: Amount,
    locale: str,
    formatter: LocaleFormatter,
    display_unit: DisplayUnit | str = DisplayUnit.AUTO,
    **display_options: Any,
) -> str:
    """Return the locale-aware string form of $amount produced by $formatter.

    The style comes from the unit classifier: a three-letter uppercase unit renders as
    currency, any other unit as a measurement unit, no unit as a plain number.
    With NEVER the unit is dropped and a plain number is rendered. ALWAYS behaves like
    AUTO here: there is no localized label for the "unit unit".

    Args:
        amount: Amount to render.
        locale: Locale tag passed to $formatter.
        formatter: Locale formatter implementation.
        display_unit: Whether the unit takes part in formatting.
        **display_options: Passed through to $formatter (e.g. `unitDisplay="long"`).

    Returns:
        str: Formatter output.

    Raises:
        UnsupportedUnitError: If $formatter does not know the unit for the style.
        UnsupportedLocaleError: If $formatter has no data for $locale.
    """
    mode = DisplayUnit.from_str(display_unit)
    unit = None if mode is DisplayUnit.NEVER else amount.unit
    style = _FORMAT_STYLE_BY_UNIT_STYLE[classify_unit(unit)]

    hints = PrecisionHints(
        min_fraction_digits=amount.fraction_digits,
        max_fraction_digits=amount.fraction_digits,
        min_significant_digits=amount.significant_digits,
        max_significant_digits=amount.significant_digits,
    )

    logger.debug(f"Formatting {amount!r} for locale '{locale}' as {style.value} with {formatter.__class__.__name__}")
    return formatter.format(locale, amount.value.decimal, style, unit, hints, display_options)
