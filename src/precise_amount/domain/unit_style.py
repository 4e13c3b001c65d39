from __future__ import annotations

import re
from enum import Enum

_CURRENCY_CODE_PATTERN = re.compile(r"[A-Z]{3}")


class UnitStyle(Enum):
    """Display style selected by the shape of a unit identifier.

    Members:
        NONE: No unit; render a plain number.
        CURRENCY: Three uppercase ASCII letters (e.g. "EUR"); render as currency.
        UNIT: Any other identifier (e.g. "kg", "kilogram"); render as a measurement unit.
    """

    NONE = "NONE"
    CURRENCY = "CURRENCY"
    UNIT = "UNIT"


def classify_unit(unit: str | None) -> UnitStyle:
    """Return the display style for $unit.

    Only the shape of the string is inspected; "XYZ" is CURRENCY even though no such
    currency exists. Validity is checked later by the locale formatter.
    """
    if unit is None:
        return UnitStyle.NONE
    if _CURRENCY_CODE_PATTERN.fullmatch(unit):
        return UnitStyle.CURRENCY
    return UnitStyle.UNIT
