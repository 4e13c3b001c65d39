__version__ = "0.1.0"

from precise_amount.domain.amount import Amount
from precise_amount.domain.decimal_value import DecimalValue
from precise_amount.domain.precision import Precision
from precise_amount.domain.rounding_mode import RoundingMode
from precise_amount.domain.unit_style import UnitStyle, classify_unit
from precise_amount.rendering.display_unit import DisplayUnit
from precise_amount.rendering.locale_formatter import BabelLocaleFormatter, FormatStyle, LocaleFormatter, PrecisionHints
from precise_amount.errors import (
    AmountError,
    FormattingError,
    InvalidNumericLiteralError,
    InvalidPrecisionError,
    UnknownRoundingModeError,
    UnsupportedLocaleError,
    UnsupportedUnitError,
)

__all__ = [
    "Amount", "DecimalValue", "Precision", "RoundingMode", "UnitStyle", "classify_unit",
    "DisplayUnit", "LocaleFormatter", "BabelLocaleFormatter", "FormatStyle", "PrecisionHints",
    "AmountError", "FormattingError", "InvalidNumericLiteralError", "InvalidPrecisionError",
    "UnknownRoundingModeError", "UnsupportedLocaleError", "UnsupportedUnitError",
]
