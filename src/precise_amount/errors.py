"""Error types raised by precise_amount.

All errors derive from `AmountError`, which is a `ValueError`, so callers that already
guard with `except ValueError` keep working.
"""


class AmountError(ValueError):
    """Base error for all precise_amount operations."""
    pass


# Construction errors
class InvalidNumericLiteralError(AmountError):
    """Value does not parse as a signed decimal numeral."""
    pass


class InvalidPrecisionError(AmountError):
    """$significant_digits is not a positive int or $fraction_digits is not a non-negative int."""
    pass


class UnknownRoundingModeError(AmountError):
    """Rounding mode is not one of the recognized names."""
    pass


# Locale-aware rendering errors
class FormattingError(AmountError):
    """Base error for failures of the locale-aware render path.

    The Amount that was being rendered stays valid and reusable.
    """
    pass


class UnsupportedUnitError(FormattingError):
    """Locale formatter does not recognize the unit or currency identifier."""
    def __init__(self, unit: str, style: str):
        self.unit = unit
        self.style = style
        super().__init__(f"Unit '{unit}' is not supported for style '{style}'")


class UnsupportedLocaleError(FormattingError):
    """Locale formatter has no data for the requested locale."""
    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Locale '{locale}' is not supported")
