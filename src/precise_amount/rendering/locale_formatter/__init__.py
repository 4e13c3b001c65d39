from precise_amount.rendering.locale_formatter.protocol import FormatStyle, LocaleFormatter, PrecisionHints
from precise_amount.rendering.locale_formatter.babel_impl import BabelLocaleFormatter

__all__ = ["FormatStyle", "LocaleFormatter", "PrecisionHints", "BabelLocaleFormatter"]
