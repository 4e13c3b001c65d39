from __future__ import annotations

import pytest

from precise_amount.domain.amount import Amount
from precise_amount.errors import UnsupportedLocaleError, UnsupportedUnitError
from precise_amount.rendering.locale_formatter.babel_impl import BabelLocaleFormatter

FORMATTER = BabelLocaleFormatter(unit_display="short")


# region Decimal style


def test_decimal_keeps_trailing_zeros() -> None:
    assert Amount("1234.50").to_locale_string("en", FORMATTER) == "1,234.50"


def test_decimal_uses_locale_separators() -> None:
    assert Amount("1234.50").to_locale_string("de-DE", FORMATTER) == "1.234,50"
    assert Amount("1234.50").to_locale_string("de_DE", FORMATTER) == "1.234,50"


def test_decimal_without_grouping() -> None:
    assert Amount("1234.50").to_locale_string("en", FORMATTER, useGrouping=False) == "1234.50"


def test_decimal_does_not_round_long_fractions() -> None:
    assert Amount("0.123456789").to_locale_string("en", FORMATTER) == "0.123456789"


# endregion

# region Currency style


def test_currency_symbol() -> None:
    assert Amount("1234.5", unit="USD", fraction_digits=2).to_locale_string("en", FORMATTER) == "$1,234.50"


def test_currency_ignores_currency_default_digits() -> None:
    # JPY has no minor unit; the Amount's own fraction digits win
    assert Amount("100.25", unit="USD").to_locale_string("en", FORMATTER) == "$100.25"
    assert "100.5" in Amount("100.5", unit="JPY").to_locale_string("en", FORMATTER)


def test_currency_code_and_name() -> None:
    code = Amount("1234.50", unit="USD").to_locale_string("en", FORMATTER, currencyDisplay="code")
    assert "USD" in code
    assert "1,234.50" in code

    name = Amount("1234.50", unit="USD").to_locale_string("en", FORMATTER, currencyDisplay="name")
    assert name == "1,234.50 US dollars"


def test_unknown_currency() -> None:
    with pytest.raises(UnsupportedUnitError) as exc_info:
        Amount("1", unit="XQQ").to_locale_string("en", FORMATTER)
    assert exc_info.value.unit == "XQQ"
    assert exc_info.value.style == "currency"


def test_invalid_currency_display() -> None:
    with pytest.raises(ValueError):
        Amount("1", unit="USD").to_locale_string("en", FORMATTER, currencyDisplay="emoji")


# endregion

# region Unit style


def test_unit_long_name() -> None:
    assert Amount("42.7", unit="kilogram").to_locale_string("en", FORMATTER, unitDisplay="long") == "42.7 kilograms"
    assert Amount("42.70", unit="kilogram").to_locale_string("en", FORMATTER, unitDisplay="long") == "42.70 kilograms"


def test_unit_with_significant_digits_for_other_locale() -> None:
    result = Amount("42.7", unit="kilogram", significant_digits=4).to_locale_string("zh-CN", FORMATTER, unitDisplay="long")
    assert "42.70" in result


def test_unknown_unit() -> None:
    with pytest.raises(UnsupportedUnitError):
        Amount("1", unit="flurbs").to_locale_string("en", FORMATTER)


def test_invalid_unit_display() -> None:
    with pytest.raises(ValueError):
        Amount("1", unit="kilogram").to_locale_string("en", FORMATTER, unitDisplay="tiny")
    with pytest.raises(ValueError):
        BabelLocaleFormatter(unit_display="tiny")


# endregion

# region Locale


@pytest.mark.parametrize("locale", ["xx-YY", "", "not a locale"])
def test_unknown_locale(locale: str) -> None:
    with pytest.raises(UnsupportedLocaleError):
        Amount("1").to_locale_string(locale, FORMATTER)


# endregion
