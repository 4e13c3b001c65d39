from __future__ import annotations

from decimal import Decimal

import pytest

from precise_amount.domain.amount import Amount
from precise_amount.domain.decimal_value import DecimalValue
from precise_amount.domain.precision import Precision
from precise_amount.domain.rounding_mode import RoundingMode
from precise_amount.domain.unit_style import UnitStyle
from precise_amount.errors import (
    InvalidNumericLiteralError,
    InvalidPrecisionError,
    UnknownRoundingModeError,
)


# region Construction


def test_natural_precision_from_literal() -> None:
    amount = Amount("123.456")
    assert amount.significant_digits == 6
    assert amount.fraction_digits == 3
    assert amount.unit is None
    assert amount.rounding_mode is RoundingMode.HALF_EVEN


def test_explicit_precision_rounds_once_at_construction() -> None:
    assert Amount("1.005", fraction_digits=2).to_string() == "1.00"
    assert Amount("1.005", fraction_digits=2, rounding_mode="halfExpand").to_string() == "1.01"


def test_both_precision_counts_are_stored_verbatim() -> None:
    amount = Amount("123.456", significant_digits=2, fraction_digits=1)
    assert amount.precision == Precision(2, 1)
    assert amount.to_string() == "123.5"


def test_unit_is_stored_verbatim() -> None:
    assert Amount("1", unit="not a real unit").unit == "not a real unit"


def test_accepts_numeric_literals() -> None:
    assert Amount(42).to_string() == "42"
    assert Amount(Decimal("0.50")).to_string() == "0.50"
    assert Amount(0.1).to_string() == "0.1"
    assert Amount(DecimalValue.parse("7.0")).to_string() == "7.0"


@pytest.mark.parametrize("literal", ["1.20", "100", "0.0012", "-3.50", "0", "12345678901234567890.123456789012345"])
def test_plain_string_round_trip(literal: str) -> None:
    assert Amount(literal).to_string(display_unit="never") == literal


def test_invalid_literal() -> None:
    with pytest.raises(InvalidNumericLiteralError):
        Amount("abc")


def test_invalid_precision() -> None:
    with pytest.raises(InvalidPrecisionError):
        Amount("1", significant_digits=0)
    with pytest.raises(InvalidPrecisionError):
        Amount("1", fraction_digits=-1)


def test_unknown_rounding_mode() -> None:
    with pytest.raises(UnknownRoundingModeError):
        Amount("1", fraction_digits=0, rounding_mode="sideways")


def test_construction_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        Amount("1", significant_digits=0)


def test_invalid_unit() -> None:
    with pytest.raises(ValueError):
        Amount("1", unit="")
    with pytest.raises(TypeError):
        Amount("1", unit=5)


# endregion

# region Derivation


def test_with_fraction_digits_upgrade_pads() -> None:
    assert Amount("123.456").with_(fraction_digits=4).to_string() == "123.4560"


def test_with_significant_digits_uses_half_even_by_default() -> None:
    assert Amount("123.456").with_(significant_digits=5).to_string() == "123.46"


def test_with_significant_digits_and_truncate() -> None:
    assert Amount("123.456").with_(significant_digits=5, rounding_mode="truncate").to_string() == "123.45"


def test_default_rounding_is_half_even() -> None:
    assert Amount("0.125").with_(fraction_digits=2).to_string() == "0.12"


def test_downgrade_reflects_rounding_mode() -> None:
    amount = Amount("2.345")
    assert amount.with_(fraction_digits=2, rounding_mode=RoundingMode.CEIL).to_string() == "2.35"
    assert amount.with_(fraction_digits=2, rounding_mode=RoundingMode.FLOOR).to_string() == "2.34"
    assert Amount("-2.345").with_(fraction_digits=2, rounding_mode=RoundingMode.CEIL).to_string() == "-2.34"


@pytest.mark.parametrize(
    "amount",
    [
        Amount("123.456"),
        Amount("1.20", unit="kg"),
        Amount("123.456", significant_digits=5),
        Amount("123456", significant_digits=3),
        Amount("1.5", significant_digits=2, fraction_digits=3),
        Amount("0"),
    ],
)
def test_with_no_options_is_idempotent(amount: Amount) -> None:
    derived = amount.with_()
    assert derived == amount
    assert derived.to_string() == amount.to_string()
    assert derived.precision == amount.precision


def test_with_never_mutates_receiver() -> None:
    original = Amount("123.456", unit="kg")
    original.with_(significant_digits=2, unit="g")
    assert original.to_string() == "123.456[kg]"
    assert original.precision == Precision(6, 3)


def test_with_significant_digits_rederives_fraction_digits() -> None:
    derived = Amount("123.456").with_(significant_digits=5)
    assert derived.precision == Precision(5, 2)


def test_with_fraction_digits_keeps_significant_digits() -> None:
    derived = Amount("123.456").with_(significant_digits=5).with_(fraction_digits=1)
    assert derived.to_string() == "123.5"
    assert derived.precision == Precision(5, 1)

    # Padding does not make the zeros significant
    padded = Amount("123456", significant_digits=3).with_(fraction_digits=1)
    assert padded.to_string() == "123000.0"
    assert padded.precision == Precision(3, 1)


def test_with_keeps_amounts_with_many_digits() -> None:
    large = Amount("1e1000")
    assert large.significant_digits == 1001
    assert large.with_() == large

    long_literal = Amount("1" * 1200)
    assert long_literal.with_(unit="kg") == Amount("1" * 1200, unit="kg")
    assert long_literal.with_(fraction_digits=2).precision == Precision(1200, 2)

    # Counts passed explicitly are still capped
    with pytest.raises(InvalidPrecisionError):
        long_literal.with_(significant_digits=1200)


def test_with_carries_rounding_mode() -> None:
    amount = Amount("1.25", rounding_mode="halfExpand")
    derived = amount.with_(fraction_digits=1)
    assert derived.to_string() == "1.3"
    assert derived.rounding_mode is RoundingMode.HALF_EXPAND


def test_with_replaces_and_drops_unit() -> None:
    amount = Amount("5", unit="kg")
    assert amount.with_(unit="lb").unit == "lb"
    assert amount.with_(unit=None).unit is None
    assert amount.with_(fraction_digits=1).unit == "kg"


def test_with_validates_options() -> None:
    with pytest.raises(InvalidPrecisionError):
        Amount("1").with_(fraction_digits=-1)
    with pytest.raises(UnknownRoundingModeError):
        Amount("1").with_(rounding_mode="nope")
    with pytest.raises(ValueError):
        Amount("1").with_(unit="")


# endregion

# region Rendering and parsing


def test_to_string_display_unit() -> None:
    amount = Amount("42.7", unit="kg")
    assert amount.to_string() == "42.7[kg]"
    assert str(amount) == "42.7[kg]"
    assert amount.to_string(display_unit="never") == "42.7"
    assert Amount("42.7").to_string(display_unit="always") == "42.7[1]"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.23[kg]", Amount("1.23", unit="kg")),
        ("-0.50[EUR]", Amount("-0.50", unit="EUR")),
        ("7", Amount("7")),
        ("5[1]", Amount("5")),
        (" 2.0 [m] ", Amount("2.0", unit="m")),
    ],
)
def test_from_str(text: str, expected: Amount) -> None:
    assert Amount.from_str(text) == expected


def test_from_str_limits_on_units() -> None:
    # Unit "1" is the rendered stand-in for "no unit"
    assert Amount.from_str(Amount("5", unit="1").to_string()) == Amount("5")

    with pytest.raises(InvalidNumericLiteralError):
        Amount.from_str(Amount("1", unit="a]b").to_string())


@pytest.mark.parametrize("text", ["[kg]", "1.2[kg", "1.2[]", "abc[kg]", "1 2", ""])
def test_from_str_rejects_malformed_text(text: str) -> None:
    with pytest.raises(InvalidNumericLiteralError):
        Amount.from_str(text)


# endregion

# region Value semantics


def test_unit_style_and_currency() -> None:
    assert Amount("10", unit="EUR").unit_style is UnitStyle.CURRENCY
    assert Amount("10", unit="EUR").currency == "EUR"
    assert Amount("10", unit="kg").unit_style is UnitStyle.UNIT
    assert Amount("10", unit="kg").currency is None
    assert Amount("10").unit_style is UnitStyle.NONE


def test_equality_and_hash() -> None:
    assert Amount("1.2") != Amount("1.20")
    assert Amount("1.2", unit="kg") != Amount("1.2", unit="g")
    assert Amount("1.20", unit="kg") == Amount("1.20", unit="kg")
    assert len({Amount("1.20"), Amount("1.20"), Amount("1.2")}) == 2
    assert Amount("1") != "1"


def test_repr() -> None:
    assert repr(Amount("1.20", unit="kg")) == "Amount('1.20', unit='kg', significant_digits=3, fraction_digits=2)"


# endregion
