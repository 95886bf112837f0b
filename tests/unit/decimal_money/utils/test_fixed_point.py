from decimal import Decimal

import pytest

from decimal_money.utils.fixed_point import (
    compare_units,
    divide_units,
    from_units,
    loses_digits,
    multiply_units,
    round_half_up,
    to_units,
)


@pytest.mark.parametrize(
    "value, scale, expected",
    [
        ("100", 8, 10_000_000_000),
        ("3.33333333333", 8, 333_333_333),
        ("-0.000000019", 8, -1),
        ("0.000000009", 8, 0),
        ("1E+3", 2, 100_000),
        ("-12.345", 2, -1234),
        ("0", 8, 0),
    ],
)
def test_to_units_truncates_toward_zero(value, scale, expected):
    assert to_units(Decimal(value), scale) == expected


def test_from_units_carries_scale():
    assert from_units(10_000_000_000, 8) == Decimal("100")
    assert from_units(10_000_000_000, 8).as_tuple().exponent == -8
    assert from_units(-1, 8) == Decimal("-0.00000001")
    assert from_units(0, 2) == Decimal("0")
    assert from_units(42, 0) == Decimal("42")


def test_loses_digits():
    assert loses_digits(Decimal("0.123456789"), 8)
    assert not loses_digits(Decimal("0.12345678"), 8)
    assert not loses_digits(Decimal("0.123456780000"), 8)


def test_arbitrary_precision_is_kept():
    big = Decimal("123456789012345678901234567890.12345678")
    assert from_units(to_units(big, 8), 8) == big
    assert from_units(to_units(big, 8) * 2, 8) == Decimal("246913578024691357802469135780.24691356")


def test_multiply_units_truncates():
    # 1.5 * 1.5 = 2.25 at scale 1 -> 2.2
    assert multiply_units(15, 15, 1) == 22
    assert multiply_units(-15, 15, 1) == -22


def test_divide_units_truncates():
    # 1 / 3 at scale 4
    assert divide_units(10_000, 30_000, 4) == 3333
    assert divide_units(-10_000, 30_000, 4) == -3333
    assert divide_units(20_000, -30_000, 4) == -6666


def test_divide_units_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide_units(1, 0, 8)


def test_compare_units():
    assert compare_units(1, 2) == -1
    assert compare_units(2, 2) == 0
    assert compare_units(3, 2) == 1
    assert compare_units(-5, 0) == -1


@pytest.mark.parametrize(
    "value, scale, expected",
    [
        ("3.9843", 0, "4"),
        ("3.33333333333", 2, "3.33"),
        ("0.5", 0, "1"),
        ("-0.5", 0, "0"),
        ("-2.5", 0, "-2"),
        ("-2.51", 0, "-3"),
        ("12.345", 2, "12.35"),
        ("12", 3, "12.000"),
    ],
)
def test_round_half_up(value, scale, expected):
    rounded = round_half_up(Decimal(value), scale)
    assert rounded == Decimal(expected)
    assert rounded.as_tuple().exponent == -scale


def test_conversions_beyond_int_str_digit_limit():
    digits = 5000
    value = Decimal("9" * digits + ".123456789")
    units = to_units(value, 8)

    assert units == (10**digits - 1) * 10**8 + 12_345_678
    assert from_units(units, 8) == Decimal("9" * digits + ".12345678")
    assert from_units(-units, 8) == -Decimal("9" * digits + ".12345678")
    assert round_half_up(value, 2) == Decimal("9" * digits + ".12")
