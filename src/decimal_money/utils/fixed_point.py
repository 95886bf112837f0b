"""Exact decimal arithmetic on integer mantissas.

A value at scale $s is carried as the integer `units = value * 10**s`. Python integers have
arbitrary precision, so sums and products never overflow and never round; the only place
digits are dropped is the explicit truncation toward zero in `to_units`, `multiply_units`
and `divide_units`. Conversions between `Decimal` and `int` never go through text, so the
int to str digit limit does not apply.
"""

from __future__ import annotations

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal

# Context wide enough that `scaleb` never rounds
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def _split(value: Decimal) -> tuple[int, int]:
    """Return ($mantissa, $exponent) such that $value == $mantissa * 10**$exponent."""
    sign, digits, exponent = value.as_tuple()
    return int(Decimal((sign, digits, 0))), int(exponent)


def _divide_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def to_units(value: Decimal, scale: int) -> int:
    """Convert a finite Decimal into integer units at $scale, truncating toward zero.

    Examples:
        >>> to_units(Decimal("3.33333333333"), 8)
        333333333
        >>> to_units(Decimal("-0.000000019"), 8)
        -1
        >>> to_units(Decimal("100"), 8)
        10000000000
    """
    mantissa, exponent = _split(value)
    shift = exponent + scale
    if shift >= 0:
        return mantissa * 10**shift
    return _divide_toward_zero(mantissa, 10**-shift)


def from_units(units: int, scale: int) -> Decimal:
    """Convert integer units at $scale back into a Decimal carrying exactly $scale fractional digits."""
    return Decimal(units).scaleb(-scale, context=_EXACT)


def loses_digits(value: Decimal, scale: int) -> bool:
    """Return True if $value has non-zero digits beyond $scale."""
    return from_units(to_units(value, scale), scale) != value


def multiply_units(left: int, right: int, scale: int) -> int:
    """Multiply two values at $scale; the product is truncated back to $scale."""
    return _divide_toward_zero(left * right, 10**scale)


def divide_units(dividend: int, divisor: int, scale: int) -> int:
    """Divide two values at $scale; the quotient is truncated to $scale.

    Raises:
        ZeroDivisionError: If $divisor is 0.
    """
    if divisor == 0:
        raise ZeroDivisionError("$divisor cannot be 0")
    return _divide_toward_zero(dividend * 10**scale, divisor)


def compare_units(left: int, right: int) -> int:
    """Return -1, 0 or 1 as $left is less than, equal to or greater than $right."""
    return (left > right) - (left < right)


def round_half_up(value: Decimal, scale: int) -> Decimal:
    """Round $value to $scale fractional digits, halves toward positive infinity.

    Computes `floor(value * 10**scale + 1/2)`, so -2.5 becomes -2 while -2.7 becomes -3.

    Examples:
        >>> round_half_up(Decimal("3.9843"), 0)
        Decimal('4')
        >>> round_half_up(Decimal("-2.5"), 0)
        Decimal('-2')
        >>> round_half_up(Decimal("3.33333333333"), 2)
        Decimal('3.33')
    """
    mantissa, exponent = _split(value)
    shift = exponent + scale
    if shift >= 0:
        units = mantissa * 10**shift
    else:
        denominator = 10**-shift
        # floor((m / d) + 1/2) == floor((2m + d) / 2d)
        units = (2 * mantissa + denominator) // (2 * denominator)
    return from_units(units, scale)
