from __future__ import annotations

import logging
from decimal import Decimal

from decimal_money.monetary.currency import Currency
from decimal_money.monetary.exceptions import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    InvalidScaleError,
)
from decimal_money.utils.decimal_tools import DecimalLike, as_decimal, describe
from decimal_money.utils.fixed_point import (
    compare_units,
    divide_units,
    from_units,
    loses_digits,
    multiply_units,
    round_half_up,
    to_units,
)

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (Decimal, int, float, str)


class Money:
    """Represents an exact monetary amount with currency.

    The amount is kept exactly as given. Whenever it takes part in arithmetic or comparison it
    is truncated toward zero to `SCALE` fractional digits and all math runs on integer units
    at that scale, so no binary floating point is involved after the input boundary.

    Every operation returns a new `Money`; instances are never mutated.
    """

    __slots__ = ("_amount", "_currency")

    # Fractional digits used by all arithmetic, enough for satoshi amounts
    SCALE = 8

    # region Init

    def __init__(self, amount: DecimalLike, currency: Currency):
        """Initialize Money with amount and currency.

        Args:
            amount: Numeric amount (str, int, float or Decimal).
            currency (Currency): Currency object.

        Raises:
            InvalidAmountError: If $amount is not a well-formed decimal number.
            TypeError: If $currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {describe(currency)}")

        # Raise: $amount must be a well-formed decimal number
        try:
            decimal_amount = as_decimal(amount)
        except (TypeError, ValueError) as e:
            raise InvalidAmountError(f"Cannot init `Money` because $amount ({describe(amount)}) is not a well-formed decimal number") from e

        object.__setattr__(self, "_amount", decimal_amount)
        object.__setattr__(self, "_currency", currency)

    @classmethod
    def from_amount(cls, amount: DecimalLike, currency: Currency | str) -> Money:
        """Create Money from an amount and either a Currency or a raw 3 letter code.

        Args:
            amount: Numeric amount (str, int, float or Decimal).
            currency: Currency object or code such as "EUR".

        Returns:
            Money: New instance.

        Raises:
            InvalidCurrencyCodeError: If $currency is a code that is not 3 characters long.
            InvalidAmountError: If $amount is not a well-formed decimal number.
        """
        if not isinstance(currency, Currency):
            currency = Currency(currency)
        return cls(amount, currency)

    # endregion

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the exact decimal amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    # endregion

    # region Arithmetic

    def add(self, addend: Money) -> Money:
        """Return the sum of this and $addend.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        self._check_same_currency(addend)
        return self._new_instance(self._units() + addend._units())

    def subtract(self, subtrahend: Money) -> Money:
        """Return the difference of this and $subtrahend.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        self._check_same_currency(subtrahend)
        return self._new_instance(self._units() - subtrahend._units())

    def multiply_by(self, multiplier: DecimalLike) -> Money:
        """Return this amount multiplied by scalar $multiplier, truncated to `SCALE`.

        Raises:
            InvalidAmountError: If $multiplier is not a well-formed decimal number.
        """
        multiplier_units = self._scalar_units(multiplier, "multiply_by", "multiplier")
        return self._new_instance(multiply_units(self._units(), multiplier_units, self.SCALE))

    def divide_by(self, divisor: DecimalLike) -> Money:
        """Return this amount divided by scalar $divisor, truncated (not rounded) to `SCALE`.

        Raises:
            InvalidAmountError: If $divisor is not a well-formed decimal number.
            DivisionByZeroError: If $divisor is zero at `SCALE`.
        """
        divisor_units = self._scalar_units(divisor, "divide_by", "divisor")

        # Raise: divisor must not be zero at the fixed scale
        if divisor_units == 0:
            raise DivisionByZeroError(f"Cannot call `divide_by` because $divisor ({describe(divisor)}) is zero")

        return self._new_instance(divide_units(self._units(), divisor_units, self.SCALE))

    def round(self, scale: int = 0) -> Money:
        """Round to $scale fractional digits, halves toward positive infinity.

        Works on the exact stored amount, so `Money("-2.5", EUR).round()` is -2 and
        `Money("3.9843", EUR).round()` is 4. The result is `floor(amount * 10**scale + 1/2)`:
        negative amounts that are not exact halves go to the nearest value, so
        `Money("-2.7", EUR).round()` is -3 and `Money("-2.2", EUR).round()` is -2 (adding one
        half and truncating toward zero would give -2 for both).

        Args:
            scale: Number of fractional digits to keep, default 0.

        Returns:
            Money: New instance whose amount has exactly $scale fractional digits.

        Raises:
            InvalidScaleError: If $scale is not a non-negative integer.
        """
        # Raise: scale must be a non-negative int
        if isinstance(scale, bool) or not isinstance(scale, int):
            raise InvalidScaleError(f"$scale must be an integer, but provided value is: {describe(scale)}")
        if scale < 0:
            raise InvalidScaleError(f"$scale must be >= 0, but provided value is: {describe(scale)}")

        return self.__class__(round_half_up(self._amount, scale), self._currency)

    def convert_to(self, target_currency: Currency | str, rate: DecimalLike) -> Money:
        """Convert into $target_currency by multiplying with $rate.

        This is the only operation that crosses currencies, so no currency check is done.

        Args:
            target_currency: Currency (or its code) of the result.
            rate: Units of $target_currency per one unit of this currency.

        Returns:
            Money: New instance in $target_currency.

        Raises:
            InvalidAmountError: If $rate is not a well-formed decimal number.
            InvalidCurrencyCodeError: If $target_currency is a malformed code.
        """
        if not isinstance(target_currency, Currency):
            target_currency = Currency(target_currency)

        rate_units = self._scalar_units(rate, "convert_to", "rate")
        converted = from_units(multiply_units(self._units(), rate_units, self.SCALE), self.SCALE)
        logger.debug(f"Converted {self} to {converted} {target_currency} at $rate {describe(rate)}")
        return self.__class__(converted, target_currency)

    # endregion

    # region Comparison

    def compare_to(self, other: Money) -> int:
        """Return -1, 0 or 1 as this amount is less than, equal to or greater than $other.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        self._check_same_currency(other)
        return compare_units(self._units(), other._units())

    def equals(self, other: Money) -> bool:
        """Check whether this amount equals $other. Unlike `==`, raises on currency mismatch."""
        return self.compare_to(other) == 0

    def is_greater_than(self, other: Money) -> bool:
        return self.compare_to(other) == 1

    def is_greater_than_or_equal_to(self, other: Money) -> bool:
        return self.compare_to(other) >= 0

    def is_less_than(self, other: Money) -> bool:
        return self.compare_to(other) == -1

    def is_less_than_or_equal_to(self, other: Money) -> bool:
        return self.compare_to(other) <= 0

    def is_zero(self) -> bool:
        return self._units() == 0

    def is_positive(self) -> bool:
        return self._units() > 0

    def is_negative(self) -> bool:
        return self._units() < 0

    def has_same_currency_as(self, other: Money) -> bool:
        """Check whether $other has the same currency. Never raises; non-Money gives False."""
        return isinstance(other, Money) and self._currency.equals(other.currency)

    # endregion

    # region Internals

    def _new_instance(self, units: int) -> Money:
        return self.__class__(from_units(units, self.SCALE), self._currency)

    def _units(self) -> int:
        if logger.isEnabledFor(logging.DEBUG) and loses_digits(self._amount, self.SCALE):
            logger.debug(f"Amount {self._amount} of {self._currency} truncated to {self.SCALE} fractional digits")
        return to_units(self._amount, self.SCALE)

    def _scalar_units(self, value: DecimalLike, operation: str, name: str) -> int:
        # Raise: scalar operand must be a well-formed decimal number
        try:
            decimal_value = as_decimal(value)
        except (TypeError, ValueError) as e:
            raise InvalidAmountError(f"Cannot call `{operation}` because ${name} ({describe(value)}) is not a well-formed decimal number") from e

        if logger.isEnabledFor(logging.DEBUG) and loses_digits(decimal_value, self.SCALE):
            logger.debug(f"${name} {decimal_value} of `{operation}` truncated to {self.SCALE} fractional digits")
        return to_units(decimal_value, self.SCALE)

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            TypeError: If $other is not a Money.
            CurrencyMismatchError: If currencies don't match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"$other must be a Money instance, but provided value is: {describe(other)}")
        if not self.has_same_currency_as(other):
            raise CurrencyMismatchError(f"Cannot operate on different currencies: {self._currency} and {other.currency}")

    # endregion

    # region Python protocol

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot set attribute '{name}'")

    def __eq__(self, other) -> bool:
        """Check equality with another Money object. Different currencies are never equal."""
        if not isinstance(other, Money):
            return NotImplemented
        if not self.has_same_currency_as(other):
            return False
        return self._units() == other._units()

    def __hash__(self) -> int:
        """Hash based on amount at `SCALE` and currency code."""
        return hash((self._units(), self._currency.code))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_less_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_greater_than_or_equal_to(other)

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by number (returns Money)."""
        if isinstance(other, bool) or not isinstance(other, _SCALAR_TYPES):
            return NotImplemented  # Money * Money doesn't make sense
        return self.multiply_by(other)

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number (returns Money)."""
        if isinstance(other, bool) or not isinstance(other, _SCALAR_TYPES):
            return NotImplemented
        return self.divide_by(other)

    def __round__(self, ndigits: int | None = None) -> Money:
        return self.round(0 if ndigits is None else ndigits)

    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self._amount:f} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like "Money('1000.50', USD)"."""
        return f"{self.__class__.__name__}('{self._amount:f}', {self._currency.code})"

    # endregion
