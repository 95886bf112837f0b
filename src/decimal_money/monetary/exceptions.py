"""Errors raised by monetary values.

Every error is a caller-input error: nothing here is transient and nothing is retried.
"""


class MoneyError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(MoneyError, ValueError):
    """Raised when an argument passed to `Currency` or `Money` is not acceptable."""


class InvalidCurrencyCodeError(InvalidArgumentError):
    """Raised when a currency code is not text or is not exactly 3 characters long."""


class InvalidAmountError(InvalidArgumentError):
    """Raised when an amount, multiplier, divisor or rate is not a well-formed decimal number."""


class DivisionByZeroError(InvalidArgumentError, ZeroDivisionError):
    """Raised when a divisor equals zero at the fixed scale."""


class InvalidScaleError(InvalidArgumentError):
    """Raised when a rounding scale is not a non-negative integer."""


class CurrencyMismatchError(MoneyError, ValueError):
    """Raised when two `Money` values with different currencies meet in one operation."""
