__version__ = "0.1.0"

from decimal_money.monetary.currency import Currency
from decimal_money.monetary.exceptions import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    InvalidArgumentError,
    InvalidCurrencyCodeError,
    InvalidScaleError,
    MoneyError,
)
from decimal_money.monetary.money import Money

__all__ = [
    "Currency",
    "Money",
    "MoneyError",
    "InvalidArgumentError",
    "InvalidCurrencyCodeError",
    "InvalidAmountError",
    "DivisionByZeroError",
    "InvalidScaleError",
    "CurrencyMismatchError",
]
