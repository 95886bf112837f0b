"""Currency-named shortcuts for creating Money.

Any 3 letter upper-case attribute of this module is a factory for that currency:

    >>> from decimal_money.monetary import factories
    >>> factories.EUR(25)
    Money('25', EUR)
"""

from __future__ import annotations

from typing import Callable

from decimal_money.monetary.currency import Currency
from decimal_money.monetary.money import Money
from decimal_money.utils.decimal_tools import DecimalLike


def money(amount: DecimalLike, currency: Currency | str) -> Money:
    """Create Money from an amount and a Currency or currency code."""
    return Money.from_amount(amount, currency)


def __getattr__(name: str) -> Callable[[DecimalLike], Money]:
    if len(name) != Currency.CODE_LENGTH or not name.isalpha() or not name.isupper():
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    currency = Currency(name)

    def factory(amount: DecimalLike) -> Money:
        return Money(amount, currency)

    factory.__name__ = factory.__qualname__ = name
    factory.__doc__ = f"Create Money in {name}."
    return factory
