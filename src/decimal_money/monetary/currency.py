from __future__ import annotations

from decimal_money.monetary.exceptions import InvalidCurrencyCodeError
from decimal_money.utils.decimal_tools import describe


class Currency:
    """Immutable currency identity wrapping a 3 letter code.

    The code is stored in upper case and is not checked against any ISO table. Two
    currencies are equal when their codes are equal.

    Attributes:
        code (str): Upper-cased 3 letter code (e.g., "EUR", "USD").
    """

    __slots__ = ("_code",)

    CODE_LENGTH = 3

    def __init__(self, code: str):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code in any case (e.g., "eur", "USD").

        Raises:
            InvalidCurrencyCodeError: If $code is not a string, contains non-ASCII characters or
                is not 3 characters long once upper-cased.
        """
        # Raise: code must be text, not a number or other object
        if not isinstance(code, str):
            raise InvalidCurrencyCodeError(f"$code must be a 3 letter string, but provided value is: {describe(code)}")

        # Raise: code must be ASCII, upper-casing other scripts can change its length
        if not code.isascii():
            raise InvalidCurrencyCodeError(f"$code must contain only ASCII characters, but provided value is: {describe(code)}")

        # Raise: code must be exactly 3 characters long
        normalized = code.upper()
        if len(normalized) != self.CODE_LENGTH:
            raise InvalidCurrencyCodeError(f"$code must be exactly {self.CODE_LENGTH} characters long, but provided value is: {describe(code)}")

        object.__setattr__(self, "_code", normalized)

    @classmethod
    def from_code(cls, code: str) -> Currency:
        """Create a Currency from its code. Same as calling the constructor."""
        return cls(code)

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    def equals(self, other: Currency) -> bool:
        """Check whether $other has the same code as this currency."""
        return isinstance(other, Currency) and self._code == other._code

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot set attribute '{name}'")

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self._code)

    def __str__(self) -> str:
        """Return string representation."""
        return self._code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self._code}')"
