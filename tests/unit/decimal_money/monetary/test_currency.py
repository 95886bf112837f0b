import pytest

from decimal_money.monetary.currency import Currency
from decimal_money.monetary.exceptions import InvalidArgumentError, InvalidCurrencyCodeError


def test_constructor_keeps_code():
    currency = Currency.from_code("EUR")
    assert currency.code == "EUR"
    assert str(currency) == "EUR"
    assert repr(currency) == "Currency('EUR')"


def test_code_is_upper_cased():
    assert Currency("eur").code == "EUR"
    assert Currency("uSd").code == "USD"


def test_different_instances_are_equal():
    assert Currency("EUR").equals(Currency("EUR"))
    assert Currency("USD") == Currency("USD")
    assert Currency("EUR").equals(Currency("eur"))
    assert hash(Currency("EUR")) == hash(Currency("eur"))
    assert len({Currency("EUR"), Currency("eur"), Currency("USD")}) == 2


def test_different_currencies_are_not_equal():
    assert not Currency("EUR").equals(Currency("USD"))
    assert Currency("EUR") != Currency("USD")


def test_equals_with_other_type_is_false():
    assert not Currency("EUR").equals("EUR")
    assert Currency("EUR") != "EUR"


@pytest.mark.parametrize("code", [1234, 12.5, None, b"EUR", ["E", "U", "R"]])
def test_non_string_code_is_rejected(code):
    with pytest.raises(InvalidCurrencyCodeError):
        Currency(code)


@pytest.mark.parametrize("code", ["FooBar", "EU", "", "EURO", "ßab", "ÉUR", "ﬀa", "eu\u0307"])
def test_non_3_letter_code_is_rejected(code):
    with pytest.raises(InvalidCurrencyCodeError) as exc_info:
        Currency.from_code(code)
    assert isinstance(exc_info.value, InvalidArgumentError)
    assert isinstance(exc_info.value, ValueError)


def test_currency_is_immutable():
    currency = Currency("EUR")
    with pytest.raises(AttributeError):
        currency._code = "USD"
    assert currency.code == "EUR"


@pytest.mark.parametrize("code", ["eur", "Usd", "xBt", "a1_"])
def test_stored_code_is_always_3_ascii_characters(code):
    currency = Currency(code)
    assert len(currency.code) == 3
    assert currency.code.isascii()
    assert currency.code == code.upper()


def test_error_message_for_huge_code_is_short():
    with pytest.raises(InvalidCurrencyCodeError) as exc_info:
        Currency("E" * 5000)
    assert len(str(exc_info.value)) < 200


def test_huge_integer_code_is_rejected_with_short_message():
    with pytest.raises(InvalidCurrencyCodeError) as exc_info:
        Currency(10**5000)
    assert len(str(exc_info.value)) < 200
