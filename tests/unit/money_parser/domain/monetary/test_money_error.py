from money_parser.domain.monetary.money_error import (
    MoneyErrorKind,
    MoneyParseError,
    ParseAmount,
    ParseCurrency,
    ParseFormatting,
    amount_error_from,
)


def test_error_kinds():
    assert ParseAmount("x").kind == MoneyErrorKind.PARSE_AMOUNT
    assert ParseCurrency("x").kind == MoneyErrorKind.PARSE_CURRENCY
    assert ParseFormatting("x").kind == MoneyErrorKind.PARSE_FORMATTING


def test_error_display():
    assert str(ParseAmount("invalid float literal: 'abc'")) == "Invalid input: invalid float literal: 'abc'"
    assert str(ParseCurrency("Unknown currency")) == "Unknown currency"
    assert str(ParseFormatting("Expecting amount and currency")) == "Expecting amount and currency"


def test_errors_compare_by_kind_and_message():
    assert ParseCurrency("Unknown currency") == ParseCurrency("Unknown currency")
    assert ParseCurrency("Unknown currency") != ParseFormatting("Unknown currency")


def test_amount_error_from_value_error():
    error = amount_error_from(ValueError("invalid float literal: 'ten'"))

    assert error == ParseAmount("invalid float literal: 'ten'")


def test_money_parse_error_wraps_error():
    error = MoneyParseError(ParseAmount("invalid float literal: 'ten'"))

    assert isinstance(error, ValueError)
    assert error.error == ParseAmount("invalid float literal: 'ten'")
    assert error.kind == MoneyErrorKind.PARSE_AMOUNT
    assert str(error) == "Invalid input: invalid float literal: 'ten'"
