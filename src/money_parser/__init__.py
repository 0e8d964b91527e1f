__version__ = "0.0.1"

from money_parser.domain.monetary.currency import Currency
from money_parser.domain.monetary.money import Money
from money_parser.domain.monetary.money_error import (
    MoneyError,
    MoneyErrorKind,
    MoneyParseError,
    ParseAmount,
    ParseCurrency,
    ParseFormatting,
)
from money_parser.domain.monetary.parser import MoneyParser, parse, parse_currency
from money_parser.utils.result import Err, Ok, Result

__all__ = [
    "Currency",
    "Money",
    "MoneyError",
    "MoneyErrorKind",
    "MoneyParseError",
    "ParseAmount",
    "ParseCurrency",
    "ParseFormatting",
    "MoneyParser",
    "parse",
    "parse_currency",
    "Ok",
    "Err",
    "Result",
]
