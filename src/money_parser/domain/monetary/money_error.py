from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class MoneyErrorKind(Enum):
    """Classification of a failed Money parse.

    Members:
        PARSE_AMOUNT: Amount token is not a valid floating-point literal.
        PARSE_CURRENCY: Currency token is not a known currency name or symbol.
        PARSE_FORMATTING: Input does not consist of exactly an amount and a currency.
    """

    PARSE_AMOUNT = "PARSE_AMOUNT"
    PARSE_CURRENCY = "PARSE_CURRENCY"
    PARSE_FORMATTING = "PARSE_FORMATTING"


@dataclass(frozen=True)
class ParseAmount:
    """Amount token could not be parsed; $message is the underlying numeric parse failure."""

    message: str

    @property
    def kind(self) -> MoneyErrorKind:
        return MoneyErrorKind.PARSE_AMOUNT

    def __str__(self) -> str:
        return f"Invalid input: {self.message}"


@dataclass(frozen=True)
class ParseCurrency:
    """Currency token is not recognized."""

    message: str

    @property
    def kind(self) -> MoneyErrorKind:
        return MoneyErrorKind.PARSE_CURRENCY

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ParseFormatting:
    """Input is not shaped like "<amount> <currency>"."""

    message: str

    @property
    def kind(self) -> MoneyErrorKind:
        return MoneyErrorKind.PARSE_FORMATTING

    def __str__(self) -> str:
        return self.message


# Closed set of parse failures
MoneyError: TypeAlias = ParseAmount | ParseCurrency | ParseFormatting


def amount_error_from(error: ValueError) -> ParseAmount:
    """Convert a numeric parse failure into the domain error for the amount token."""
    return ParseAmount(str(error))


class MoneyParseError(ValueError):
    """Raised by the raising parse API; carries the classified failure in $error."""

    def __init__(self, error: MoneyError):
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> MoneyErrorKind:
        return self.error.kind
