from __future__ import annotations

import logging
import re

from money_parser.domain.monetary.currency import Currency
from money_parser.domain.monetary.money import Money
from money_parser.domain.monetary.money_error import (
    MoneyError,
    MoneyParseError,
    ParseCurrency,
    ParseFormatting,
    amount_error_from,
)
from money_parser.utils.numeric_tools import parse_float_literal
from money_parser.utils.result import Err, Ok, Result

logger = logging.getLogger(__name__)

# Maximal run of non-whitespace characters. U+001C..U+001F count as whitespace for `str.split()`,
# but are not Unicode White_Space, so they stay inside a token.
_TOKEN = re.compile(r"(?:[^\s]|[\x1c-\x1f])+")


class MoneyParser:
    """Parses text like "100 Euro", "10 $" or "42.4 DOLLAR" into `Money`.

    Input must be exactly two whitespace-separated tokens: amount first, currency second. Amount is
    validated before currency, and the first failure is returned as `Err`. Nothing is retried,
    defaulted or coerced.

    Stateless; safe to call from multiple threads.
    """

    FORMATTING_MESSAGE = "Expecting amount and currency"
    UNKNOWN_CURRENCY_MESSAGE = "Unknown currency"

    # region Parse

    @classmethod
    def parse(cls, text: str) -> Result[Money, MoneyError]:
        """Parse $text into Money.

        Args:
            text (str): Text in format "<amount> <currency>".

        Returns:
            Result[Money, MoneyError]: `Ok(Money)` on success, otherwise `Err` with one of
            `ParseFormatting`, `ParseAmount` or `ParseCurrency`.

        Raises:
            TypeError: If $text is not a string.
        """
        if not isinstance(text, str):
            raise TypeError(f"$text must be a string, but provided value is: {text}")

        tokens = _TOKEN.findall(text)

        # Check token count first, then bind tokens by position
        if len(tokens) != 2:
            logger.debug(f"Rejected $text = '{text}': expected 2 tokens, got {len(tokens)}")
            return Err(ParseFormatting(cls.FORMATTING_MESSAGE))

        amount_token = tokens[0]
        currency_token = tokens[1]

        try:
            amount = parse_float_literal(amount_token)
        except ValueError as e:
            logger.debug(f"Rejected $text = '{text}': invalid amount '{amount_token}' ({e})")
            return Err(amount_error_from(e))

        currency_result = cls.parse_currency(currency_token)
        if isinstance(currency_result, Err):
            return currency_result

        return Ok(Money(amount, currency_result.value))

    @classmethod
    def parse_currency(cls, token: str) -> Result[Currency, MoneyError]:
        """Look up the currency written as $token (case-insensitive).

        Returns:
            Result[Currency, MoneyError]: `Ok(Currency)` or `Err(ParseCurrency("Unknown currency"))`.
        """
        try:
            currency = Currency.from_str(token)
        except ValueError:
            logger.debug(f"Rejected currency $token = '{token}'")
            return Err(ParseCurrency(cls.UNKNOWN_CURRENCY_MESSAGE))

        return Ok(currency)

    @classmethod
    def from_str(cls, text: str) -> Money:
        """Parse $text into Money, raising instead of returning `Err`.

        Raises:
            MoneyParseError: If $text cannot be parsed; `error` holds the classified failure.
            TypeError: If $text is not a string.
        """
        result = cls.parse(text)
        if isinstance(result, Err):
            raise MoneyParseError(result.error)

        return result.value

    # endregion


def parse(text: str) -> Result[Money, MoneyError]:
    """Parse "<amount> <currency>" text into Money. See `MoneyParser.parse`."""
    return MoneyParser.parse(text)


def parse_currency(token: str) -> Result[Currency, MoneyError]:
    """Look up a currency token. See `MoneyParser.parse_currency`."""
    return MoneyParser.parse_currency(token)
