from __future__ import annotations

from enum import Enum


class Currency(Enum):
    """Currencies a monetary value can be expressed in.

    Members:
        DOLLAR: US dollar, written as "dollar" or "$".
        EURO: Euro, written as "euro" or "eur".
    """

    DOLLAR = "DOLLAR"
    EURO = "EURO"

    @classmethod
    def from_str(cls, token: str) -> Currency:
        """Get currency by its name or symbol.

        Matching is case-insensitive ("DOLLAR", "Dollar" and "dollar" are the same). The token is
        not trimmed, so it must not contain any whitespace.

        Args:
            token (str): Currency name or symbol to look up.

        Returns:
            Currency: The matching currency.

        Raises:
            TypeError: If $token is not a string.
            ValueError: If $token is not a known currency name or symbol.
        """
        if not isinstance(token, str):
            raise TypeError(f"$token must be a string, but provided value is: {token}")

        currency = _CURRENCY_BY_TOKEN.get(token.lower())
        if currency is None:
            raise ValueError(f"Currency with $token = '{token}' is unknown. Known tokens: {list(_CURRENCY_BY_TOKEN.keys())}")

        return currency


# Single source of truth for recognized tokens (all lowercase)
_CURRENCY_BY_TOKEN = {
    "dollar": Currency.DOLLAR,
    "$": Currency.DOLLAR,
    "euro": Currency.EURO,
    "eur": Currency.EURO,
}
