from __future__ import annotations

import logging

from money_parser import MoneyParseError, MoneyParser, Ok, ParseAmount, ParseCurrency, ParseFormatting


logger = logging.getLogger(__name__)


def describe(text: str) -> str:
    result = MoneyParser.parse(text)

    # Every failure kind is handled here; the library itself does not report anything
    if isinstance(result, Ok):
        money = result.value
        return f"{text!r} -> {money.amount} {money.currency.name}"
    error = result.error
    if isinstance(error, ParseFormatting):
        return f"{text!r} -> malformed: {error}"
    if isinstance(error, ParseAmount):
        return f"{text!r} -> bad amount: {error}"
    if isinstance(error, ParseCurrency):
        return f"{text!r} -> bad currency: {error}"
    raise AssertionError(f"Unhandled error: {error!r}")


if __name__ == "__main__":
    # DEBUG shows why the parser rejected an input
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    for sample in ["100 Euro", "10 $", "42.4 DOLLAR", "140.01", "OneMillion Euro", "5 pounds", "Euro 100"]:
        logger.info(describe(sample))

    try:
        MoneyParser.from_str("100 Yen")
    except MoneyParseError as e:
        logger.info(f"from_str raised {e.kind.name}: {e}")
