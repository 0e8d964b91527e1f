from __future__ import annotations

from dataclasses import dataclass

from money_parser.domain.monetary.currency import Currency


@dataclass(frozen=True)
class Money:
    """Represents a monetary amount with currency.

    Immutable value object: two instances are equal when both $amount and $currency are equal.
    No range or sign validation is done, so negative, infinite and NaN amounts are allowed.

    Attributes:
        amount (float): Numeric amount.
        currency (Currency): Currency of the amount.
    """

    amount: float
    currency: Currency

    def __post_init__(self) -> None:
        # Raise: currency must be an instance of Currency
        if not isinstance(self.currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {self.currency}")

        # Raise: amount must be a real number (bool is an int subclass, but not an amount)
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise TypeError(f"$amount must be an int or float, but provided value is: {self.amount!r}")

        # frozen=True requires object.__setattr__ to normalize the stored value
        object.__setattr__(self, "amount", float(self.amount))

    @classmethod
    def new(cls, amount: float, currency: Currency) -> Money:
        """Create Money from $amount and $currency."""
        return cls(amount, currency)
