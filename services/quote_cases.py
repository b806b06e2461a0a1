# services/quote_cases.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Union

from schemas import QuoteRequest


Amount = Union[int, float]


@dataclass(frozen=True)
class QuoteCase:
    action: str
    base_currency: str
    quote_currency: str
    amount: Amount

    @property
    def label(self) -> str:
        joiner = "for" if self.action == "sell" else "with"
        return f"{self.action} {self.amount} {self.base_currency} {joiner} {self.quote_currency}"

    def to_request(self) -> Dict[str, str]:
        # amount travels as its string form, never as a JSON number
        return QuoteRequest(
            action=self.action,
            base_currency=self.base_currency,
            quote_currency=self.quote_currency,
            amount=str(self.amount),
        ).model_dump()


# Expected to be quoted with HTTP 200.
HAPPY_CASES: Tuple[QuoteCase, ...] = (
    QuoteCase("buy", "LTC", "USD", 42.45),
    QuoteCase("sell", "LTC", "USD", 42.45),
    QuoteCase("buy", "BTC", "USD", 20.35),
    QuoteCase("buy", "BTC", "ETH", 10),
    QuoteCase("buy", "ETH", "BTC", 10),
    QuoteCase("buy", "USD", "BTC", 100),
)

# Expected to be rejected with a non-200 status and an error message.
SAD_CASES: Tuple[QuoteCase, ...] = (
    QuoteCase("buy", "LTC", "GBP", 100),  # unsupported pair
    QuoteCase("buy", "ARK", "USD", 100),  # unknown base
    QuoteCase("sell", "USD", "Ark", 100),  # unknown quote, wrong case
    QuoteCase("waffle", "BTC", "USD", 100),  # bad action
    QuoteCase("buy", "BTC", "USD", -100),  # negative amount
    QuoteCase("sell", "BTC", "USD", 25000000),  # deeper than any order book
)
