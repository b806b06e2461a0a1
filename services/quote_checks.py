# services/quote_checks.py
from __future__ import annotations

from typing import Any, Dict

from schemas import QuoteResponse
from services.precision import (
    currency_precision,
    decimal_places,
    round_to_precision,
    to_float,
)
from services.quote_cases import Amount


def _passed() -> None:
    print(".", end="", flush=True)


def acceptable(
    request: Dict[str, str],
    response: Any,
    quote: QuoteResponse,
    amount: Amount,
) -> int:
    """
    Checks for a request the service should quote.

    All four checks run regardless of earlier failures; returns how many failed.
    """
    fails = 0

    if response.status_code == 200:
        _passed()
    else:
        print("FAIL: API responded with error status %s" % response.status_code)
        fails += 1

    if quote.currency == request["quote_currency"]:
        _passed()
    else:
        fails += 1
        print("FAIL: returned currency should be requested quote currency")
        print("Expected '%s' got '%s'" % (request["quote_currency"], quote.currency))

    price = to_float(quote.price)
    total = to_float(quote.total)
    precision = currency_precision(quote.currency)

    expected_total = round_to_precision(amount * price, precision)
    if expected_total == total:
        _passed()
    else:
        fails += 1
        print("FAIL: quote total should be the amount requested times the price")
        print("Expected '%s' got '%s'" % (expected_total, total))

    places = decimal_places(total)
    if places <= precision:
        _passed()
    else:
        fails += 1
        print(
            "FAIL: total is too precise, it has %s decimal places but should have at most %s"
            % (places, precision)
        )

    return fails


def unacceptable(
    request: Dict[str, str],
    response: Any,
    quote: QuoteResponse,
    amount: Amount,
    *,
    strict_messages: bool = False,
) -> int:
    """Checks for a request the service should reject."""
    fails = 0

    if response.status_code != 200:
        _passed()
    else:
        print("FAIL: Bad API request responded with success status")
        fails += 1

    if quote.error_message():
        _passed()
    else:
        print("FAIL: Bad API request did not respond with error message")
        # reported but only counted in strict mode
        if strict_messages:
            fails += 1

    return fails
