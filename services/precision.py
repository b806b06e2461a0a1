# services/precision.py
from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any


CRYPTO_CURRENCIES = frozenset({"BTC", "ETH", "LTC"})
CRYPTO_PRECISION = 8
FIAT_PRECISION = 2

_LEADING_NUMBER_RE = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def currency_precision(currency: Any) -> int:
    if isinstance(currency, str) and currency in CRYPTO_CURRENCIES:
        return CRYPTO_PRECISION
    return FIAT_PRECISION


def to_float(value: Any) -> float:
    """
    Lenient numeric coercion for fields reported by the quote service.

    Missing or unparseable values become 0.0; a string is read up to the end of
    its leading number, so "12.5abc" is 12.5.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_NUMBER_RE.match(str(value))
    if not match:
        return 0.0
    return float(match.group(0))


def decimal_places(value: float) -> int:
    """Digits after the point in the shortest round-tripping form of value (1234.0 -> 1)."""
    if not math.isfinite(value):
        return 0
    exponent = Decimal(repr(float(value))).as_tuple().exponent
    return max(0, -exponent)


def round_to_precision(value: float, precision: int) -> float:
    """Round half away from zero on the decimal form of value."""
    value = float(value)
    if not math.isfinite(value) or decimal_places(value) <= precision:
        return value
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
