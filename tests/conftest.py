# tests/conftest.py

import json
from typing import Any, Callable, Dict, List, Optional

import pytest

from services.precision import currency_precision, round_to_precision


# ---------------------------
# HTTP fakes
# ---------------------------

class FakeResponse:
    def __init__(self, status_code: int = 200, json_data: Any = None, text: Optional[str] = None, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.text = text if text is not None else json.dumps(json_data)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Stands in for requests.Session; hands each POST body to a responder."""

    def __init__(self, responder: Callable[[Dict[str, str]], FakeResponse]):
        self.responder = responder
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        return self.responder(json)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


# ---------------------------
# Deterministic quote service
# ---------------------------

# price of one unit of base, in quote currency
PRICES = {
    ("LTC", "USD"): "61.20",
    ("BTC", "USD"): "6512.40",
    ("BTC", "ETH"): "15.34782610",
    ("ETH", "BTC"): "0.06515580",
    ("USD", "BTC"): "0.00015355",
}

# largest amount any order book can fill
MAX_DEPTH = 10000


def _reject(message: str, status: int = 400) -> FakeResponse:
    return FakeResponse(status, {"message": message})


def fake_quote_service(body: Dict[str, str]) -> FakeResponse:
    if body.get("action") not in ("buy", "sell"):
        return _reject("action must be 'buy' or 'sell'")
    try:
        amount = float(body.get("amount", ""))
    except ValueError as exc:
        return _reject(str(exc))
    if amount <= 0:
        return _reject("amount must be a positive number")

    pair = (body.get("base_currency"), body.get("quote_currency"))
    price = PRICES.get(pair)
    if price is None:
        return _reject("invalid currency pair")
    if amount > MAX_DEPTH:
        return _reject("insufficient order book depth")

    quote_currency = body["quote_currency"]
    precision = currency_precision(quote_currency)
    total = round_to_precision(amount * float(price), precision)
    return FakeResponse(
        200,
        {"price": price, "total": "%.*f" % (precision, total), "currency": quote_currency},
    )


@pytest.fixture()
def quote_service() -> FakeSession:
    return FakeSession(fake_quote_service)


@pytest.fixture()
def make_session() -> Callable[..., FakeSession]:
    def _make(responder: Callable[[Dict[str, str]], FakeResponse]) -> FakeSession:
        return FakeSession(responder)

    return _make


@pytest.fixture()
def clean_env(monkeypatch, tmp_path):
    # keep a developer's .env and shell exports out of Settings()
    monkeypatch.chdir(tmp_path)
    for name in (
        "GDAX_QUOTE_HOST",
        "GDAX_QUOTE_LISTEN_PORT",
        "QUOTE_HTTP_TIMEOUT_S",
        "QUOTE_SMOKE_STRICT_MESSAGES",
        "QUOTE_SMOKE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
