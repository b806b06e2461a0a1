# services/quote_client.py
from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict, NamedTuple, Optional

import requests

from schemas import QuoteResponse
from services.quote_cases import Amount, QuoteCase


logger = logging.getLogger("quote_smoke.http")

QUOTE_PATH = "/quote"


class QuoteRunError(RuntimeError):
    """The run cannot continue: the service was unreachable or answered with non-JSON."""


class QuoteResult(NamedTuple):
    request: Dict[str, str]
    response: requests.Response
    quote: QuoteResponse
    amount: Amount


def new_trace_id() -> str:
    return uuid.uuid4().hex[:16]


def _decode(resp: Any, url: str) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        raise QuoteRunError(
            "Invalid JSON from %s (HTTP %s): %s" % (url, resp.status_code, resp.text)
        ) from exc


def run_test(
    session: requests.Session,
    base_url: str,
    case: QuoteCase,
    timeout: Optional[float] = None,
) -> QuoteResult:
    request = case.to_request()
    print("--> %s" % request)

    url = base_url.rstrip("/") + QUOTE_PATH
    trace_id = new_trace_id()
    headers = {"Content-Type": "application/json", "X-Request-Id": trace_id}

    start = time.monotonic()
    logger.info("%s --> POST %s (%s)", trace_id, url, case.label)
    try:
        resp = session.post(url, json=request, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise QuoteRunError("Request failed: %s" % exc) from exc
    logger.info(
        "%s <-- %s %s (%.2fs)", trace_id, resp.status_code, url, time.monotonic() - start
    )

    payload = _decode(resp, url)
    print("<-- %s" % payload)
    return QuoteResult(request, resp, QuoteResponse.from_payload(payload), case.amount)
