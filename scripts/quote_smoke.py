# scripts/quote_smoke.py
from __future__ import annotations

import logging
import sys
from typing import Optional

import requests
from pydantic import ValidationError

from services.quote_cases import HAPPY_CASES, SAD_CASES
from services.quote_checks import acceptable, unacceptable
from services.quote_client import QuoteRunError, run_test
from settings import Settings


logger = logging.getLogger("quote_smoke")


def die(message, code=1):
    print(message)
    sys.exit(code)


def run_suite(
    session: requests.Session,
    base_url: str,
    *,
    timeout: Optional[float] = None,
    strict_messages: bool = False,
) -> int:
    fails = 0

    for case in HAPPY_CASES:
        result = run_test(session, base_url, case, timeout=timeout)
        fails += acceptable(*result)
        print()

    for case in SAD_CASES:
        result = run_test(session, base_url, case, timeout=timeout)
        fails += unacceptable(*result, strict_messages=strict_messages)
        print()

    return fails


def main() -> None:
    try:
        cfg = Settings()
    except ValidationError as exc:
        die("Invalid configuration: %s" % exc)

    logging.basicConfig(level=cfg.QUOTE_SMOKE_LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    logger.info(
        "Quote smoke starting; target=%s cases=%s strict_messages=%s",
        cfg.base_url,
        len(HAPPY_CASES) + len(SAD_CASES),
        cfg.QUOTE_SMOKE_STRICT_MESSAGES,
    )

    with requests.Session() as session:
        try:
            fails = run_suite(
                session,
                cfg.base_url,
                timeout=cfg.QUOTE_HTTP_TIMEOUT_S,
                strict_messages=cfg.QUOTE_SMOKE_STRICT_MESSAGES,
            )
        except QuoteRunError as exc:
            logger.error("Quote smoke aborted: %s", exc)
            die(str(exc))

    logger.info("Quote smoke finished; fails=%s", fails)
    if fails == 0:
        print("Test suite passed, to the moon!!")
        sys.exit(0)

    print("%s assertions failed" % fails)
    sys.exit(1)


if __name__ == "__main__":
    main()
