# schemas.py
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


# -------- QUOTE --------
class QuoteRequest(BaseModel):
    action: str
    base_currency: str
    quote_currency: str
    amount: str


class QuoteResponse(BaseModel):
    """
    Body returned by POST /quote.

    The service owns this shape, so every field is optional and left untyped:
    a success carries currency/price/total, a rejection carries message.
    """

    model_config = ConfigDict(extra="allow")

    currency: Optional[Any] = None
    price: Optional[Any] = None
    total: Optional[Any] = None
    message: Optional[Any] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "QuoteResponse":
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)

    def error_message(self) -> Optional[str]:
        if isinstance(self.message, str) and self.message:
            return self.message
        return None
