from typing import NewType

from pydantic import BaseModel, ConfigDict, Field

TransactionId = NewType("TransactionId", str)
WebhookToken = NewType("WebhookToken", str)


class WebhookPayload(BaseModel):
    # Every field is optional on the wire; presence rules live in WebhookService.
    model_config = ConfigDict(extra="ignore")

    event: str | None = None
    transaction_id: str | None = None
    amount: str | None = None
    currency: str | None = None
    timestamp: str | None = None


class CallbackPayload(BaseModel):
    transaction_id: str


class WebhookResult(BaseModel):
    status_code: int
    detail: str
    headers: dict[str, str] = Field(default_factory=dict)
