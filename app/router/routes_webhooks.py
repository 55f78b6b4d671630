import logging

from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from app.dto.webhook import WebhookPayload, WebhookToken
from app.repositories.transaction_ledger import TransactionLedger
from app.services.callback_notifier import CallbackNotifier
from app.services.webhook_service import WebhookService
from app.utils.config import settings

router = APIRouter(tags=["webhooks"])
logger = logging.getLogger(__name__)


def get_ledger(request: Request) -> TransactionLedger:
    return request.app.state.ledger


def get_notifier(request: Request) -> CallbackNotifier:
    return request.app.state.notifier


def get_service(
    ledger: TransactionLedger = Depends(get_ledger),
    notifier: CallbackNotifier = Depends(get_notifier),
) -> WebhookService:
    return WebhookService(ledger, notifier, WebhookToken(settings.webhook_token))


@router.post("/webhook", response_class=PlainTextResponse)
async def receive_webhook(
    request: Request,
    x_webhook_token: str | None = Header(default=None),
    service: WebhookService = Depends(get_service),
) -> PlainTextResponse:
    try:
        body = await request.body()
        try:
            payload = WebhookPayload.model_validate_json(body)
        except ValidationError:
            logger.info("Rejecting webhook with invalid or malformed JSON")
            return PlainTextResponse("Invalid or malformed JSON", status_code=status.HTTP_400_BAD_REQUEST)

        result = await service.process(payload, x_webhook_token)
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected error while processing webhook")
        return PlainTextResponse("An unexpected error occurred", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return PlainTextResponse(result.detail, status_code=result.status_code, headers=result.headers)
