import logging
import secrets

from app.dto.webhook import TransactionId, WebhookPayload, WebhookResult, WebhookToken
from app.repositories.transaction_ledger import TransactionLedger
from app.services.callback_notifier import CallbackNotifier
from app.utils.amount import is_valid_amount
from app.utils.enums import CallbackEndpoint, LedgerDecision

logger = logging.getLogger(__name__)

UNAUTHORIZED_HEADERS = {"WWW-Authenticate": 'Bearer realm="webhook"'}


def token_matches(presented: str | None, expected: WebhookToken) -> bool:
    if presented is None:
        return False
    return secrets.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))


class WebhookService:
    def __init__(self, ledger: TransactionLedger, notifier: CallbackNotifier, valid_token: WebhookToken):
        self.ledger = ledger
        self.notifier = notifier
        self.valid_token = valid_token

    async def process(self, payload: WebhookPayload, token: str | None) -> WebhookResult:
        if not token_matches(token, self.valid_token):
            logger.info("Rejecting webhook with missing or invalid token")
            return WebhookResult(status_code=401, detail="Unauthorized", headers=UNAUTHORIZED_HEADERS)

        # Only id and timestamp gate this branch; a missing amount is reported as an invalid amount.
        if not payload.transaction_id or payload.timestamp is None:
            logger.info(
                "Rejecting webhook with missing required fields. transaction_id=%s",
                payload.transaction_id or "N/A",
            )
            if payload.transaction_id:
                await self.notifier.notify(CallbackEndpoint.CANCEL, TransactionId(payload.transaction_id))
            return WebhookResult(status_code=400, detail="Missing required fields")

        transaction_id = TransactionId(payload.transaction_id)
        decision = self.ledger.record_if_new(transaction_id, accept=is_valid_amount(payload.amount))

        if decision == LedgerDecision.DUPLICATE:
            logger.info("Rejecting duplicate transaction. transaction_id=%s", transaction_id)
            return WebhookResult(status_code=409, detail="Duplicate transaction")

        if decision == LedgerDecision.REJECTED:
            logger.info("Invalid amount, cancelling transaction. transaction_id=%s amount=%r", transaction_id, payload.amount)
            await self.notifier.notify(CallbackEndpoint.CANCEL, transaction_id)
            return WebhookResult(status_code=400, detail="Invalid amount")

        logger.info("Transaction accepted, confirming. transaction_id=%s", transaction_id)
        await self.notifier.notify(CallbackEndpoint.CONFIRM, transaction_id)
        return WebhookResult(status_code=200, detail="Webhook processed")
