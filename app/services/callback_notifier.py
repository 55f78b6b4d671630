import logging

import httpx

from app.dto.webhook import CallbackPayload, TransactionId
from app.utils.enums import CallbackEndpoint

logger = logging.getLogger(__name__)


class CallbackNotifier:
    """Posts the outcome of a transaction to the downstream callback service.

    Delivery is attempted once. Failures are logged and reported through the return
    value; they never reach the caller as exceptions.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self.client = client
        self.base_url = base_url.rstrip("/")

    def endpoint_url(self, endpoint: CallbackEndpoint) -> str:
        return f"{self.base_url}/{endpoint.value}"

    async def notify(self, endpoint: CallbackEndpoint, transaction_id: TransactionId) -> bool:
        url = self.endpoint_url(endpoint)
        body = CallbackPayload(transaction_id=transaction_id)
        try:
            response = await self.client.post(url, json=body.model_dump())
        except httpx.HTTPError as exc:
            logger.warning(
                "Callback delivery failed. endpoint=%s transaction_id=%s error=%s",
                endpoint.value,
                transaction_id,
                exc,
            )
            return False
        except Exception:  # noqa: BLE001
            logger.exception(
                "Unexpected error sending callback. endpoint=%s transaction_id=%s",
                endpoint.value,
                transaction_id,
            )
            return False

        if response.is_success:
            logger.info("Callback sent. endpoint=%s transaction_id=%s", endpoint.value, transaction_id)
            return True
        logger.warning(
            "Callback rejected by downstream service. endpoint=%s transaction_id=%s status_code=%s",
            endpoint.value,
            transaction_id,
            response.status_code,
        )
        return False
