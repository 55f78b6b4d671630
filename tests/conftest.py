import asyncio
import sys

import pytest
from fastapi.testclient import TestClient

from app.dto.webhook import TransactionId
from app.router.routes_webhooks import get_notifier
from app.utils.config import settings
from app.utils.enums import CallbackEndpoint

if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

VALID_TIMESTAMP = "2023-10-01T12:00:00Z"


class RecordingNotifier:
    """Stands in for CallbackNotifier and keeps every notification it was asked to send."""

    def __init__(self, succeed: bool = True):
        self.calls: list[tuple[CallbackEndpoint, TransactionId]] = []
        self.succeed = succeed

    async def notify(self, endpoint: CallbackEndpoint, transaction_id: TransactionId) -> bool:
        # Yield so concurrent handlers actually interleave around the ledger.
        await asyncio.sleep(0)
        self.calls.append((endpoint, transaction_id))
        return self.succeed

    def calls_for(self, endpoint: CallbackEndpoint) -> list[TransactionId]:
        return [txn_id for called, txn_id in self.calls if called == endpoint]


def make_payload(**overrides) -> dict:
    payload = {
        "event": "payment_success",
        "transaction_id": "tx1",
        "amount": "25.50",
        "currency": "BRL",
        "timestamp": VALID_TIMESTAMP,
    }
    payload.update(overrides)
    return {key: value for key, value in payload.items() if value is not None}


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-Webhook-Token": settings.webhook_token}


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def client(notifier):
    from app.main import app

    app.dependency_overrides[get_notifier] = lambda: notifier
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def ledger(client):
    return client.app.state.ledger
