import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI

from app.repositories.transaction_ledger import TransactionLedger
from app.router.routes_health import router as health_router
from app.router.routes_webhooks import router as webhooks_router
from app.services.callback_notifier import CallbackNotifier
from app.utils.config import settings
from app.utils.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # The ledger lives exactly as long as the process; nothing is persisted.
    app.state.ledger = TransactionLedger()
    async with httpx.AsyncClient(timeout=settings.callback_timeout_seconds) as client:
        app.state.notifier = CallbackNotifier(client, settings.callback_base_url)
        logger.info(
            "Webhook handler ready. callback_base_url=%s",
            settings.callback_base_url,
        )
        yield
    logger.info("Webhook handler stopped. processed_transactions=%s", len(app.state.ledger))


app = FastAPI(title="Transaction Webhook Handler", lifespan=lifespan)
app.include_router(health_router)
app.include_router(webhooks_router)


def run() -> None:
    configure_logging()
    logger.info("Server online at http://%s:%s/ (press CTRL+C to stop)", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
