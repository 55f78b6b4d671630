#!/usr/bin/env python3
"""Local stand-in for the downstream callback service on 127.0.0.1:5001."""
import argparse
import logging

import uvicorn
from fastapi import FastAPI

from app.dto.webhook import CallbackPayload
from app.utils.enums import CallbackEndpoint
from app.utils.logging import configure_logging

logger = logging.getLogger("callback_receiver")

app = FastAPI(title="Callback Receiver")


@app.post(f"/{CallbackEndpoint.CONFIRM.value}")
async def confirm(payload: CallbackPayload) -> dict[str, str]:
    logger.info("Confirmation received. transaction_id=%s", payload.transaction_id)
    return {"status": "confirmed", "transaction_id": payload.transaction_id}


@app.post(f"/{CallbackEndpoint.CANCEL.value}")
async def cancel(payload: CallbackPayload) -> dict[str, str]:
    logger.info("Cancellation received. transaction_id=%s", payload.transaction_id)
    return {"status": "cancelled", "transaction_id": payload.transaction_id}


def main() -> None:
    parser = argparse.ArgumentParser(description="Mock callback service")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=5001)
    args = parser.parse_args()
    configure_logging()
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
