from fastapi import APIRouter, Depends

from app.dto.health import HealthResponse
from app.repositories.transaction_ledger import TransactionLedger
from app.router.routes_webhooks import get_ledger
from app.utils.time import utcnow

router = APIRouter()


@router.get("/", response_model=HealthResponse)
async def health_check(ledger: TransactionLedger = Depends(get_ledger)) -> HealthResponse:
    return HealthResponse(status="HEALTHY", current_time=utcnow(), processed_transactions=len(ledger))
