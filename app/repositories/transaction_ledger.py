import threading

from app.dto.webhook import TransactionId
from app.utils.enums import LedgerDecision


class TransactionLedger:
    """In-memory record of transaction ids that completed the success path.

    Ids are only ever added. The duplicate check and the insert run under one lock
    so two requests carrying the same id can never both be recorded.
    """

    def __init__(self) -> None:
        self._processed: set[TransactionId] = set()
        self._lock = threading.Lock()

    def record_if_new(self, transaction_id: TransactionId, *, accept: bool) -> LedgerDecision:
        # Duplicate check precedes the amount verdict.
        with self._lock:
            if transaction_id in self._processed:
                return LedgerDecision.DUPLICATE
            if not accept:
                return LedgerDecision.REJECTED
            self._processed.add(transaction_id)
            return LedgerDecision.RECORDED

    def contains(self, transaction_id: TransactionId) -> bool:
        with self._lock:
            return transaction_id in self._processed

    def snapshot(self) -> frozenset[TransactionId]:
        with self._lock:
            return frozenset(self._processed)

    def __len__(self) -> int:
        with self._lock:
            return len(self._processed)
