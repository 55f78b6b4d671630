from enum import StrEnum


class CallbackEndpoint(StrEnum):
    CONFIRM = "confirmar"
    CANCEL = "cancelar"


class LedgerDecision(StrEnum):
    RECORDED = "RECORDED"
    DUPLICATE = "DUPLICATE"
    REJECTED = "REJECTED"
