from conftest import make_payload

from app.utils.enums import CallbackEndpoint


def test_same_payload_twice_is_rejected_as_duplicate(client, notifier, ledger, auth_headers):
    payload = make_payload(transaction_id="tx1")

    first = client.post("/webhook", json=payload, headers=auth_headers)
    second = client.post("/webhook", json=payload, headers=auth_headers)

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.text == "Duplicate transaction"
    assert len(ledger) == 1
    assert notifier.calls == [(CallbackEndpoint.CONFIRM, "tx1")]


def test_duplicate_with_invalid_amount_is_still_a_conflict(client, notifier, auth_headers):
    assert client.post("/webhook", json=make_payload(transaction_id="tx_dup"), headers=auth_headers).status_code == 200

    response = client.post("/webhook", json=make_payload(transaction_id="tx_dup", amount="-1"), headers=auth_headers)

    assert response.status_code == 409
    assert notifier.calls_for(CallbackEndpoint.CANCEL) == []


def test_cancelled_transaction_can_be_retried(client, notifier, ledger, auth_headers):
    rejected = client.post("/webhook", json=make_payload(transaction_id="tx_retry", amount="0"), headers=auth_headers)
    accepted = client.post("/webhook", json=make_payload(transaction_id="tx_retry"), headers=auth_headers)

    assert rejected.status_code == 400
    assert accepted.status_code == 200
    assert ledger.contains("tx_retry")
    assert notifier.calls == [
        (CallbackEndpoint.CANCEL, "tx_retry"),
        (CallbackEndpoint.CONFIRM, "tx_retry"),
    ]


def test_ledger_is_empty_on_fresh_start(client, ledger):
    assert len(ledger) == 0
