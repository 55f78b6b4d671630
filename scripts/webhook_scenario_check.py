#!/usr/bin/env python3
import argparse
import dataclasses
import sys
import time
import uuid

import httpx


@dataclasses.dataclass
class TestResult:
    name: str
    passed: bool
    detail: str


def make_payload(txn_id: str | None, amount: str | None = "25.50", timestamp: str | None = "2023-10-01T12:00:00Z") -> dict:
    payload = {"event": "payment_success", "currency": "BRL"}
    if txn_id is not None:
        payload["transaction_id"] = txn_id
    if amount is not None:
        payload["amount"] = amount
    if timestamp is not None:
        payload["timestamp"] = timestamp
    return payload


def post_webhook(
    client: httpx.Client, base_url: str, token: str | None, headers: dict | None = None, **kwargs
) -> httpx.Response:
    headers = dict(headers or {})
    if token is not None:
        headers["X-Webhook-Token"] = token
    return client.post(f"{base_url}/webhook", headers=headers, **kwargs)


def expect_status(name: str, response: httpx.Response, expected: int) -> TestResult:
    if response.status_code != expected:
        return TestResult(name, False, f"Expected {expected}, got {response.status_code} ({response.text!r})")
    return TestResult(name, True, f"Responded {expected} ({response.text!r})")


def run_success_and_duplicate(client: httpx.Client, base_url: str, token: str) -> list[TestResult]:
    payload = make_payload(f"tx_{uuid.uuid4().hex[:10]}")
    try:
        first = post_webhook(client, base_url, token, json=payload)
        second = post_webhook(client, base_url, token, json=payload)
    except httpx.HTTPError as exc:
        return [TestResult("Successful Transaction", False, f"Exception: {exc}")]
    return [
        expect_status("Successful Transaction", first, 200),
        expect_status("Duplicate Transaction", second, 409),
    ]


def run_single(client: httpx.Client, base_url: str, name: str, expected: int, token: str | None, **kwargs) -> TestResult:
    try:
        return expect_status(name, post_webhook(client, base_url, token, **kwargs), expected)
    except httpx.HTTPError as exc:
        return TestResult(name, False, f"Exception: {exc}")


def print_report(results: list[TestResult], total_seconds: float) -> int:
    passed = sum(1 for r in results if r.passed)
    total = len(results)
    verdict = "PASS" if passed == total else "FAIL"
    print(f"RESULT: {verdict} ({passed} / {total} scenarios passed)\n")
    for res in results:
        state = "PASS" if res.passed else "FAIL"
        print(f"- {state} | {res.name}")
        print(f"  - {res.detail}")
    print(f"\nTotal time: {total_seconds:.1f}s")
    return 0 if passed == total else 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the webhook scenarios against a running server")
    parser.add_argument("--base-url", default="http://localhost:5000", help="Base URL of the webhook handler")
    parser.add_argument("--token", default="meu-token-secreto", help="Valid X-Webhook-Token value")
    parser.add_argument("--request-timeout-seconds", type=float, default=10.0, help="HTTP request timeout")
    args = parser.parse_args()

    started = time.perf_counter()
    with httpx.Client(timeout=args.request_timeout_seconds) as client:
        results = run_success_and_duplicate(client, args.base_url, args.token)
        results += [
            run_single(
                client, args.base_url, "Invalid Amount", 400, args.token,
                json=make_payload(f"tx_{uuid.uuid4().hex[:10]}", amount="-5"),
            ),
            run_single(client, args.base_url, "Invalid Token", 401, "wrong", json=make_payload("tx_bad_token")),
            run_single(client, args.base_url, "Missing Token", 401, None, json=make_payload("tx_no_token")),
            run_single(client, args.base_url, "Missing Transaction Id", 400, args.token, json=make_payload(None, amount="10")),
            run_single(
                client, args.base_url, "Missing Timestamp", 400, args.token,
                json=make_payload(f"tx_{uuid.uuid4().hex[:10]}", timestamp=None),
            ),
            run_single(
                client, args.base_url, "Malformed JSON", 400, args.token,
                content=b'{"transaction_id": ', headers={"Content-Type": "application/json"},
            ),
        ]
    total = time.perf_counter() - started
    return print_report(results, total)


if __name__ == "__main__":
    sys.exit(main())
