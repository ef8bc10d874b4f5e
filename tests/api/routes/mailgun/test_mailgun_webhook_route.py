"""Testes do endpoint POST /webhook/mailgun."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.mailgun import webhook
from app.bootstrap.mailgun_adapters import MailgunEventDecoder, MailgunSignatureVerifier
from app.use_cases.mailgun import MailgunRelayPipeline
from tests.fakes.fake_notification_sender import FakeNotificationSender, failing_sender
from tests.fakes.mailgun_payloads import (
    SIGNING_KEY,
    failed_event,
    rejected_event,
    signature_block,
    webhook_body,
)


def _build_request(
    *,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/webhook/mailgun",
        "raw_path": b"/webhook/mailgun",
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.fixture
def sender() -> FakeNotificationSender:
    return FakeNotificationSender()


@pytest.fixture(autouse=True)
def _inline_pipeline(monkeypatch: pytest.MonkeyPatch, sender: FakeNotificationSender) -> None:
    pipeline = MailgunRelayPipeline(
        signing_key=SIGNING_KEY,
        verifier=MailgunSignatureVerifier(),
        decoder=MailgunEventDecoder(),
        sender=sender,
    )
    monkeypatch.setattr(webhook, "get_relay_pipeline", lambda: pipeline)
    monkeypatch.setattr(
        webhook,
        "get_slack_settings",
        lambda: SimpleNamespace(delivery_mode="inline"),
    )


def _assert_not_acceptable(response: object) -> None:
    assert response.status_code == 406
    assert response.body == b""


@pytest.mark.asyncio
async def test_signed_rejected_event_returns_200_and_delivers(
    sender: FakeNotificationSender,
) -> None:
    request = _build_request(body=webhook_body(rejected_event()))

    response = await webhook.receive_webhook(request)

    assert response["status"] == "received"
    assert response["correlation_id"]
    assert len(sender.sent) == 1
    assert sender.sent[0].error_field.value == "rejected"


@pytest.mark.asyncio
async def test_correlation_id_header_is_echoed() -> None:
    request = _build_request(
        body=webhook_body(failed_event()),
        headers={"X-Request-Id": "req-123"},
    )

    response = await webhook.receive_webhook(request)

    assert response["correlation_id"] == "req-123"


@pytest.mark.asyncio
async def test_bad_signature_returns_406_without_body(sender: FakeNotificationSender) -> None:
    body = webhook_body(failed_event(), signature=signature_block(key=b"wrong"))

    response = await webhook.receive_webhook(_build_request(body=body))

    _assert_not_acceptable(response)
    assert sender.sent == []


@pytest.mark.asyncio
async def test_missing_required_field_returns_406(sender: FakeNotificationSender) -> None:
    data = failed_event()
    del data["recipient"]

    response = await webhook.receive_webhook(_build_request(body=webhook_body(data)))

    _assert_not_acceptable(response)
    assert sender.sent == []


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"{not json", b"[]", b'{"signature": 1}'])
async def test_invalid_body_returns_406(body: bytes) -> None:
    response = await webhook.receive_webhook(_build_request(body=body))

    _assert_not_acceptable(response)


@pytest.mark.asyncio
async def test_missing_signature_block_returns_406() -> None:
    body = json.dumps({"event-data": failed_event()}).encode("utf-8")

    response = await webhook.receive_webhook(_build_request(body=body))

    _assert_not_acceptable(response)


@pytest.mark.asyncio
async def test_signature_with_lone_surrogate_returns_406(sender: FakeNotificationSender) -> None:
    body = (
        b'{"signature": {"timestamp": "\\ud800", "token": "t", "signature": "00"},'
        b' "event-data": {"event": "failed"}}'
    )

    response = await webhook.receive_webhook(_build_request(body=body))

    _assert_not_acceptable(response)
    assert sender.sent == []


@pytest.mark.asyncio
async def test_deeply_nested_body_returns_406() -> None:
    body = b"[" * 200_000 + b"]" * 200_000

    response = await webhook.receive_webhook(_build_request(body=body))

    _assert_not_acceptable(response)


@pytest.mark.asyncio
async def test_unmodeled_event_is_accepted(sender: FakeNotificationSender) -> None:
    body = webhook_body({"event": "opened", "id": "x"})

    response = await webhook.receive_webhook(_build_request(body=body))

    assert response["status"] == "received"
    assert sender.sent[0].data_fields == ()


@pytest.mark.asyncio
async def test_delivery_failure_does_not_change_response(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    pipeline = MailgunRelayPipeline(
        signing_key=SIGNING_KEY,
        verifier=MailgunSignatureVerifier(),
        decoder=MailgunEventDecoder(),
        sender=failing_sender(500),
    )
    monkeypatch.setattr(webhook, "get_relay_pipeline", lambda: pipeline)

    response = await webhook.receive_webhook(
        _build_request(body=webhook_body(failed_event()))
    )

    assert response["status"] == "received"


@pytest.mark.asyncio
async def test_dispatch_receives_async_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    async def _fake_dispatch(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(webhook, "dispatch_delivery", _fake_dispatch)
    monkeypatch.setattr(
        webhook,
        "get_slack_settings",
        lambda: SimpleNamespace(delivery_mode="async"),
    )

    response = await webhook.receive_webhook(
        _build_request(body=webhook_body(failed_event()), headers={"X-Correlation-Id": "c-1"})
    )

    assert response["status"] == "received"
    assert captured["correlation_id"] == "c-1"
    assert captured["settings"].delivery_mode == "async"
    assert captured["result"].accepted is True
