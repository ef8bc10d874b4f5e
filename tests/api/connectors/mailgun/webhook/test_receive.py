import json

import pytest

from api.connectors.mailgun.webhook.receive import parse_webhook_payload
from app.domain.errors import InvalidPayloadError
from tests.fakes.mailgun_payloads import rejected_event, signature_block, webhook_body


def test_parse_webhook_payload_ok() -> None:
    body = webhook_body(rejected_event())

    envelope = parse_webhook_payload(body)

    assert envelope.signature.timestamp == signature_block()["timestamp"]
    assert envelope.signature.signature == signature_block()["signature"]
    assert json.loads(envelope.event_data) == rejected_event()


def test_parse_webhook_payload_numeric_timestamp_is_string() -> None:
    body = json.dumps(
        {"signature": {"timestamp": 1529006854, "token": "t", "signature": "ab"}}
    ).encode()

    envelope = parse_webhook_payload(body)

    assert envelope.signature.timestamp == "1529006854"


def test_parse_webhook_payload_missing_parts_are_empty() -> None:
    envelope = parse_webhook_payload(b"{}")

    assert envelope.signature.signature == ""
    assert envelope.event_data == b""


def test_parse_webhook_payload_empty_body() -> None:
    envelope = parse_webhook_payload(b"")

    assert envelope.event_data == b""


@pytest.mark.parametrize(
    ("body", "code"),
    [
        (b"{invalid}", "invalid_json"),
        (b"\xff", "invalid_json"),
        (b"[1, 2]", "payload_not_object"),
        (b'{"signature": "abc"}', "signature_not_object"),
        (b'{"signature": {"token": ["x"]}}', "invalid_signature_block"),
    ],
)
def test_parse_webhook_payload_invalid(body: bytes, code: str) -> None:
    with pytest.raises(InvalidPayloadError, match=code):
        parse_webhook_payload(body)


@pytest.mark.parametrize(
    "body",
    [
        b"[" * 200_000 + b"]" * 200_000,
        b'{"event-data":' + b'{"a":' * 200_000 + b"1" + b"}" * 200_001,
    ],
)
def test_parse_webhook_payload_deeply_nested_is_invalid_json(body: bytes) -> None:
    with pytest.raises(InvalidPayloadError, match="invalid_json"):
        parse_webhook_payload(body)


def test_parse_webhook_payload_keeps_lone_surrogate_in_signature() -> None:
    body = b'{"signature": {"timestamp": "\\ud800", "token": "t", "signature": "00"}}'

    envelope = parse_webhook_payload(body)

    assert envelope.signature.timestamp == "\ud800"
