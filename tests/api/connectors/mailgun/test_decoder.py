"""Testes da decodificação em duas fases do event-data Mailgun."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from api.connectors.mailgun.decoder import (
    decode_event,
    peek_event_name,
    supported_event_types,
)
from app.domain.errors import EventParseError, UnrecognizedEventError
from app.domain.mailgun_events import FailedEvent, RejectedEvent, UnhandledEvent
from tests.fakes.mailgun_payloads import CLICKED_EVENT, failed_event, rejected_event


def _raw(data: object) -> bytes:
    return json.dumps(data).encode("utf-8")


class TestPeekEventName:
    """Fase 1: leitura do discriminante."""

    def test_reads_event_without_validating_rest(self) -> None:
        assert peek_event_name(_raw({"event": "failed"})) == "failed"

    @pytest.mark.parametrize(
        "raw",
        [
            b"",
            b"{invalid",
            b"[]",
            b'"rejected"',
            b"\xff\xfe",
            _raw({"id": "abc"}),
            _raw({"event": 42}),
            _raw({"event": None}),
        ],
    )
    def test_unreadable_discriminant_is_unrecognized(self, raw: bytes) -> None:
        with pytest.raises(UnrecognizedEventError):
            peek_event_name(raw)


class TestDecodeEvent:
    """Fase 2: dispatch para o schema do discriminante."""

    def test_supported_types(self) -> None:
        assert supported_event_types() == frozenset({"rejected", "failed"})

    def test_rejected_event(self) -> None:
        record = decode_event(_raw(rejected_event()))

        assert isinstance(record, RejectedEvent)
        assert record.event_type == "rejected"
        assert record.id == "-VRbgQ7nT2OyYHEWR3BNnA"
        assert record.message.headers.subject == "Test rejected webhook"
        assert record.message.headers.to == "alice@example.com"
        assert record.reject is not None
        assert record.reject.reason == "Sandbox subdomains are for test purposes only."
        assert record.reject.description == ""

    def test_failed_event(self) -> None:
        record = decode_event(_raw(failed_event()))

        assert isinstance(record, FailedEvent)
        assert record.event_type == "failed"
        assert record.recipient == "alice@example.com"
        assert record.severity == "permanent"
        assert record.reason == "suppress-bounce"
        assert record.delivery_status is not None
        assert record.delivery_status.message == "No Such User Here"
        assert record.delivery_status.code == 605

    def test_failed_event_without_optional_fields(self) -> None:
        data = failed_event()
        del data["delivery-status"]
        data["reason"] = None

        record = decode_event(_raw(data))

        assert isinstance(record, FailedEvent)
        assert record.delivery_status is None
        assert record.reason == ""

    def test_rejected_event_without_reject_block(self) -> None:
        data = rejected_event()
        del data["reject"]

        record = decode_event(_raw(data))

        assert isinstance(record, RejectedEvent)
        assert record.reject is None

    @pytest.mark.parametrize("name", ["clicked", "delivered", "opened", "", "REJECTED"])
    def test_unmodeled_types_are_unhandled_not_errors(self, name: str) -> None:
        record = decode_event(_raw({"event": name, "anything": [1, 2, 3]}))

        assert record == UnhandledEvent(event_type=name)

    def test_clicked_event_payload(self) -> None:
        assert decode_event(_raw(CLICKED_EVENT)) == UnhandledEvent(event_type="clicked")

    def test_failed_missing_recipient_is_parse_error(self) -> None:
        data = failed_event()
        del data["recipient"]

        with pytest.raises(EventParseError) as exc_info:
            decode_event(_raw(data))

        assert exc_info.value.name == "failed"
        assert isinstance(exc_info.value.cause, ValidationError)
        assert "event_parse_failed" in str(exc_info.value)

    @pytest.mark.parametrize("missing", ["id", "message"])
    def test_rejected_missing_required_is_parse_error(self, missing: str) -> None:
        data = rejected_event()
        del data[missing]

        with pytest.raises(EventParseError) as exc_info:
            decode_event(_raw(data))

        assert exc_info.value.name == "rejected"

    def test_rejected_missing_to_header_is_parse_error(self) -> None:
        data = rejected_event()
        del data["message"]["headers"]["to"]

        with pytest.raises(EventParseError) as exc_info:
            decode_event(_raw(data))

        assert exc_info.value.name == "rejected"

    def test_failed_allows_missing_to_header(self) -> None:
        data = failed_event()
        del data["message"]["headers"]["to"]

        record = decode_event(_raw(data))

        assert isinstance(record, FailedEvent)
        assert record.message.headers.to == ""

    def test_wrong_field_type_is_parse_error(self) -> None:
        with pytest.raises(EventParseError):
            decode_event(_raw(failed_event(severity=["permanent"])))

    def test_known_name_with_other_shape_is_parse_error(self) -> None:
        # payload de "failed" rotulado como "rejected": reporta o schema escolhido
        with pytest.raises(EventParseError) as exc_info:
            decode_event(_raw(failed_event(event="rejected", message={"headers": {}})))

        assert exc_info.value.name == "rejected"

    def test_unrecognized_envelope(self) -> None:
        with pytest.raises(UnrecognizedEventError):
            decode_event(b"not json")

    def test_deeply_nested_event_data_is_unrecognized(self) -> None:
        raw = b'{"event":"failed","x":' + b"[" * 200_000 + b"]" * 200_000 + b"}"

        with pytest.raises(UnrecognizedEventError):
            decode_event(raw)
