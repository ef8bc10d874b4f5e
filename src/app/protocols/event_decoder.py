"""Protocolo de decodificação de eventos inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.mailgun_events import EventRecord


class EventDecoderProtocol(Protocol):
    """Contrato mínimo para converter event-data bruto em EventRecord.

    Levanta UnrecognizedEventError ou EventParseError; tipos não
    modelados retornam UnhandledEvent sem erro.
    """

    def decode(self, raw: bytes) -> EventRecord: ...
