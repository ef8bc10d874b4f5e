"""Mapeamento EventRecord → NotificationMessage.

Função pura e total: nunca falha para um EventRecord válido.
Não descarta campos; a omissão de opcionais vazios é decisão do
renderer do destino (ver api/payload_builders/slack).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.mailgun_events import FailedEvent, RejectedEvent, UnhandledEvent
from app.domain.notification import NotificationField, NotificationMessage
from config.settings import DEFAULT_MESSAGE_TITLE

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.mailgun_events import EventRecord

ERROR_FIELD_LABEL = "Event"


def _rejected_fields(event: RejectedEvent) -> list[NotificationField]:
    headers = event.message.headers
    reject = event.reject
    return [
        NotificationField("Message ID", event.id, required=True),
        NotificationField("Subject", headers.subject, required=True),
        NotificationField("To", headers.to, required=True),
        NotificationField("Reason", reject.reason if reject else "", required=False),
        NotificationField(
            "Description", reject.description if reject else "", required=False
        ),
    ]


def _failed_fields(event: FailedEvent) -> list[NotificationField]:
    status = event.delivery_status
    return [
        NotificationField("Message ID", event.id, required=True),
        NotificationField("Recipient", event.recipient, required=True),
        NotificationField("Subject", event.message.headers.subject, required=True),
        NotificationField("Severity", event.severity, required=True),
        NotificationField(
            "DeliveryStatus", status.message if status else "", required=False
        ),
        NotificationField("Reason", event.reason, required=False),
    ]


def _unhandled_fields(_event: UnhandledEvent) -> list[NotificationField]:
    return []


# Ordem dos campos é a ordem literal de cada função
_FIELD_BUILDERS: dict[type, Callable[..., list[NotificationField]]] = {
    RejectedEvent: _rejected_fields,
    FailedEvent: _failed_fields,
    UnhandledEvent: _unhandled_fields,
}


def build_notification(
    record: EventRecord,
    title: str = DEFAULT_MESSAGE_TITLE,
) -> NotificationMessage:
    """Constrói a notificação para um evento decodificado.

    Args:
        record: Evento verificado e decodificado
        title: Título da mensagem

    Returns:
        NotificationMessage com campo "Event" primeiro e campos de dados
        na ordem fixa da variante
    """
    builder = _FIELD_BUILDERS.get(type(record), _unhandled_fields)
    return NotificationMessage(
        title=title,
        error_field=NotificationField(ERROR_FIELD_LABEL, record.event_type, required=True),
        data_fields=tuple(builder(record)),
    )
