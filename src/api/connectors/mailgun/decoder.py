"""Decodificação em duas fases do `event-data` Mailgun.

1. Peek: lê apenas o discriminante `event`, sem exigir o restante.
2. Dispatch: valida o payload completo contra o schema registrado
   para aquele discriminante.

Novos tipos de evento entram com uma linha em `_EVENT_SCHEMAS`.
"""

from __future__ import annotations

import json

from pydantic import ValidationError

from app.domain.errors import EventParseError, UnrecognizedEventError
from app.domain.mailgun_events import (
    EventRecord,
    FailedEvent,
    MailgunEvent,
    RejectedEvent,
    UnhandledEvent,
)

# Chave do discriminante no event-data
EVENT_NAME_KEY = "event"

# Mapeamento de discriminante para schema estrito
_EVENT_SCHEMAS: dict[str, type[MailgunEvent]] = {
    "rejected": RejectedEvent,
    "failed": FailedEvent,
}


def supported_event_types() -> frozenset[str]:
    """Tipos de evento com schema dedicado."""
    return frozenset(_EVENT_SCHEMAS)


def peek_event_name(raw: bytes) -> str:
    """Lê o discriminante do evento sem validar o restante do payload.

    Raises:
        UnrecognizedEventError: JSON inválido, não-objeto, ou `event`
            ausente/não-string
    """
    try:
        document = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise UnrecognizedEventError("unrecognized_event") from exc

    if not isinstance(document, dict):
        raise UnrecognizedEventError("unrecognized_event")

    name = document.get(EVENT_NAME_KEY)
    if not isinstance(name, str):
        raise UnrecognizedEventError("unrecognized_event")

    return name


def decode_event(raw: bytes) -> EventRecord:
    """Converte bytes de event-data em um EventRecord tipado.

    Args:
        raw: Objeto `event-data` serializado

    Raises:
        UnrecognizedEventError: Se o discriminante não puder ser lido
        EventParseError: Se o evento é conhecido mas o schema falha

    Returns:
        RejectedEvent, FailedEvent ou UnhandledEvent (tipo não modelado)
    """
    name = peek_event_name(raw)

    schema = _EVENT_SCHEMAS.get(name)
    if schema is None:
        return UnhandledEvent(event_type=name)

    try:
        return schema.model_validate_json(raw)
    except ValidationError as exc:
        raise EventParseError(name, exc) from exc
