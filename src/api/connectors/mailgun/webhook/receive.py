"""Parse inicial do corpo do webhook Mailgun (sem PII)."""

from __future__ import annotations

import json

from pydantic import ValidationError

from app.domain.errors import InvalidPayloadError
from app.domain.mailgun_webhook import InboundEnvelope, Signature

SIGNATURE_KEY = "signature"
EVENT_DATA_KEY = "event-data"


def parse_webhook_payload(raw_body: bytes) -> InboundEnvelope:
    """Separa o corpo do webhook em assinatura e event-data bruto.

    Bloco `signature` ausente vira Signature vazia e `event-data` ausente
    vira bytes vazios: ambos são rejeitados adiante pelo pipeline.

    Args:
        raw_body: Corpo bruto do request

    Raises:
        InvalidPayloadError: Se o JSON estiver inválido ou não for objeto

    Returns:
        InboundEnvelope com event-data reserializado em bytes
    """
    try:
        payload = json.loads(raw_body or b"{}")
    except (ValueError, RecursionError) as exc:
        raise InvalidPayloadError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidPayloadError("payload_not_object")

    signature_block = payload.get(SIGNATURE_KEY) or {}
    if not isinstance(signature_block, dict):
        raise InvalidPayloadError("signature_not_object")

    try:
        signature = Signature.model_validate(signature_block)
    except ValidationError as exc:
        raise InvalidPayloadError("invalid_signature_block") from exc

    event_data = b""
    if EVENT_DATA_KEY in payload:
        try:
            serialized = json.dumps(payload[EVENT_DATA_KEY], separators=(",", ":"))
        except RecursionError as exc:
            raise InvalidPayloadError("invalid_json") from exc
        event_data = serialized.encode("utf-8")

    return InboundEnvelope(signature=signature, event_data=event_data)
