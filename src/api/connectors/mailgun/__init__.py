"""Connector Mailgun: assinatura, envelope e decodificação de eventos."""

from .decoder import decode_event, peek_event_name, supported_event_types
from .signature import compute_signature, sign_webhook, verify_webhook_signature
from .webhook import parse_webhook_payload

__all__ = [
    "compute_signature",
    "decode_event",
    "parse_webhook_payload",
    "peek_event_name",
    "sign_webhook",
    "supported_event_types",
    "verify_webhook_signature",
]
