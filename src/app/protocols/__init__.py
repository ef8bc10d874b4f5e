"""Protocolos e contratos do core da aplicação."""

from .event_decoder import EventDecoderProtocol
from .http_client import SlackWebhookClientProtocol
from .notification_sender import NotificationSenderProtocol
from .payload_builder import NotificationPayloadBuilderProtocol
from .signature_verifier import SignatureVerifierProtocol

__all__ = [
    "EventDecoderProtocol",
    "NotificationPayloadBuilderProtocol",
    "NotificationSenderProtocol",
    "SignatureVerifierProtocol",
    "SlackWebhookClientProtocol",
]
