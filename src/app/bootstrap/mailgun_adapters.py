"""Adapters concretos Mailgun/Slack (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.mailgun.decoder import decode_event
from api.connectors.mailgun.signature import verify_webhook_signature
from api.payload_builders.slack.message import SlackMessagePayloadBuilder
from app.infra.http import HttpError
from app.protocols.event_decoder import EventDecoderProtocol
from app.protocols.notification_sender import NotificationSenderProtocol
from app.protocols.signature_verifier import SignatureVerifierProtocol
from utils.errors import DeliveryError

if TYPE_CHECKING:
    from app.domain.mailgun_events import EventRecord
    from app.domain.mailgun_webhook import Signature
    from app.domain.notification import NotificationMessage
    from app.protocols.http_client import SlackWebhookClientProtocol
    from app.protocols.payload_builder import NotificationPayloadBuilderProtocol

logger = logging.getLogger(__name__)


class MailgunSignatureVerifier(SignatureVerifierProtocol):
    """Verificador HMAC-SHA256 do Mailgun."""

    def verify(self, secret: bytes, signature: Signature) -> bool:
        return verify_webhook_signature(secret, signature)


class MailgunEventDecoder(EventDecoderProtocol):
    """Decoder em duas fases do event-data Mailgun."""

    def decode(self, raw: bytes) -> EventRecord:
        return decode_event(raw)


class SlackNotificationSender(NotificationSenderProtocol):
    """Sender de notificações via Slack incoming webhook."""

    def __init__(
        self,
        client: SlackWebhookClientProtocol,
        webhook_url: str,
        builder: NotificationPayloadBuilderProtocol | None = None,
    ) -> None:
        self._client = client
        self._webhook_url = webhook_url
        self._builder = builder or SlackMessagePayloadBuilder()

    async def send(self, message: NotificationMessage) -> None:
        payload = self._builder.build_payload(message)
        try:
            await self._client.post_message(self._webhook_url, payload)
        except HttpError as exc:
            raise DeliveryError(str(exc), status_code=exc.status_code) from exc
        except ValueError as exc:
            raise DeliveryError(str(exc)) from exc
