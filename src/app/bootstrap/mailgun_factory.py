"""Factory de wiring do relay Mailgun → Slack (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.slack.http_client import create_slack_webhook_client
from app.bootstrap.mailgun_adapters import (
    MailgunEventDecoder,
    MailgunSignatureVerifier,
    SlackNotificationSender,
)
from app.use_cases.mailgun.relay_event import MailgunRelayPipeline
from config.settings import get_mailgun_settings, get_slack_settings

if TYPE_CHECKING:
    from config.settings import MailgunSettings, SlackSettings


def create_slack_notification_sender(
    settings: SlackSettings | None = None,
) -> SlackNotificationSender:
    """Cria sender Slack (implementa NotificationSenderProtocol)."""
    slack = settings or get_slack_settings()
    return SlackNotificationSender(
        client=create_slack_webhook_client(slack),
        webhook_url=slack.webhook_url,
    )


def create_mailgun_relay_pipeline(
    mailgun_settings: MailgunSettings | None = None,
    slack_settings: SlackSettings | None = None,
) -> MailgunRelayPipeline:
    """Cria o pipeline com dependências injetadas a partir das settings."""
    mailgun = mailgun_settings or get_mailgun_settings()
    slack = slack_settings or get_slack_settings()
    return MailgunRelayPipeline(
        signing_key=mailgun.signing_key_bytes,
        verifier=MailgunSignatureVerifier(),
        decoder=MailgunEventDecoder(),
        sender=create_slack_notification_sender(slack),
        title=slack.message_title,
    )
