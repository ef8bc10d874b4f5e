"""Connector Slack: entrega via incoming webhooks."""

from .http_client import SlackWebhookClient, SlackWebhookError, create_slack_webhook_client

__all__ = [
    "SlackWebhookClient",
    "SlackWebhookError",
    "create_slack_webhook_client",
]
