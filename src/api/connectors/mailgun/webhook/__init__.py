"""Webhook Mailgun: parsing seguro do corpo recebido."""

from .receive import parse_webhook_payload

__all__ = ["parse_webhook_payload"]
