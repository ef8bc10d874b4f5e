"""Rotas do webhook Mailgun."""

from api.routes.mailgun.webhook import router

__all__ = ["router"]
