"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class SlackWebhookClientProtocol(Protocol):
    """Contrato mínimo para cliente HTTP de incoming webhooks Slack."""

    async def post_message(
        self,
        webhook_url: str,
        payload: dict[str, Any],
    ) -> None: ...
