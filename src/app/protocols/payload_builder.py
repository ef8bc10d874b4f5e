"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.notification import NotificationMessage


class NotificationPayloadBuilderProtocol(Protocol):
    """Contrato mínimo para renderizar uma notificação no formato do destino."""

    def build_payload(self, message: NotificationMessage) -> dict[str, Any]: ...
