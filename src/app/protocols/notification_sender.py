"""Protocolos de entrega de notificações."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.notification import NotificationMessage


class NotificationSenderProtocol(Protocol):
    """Contrato mínimo para entregar uma notificação pronta.

    Levanta DeliveryError em falha; não retém a mensagem após o envio.
    """

    async def send(self, message: NotificationMessage) -> None: ...
