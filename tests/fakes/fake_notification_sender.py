"""Sender fake que registra mensagens em memória."""

from __future__ import annotations

from app.domain.notification import NotificationMessage
from utils.errors import DeliveryError


class FakeNotificationSender:
    """Implementa NotificationSenderProtocol para testes."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.sent: list[NotificationMessage] = []
        self._fail_with = fail_with

    async def send(self, message: NotificationMessage) -> None:
        if self._fail_with is not None:
            raise self._fail_with
        self.sent.append(message)


def failing_sender(status_code: int = 500) -> FakeNotificationSender:
    return FakeNotificationSender(
        fail_with=DeliveryError("http_retryable_status", status_code=status_code)
    )
