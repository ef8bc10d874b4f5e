"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class DeliveryError(InfrastructureError):
    """Falha ao entregar notificação no destino (Slack).

    Nunca altera a resposta já decidida para o webhook de entrada.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
