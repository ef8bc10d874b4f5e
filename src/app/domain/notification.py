"""Mensagem de notificação agnóstica de transporte."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NotificationField:
    """Campo rotulado da notificação.

    Attributes:
        label: Rótulo exibido (ex: "Message ID")
        value: Valor (pode ser vazio)
        required: True = sempre renderizado; False = pode ser omitido se vazio
    """

    label: str
    value: str
    required: bool


@dataclass(frozen=True, slots=True)
class NotificationMessage:
    """Notificação pronta para o colaborador de entrega.

    Attributes:
        title: Título da mensagem
        error_field: Campo de erro (sempre "Event")
        data_fields: Campos de dados na ordem de exibição
    """

    title: str
    error_field: NotificationField
    data_fields: tuple[NotificationField, ...] = ()

    @property
    def fields(self) -> tuple[NotificationField, ...]:
        """Todos os campos, erro primeiro."""
        return (self.error_field, *self.data_fields)
