"""Eventos Mailgun modelados pelo relay.

`EventRecord` é uma união fechada: exatamente uma das variantes abaixo.
Campos extras do payload Mailgun (envelope, flags, storage, tags,
user-variables...) são ignorados, nunca rejeitados.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _none_as_empty(value: object) -> object:
    return "" if value is None else value


# Texto opcional: ausente ou null vira string vazia
OptionalText = Annotated[str, BeforeValidator(_none_as_empty)]


class _MailgunModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class MessageHeaders(_MailgunModel):
    """Headers da mensagem original (subset usado nas notificações)."""

    subject: str
    to: OptionalText = ""
    message_id: OptionalText = Field(default="", alias="message-id")
    sender: OptionalText = Field(default="", alias="from")


class RejectedMessageHeaders(MessageHeaders):
    """Headers de mensagem rejeitada: destinatário é obrigatório."""

    to: str


class RejectedMessage(_MailgunModel):
    headers: RejectedMessageHeaders


class FailedMessage(_MailgunModel):
    headers: MessageHeaders


class RejectDetails(_MailgunModel):
    reason: OptionalText = ""
    description: OptionalText = ""


class DeliveryStatus(_MailgunModel):
    message: OptionalText = ""
    description: OptionalText = ""
    code: int | None = None


class MailgunEvent(_MailgunModel):
    """Campos comuns a todo evento Mailgun."""

    id: str
    event: str
    timestamp: float | None = None

    @property
    def event_type(self) -> str:
        return self.event


class RejectedEvent(MailgunEvent):
    """Mailgun recusou a mensagem antes de tentar entregá-la."""

    event: Literal["rejected"]
    message: RejectedMessage
    reject: RejectDetails | None = None


class FailedEvent(MailgunEvent):
    """Falha de entrega (temporária ou permanente) reportada pelo Mailgun."""

    event: Literal["failed"]
    recipient: str
    severity: str
    message: FailedMessage
    reason: OptionalText = ""
    delivery_status: DeliveryStatus | None = Field(default=None, alias="delivery-status")


@dataclass(frozen=True, slots=True)
class UnhandledEvent:
    """Evento com discriminante válido mas não modelado (ex: "clicked").

    Não é erro: gera notificação apenas com o tipo do evento.
    """

    event_type: str


EventRecord = RejectedEvent | FailedEvent | UnhandledEvent
