"""Erros de verificação e decodificação de webhooks Mailgun.

Definidos em app/domain para manter boundaries corretas: o pipeline
(app/use_cases) trata estes erros sem importar api/connectors.

Mensagens são códigos curtos, sem conteúdo do payload.
"""

from __future__ import annotations


class MailgunWebhookError(ValueError):
    """Erro base para webhooks Mailgun que devem ser rejeitados."""


class InvalidPayloadError(MailgunWebhookError):
    """Corpo do webhook não é um objeto JSON válido."""


class SignatureDecodeError(MailgunWebhookError):
    """Assinatura ausente, incompleta ou com hex inválido."""


class UnrecognizedEventError(MailgunWebhookError):
    """Não foi possível ler o discriminante `event` do event-data."""


class EventParseError(MailgunWebhookError):
    """Evento conhecido cujo payload não satisfaz o schema esperado.

    Attributes:
        name: Nome do evento (discriminante) que falhou
        cause: Erro de validação original
    """

    def __init__(self, name: str, cause: Exception) -> None:
        super().__init__(f"event_parse_failed: {name}")
        self.name = name
        self.cause = cause
