"""Envelope de webhook Mailgun: assinatura + event-data bruto."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


class Signature(BaseModel):
    """Prova de autenticidade enviada pelo Mailgun em cada webhook.

    Campos ausentes ficam vazios; o verificador os trata como erro.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    timestamp: str = ""
    token: str = ""
    signature: str = ""


@dataclass(frozen=True, slots=True)
class InboundEnvelope:
    """Corpo decodificado de um webhook.

    Attributes:
        signature: Bloco `signature` do payload
        event_data: Objeto `event-data` serializado em JSON (bytes),
            repassado opaco ao decoder
    """

    signature: Signature
    event_data: bytes
