"""Protocolo de verificação de assinatura de webhook."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.mailgun_webhook import Signature


class SignatureVerifierProtocol(Protocol):
    """Contrato mínimo para validar a assinatura de um webhook.

    Retorna False em divergência; levanta SignatureDecodeError quando a
    assinatura nem pode ser interpretada.
    """

    def verify(self, secret: bytes, signature: Signature) -> bool: ...
