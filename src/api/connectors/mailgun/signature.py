"""Validação de assinatura HMAC-SHA256 dos webhooks Mailgun.

O Mailgun assina `timestamp || token` (concatenação sem separador)
com a HTTP webhook signing key e envia o digest em hex.
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
from typing import TYPE_CHECKING

from app.domain.errors import SignatureDecodeError

if TYPE_CHECKING:
    from app.domain.mailgun_webhook import Signature


def compute_signature(secret: bytes, timestamp: str, token: str) -> bytes:
    """Calcula HMAC-SHA256(secret, timestamp || token).

    Args:
        secret: Signing key em bytes
        timestamp: Campo `signature.timestamp`
        token: Campo `signature.token`

    Returns:
        Digest bruto (32 bytes)
    """
    mac = hmac.new(secret, digestmod=hashlib.sha256)
    mac.update(timestamp.encode("utf-8"))
    mac.update(token.encode("utf-8"))
    return mac.digest()


def sign_webhook(secret: bytes, timestamp: str, token: str) -> str:
    """Gera a assinatura hex como o Mailgun envia (útil em testes e tooling)."""
    return compute_signature(secret, timestamp, token).hex()


def verify_webhook_signature(secret: bytes, signature: Signature) -> bool:
    """Valida assinatura de um webhook Mailgun.

    Args:
        secret: Signing key em bytes
        signature: Bloco `signature` do payload

    Raises:
        SignatureDecodeError: Se algum campo estiver vazio, não for
            codificável em UTF-8 ou o hex for inválido

    Returns:
        True somente se o digest recebido for idêntico ao calculado.
        False se divergir, inclusive quando o tamanho decodificado difere.
    """
    if not signature.timestamp or not signature.token or not signature.signature:
        raise SignatureDecodeError("missing_signature_fields")

    try:
        expected = compute_signature(secret, signature.timestamp, signature.token)
    except UnicodeEncodeError as exc:
        # JSON admite escapes de surrogate isolado (ex: "\ud800"), sem UTF-8 válido
        raise SignatureDecodeError("invalid_signature_fields") from exc

    try:
        received = binascii.unhexlify(signature.signature)
    except ValueError as exc:
        raise SignatureDecodeError("invalid_signature_hex") from exc

    if len(received) != len(expected):
        return False

    # Comparação em tempo constante (não para no primeiro byte divergente)
    return hmac.compare_digest(received, expected)
