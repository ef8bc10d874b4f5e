"""Settings específicas do Mailgun.

Segredo compartilhado usado para validar a assinatura HMAC dos webhooks.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class MailgunSettings:
    """Configurações do provedor Mailgun.

    Attributes:
        webhook_signing_key: HTTP webhook signing key do painel Mailgun
    """

    webhook_signing_key: str = ""

    @property
    def signing_key_bytes(self) -> bytes:
        """Chave de assinatura em bytes (entrada do HMAC)."""
        return self.webhook_signing_key.encode("utf-8")

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Mailgun.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.webhook_signing_key:
            errors.append("MAILGUN_WEBHOOK_SIGNING_KEY não configurado")

        return errors


def _load_from_env() -> MailgunSettings:
    """Carrega MailgunSettings a partir de variáveis de ambiente."""
    return MailgunSettings(
        webhook_signing_key=os.getenv(
            "MAILGUN_WEBHOOK_SIGNING_KEY", os.getenv("MAILGUN_API_KEY", "")
        ),
    )


@lru_cache(maxsize=1)
def get_mailgun_settings() -> MailgunSettings:
    """Retorna instância cacheada de MailgunSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
