"""Settings específicas do Slack.

Destino das notificações (incoming webhook) e política de entrega.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_MESSAGE_TITLE: str = "Mailgun Error"


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do canal Slack.

    Attributes:
        webhook_url: URL do incoming webhook (contém o segredo do canal)
        request_timeout_seconds: Timeout para o POST ao Slack
        max_retries: Máximo de novas tentativas em 429/5xx/erro de conexão
        delivery_mode: Entrega em background (async) ou antes da resposta (inline)
        message_title: Título das mensagens enviadas
    """

    webhook_url: str = ""
    request_timeout_seconds: float = 10.0
    max_retries: int = 2
    delivery_mode: str = "async"
    message_title: str = DEFAULT_MESSAGE_TITLE

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Slack.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.webhook_url:
            errors.append("SLACK_WEBHOOK_URL não configurado")
        elif not self.webhook_url.startswith("https://"):
            errors.append("SLACK_WEBHOOK_URL deve usar https")

        if self.request_timeout_seconds <= 0:
            errors.append("SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("SLACK_MAX_RETRIES deve ser >= 0")

        if self.delivery_mode not in ("async", "inline"):
            errors.append("SLACK_DELIVERY_MODE deve ser 'async' ou 'inline'")

        return errors


def _load_from_env() -> SlackSettings:
    """Carrega SlackSettings a partir de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "").lower()
    default_delivery_mode = (
        "inline" if environment in ("staging", "development", "dev", "test") else "async"
    )
    return SlackSettings(
        webhook_url=os.getenv("SLACK_WEBHOOK_URL", ""),
        request_timeout_seconds=float(
            os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "10")
        ),
        max_retries=int(os.getenv("SLACK_MAX_RETRIES", "2")),
        delivery_mode=os.getenv("SLACK_DELIVERY_MODE", default_delivery_mode).lower(),
        message_title=os.getenv("SLACK_MESSAGE_TITLE", DEFAULT_MESSAGE_TITLE),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
