"""Cliente HTTP especializado para incoming webhooks do Slack.

Estende HttpClient genérico com comportamentos específicos do Slack:
- Sucesso somente com HTTP 200 (corpo "ok")
- Erros Slack vêm como texto curto (ex: "invalid_payload", "no_service")
- Logging sem a URL do webhook (ela é o próprio segredo do canal)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.infra.http import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    from config.settings import SlackSettings

logger: logging.Logger = logging.getLogger(__name__)

# Tamanho máximo do corpo de erro Slack repassado à exceção
_MAX_ERROR_BODY = 64


class SlackWebhookError(HttpError):
    """Slack recusou o payload (status != 200).

    Attributes:
        slack_error: Código retornado pelo Slack (ex: "channel_is_archived")
    """

    def __init__(self, slack_error: str, status_code: int) -> None:
        super().__init__(
            f"slack_webhook_error: {slack_error}",
            status_code=status_code,
            is_retryable=False,
        )
        self.slack_error = slack_error


class SlackWebhookClient(HttpClient):
    """Cliente HTTP para Slack incoming webhooks."""

    async def post_message(
        self,
        webhook_url: str,
        payload: dict[str, Any],
    ) -> None:
        """Publica uma mensagem no canal do webhook.

        Args:
            webhook_url: URL do incoming webhook
            payload: Payload JSON no formato Slack

        Raises:
            ValueError: Se webhook_url está vazia
            SlackWebhookError: Se o Slack responder com erro
            HttpError: Se a conexão falhar após os retries
        """
        if not webhook_url or not webhook_url.strip():
            raise ValueError(
                "webhook_url é obrigatória para envio ao Slack. "
                "Verifique se SLACK_WEBHOOK_URL está configurado."
            )

        response = await self.post(
            webhook_url,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        if response.status_code != 200:
            slack_error = response.text.strip()[:_MAX_ERROR_BODY] or "unknown_error"
            logger.warning(
                "slack_webhook_rejected",
                extra={"status_code": response.status_code, "slack_error": slack_error},
            )
            raise SlackWebhookError(slack_error, response.status_code)

        logger.debug("slack_webhook_accepted", extra={"status_code": response.status_code})


def create_slack_webhook_client(
    settings: SlackSettings | None = None,
) -> SlackWebhookClient:
    """Factory para criar cliente Slack com config padrão.

    Args:
        settings: SlackSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_slack_settings

    slack = settings or get_slack_settings()
    config = HttpClientConfig(
        timeout_seconds=slack.request_timeout_seconds,
        max_retries=slack.max_retries,
    )
    return SlackWebhookClient(config=config)
