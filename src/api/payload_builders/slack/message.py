"""Builder de payload Slack (incoming webhook) para notificações.

Política de renderização:
- Campos obrigatórios sempre aparecem; vazios viram EMPTY_VALUE_PLACEHOLDER.
- Campos opcionais vazios são omitidos.
- A ordem dos campos é preservada.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.notification import NotificationField, NotificationMessage

ERROR_COLOR = "danger"
DATA_COLOR = "#439FE0"
EMPTY_VALUE_PLACEHOLDER = "(empty)"


def render_fields(fields: tuple[NotificationField, ...]) -> list[dict[str, Any]]:
    """Converte campos em `fields` de attachment Slack.

    Args:
        fields: Campos na ordem de exibição

    Returns:
        Lista de dicts {title, value, short}, sem opcionais vazios
    """
    rendered: list[dict[str, Any]] = []
    for field in fields:
        value = field.value.strip()
        if not value:
            if not field.required:
                continue
            value = EMPTY_VALUE_PLACEHOLDER
        rendered.append({"title": field.label, "value": value, "short": False})
    return rendered


class SlackMessagePayloadBuilder:
    """Builder de mensagens Slack com attachments de erro e de dados."""

    def build_payload(self, message: NotificationMessage) -> dict[str, Any]:
        """Constrói payload para o incoming webhook.

        Args:
            message: Notificação montada pelo pipeline

        Returns:
            Payload {"text", "attachments"} conforme API Slack
        """
        attachments: list[dict[str, Any]] = [
            {
                "color": ERROR_COLOR,
                "fallback": f"{message.error_field.label}: {message.error_field.value}",
                "fields": render_fields((message.error_field,)),
            }
        ]

        data_fields = render_fields(message.data_fields)
        if data_fields:
            attachments.append({"color": DATA_COLOR, "fields": data_fields})

        return {
            "text": message.title,
            "attachments": attachments,
        }


def build_slack_payload(message: NotificationMessage) -> dict[str, Any]:
    """Atalho funcional para SlackMessagePayloadBuilder."""
    return SlackMessagePayloadBuilder().build_payload(message)
