"""Formatters de logging estruturado.

Define formatters para logs JSON com campos obrigatórios:
- correlation_id
- service
- timestamp (asctime)
- level
- logger (name)
- message
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Returns:
        JsonFormatter configurado para logs estruturados (UTF-8 sem escape).

    Exemplo de output (entrega em background concluída com falha no Slack):
        {
            "asctime": "2026-10-19 14:02:11,482",
            "level": "INFO",
            "logger": "api.routes.mailgun.webhook_runtime",
            "message": "slack_delivery_finished",
            "correlation_id": "5f0c2a7e-3d1b-4c8e-9a41-0b6f2d9e7c13",
            "service": "mailgun_slack_relay",
            "pending_deliveries": 0,
            "delivered": false,
            "final_state": "DONE",
            "event_type": "failed",
            "transitions": ["envelope_received", "signature_valid", "event_decoded",
                            "notification_built", "delivery_failed"]
        }

    Campos de `extra` entram no JSON no mesmo nível; os sensíveis já
    chegam mascarados pelo SensitiveFieldFilter do handler.
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
