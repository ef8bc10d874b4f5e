"""Endpoint de webhook do Mailgun.

Endpoints:
- POST /webhook/mailgun: recebimento de eventos de entrega

Fluxo:
1. Parse do corpo (signature + event-data)
2. Pipeline: assinatura HMAC → decodificação → notificação
3. Entrega ao Slack (inline ou em background)

Segurança:
- Qualquer rejeição responde 406 sem corpo (sem pistas do motivo)
- Resposta ao Mailgun não depende do sucesso da entrega ao Slack
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.mailgun.webhook.receive import parse_webhook_payload
from api.routes.mailgun.webhook_runtime import dispatch_delivery, get_relay_pipeline
from app.domain.errors import InvalidPayloadError
from app.observability import (
    correlation_id_from_headers,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_slack_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_acceptable() -> Response:
    return Response(status_code=status.HTTP_406_NOT_ACCEPTABLE)


@router.post("/mailgun", response_model=None)
async def receive_webhook(request: Request) -> Response | dict[str, Any]:
    """Recebimento de eventos Mailgun.

    Returns:
        Confirmação de recebimento ou Response 406.
    """
    token = set_correlation_id(correlation_id_from_headers(request.headers))

    try:
        raw_body = await request.body()

        try:
            envelope = parse_webhook_payload(raw_body)
        except InvalidPayloadError as exc:
            logger.warning(
                "mailgun_payload_invalid",
                extra={
                    "provider": "mailgun",
                    "error": str(exc),
                    "payload_size": len(raw_body),
                },
            )
            return _not_acceptable()

        pipeline = get_relay_pipeline()
        result = pipeline.process(envelope)

        if not result.accepted:
            logger.warning(
                "mailgun_webhook_rejected",
                extra={
                    "provider": "mailgun",
                    "reason": result.rejection.value if result.rejection else None,
                },
            )
            return _not_acceptable()

        logger.info(
            "mailgun_webhook_accepted",
            extra={
                "provider": "mailgun",
                "event_type": result.record.event_type if result.record else None,
                "payload_size": len(raw_body),
            },
        )

        await dispatch_delivery(
            pipeline=pipeline,
            result=result,
            correlation_id=get_correlation_id(),
            settings=get_slack_settings(),
        )

        return {
            "status": "received",
            "correlation_id": get_correlation_id(),
        }

    finally:
        reset_correlation_id(token)
