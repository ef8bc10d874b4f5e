"""Runtime do webhook Mailgun: pipeline e despacho da entrega ao Slack.

Modo `inline`: a entrega é aguardada antes da resposta ao Mailgun.
Modo `async`: a entrega vira uma task em background, limitada por
semáforo e registrada em `_in_flight` até concluir; o shutdown aguarda
as pendentes via `drain_background_tasks`.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.use_cases.mailgun.relay_event import MailgunRelayPipeline, RelayResult

logger = logging.getLogger(__name__)

# Limite de entregas simultâneas em voo
MAX_CONCURRENT_DELIVERIES = 50

_delivery_slots = asyncio.Semaphore(MAX_CONCURRENT_DELIVERIES)
_in_flight: set[asyncio.Task[RelayResult]] = set()

_relay_pipeline: MailgunRelayPipeline | None = None


def get_relay_pipeline() -> MailgunRelayPipeline:
    """Obtém o pipeline de relay (lazy-loading)."""
    global _relay_pipeline
    if _relay_pipeline is None:
        from app.bootstrap.mailgun_factory import create_mailgun_relay_pipeline

        _relay_pipeline = create_mailgun_relay_pipeline()
    return _relay_pipeline


def pending_delivery_count() -> int:
    """Quantidade de entregas em background ainda não concluídas."""
    return len(_in_flight)


async def dispatch_delivery(
    *,
    pipeline: MailgunRelayPipeline,
    result: RelayResult,
    correlation_id: str,
    settings: Any,
) -> RelayResult | None:
    """Despacha a entrega inline ou async conforme configuração.

    Em ambos os modos a resposta ao Mailgun não depende do desfecho.

    Returns:
        RelayResult final no modo inline; None quando agendada em background
    """
    delivery_mode = (settings.delivery_mode or "async").lower()
    if delivery_mode == "inline":
        logger.info(
            "slack_delivery_inline",
            extra={"correlation_id": correlation_id, "mode": "inline"},
        )
        return await pipeline.deliver(result)

    # create_task copia o contexto: o correlation_id segue nos logs da entrega
    task = asyncio.create_task(_deliver_with_slot(pipeline, result))
    _in_flight.add(task)
    task.add_done_callback(functools.partial(_on_delivery_done, correlation_id))
    logger.info(
        "slack_delivery_scheduled",
        extra={
            "correlation_id": correlation_id,
            "mode": "async",
            "pending_deliveries": len(_in_flight),
        },
    )
    return None


async def _deliver_with_slot(
    pipeline: MailgunRelayPipeline,
    result: RelayResult,
) -> RelayResult:
    async with _delivery_slots:
        return await pipeline.deliver(result)


def _on_delivery_done(correlation_id: str, task: asyncio.Task[RelayResult]) -> None:
    _in_flight.discard(task)
    extra: dict[str, Any] = {
        "correlation_id": correlation_id,
        "pending_deliveries": len(_in_flight),
    }

    if task.cancelled():
        logger.warning("slack_delivery_cancelled", extra=extra)
        return

    exc = task.exception()
    if exc is not None:
        # deliver() só levanta em erro de programação (estado inválido)
        logger.error(
            "slack_delivery_task_failed",
            extra={**extra, "error_type": type(exc).__name__},
        )
        return

    outcome = task.result()
    logger.info(
        "slack_delivery_finished",
        extra={
            **extra,
            "delivered": outcome.delivered,
            "final_state": outcome.state.value,
            "event_type": outcome.message.error_field.value if outcome.message else None,
            "transitions": [t.trigger for t in outcome.history],
        },
    )


async def drain_background_tasks(timeout_seconds: float = 30.0) -> int:
    """Aguarda entregas pendentes durante o shutdown.

    Returns:
        Quantidade de entregas canceladas por estourar o timeout
    """
    if not _in_flight:
        return 0

    logger.info(
        "slack_delivery_shutdown_wait",
        extra={"pending_deliveries": len(_in_flight), "timeout_seconds": timeout_seconds},
    )
    _, pending = await asyncio.wait(set(_in_flight), timeout=timeout_seconds)
    if not pending:
        return 0

    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    logger.warning(
        "slack_delivery_shutdown_cancelled",
        extra={"cancelled_deliveries": len(pending)},
    )
    return len(pending)
