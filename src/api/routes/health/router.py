"""Endpoints de health check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.routes.mailgun.webhook_runtime import pending_delivery_count
from config.settings import get_mailgun_settings, get_slack_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "mailgun-slack-relay"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness: segredo Mailgun e destino Slack configurados."""
    mailgun_check = _check_settings(get_mailgun_settings().validate())
    slack_check = _check_settings(get_slack_settings().validate())
    ready = mailgun_check.status == "ok" and slack_check.status == "ok"

    if not ready:
        logger.warning(
            "readiness_check_failed",
            extra={"mailgun": mailgun_check.status, "slack": slack_check.status},
        )

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "mailgun": mailgun_check.as_dict(),
            "slack": slack_check.as_dict(),
        },
        "pending_deliveries": pending_delivery_count(),
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_settings(errors: list[str]) -> DependencyCheck:
    if errors:
        return DependencyCheck(status="failed", error="; ".join(errors))
    return DependencyCheck(status="ok")
