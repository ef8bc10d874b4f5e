"""Use case: relay de um webhook Mailgun para o Slack.

Sequência por request (sem estado compartilhado entre requests):

    RECEIVED → VERIFYING → DECODING → BUILDING → DELIVERING → DONE
                   └──────────┴──→ REJECTED (HTTP 406)

Erros de verificação/decodificação nunca escapam como exceção: viram
RelayResult em REJECTED. Falha de entrega é apenas registrada em log.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from app.domain.errors import (
    EventParseError,
    MailgunWebhookError,
    SignatureDecodeError,
    UnrecognizedEventError,
)
from app.domain.mailgun_events import UnhandledEvent
from app.services.notification_builder import build_notification
from config.settings import DEFAULT_MESSAGE_TITLE
from fsm import InvalidTransitionError, RelayState, RelayStateMachine
from utils.errors import DeliveryError

if TYPE_CHECKING:
    from app.domain.mailgun_events import EventRecord
    from app.domain.mailgun_webhook import InboundEnvelope
    from app.domain.notification import NotificationMessage
    from app.protocols.event_decoder import EventDecoderProtocol
    from app.protocols.notification_sender import NotificationSenderProtocol
    from app.protocols.signature_verifier import SignatureVerifierProtocol
    from fsm import StateTransition

logger = logging.getLogger(__name__)


class RejectionReason(StrEnum):
    """Motivo de rejeição (uso interno/logs; nunca exposto ao chamador)."""

    SIGNING_KEY_MISSING = "signing_key_missing"
    SIGNATURE_UNREADABLE = "signature_unreadable"
    SIGNATURE_MISMATCH = "signature_mismatch"
    EVENT_UNRECOGNIZED = "event_unrecognized"
    EVENT_PARSE_FAILED = "event_parse_failed"


@dataclass(frozen=True, slots=True)
class RelayResult:
    """Desfecho do processamento de um webhook.

    Attributes:
        state: Estado final alcançado (DELIVERING, DONE ou REJECTED)
        record: Evento decodificado (ausente se rejeitado)
        message: Notificação construída (ausente se rejeitado)
        rejection: Motivo da rejeição
        error: Erro de origem da rejeição (None para assinatura divergente)
        delivered: Resultado da entrega (None enquanto não tentada)
        history: Transições percorridas
    """

    state: RelayState
    record: EventRecord | None = None
    message: NotificationMessage | None = None
    rejection: RejectionReason | None = None
    error: MailgunWebhookError | None = None
    delivered: bool | None = None
    history: tuple[StateTransition, ...] = ()

    @property
    def accepted(self) -> bool:
        return self.state is not RelayState.REJECTED


class MailgunRelayPipeline:
    """Orquestra verificação, decodificação, montagem e entrega."""

    def __init__(
        self,
        signing_key: bytes,
        verifier: SignatureVerifierProtocol,
        decoder: EventDecoderProtocol,
        sender: NotificationSenderProtocol,
        title: str = DEFAULT_MESSAGE_TITLE,
    ) -> None:
        self._signing_key = signing_key
        self._verifier = verifier
        self._decoder = decoder
        self._sender = sender
        self._title = title

    def process(self, envelope: InboundEnvelope) -> RelayResult:
        """Verifica, decodifica e monta a notificação (sem IO).

        Returns:
            RelayResult em DELIVERING (pronto para entrega) ou REJECTED
        """
        machine = RelayStateMachine()
        machine.transition(RelayState.VERIFYING, "envelope_received")

        rejection, error = self._verify(envelope)
        if rejection is not None:
            machine.transition(RelayState.REJECTED, rejection.value)
            return RelayResult(
                state=machine.current_state,
                rejection=rejection,
                error=error,
                history=tuple(machine.history),
            )
        machine.transition(RelayState.DECODING, "signature_valid")

        try:
            record = self._decoder.decode(envelope.event_data)
        except (UnrecognizedEventError, EventParseError) as exc:
            rejection = _decode_rejection(exc)
            logger.warning(
                "mailgun_event_rejected",
                extra={
                    "reason": rejection.value,
                    "event_name": getattr(exc, "name", None),
                },
            )
            machine.transition(RelayState.REJECTED, rejection.value)
            return RelayResult(
                state=machine.current_state,
                rejection=rejection,
                error=exc,
                history=tuple(machine.history),
            )

        if isinstance(record, UnhandledEvent):
            logger.info("mailgun_event_unhandled", extra={"event_type": record.event_type})
        machine.transition(RelayState.BUILDING, "event_decoded", {"event_type": record.event_type})

        message = build_notification(record, title=self._title)
        machine.transition(
            RelayState.DELIVERING,
            "notification_built",
            {"field_count": len(message.fields)},
        )
        return RelayResult(
            state=machine.current_state,
            record=record,
            message=message,
            history=tuple(machine.history),
        )

    async def deliver(self, result: RelayResult) -> RelayResult:
        """Entrega a notificação; sempre termina em DONE.

        Raises:
            InvalidTransitionError: Se result não estiver em DELIVERING
        """
        if result.state is not RelayState.DELIVERING or result.message is None:
            raise InvalidTransitionError(
                f"Entrega exige estado DELIVERING, recebido: {result.state.name}"
            )

        delivered = False
        event_type = result.message.error_field.value
        try:
            await self._sender.send(result.message)
            delivered = True
            logger.info("slack_delivery_succeeded", extra={"event_type": event_type})
        except DeliveryError as exc:
            logger.error(
                "slack_delivery_failed",
                extra={
                    "event_type": event_type,
                    "error": str(exc),
                    "status_code": exc.status_code,
                },
            )
        except Exception:
            logger.exception("slack_delivery_unexpected_error", extra={"event_type": event_type})

        machine = RelayStateMachine(initial_state=RelayState.DELIVERING)
        machine.transition(
            RelayState.DONE,
            "delivery_succeeded" if delivered else "delivery_failed",
        )
        return dataclasses.replace(
            result,
            state=machine.current_state,
            delivered=delivered,
            history=result.history + tuple(machine.history),
        )

    async def run(self, envelope: InboundEnvelope) -> RelayResult:
        """Processa e, se aceito, entrega na mesma chamada."""
        result = self.process(envelope)
        if not result.accepted:
            return result
        return await self.deliver(result)

    def _verify(
        self, envelope: InboundEnvelope
    ) -> tuple[RejectionReason | None, MailgunWebhookError | None]:
        if not self._signing_key:
            logger.error("mailgun_signing_key_missing")
            return RejectionReason.SIGNING_KEY_MISSING, None

        try:
            verified = self._verifier.verify(self._signing_key, envelope.signature)
        except SignatureDecodeError as exc:
            logger.warning("mailgun_signature_unreadable", extra={"error": str(exc)})
            return RejectionReason.SIGNATURE_UNREADABLE, exc

        if not verified:
            # debug para não inundar logs com tráfego forjado
            logger.debug("mailgun_signature_mismatch")
            return RejectionReason.SIGNATURE_MISMATCH, None

        return None, None


def _decode_rejection(exc: MailgunWebhookError) -> RejectionReason:
    if isinstance(exc, EventParseError):
        return RejectionReason.EVENT_PARSE_FAILED
    return RejectionReason.EVENT_UNRECOGNIZED
