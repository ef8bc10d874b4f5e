"""
Estados canônicos do pipeline de relay Mailgun → Slack.

Cada request de webhook percorre estes estados exatamente uma vez,
do recebimento até a entrega ou rejeição. Não há laços nem retries.
"""

from enum import StrEnum


class RelayState(StrEnum):
    """
    Estados de processamento de um webhook Mailgun.

    Estados não-terminais:
        - RECEIVED: Envelope recebido, ainda não verificado
        - VERIFYING: Validando assinatura HMAC
        - DECODING: Decodificando event-data
        - BUILDING: Montando a notificação
        - DELIVERING: Notificação pronta, entregue ao colaborador Slack

    Estados terminais:
        - DONE: Entrega tentada (sucesso ou falha apenas registrada)
        - REJECTED: Assinatura ou evento inválidos (HTTP 406)
    """

    RECEIVED = "RECEIVED"
    VERIFYING = "VERIFYING"
    DECODING = "DECODING"
    BUILDING = "BUILDING"
    DELIVERING = "DELIVERING"

    DONE = "DONE"
    REJECTED = "REJECTED"

    def __str__(self) -> str:
        return self.value


TERMINAL_STATES: frozenset[RelayState] = frozenset({
    RelayState.DONE,
    RelayState.REJECTED,
})

DEFAULT_INITIAL_STATE: RelayState = RelayState.RECEIVED


def is_terminal(state: RelayState) -> bool:
    """Verifica se o estado é terminal."""
    return state in TERMINAL_STATES
