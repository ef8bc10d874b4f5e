"""
Máquina de estados (RelayStateMachine) de um request de webhook.

Controla as transições do pipeline e mantém histórico rastreável.
Uma instância por request; nada é compartilhado entre requests.
"""

from typing import Any

from fsm.states.relay import DEFAULT_INITIAL_STATE, RelayState, is_terminal
from fsm.transitions.rules import is_transition_valid
from fsm.types.transition import InvalidTransitionError, StateTransition


class RelayStateMachine:
    """
    Máquina de estados do relay Mailgun → Slack.

    Attributes:
        current_state: Estado atual da máquina
        history: Histórico de transições realizadas
    """

    __slots__ = ("_current_state", "_history")

    def __init__(self, initial_state: RelayState | None = None) -> None:
        self._current_state = initial_state or DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []

    @property
    def current_state(self) -> RelayState:
        """Estado atual da máquina."""
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def is_terminal(self) -> bool:
        """Verifica se está em estado terminal."""
        return is_terminal(self._current_state)

    def transition(
        self,
        target: RelayState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> StateTransition:
        """
        Realiza uma transição de estado.

        Args:
            target: Estado de destino
            trigger: Identificador do gatilho (ex: 'signature_valid')
            metadata: Dados adicionais para auditoria (nunca PII)

        Returns:
            StateTransition registrada no histórico

        Raises:
            InvalidTransitionError: Se a transição não é permitida
        """
        if not is_transition_valid(self._current_state, target):
            raise InvalidTransitionError(
                f"Transição inválida: {self._current_state.name} → {target.name}"
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )
        self._current_state = target
        self._history.append(transition)
        return transition
