"""
Módulo FSM — máquina de estados do pipeline de relay.

Estrutura:
    - states/: Definições dos estados (RelayState enum)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - manager/: Máquina de estados (RelayStateMachine)
    - types/: Tipos de dados (StateTransition)
"""

from fsm.manager import RelayStateMachine
from fsm.states import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    RelayState,
    is_terminal,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import InvalidTransitionError, StateTransition

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "InvalidTransitionError",
    "RelayState",
    "RelayStateMachine",
    "StateTransition",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "validate_transition_map",
]
