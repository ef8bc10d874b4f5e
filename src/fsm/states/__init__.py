"""
Exports públicos do módulo fsm/states.

Estados canônicos do pipeline de relay.
"""

from fsm.states.relay import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    RelayState,
    is_terminal,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "RelayState",
    "is_terminal",
]
