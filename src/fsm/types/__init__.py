"""
Exports públicos do módulo fsm/types.

Tipos e estruturas de dados para transições de estado.
"""

from fsm.types.transition import InvalidTransitionError, StateTransition

__all__ = [
    "InvalidTransitionError",
    "StateTransition",
]
