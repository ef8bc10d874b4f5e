"""
Exports públicos do módulo fsm/manager.
"""

from fsm.manager.machine import RelayStateMachine

__all__ = ["RelayStateMachine"]
