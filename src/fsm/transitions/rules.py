"""
Regras de transição válidas entre estados do pipeline de relay.

O grafo é linear, com um único desvio absorvente (REJECTED) a partir
da verificação de assinatura ou da decodificação do evento.
"""

from fsm.states.relay import TERMINAL_STATES, RelayState

# Tipagem explícita do mapa de transições
TransitionMap = dict[RelayState, frozenset[RelayState]]

# Chave: estado de origem
# Valor: conjunto de estados de destino permitidos
VALID_TRANSITIONS: TransitionMap = {
    RelayState.RECEIVED: frozenset({RelayState.VERIFYING}),
    RelayState.VERIFYING: frozenset({
        RelayState.DECODING,
        RelayState.REJECTED,
    }),
    RelayState.DECODING: frozenset({
        RelayState.BUILDING,
        RelayState.REJECTED,
    }),
    # Builder é total: não existe caminho de rejeição aqui
    RelayState.BUILDING: frozenset({RelayState.DELIVERING}),
    # Falha de entrega não muda o desfecho do request
    RelayState.DELIVERING: frozenset({RelayState.DONE}),

    # Estados terminais
    RelayState.DONE: frozenset(),
    RelayState.REJECTED: frozenset(),
}


def get_valid_targets(state: RelayState) -> frozenset[RelayState]:
    """Retorna os estados de destino válidos para um estado de origem."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: RelayState, to_state: RelayState) -> bool:
    """Verifica se a transição from_state → to_state é permitida."""
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a consistência do mapa de transições.

    Returns:
        Lista de problemas encontrados (vazia = consistente)
    """
    errors: list[str] = []

    for state in RelayState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado sem regras de transição: {state.name}")

    for state in TERMINAL_STATES:
        if VALID_TRANSITIONS.get(state):
            errors.append(f"Estado terminal com saídas: {state.name}")

    for state, targets in VALID_TRANSITIONS.items():
        if state not in TERMINAL_STATES and not targets:
            errors.append(f"Estado não-terminal sem saídas: {state.name}")

    return errors
