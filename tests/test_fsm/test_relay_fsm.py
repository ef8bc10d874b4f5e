"""
Testes do módulo FSM do relay.

Cobre estados, mapa de transições, máquina e registros de transição.
"""

from datetime import datetime

import pytest

from fsm import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    InvalidTransitionError,
    RelayState,
    RelayStateMachine,
    StateTransition,
    get_valid_targets,
    is_terminal,
    is_transition_valid,
    validate_transition_map,
)

HAPPY_PATH = [
    RelayState.VERIFYING,
    RelayState.DECODING,
    RelayState.BUILDING,
    RelayState.DELIVERING,
    RelayState.DONE,
]


class TestStatesAndTransitions:
    def test_states_and_terminals(self) -> None:
        assert len(RelayState) == 7
        assert {RelayState.DONE, RelayState.REJECTED} == TERMINAL_STATES
        assert DEFAULT_INITIAL_STATE is RelayState.RECEIVED
        assert is_terminal(RelayState.REJECTED)
        assert not is_terminal(RelayState.DELIVERING)
        assert str(RelayState.DONE) == "DONE"

    def test_transition_map_is_consistent(self) -> None:
        assert validate_transition_map() == []
        assert set(VALID_TRANSITIONS) == set(RelayState)

    @pytest.mark.parametrize("state", [RelayState.VERIFYING, RelayState.DECODING])
    def test_rejection_only_from_verify_or_decode(self, state: RelayState) -> None:
        assert is_transition_valid(state, RelayState.REJECTED)

    @pytest.mark.parametrize(
        "state",
        [RelayState.RECEIVED, RelayState.BUILDING, RelayState.DELIVERING, RelayState.DONE],
    )
    def test_no_rejection_elsewhere(self, state: RelayState) -> None:
        assert not is_transition_valid(state, RelayState.REJECTED)

    def test_terminal_states_have_no_targets(self) -> None:
        for state in TERMINAL_STATES:
            assert get_valid_targets(state) == frozenset()


class TestRelayStateMachine:
    def test_happy_path_records_history(self) -> None:
        machine = RelayStateMachine()

        for target in HAPPY_PATH:
            machine.transition(target, f"to_{target.value.lower()}")

        assert machine.current_state is RelayState.DONE
        assert machine.is_terminal
        assert [t.to_state for t in machine.history] == HAPPY_PATH
        assert machine.history[0].from_state is RelayState.RECEIVED

    def test_invalid_transition_raises_and_keeps_state(self) -> None:
        machine = RelayStateMachine()

        with pytest.raises(InvalidTransitionError, match="RECEIVED → DONE"):
            machine.transition(RelayState.DONE, "skip")

        assert machine.current_state is RelayState.RECEIVED
        assert machine.history == []

    def test_terminal_state_is_absorbing(self) -> None:
        machine = RelayStateMachine(initial_state=RelayState.VERIFYING)
        machine.transition(RelayState.REJECTED, "signature_mismatch")

        for state in RelayState:
            assert not is_transition_valid(machine.current_state, state)

    def test_history_is_a_copy(self) -> None:
        machine = RelayStateMachine()
        machine.transition(RelayState.VERIFYING, "envelope_received")

        machine.history.clear()

        assert len(machine.history) == 1

    def test_history_records_trigger_and_metadata(self) -> None:
        machine = RelayStateMachine()
        machine.transition(RelayState.VERIFYING, "envelope_received", {"size": 10})

        (record,) = machine.history

        assert record.from_state is RelayState.RECEIVED
        assert record.to_state is RelayState.VERIFYING
        assert record.trigger == "envelope_received"
        assert record.metadata == {"size": 10}


class TestStateTransition:
    def test_empty_trigger_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="trigger"):
            StateTransition(RelayState.RECEIVED, RelayState.VERIFYING, "  ")

    def test_timestamp_is_utc(self) -> None:
        transition = StateTransition(RelayState.DECODING, RelayState.BUILDING, "event_decoded")

        assert isinstance(transition.timestamp, datetime)
        assert transition.timestamp.tzinfo is not None
        assert transition.metadata == {}
