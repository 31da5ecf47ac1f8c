"""Attempt state machine enforced by the orchestrator."""

from enum import Enum
from typing import Any

from payment_handoff.models import InvalidTransitionError


class AttemptState(str, Enum):
    """Lifecycle states of a single payment attempt."""

    CREATED = "CREATED"
    VALIDATING = "VALIDATING"
    REJECTED = "REJECTED"
    NORMALIZED = "NORMALIZED"
    DELEGATING = "DELEGATING"
    LAUNCH_FAILED = "LAUNCH_FAILED"
    AWAITING_OUTCOME = "AWAITING_OUTCOME"
    COMPLETED = "COMPLETED"
    NOT_COMPLETED = "NOT_COMPLETED"


ALLOWED_TRANSITIONS: dict[AttemptState, set[AttemptState]] = {
    AttemptState.CREATED: {AttemptState.VALIDATING},
    AttemptState.VALIDATING: {AttemptState.REJECTED, AttemptState.NORMALIZED},
    AttemptState.NORMALIZED: {AttemptState.DELEGATING},
    AttemptState.DELEGATING: {AttemptState.LAUNCH_FAILED, AttemptState.AWAITING_OUTCOME},
    AttemptState.AWAITING_OUTCOME: {AttemptState.COMPLETED, AttemptState.NOT_COMPLETED},
    AttemptState.REJECTED: set(),
    AttemptState.LAUNCH_FAILED: set(),
    AttemptState.COMPLETED: set(),
    AttemptState.NOT_COMPLETED: set(),
}

TERMINAL_STATES = frozenset(state for state, targets in ALLOWED_TRANSITIONS.items() if not targets)


def validate_transition(current: AttemptState, new: AttemptState) -> None:
    """Raise when a transition is not allowed by the state machine."""

    if new not in ALLOWED_TRANSITIONS.get(current, set()):
        raise InvalidTransitionError(current.value, new.value)


class AttemptTracker:
    """Tracks the state of one attempt and logs every transition at debug level."""

    def __init__(self, reference: str, log: Any) -> None:
        self.reference = reference
        self.state = AttemptState.CREATED
        self.history: list[AttemptState] = [AttemptState.CREATED]
        self._log = log

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    def advance(self, new: AttemptState) -> None:
        validate_transition(self.state, new)
        previous = self.state
        self.state = new
        self.history.append(new)
        self._log.debug(
            "attempt_state_changed",
            reference=self.reference,
            from_state=previous.value,
            to_state=new.value,
        )
