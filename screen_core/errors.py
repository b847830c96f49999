from __future__ import annotations


class ScreenError(Exception):
    """Base class for screening-core errors."""


class NormTableError(ValueError):
    """The age-norm table does not partition the supported age range."""


class SessionScopeError(RuntimeError):
    """Session state was requested outside of an active session scope."""


class AssessmentNotReady(ScreenError):
    """Both games must be completed before an assessment can be reported."""

    def __init__(self, memory_completed: bool, safari_completed: bool) -> None:
        missing = [name for name, done in (("memory", memory_completed), ("safari", safari_completed)) if not done]
        super().__init__(f"games incomplete: {', '.join(missing)}")
        self.missing = missing


class GamePhaseError(ScreenError):
    """A game action was attempted in a phase that does not accept it."""

    def __init__(self, action: str, phase: str) -> None:
        super().__init__(f"cannot {action} during phase '{phase}'")
        self.action = action
        self.phase = phase
