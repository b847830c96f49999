# screen_core/session.py
from __future__ import annotations
import contextvars
import logging
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from .types import Assessment, MemoryResult, SafariResult
from .assessment import assess
from .errors import SessionScopeError
from .config import DEFAULT_AGE, DEFAULT_DISPLAY_NAME


log = logging.getLogger(__name__)


class GameSession:
    """State for one player's visit: setup values, both results, cached assessment.

    Created when a visit starts and handed to every view that needs it. The
    assessment is an explicit cache: filled by ``compute_assessment`` and
    dropped whenever a result changes or the session is reset.
    """

    def __init__(self, age: int = DEFAULT_AGE, player_name: str = "") -> None:
        self.age = age
        self.player_name = player_name
        self._memory: Optional[MemoryResult] = None
        self._safari: Optional[SafariResult] = None
        self._assessment: Optional[Assessment] = None

    # setup values are stored as given; range checks belong to the input step
    def set_age(self, value: int) -> None:
        self.age = value
        # scores are normed on age, so a cached assessment is stale now
        self._assessment = None

    def set_player_name(self, value: str) -> None:
        self.player_name = value

    @property
    def display_name(self) -> str:
        return self.player_name.strip() or DEFAULT_DISPLAY_NAME

    @property
    def memory_result(self) -> Optional[MemoryResult]:
        return self._memory

    @property
    def safari_result(self) -> Optional[SafariResult]:
        return self._safari

    @property
    def assessment(self) -> Optional[Assessment]:
        return self._assessment

    @property
    def memory_completed(self) -> bool:
        return self._memory is not None

    @property
    def safari_completed(self) -> bool:
        return self._safari is not None

    def record_memory_result(self, result: MemoryResult) -> None:
        self._memory = result
        self._assessment = None
        log.debug("memory result recorded: %s", result)

    def record_safari_result(self, result: SafariResult) -> None:
        self._safari = result
        self._assessment = None
        log.debug("safari result recorded: hits=%s misses=%s false_alarms=%s",
                  result.hits, result.misses, result.false_alarms)

    def compute_assessment(self) -> Optional[Assessment]:
        """Return the assessment, computing it once both games are done.

        Returns ``None`` while either result is missing. Once computed the
        same object is returned until a result changes or ``reset`` runs.
        """
        if self._assessment is not None:
            return self._assessment
        if self._memory is None or self._safari is None:
            return None
        self._assessment = assess(self.age, self._memory, self._safari)
        log.info("assessment computed for age %s: %s", self.age, self._assessment.status)
        return self._assessment

    def reset(self) -> None:
        self._memory = None
        self._safari = None
        self._assessment = None

    def snapshot(self) -> Dict[str, object]:
        return {
            "age": self.age,
            "player_name": self.player_name,
            "memory_result": self._memory,
            "safari_result": self._safari,
            "assessment": self._assessment,
            "memory_completed": self.memory_completed,
            "safari_completed": self.safari_completed,
        }


_CURRENT: contextvars.ContextVar[Optional[GameSession]] = contextvars.ContextVar("screen_session", default=None)


@contextmanager
def session_scope(session: Optional[GameSession] = None) -> Iterator[GameSession]:
    """Bind ``session`` (or a fresh one) as the current session for this context."""
    sess = session if session is not None else GameSession()
    token = _CURRENT.set(sess)
    try:
        yield sess
    finally:
        _CURRENT.reset(token)


def current_session() -> GameSession:
    sess = _CURRENT.get()
    if sess is None:
        raise SessionScopeError("current_session() must be called inside session_scope()")
    return sess
