from __future__ import annotations

import pytest

from screen_core.session import GameSession
from screen_core.timeline import Timeline
from screen_core.types import MemoryResult, SafariResult


def build_memory(max_level: int = 5, total_correct: int | None = None, total_attempts: int | None = None) -> MemoryResult:
    correct = max(0, max_level - 1) if total_correct is None else total_correct
    attempts = correct + 3 if total_attempts is None else total_attempts
    return MemoryResult(max_level=max_level, total_correct=correct, total_attempts=attempts)


def build_safari(
    *,
    hits: int = 13,
    total_targets: int = 13,
    total_distractors: int = 7,
    false_alarms: int = 0,
    rt: int = 600,
    reaction_times: list[int] | None = None,
) -> SafariResult:
    """Deterministic safari record; one reaction time per hit unless given."""

    rts = [rt] * hits if reaction_times is None else list(reaction_times)
    return SafariResult(
        hits=hits,
        misses=total_targets - hits,
        false_alarms=false_alarms,
        total_targets=total_targets,
        total_distractors=total_distractors,
        reaction_times=tuple(rts),
    )


@pytest.fixture
def make_memory():
    return build_memory


@pytest.fixture
def make_safari():
    return build_safari


@pytest.fixture
def session() -> GameSession:
    return GameSession()


@pytest.fixture
def timeline() -> Timeline:
    return Timeline()
