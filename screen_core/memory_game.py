# screen_core/memory_game.py
from __future__ import annotations
import logging
import random
from typing import List, Literal, Optional, Set

from .types import MemoryResult
from .timeline import Timeline, TimerHandle, emit_trace
from .errors import GamePhaseError
from .config import (
    MEMORY_START_LEVEL,
    MEMORY_LIVES,
    COUNTDOWN_SECONDS,
    COUNTDOWN_TICK_MS,
    DIGIT_SHOW_MS,
    FEEDBACK_MS,
)

log = logging.getLogger(__name__)

MemoryPhase = Literal["instructions", "countdown", "showing", "input", "feedback", "done"]


def generate_sequence(length: int, rng: random.Random) -> List[int]:
    return [rng.randint(1, 9) for _ in range(length)]


class MemoryGame:
    """Digit-span "Memory Challenge".

    Each round shows ``level`` digits one at a time, then waits for the player
    to type them back. A correct answer moves up one level; a wrong answer
    costs a life and repeats the level. The game ends when lives run out.
    """

    def __init__(
        self,
        timeline: Timeline,
        rng: Optional[random.Random] = None,
        start_level: int = MEMORY_START_LEVEL,
        lives: int = MEMORY_LIVES,
        countdown_seconds: int = COUNTDOWN_SECONDS,
    ) -> None:
        self.timeline = timeline
        self.rng = rng or random.Random()
        self.start_level = start_level
        self.start_lives = lives
        self.countdown_seconds = countdown_seconds
        self._timers: Set[TimerHandle] = set()

        self.phase: MemoryPhase = "instructions"
        self.level = start_level
        self.lives = lives
        self.max_level = 0
        self.total_correct = 0
        self.total_attempts = 0
        self.countdown = countdown_seconds
        self.sequence: List[int] = []
        self.show_index = -1
        self.last_correct: Optional[bool] = None

    # -- timers -------------------------------------------------------------
    def _after(self, delay_ms: int, fn) -> None:
        holder: List[TimerHandle] = []

        def _fire() -> None:
            self._timers.discard(holder[0])
            fn()

        handle = self.timeline.schedule(delay_ms, _fire)
        holder.append(handle)
        self._timers.add(handle)

    def _set_phase(self, phase: MemoryPhase) -> None:
        # anything scheduled for the old phase must not fire into the new one
        for h in self._timers:
            self.timeline.cancel(h)
        self._timers.clear()
        self.phase = phase
        emit_trace(log, game="memory", phase=phase, level=self.level, lives=self.lives)

    # -- flow ---------------------------------------------------------------
    def start(self) -> None:
        self.level = self.start_level
        self.max_level = 0
        self.lives = self.start_lives
        self.total_correct = 0
        self.total_attempts = 0
        self.last_correct = None
        self._begin_countdown()

    def _begin_countdown(self) -> None:
        self.countdown = self.countdown_seconds
        self._set_phase("countdown")
        if self.countdown <= 0:
            self._start_showing()
            return
        self._after(COUNTDOWN_TICK_MS, self._tick)

    def _tick(self) -> None:
        self.countdown -= 1
        if self.countdown <= 0:
            self._start_showing()
        else:
            self._after(COUNTDOWN_TICK_MS, self._tick)

    def _start_showing(self) -> None:
        self.sequence = generate_sequence(self.level, self.rng)
        self.show_index = 0
        self._set_phase("showing")
        self._after(DIGIT_SHOW_MS, self._reveal_next)

    def _reveal_next(self) -> None:
        self.show_index += 1
        if self.show_index >= len(self.sequence):
            self._set_phase("input")
        else:
            self._after(DIGIT_SHOW_MS, self._reveal_next)

    @property
    def current_digit(self) -> Optional[int]:
        if self.phase == "showing" and 0 <= self.show_index < len(self.sequence):
            return self.sequence[self.show_index]
        return None

    def submit(self, text: str) -> bool:
        if self.phase != "input":
            raise GamePhaseError("submit", self.phase)
        answer = "".join(ch for ch in str(text) if ch.isdigit())
        if len(answer) != len(self.sequence):
            raise ValueError(f"expected {len(self.sequence)} digits, got {len(answer)}")

        correct = answer == "".join(str(d) for d in self.sequence)
        self.total_attempts += 1
        self.last_correct = correct
        if correct:
            self.total_correct += 1
            self.max_level = max(self.max_level, self.level)
            self._set_phase("feedback")
            self._after(FEEDBACK_MS, self._level_up)
        else:
            self.lives -= 1
            self._set_phase("feedback")
            self._after(FEEDBACK_MS, self._after_miss)
        emit_trace(log, game="memory", level=self.level, outcome="correct" if correct else "wrong", lives=self.lives)
        return correct

    def _level_up(self) -> None:
        self.level += 1
        self._begin_countdown()

    def _after_miss(self) -> None:
        if self.lives <= 0:
            self._set_phase("done")
        else:
            self._begin_countdown()

    def abandon(self) -> None:
        """Leave the game early; pending timers are dropped."""
        self._set_phase("instructions")

    def result(self) -> MemoryResult:
        if self.phase != "done":
            raise GamePhaseError("read result", self.phase)
        return MemoryResult(
            max_level=max(self.max_level, self.level - 1),
            total_correct=self.total_correct,
            total_attempts=self.total_attempts,
        )
