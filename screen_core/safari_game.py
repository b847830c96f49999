# screen_core/safari_game.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import List, Literal, Optional, Set

from .types import SafariResult
from .timeline import Timeline, TimerHandle, emit_trace
from .errors import GamePhaseError
from .config import (
    COUNTDOWN_SECONDS,
    COUNTDOWN_TICK_MS,
    SAFARI_TOTAL_STIMULI,
    STIMULUS_DURATION_MS,
    SAFARI_TARGET_PROB,
)

log = logging.getLogger(__name__)

SafariPhase = Literal["instructions", "countdown", "playing", "done"]
TapOutcome = Literal["hit", "false-alarm"]

ANIMALS = ("🐶", "🐱", "🐰", "🦁", "🐸", "🐼", "🐵", "🐻", "🦊", "🐯")
FRUITS = ("🍎", "🍊", "🍇", "🍓", "🍋", "🍉", "🍌", "🍑", "🥝", "🍒")


@dataclass(frozen=True)
class Stimulus:
    id: int
    emoji: str
    is_target: bool  # animal = go, fruit = no-go


def generate_stimuli(count: int, rng: random.Random, target_prob: float = SAFARI_TARGET_PROB) -> List[Stimulus]:
    out: List[Stimulus] = []
    for i in range(count):
        is_target = rng.random() < target_prob
        pool = ANIMALS if is_target else FRUITS
        out.append(Stimulus(id=i, emoji=rng.choice(pool), is_target=is_target))
    return out


class SafariGame:
    """Go/no-go "Animal Safari".

    Stimuli appear one after another for a fixed window. Tapping an animal is
    a hit (its reaction time is kept), tapping a fruit is a false alarm, and
    letting an animal's window run out untapped is a miss. Only the first tap
    per stimulus counts.
    """

    def __init__(
        self,
        timeline: Timeline,
        rng: Optional[random.Random] = None,
        total_stimuli: int = SAFARI_TOTAL_STIMULI,
        stimulus_ms: int = STIMULUS_DURATION_MS,
        target_prob: float = SAFARI_TARGET_PROB,
        countdown_seconds: int = COUNTDOWN_SECONDS,
    ) -> None:
        self.timeline = timeline
        self.rng = rng or random.Random()
        self.total_stimuli = total_stimuli
        self.stimulus_ms = stimulus_ms
        self.target_prob = target_prob
        self.countdown_seconds = countdown_seconds
        self._timers: Set[TimerHandle] = set()

        self.phase: SafariPhase = "instructions"
        self.countdown = countdown_seconds
        self.stimuli: List[Stimulus] = []
        self.index = 0
        self._reset_counts()
        self._onset_ms = 0
        self.tapped = False
        self.last_outcome: Optional[TapOutcome] = None

    def _reset_counts(self) -> None:
        self.hits = 0
        self.misses = 0
        self.false_alarms = 0
        self.reaction_times: List[int] = []

    def _after(self, delay_ms: int, fn) -> None:
        holder: List[TimerHandle] = []

        def _fire() -> None:
            self._timers.discard(holder[0])
            fn()

        handle = self.timeline.schedule(delay_ms, _fire)
        holder.append(handle)
        self._timers.add(handle)

    def _cancel_timers(self) -> None:
        for h in self._timers:
            self.timeline.cancel(h)
        self._timers.clear()

    def _set_phase(self, phase: SafariPhase) -> None:
        self._cancel_timers()
        self.phase = phase
        emit_trace(log, game="safari", phase=phase, index=self.index)

    @property
    def total_targets(self) -> int:
        return sum(1 for s in self.stimuli if s.is_target)

    @property
    def total_distractors(self) -> int:
        return sum(1 for s in self.stimuli if not s.is_target)

    @property
    def current(self) -> Optional[Stimulus]:
        if self.phase == "playing" and self.index < len(self.stimuli):
            return self.stimuli[self.index]
        return None

    @property
    def progress(self) -> float:
        return (self.index / len(self.stimuli) * 100) if self.stimuli else 0.0

    def start(self) -> None:
        self._reset_counts()
        self.stimuli = []
        self.index = 0
        self.countdown = self.countdown_seconds
        self._set_phase("countdown")
        if self.countdown <= 0:
            self._begin_playing()
            return
        self._after(COUNTDOWN_TICK_MS, self._tick)

    def _tick(self) -> None:
        self.countdown -= 1
        if self.countdown <= 0:
            self._begin_playing()
        else:
            self._after(COUNTDOWN_TICK_MS, self._tick)

    def _begin_playing(self) -> None:
        self.stimuli = generate_stimuli(self.total_stimuli, self.rng, self.target_prob)
        self.index = 0
        self._set_phase("playing")
        self._present()

    def _present(self) -> None:
        if self.index >= len(self.stimuli):
            self._set_phase("done")
            log.debug("safari finished: hits=%s misses=%s false_alarms=%s",
                      self.hits, self.misses, self.false_alarms)
            return
        self._onset_ms = self.timeline.now()
        self.tapped = False
        self.last_outcome = None
        self._after(self.stimulus_ms, self._window_elapsed)

    def _window_elapsed(self) -> None:
        stim = self.stimuli[self.index]
        if not self.tapped and stim.is_target:
            self.misses += 1
            emit_trace(log, game="safari", index=self.index, stimulus=stim.emoji, outcome="miss")
        self.index += 1
        self._present()

    def tap(self) -> Optional[TapOutcome]:
        """Register a tap on the visible stimulus; repeat taps are ignored."""
        stim = self.current
        if stim is None or self.tapped:
            return None
        self.tapped = True
        rt = self.timeline.now() - self._onset_ms
        if stim.is_target:
            self.hits += 1
            self.reaction_times.append(rt)
            self.last_outcome = "hit"
        else:
            self.false_alarms += 1
            self.last_outcome = "false-alarm"
        emit_trace(log, game="safari", index=self.index, stimulus=stim.emoji, outcome=self.last_outcome, rt_ms=rt)
        return self.last_outcome

    def abandon(self) -> None:
        self._set_phase("instructions")

    def result(self) -> SafariResult:
        if self.phase != "done":
            raise GamePhaseError("read result", self.phase)
        return SafariResult(
            hits=self.hits,
            misses=self.misses,
            false_alarms=self.false_alarms,
            total_targets=self.total_targets,
            total_distractors=self.total_distractors,
            reaction_times=tuple(self.reaction_times),
        )
