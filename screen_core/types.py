from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Tuple

Status = Literal["excellent", "good", "needs-support"]


@dataclass(frozen=True)
class AgeNorm:
    min_age: int; max_age: int
    memory_span: int
    reaction_time_limit: int  # ms, includes the Fitts' Law allowance
    accuracy_threshold: int   # percent, shown to the player only
    icon: str; label: str

    def contains(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age


@dataclass(frozen=True)
class MemoryResult:
    max_level: int
    total_correct: int
    total_attempts: int


@dataclass(frozen=True)
class SafariResult:
    hits: int
    misses: int
    false_alarms: int
    total_targets: int
    total_distractors: int
    reaction_times: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        rts = tuple(self.reaction_times)
        if any(isinstance(rt, bool) or not isinstance(rt, int) for rt in rts):
            raise TypeError("reaction_times must be whole milliseconds (int)")
        object.__setattr__(self, "reaction_times", rts)

    @property
    def total_stimuli(self) -> int:
        return self.total_targets + self.total_distractors


@dataclass(frozen=True)
class Assessment:
    memory_score: int
    attention_score: int
    accuracy: int
    avg_reaction_time: int
    status: Status
    badge: str
    badge_icon: str
    child_message: str
    memory_tips: Tuple[str, ...]
    attention_tips: Tuple[str, ...]
