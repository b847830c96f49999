# screen_core/schemas.py
"""Request-style models for game results saved as JSON.

Accepts both snake_case and the camelCase keys the browser games emit
(``maxLevel``, ``reactionTimes``...).
"""
from __future__ import annotations
from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .types import MemoryResult, SafariResult
from .config import DEFAULT_AGE


class _In(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class MemoryResultIn(_In):
    max_level: int = Field(ge=0)
    total_correct: int = Field(ge=0)
    total_attempts: int = Field(ge=0)

    @model_validator(mode="after")
    def _attempts_cover_correct(self) -> "MemoryResultIn":
        if self.total_attempts < self.total_correct:
            raise ValueError("total_attempts must be >= total_correct")
        return self

    def to_record(self) -> MemoryResult:
        return MemoryResult(self.max_level, self.total_correct, self.total_attempts)


class SafariResultIn(_In):
    hits: int = Field(ge=0)
    misses: int = Field(ge=0)
    false_alarms: int = Field(ge=0)
    total_targets: int = Field(ge=0)
    total_distractors: int = Field(ge=0)
    reaction_times: List[int] = Field(default_factory=list)

    @model_validator(mode="after")
    def _consistent_counts(self) -> "SafariResultIn":
        if self.hits + self.misses != self.total_targets:
            raise ValueError("hits + misses must equal total_targets")
        if len(self.reaction_times) != self.hits:
            raise ValueError("one reaction time is required per hit")
        if self.false_alarms > self.total_distractors:
            raise ValueError("false_alarms cannot exceed total_distractors")
        if any(rt < 0 for rt in self.reaction_times):
            raise ValueError("reaction times must be non-negative")
        return self

    def to_record(self) -> SafariResult:
        return SafariResult(
            hits=self.hits,
            misses=self.misses,
            false_alarms=self.false_alarms,
            total_targets=self.total_targets,
            total_distractors=self.total_distractors,
            reaction_times=tuple(self.reaction_times),
        )


class ResultsFileIn(_In):
    age: int = DEFAULT_AGE
    player_name: str = ""
    memory: MemoryResultIn
    safari: SafariResultIn
