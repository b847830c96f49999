# screen_core/scoring.py
from __future__ import annotations
import math
from typing import Sequence

from .types import AgeNorm, MemoryResult, SafariResult
from .config import ACCURACY_WEIGHT, RT_WEIGHT


def round_half_up(x: float) -> int:
    """Round .5 away from zero for positive values (66.5 -> 67, 0.5 -> 1)."""
    return int(math.floor(x + 0.5))


def _clamp(x: int, lo: int = 0, hi: int = 100) -> int:
    if x < lo: return lo
    if x > hi: return hi
    return x


def memory_score(memory: MemoryResult, norm: AgeNorm) -> int:
    """Share of the age-expected digit span reached, capped at 100."""
    ratio = memory.max_level / norm.memory_span
    return _clamp(round_half_up(ratio * 100))


def safari_accuracy(safari: SafariResult) -> int:
    """Correct actions (hits plus withheld taps on fruit) over all stimuli."""
    total = safari.total_stimuli
    if total <= 0:
        return 0
    correct = safari.hits + (safari.total_distractors - safari.false_alarms)
    return round_half_up(correct / total * 100)


def average_reaction_time(reaction_times: Sequence[int]) -> int:
    if not reaction_times:
        return 0
    return round_half_up(sum(reaction_times) / len(reaction_times))


def reaction_time_score(avg_rt: int, norm: AgeNorm) -> int:
    if avg_rt <= 0:
        return 0
    if avg_rt <= norm.reaction_time_limit:
        return 100
    return max(0, round_half_up(norm.reaction_time_limit / avg_rt * 100))


def attention_score(accuracy: int, rt_score: int) -> int:
    # accuracy outweighs raw speed so fast impulsive tapping is not rewarded
    blended = accuracy * ACCURACY_WEIGHT + rt_score * RT_WEIGHT
    return _clamp(round_half_up(blended))


def overall_score(memory: int, attention: int) -> float:
    return (memory + attention) / 2
