# screen_core/norms.py
"""Age-banded performance norms for the two screening games.

Reaction-time limits already include a +500 ms allowance for mouse/touch
latency (Fitts' Law adjustment), so they are compared against raw tap times.
"""
from __future__ import annotations
import logging
from typing import Sequence

from .errors import NormTableError
from .types import AgeNorm
from .config import AGE_MIN, AGE_MAX

log = logging.getLogger(__name__)

AGE_NORMS: tuple[AgeNorm, ...] = (
    AgeNorm(6, 7, memory_span=3, reaction_time_limit=1200, accuracy_threshold=60, icon="🧱", label="Building Blocks"),
    AgeNorm(8, 9, memory_span=4, reaction_time_limit=1050, accuracy_threshold=65, icon="🧩", label="Puzzle Solver"),
    AgeNorm(10, 11, memory_span=5, reaction_time_limit=950, accuracy_threshold=70, icon="🚲", label="Explorer"),
    AgeNorm(12, 13, memory_span=5, reaction_time_limit=850, accuracy_threshold=75, icon="🔭", label="Scientist"),
    AgeNorm(14, 15, memory_span=6, reaction_time_limit=800, accuracy_threshold=80, icon="🧪", label="Innovator"),
    AgeNorm(16, 18, memory_span=7, reaction_time_limit=750, accuracy_threshold=85, icon="🚀", label="Ready to Launch"),
)


def norm_for_age(age: int) -> AgeNorm:
    """Return the first band containing ``age``.

    Ages outside every band fall back to the youngest band. This mirrors the
    behaviour the scores were calibrated against, so out-of-range ages are
    not clamped or rejected here.
    """
    for norm in AGE_NORMS:
        if norm.contains(age):
            return norm
    log.debug("age %s outside norm table, using %s band", age, AGE_NORMS[0].label)
    return AGE_NORMS[0]


def check_partition(norms: Sequence[AgeNorm] = AGE_NORMS, lo: int = AGE_MIN, hi: int = AGE_MAX) -> None:
    if not norms:
        raise NormTableError("norm table is empty")
    expected = lo
    for n in norms:
        if n.memory_span <= 0:
            raise NormTableError(f"{n.label}: memory span must be positive")
        if n.min_age > n.max_age:
            raise NormTableError(f"{n.label}: min_age {n.min_age} > max_age {n.max_age}")
        if n.min_age < expected:
            raise NormTableError(f"{n.label}: overlaps previous band at age {n.min_age}")
        if n.min_age > expected:
            raise NormTableError(f"gap in norm table: ages {expected}-{n.min_age - 1} not covered")
        expected = n.max_age + 1
    if expected - 1 != hi:
        raise NormTableError(f"norm table ends at {expected - 1}, expected {hi}")


def memory_goal(norm: AgeNorm) -> str:
    return f"Remember {norm.memory_span}+ digits!"


def safari_goal(norm: AgeNorm) -> str:
    return f"Be fast AND accurate! Target: {norm.accuracy_threshold}% accuracy"
