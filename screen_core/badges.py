# screen_core/badges.py
from __future__ import annotations
from typing import Tuple

from .types import Status
from .config import EXCELLENT_MIN, GOOD_MIN, TIP_THRESHOLD

BADGES: dict[str, Tuple[str, str, str]] = {
    "excellent": (
        "Super Brain Champion", "🏆",
        "Awesome work! Your brain is super powerful! Keep being amazing!",
    ),
    "good": (
        "Rising Star", "⭐",
        "Great job! You're doing really well! Practice makes perfect!",
    ),
    "needs-support": (
        "Focus Power Explorer", "🌟",
        "You did great trying! Every superhero trains their powers. Keep practicing!",
    ),
}

MEMORY_TIPS: Tuple[str, ...] = (
    "Try memory games like matching cards at home",
    "Practice remembering short lists (like groceries)",
    "Reading stories and retelling them helps build memory",
)
MEMORY_STRONG = "Your memory is strong! Challenge yourself with longer sequences"

ATTENTION_TIPS: Tuple[str, ...] = (
    "Practice focusing on one task at a time",
    "Try breathing exercises before tasks",
    "Break big tasks into smaller fun steps",
)
ATTENTION_STRONG = "Great focus skills! Keep up the good work"


def status_for(overall: float) -> Status:
    if overall >= EXCELLENT_MIN: return "excellent"
    if overall >= GOOD_MIN: return "good"
    return "needs-support"


def badge_for(status: Status) -> Tuple[str, str, str]:
    """(badge, icon, child message) for a status."""
    return BADGES[status]


def memory_tips(score: int) -> Tuple[str, ...]:
    return MEMORY_TIPS if score < TIP_THRESHOLD else (MEMORY_STRONG,)


def attention_tips(score: int) -> Tuple[str, ...]:
    return ATTENTION_TIPS if score < TIP_THRESHOLD else (ATTENTION_STRONG,)
