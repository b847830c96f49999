# screen_core/assessment.py
from __future__ import annotations
import logging
from typing import List

from .types import Assessment, MemoryResult, SafariResult
from .norms import norm_for_age
from . import scoring
from .badges import status_for, badge_for, memory_tips, attention_tips
from .config import DEBUG_TRACE, FITTS_ADJUST_MS


log = logging.getLogger(__name__)


def assess(age: int, memory: MemoryResult, safari: SafariResult) -> Assessment:
    """Turn both game results into an age-normalised assessment.

    Pure and deterministic: the same inputs always give an equal result and
    neither record is modified. Zero-stimulus or zero-hit safari runs score
    0 for the affected parts instead of dividing by zero.
    """
    norm = norm_for_age(age)

    mem = scoring.memory_score(memory, norm)
    accuracy = scoring.safari_accuracy(safari)
    avg_rt = scoring.average_reaction_time(safari.reaction_times)
    rt_score = scoring.reaction_time_score(avg_rt, norm)
    attn = scoring.attention_score(accuracy, rt_score)
    overall = scoring.overall_score(mem, attn)

    status = status_for(overall)
    badge, icon, message = badge_for(status)
    if DEBUG_TRACE:
        log.info(
            "trace age=%s band=%s memory=%s accuracy=%s avg_rt=%s rt_score=%s attention=%s overall=%s status=%s",
            age, norm.label, mem, accuracy, avg_rt, rt_score, attn, overall, status,
        )

    return Assessment(
        memory_score=mem,
        attention_score=attn,
        accuracy=accuracy,
        avg_reaction_time=avg_rt,
        status=status,
        badge=badge,
        badge_icon=icon,
        child_message=message,
        memory_tips=memory_tips(mem),
        attention_tips=attention_tips(attn),
    )


def technical_summary(
    age: int,
    player_name: str,
    memory: MemoryResult,
    safari: SafariResult,
    assessment: Assessment,
) -> List[str]:
    """Examiner-facing lines describing the raw results against the age norm."""
    norm = norm_for_age(age)
    subject = player_name.strip() or "Anonymous"
    return [
        f"Subject: {subject} | Age: {age}",
        f"Age Group Norms: {norm.label} (ages {norm.min_age}-{norm.max_age})",
        f"Max Span Achieved: {memory.max_level} digits (norm: {norm.memory_span})",
        f"Correct Sequences: {memory.total_correct}/{memory.total_attempts}",
        f"Memory Score: {assessment.memory_score}%",
        f"Hits: {safari.hits}/{safari.total_targets} (targets caught)",
        f"Misses: {safari.misses}/{safari.total_targets}",
        f"False Alarms: {safari.false_alarms}/{safari.total_distractors} (impulsivity indicator)",
        f"Overall Accuracy: {assessment.accuracy}% (norm: {norm.accuracy_threshold}%)",
        f"Avg Reaction Time: {assessment.avg_reaction_time}ms (norm limit: {norm.reaction_time_limit}ms, Fitts' adjusted)",
        f"Attention Score: {assessment.attention_score}%",
        f"Status: {assessment.status.upper()}",
        f"Badge: {assessment.badge}",
        f"Note: Reaction times include +{FITTS_ADJUST_MS}ms Fitts' Law adjustment for mouse/touch latency. "
        "This is a screening tool, not a diagnostic instrument.",
    ]
