from __future__ import annotations

import pytest

from screen_core import scoring
from screen_core.norms import norm_for_age
from screen_core.types import MemoryResult


def test_round_half_up_matches_browser_rounding():
    assert scoring.round_half_up(0.5) == 1
    assert scoring.round_half_up(2.5) == 3
    assert scoring.round_half_up(66.49) == 66
    assert scoring.round_half_up(66.6667) == 67


def test_memory_score_is_monotonic_and_capped():
    norm = norm_for_age(12)  # span 5
    scores = [scoring.memory_score(MemoryResult(lvl, 0, 0), norm) for lvl in range(0, 10)]
    assert scores[0] == 0
    assert all(b >= a for a, b in zip(scores, scores[1:])), "memory score should never drop as span grows"
    assert scores[5:] == [100] * 5


def test_accuracy_counts_withheld_taps(make_safari):
    perfect = make_safari(hits=13, total_targets=13, total_distractors=7, false_alarms=0)
    assert scoring.safari_accuracy(perfect) == 100

    mixed = make_safari(hits=5, total_targets=10, total_distractors=10, false_alarms=5)
    assert scoring.safari_accuracy(mixed) == 50


def test_accuracy_zero_when_nothing_shown(make_safari):
    empty = make_safari(hits=0, total_targets=0, total_distractors=0)
    assert scoring.safari_accuracy(empty) == 0


def test_average_reaction_time_rounds_half_up():
    assert scoring.average_reaction_time([]) == 0
    assert scoring.average_reaction_time([600, 601]) == 601
    assert scoring.average_reaction_time([500, 700, 900]) == 700


@pytest.mark.parametrize(
    "avg_rt,expected",
    [(0, 0), (1, 100), (950, 100), (1000, 95), (1900, 50), (2111, 45), (95_000, 1), (10_000_000, 0)],
)
def test_reaction_time_score(avg_rt, expected):
    assert scoring.reaction_time_score(avg_rt, norm_for_age(10)) == expected


def test_attention_blend_weights_accuracy_higher():
    assert scoring.attention_score(95, 100) == 97
    assert scoring.attention_score(100, 0) == 60
    assert scoring.attention_score(0, 100) == 40
    assert scoring.attention_score(0, 0) == 0


def test_overall_is_unrounded_mean():
    assert scoring.overall_score(100, 97) == 98.5
    assert scoring.overall_score(67, 0) == 33.5
