from __future__ import annotations

import pytest

from screen_core.errors import NormTableError
from screen_core.norms import AGE_NORMS, check_partition, memory_goal, norm_for_age
from screen_core.types import AgeNorm


@pytest.mark.parametrize("age", range(6, 19))
def test_every_supported_age_resolves_to_its_band(age):
    norm = norm_for_age(age)
    assert norm.min_age <= age <= norm.max_age


@pytest.mark.parametrize("age", [-5, 0, 5, 19, 40, 10_000])
def test_out_of_table_ages_fall_back_to_youngest_band(age):
    assert norm_for_age(age) is AGE_NORMS[0]


def test_reference_bands():
    ten = norm_for_age(10)
    assert (ten.memory_span, ten.reaction_time_limit, ten.accuracy_threshold) == (5, 950, 70)
    assert ten.label == "Explorer"
    seven = norm_for_age(7)
    assert (seven.memory_span, seven.reaction_time_limit) == (3, 1200)
    assert norm_for_age(18).label == "Ready to Launch"


def test_shipped_table_partitions_six_to_eighteen():
    assert len(AGE_NORMS) == 6
    check_partition(AGE_NORMS)
    assert all(n.memory_span > 0 for n in AGE_NORMS)


def test_check_partition_rejects_gap_and_overlap():
    gap = list(AGE_NORMS)
    gap[1] = AgeNorm(9, 9, 4, 1050, 65, "🧩", "Puzzle Solver")
    with pytest.raises(NormTableError, match="gap"):
        check_partition(gap)

    overlap = list(AGE_NORMS)
    overlap[2] = AgeNorm(9, 11, 5, 950, 70, "🚲", "Explorer")
    with pytest.raises(NormTableError, match="overlaps"):
        check_partition(overlap)

    zero_span = list(AGE_NORMS)
    zero_span[0] = AgeNorm(6, 7, 0, 1200, 60, "🧱", "Building Blocks")
    with pytest.raises(NormTableError, match="positive"):
        check_partition(zero_span)


def test_memory_goal_mentions_expected_span():
    assert memory_goal(norm_for_age(14)) == "Remember 6+ digits!"
