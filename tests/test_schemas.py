from __future__ import annotations

import pytest
from pydantic import ValidationError

from screen_core.schemas import MemoryResultIn, ResultsFileIn, SafariResultIn
from screen_core.types import MemoryResult, SafariResult


def test_accepts_browser_camel_case_payload():
    payload = {
        "age": 10,
        "playerName": "Mia",
        "memory": {"maxLevel": 5, "totalCorrect": 4, "totalAttempts": 5},
        "safari": {
            "hits": 2, "misses": 1, "falseAlarms": 0,
            "totalTargets": 3, "totalDistractors": 2,
            "reactionTimes": [640, 720],
        },
    }
    parsed = ResultsFileIn.model_validate(payload)
    assert parsed.player_name == "Mia"
    assert parsed.memory.to_record() == MemoryResult(5, 4, 5)
    assert parsed.safari.to_record() == SafariResult(2, 1, 0, 3, 2, (640, 720))


def test_accepts_snake_case_and_defaults_age():
    parsed = ResultsFileIn.model_validate({
        "memory": {"max_level": 3, "total_correct": 2, "total_attempts": 4},
        "safari": {"hits": 0, "misses": 0, "false_alarms": 0, "total_targets": 0, "total_distractors": 0},
    })
    assert parsed.age == 10
    assert parsed.safari.to_record().reaction_times == ()


@pytest.mark.parametrize(
    "bad",
    [
        {"maxLevel": -1, "totalCorrect": 0, "totalAttempts": 0},
        {"maxLevel": 3, "totalCorrect": 5, "totalAttempts": 2},
    ],
)
def test_rejects_bad_memory_records(bad):
    with pytest.raises(ValidationError):
        MemoryResultIn.model_validate(bad)


@pytest.mark.parametrize(
    "bad",
    [
        # hits + misses != totalTargets
        {"hits": 2, "misses": 2, "falseAlarms": 0, "totalTargets": 3, "totalDistractors": 1, "reactionTimes": [1, 2]},
        # one reaction time missing
        {"hits": 2, "misses": 1, "falseAlarms": 0, "totalTargets": 3, "totalDistractors": 1, "reactionTimes": [400]},
        # more false alarms than fruit shown
        {"hits": 0, "misses": 0, "falseAlarms": 2, "totalTargets": 0, "totalDistractors": 1},
    ],
)
def test_rejects_inconsistent_safari_records(bad):
    with pytest.raises(ValidationError):
        SafariResultIn.model_validate(bad)
