from __future__ import annotations

import json

from app_cli.assess_file import main as assess_main
from tools.validate_norms import main as validate_main


def _write_results(path, **overrides):
    payload = {
        "age": 7,
        "playerName": "Lu",
        "memory": {"maxLevel": 2, "totalCorrect": 1, "totalAttempts": 4},
        "safari": {
            "hits": 3, "misses": 1, "falseAlarms": 1,
            "totalTargets": 4, "totalDistractors": 2,
            "reactionTimes": [900, 1000, 1100],
        },
    }
    payload.update(overrides)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_assess_file_prints_summary_and_writes_report(tmp_path, capsys):
    src = _write_results(tmp_path / "results.json")
    html = tmp_path / "out" / "lu.html"

    code = assess_main(["--input", src, "--html", str(html)])

    out = capsys.readouterr().out
    assert code == 0
    assert "Memory Score: 67%" in out
    assert "Subject: Lu | Age: 7" in out
    assert html.exists()


def test_assess_file_json_output(tmp_path, capsys):
    src = _write_results(tmp_path / "results.json")
    assert assess_main(["-i", src, "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["assessment"]["memory_score"] == 67
    assert len(payload["assessment"]["memory_tips"]) == 3


def test_assess_file_rejects_invalid_results(tmp_path, capsys):
    src = _write_results(tmp_path / "bad.json", memory={"maxLevel": 2, "totalCorrect": 5, "totalAttempts": 1})
    assert assess_main(["-i", src]) == 2
    assert "Invalid results file" in capsys.readouterr().err


def test_assess_file_missing_input(tmp_path, capsys):
    assert assess_main(["-i", str(tmp_path / "nope.json")]) == 2


def test_validate_norms_tool_passes(capsys):
    assert validate_main() == 0
    assert "OK: ages 6-18" in capsys.readouterr().out


def test_assess_file_unreadable_inputs(tmp_path, capsys):
    assert assess_main(["-i", str(tmp_path)]) == 2
    latin = tmp_path / "latin1.json"
    latin.write_bytes(b'{"playerName": "Jos\xe9"}')
    assert assess_main(["-i", str(latin)]) == 2
    assert "Cannot read" in capsys.readouterr().err
