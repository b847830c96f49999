from __future__ import annotations

import csv
import io
import json

import pytest

from screen_core.errors import AssessmentNotReady
from screen_core.export import to_csv, to_json
from screen_core.report_html import export_report_html
from screen_core.session import GameSession
from screen_core.types import MemoryResult


def _finished(make_safari, name: str = "") -> GameSession:
    sess = GameSession(age=10, player_name=name)
    sess.record_memory_result(MemoryResult(5, 4, 5))
    sess.record_safari_result(make_safari(false_alarms=1))
    return sess


def test_html_report_contains_card_and_technical_summary(tmp_path, make_safari):
    sess = _finished(make_safari)
    out = tmp_path / "nested" / "report.html"

    path = export_report_html(sess, str(out))

    html = out.read_text(encoding="utf-8")
    assert path == str(out)
    assert "Super Brain Champion" in html
    assert "Player, Awesome work!" in html
    assert "Explorer Stage" in html
    assert "Technical Summary (For Examiner)" in html
    assert "Overall Accuracy: 95% (norm: 70%)" in html
    assert sess.assessment is not None


def test_html_report_escapes_player_name(tmp_path, make_safari):
    sess = _finished(make_safari, name="<b>Zoe</b>")
    export_report_html(sess, str(tmp_path / "r.html"))
    html = (tmp_path / "r.html").read_text(encoding="utf-8")
    assert "<b>Zoe</b>" not in html
    assert "&lt;b&gt;Zoe&lt;/b&gt;" in html


def test_html_report_requires_both_games(tmp_path):
    sess = GameSession()
    sess.record_memory_result(MemoryResult(3, 2, 4))
    with pytest.raises(AssessmentNotReady) as exc:
        export_report_html(sess, str(tmp_path / "r.html"))
    assert exc.value.missing == ["safari"]
    assert not (tmp_path / "r.html").exists()


def test_to_json_is_serialisable(make_safari):
    sess = _finished(make_safari)
    assert to_json(sess)["assessment"] is None
    sess.compute_assessment()

    payload = json.loads(json.dumps(to_json(sess)))
    assert payload["assessment"]["status"] == "excellent"
    assert payload["safari_result"]["reaction_times"] == [600] * 13
    assert payload["memory_completed"] is True


def test_to_csv_has_fixed_header_and_blank_gaps(make_safari):
    done = _finished(make_safari, name="Kai")
    done.compute_assessment()
    partial = GameSession(age=8)
    partial.record_memory_result(MemoryResult(2, 1, 4))

    rows = list(csv.DictReader(io.StringIO(to_csv([done, partial]))))

    assert rows[0]["player_name"] == "Kai"
    assert rows[0]["memory_score"] == "100"
    assert rows[0]["status"] == "excellent"
    assert rows[1]["player_name"] == "Player"
    assert rows[1]["max_level"] == "2"
    assert rows[1]["hits"] == "" and rows[1]["status"] == ""
