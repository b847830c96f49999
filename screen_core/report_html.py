from __future__ import annotations
from html import escape
from pathlib import Path
from typing import List

from .session import GameSession
from .assessment import technical_summary
from .norms import norm_for_age
from .errors import AssessmentNotReady

_STATUS_COLORS = {
    "excellent": "#16a34a",
    "good": "#2563eb",
    "needs-support": "#d97706",
}


def _tips(title: str, tips) -> str:
    if not tips:
        return ""
    items = "".join(f"<li>{escape(t)}</li>" for t in tips)
    return f"<div class=\"tips\"><h3>{escape(title)}</h3><ul>{items}</ul></div>"


def _score(label: str, value: int) -> str:
    return f"<div class=\"score\"><span class=\"value\">{int(value)}%</span><span>{escape(label)}</span></div>"


def render_report_html(session: GameSession) -> str:
    a = session.compute_assessment()
    if a is None:
        raise AssessmentNotReady(session.memory_completed, session.safari_completed)
    norm = norm_for_age(session.age)
    lines: List[str] = technical_summary(
        session.age, session.player_name, session.memory_result, session.safari_result, a
    )
    tech = "".join(f"<p>{escape(line)}</p>" for line in lines)
    color = _STATUS_COLORS.get(a.status, "#6b7280")
    return f"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8"/>
<title>Brain Quest Results</title>
<style>
 body{{font-family:system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,'Helvetica Neue',Arial}}
 .wrap{{max-width:720px;margin:40px auto;padding:0 16px}}
 .badge{{font-size:4rem;text-align:center}}
 h1{{text-align:center;color:{color};margin:8px 0}}
 .message{{text-align:center;font-size:1.1rem}}
 .scores{{display:flex;justify-content:center;gap:32px;margin:24px 0}}
 .score{{display:flex;flex-direction:column;align-items:center}}
 .score .value{{font-size:2rem;font-weight:700}}
 .technical{{border-top:1px solid #ddd;margin-top:32px;font-size:.9rem;color:#374151}}
</style>
</head>
<body>
<div class="wrap">
  <div class="badge">{escape(a.badge_icon)}</div>
  <h1>{escape(a.badge)}</h1>
  <p class="message">{escape(session.display_name)}, {escape(a.child_message)}</p>
  <p class="message">{escape(norm.icon)} {escape(norm.label)} Stage</p>
  <div class="scores">{_score("Memory", a.memory_score)}{_score("Focus", a.attention_score)}</div>
  {_tips("Memory Tips", a.memory_tips)}
  {_tips("Focus Tips", a.attention_tips)}
  <div class="technical"><h3>Technical Summary (For Examiner)</h3>{tech}</div>
</div>
</body>
</html>"""


def export_report_html(session: GameSession, path: str) -> str:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_report_html(session), encoding="utf-8")
    return str(out)
