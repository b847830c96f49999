"""JSON/CSV views of finished sessions."""
from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Iterable
import csv
import io

from .session import GameSession

_FIELDS: tuple[str, ...] = (
    "player_name",
    "age",
    "max_level",
    "total_correct",
    "total_attempts",
    "hits",
    "misses",
    "false_alarms",
    "total_targets",
    "total_distractors",
    "avg_reaction_time",
    "accuracy",
    "memory_score",
    "attention_score",
    "status",
    "badge",
)


def _to_basic(x: Any) -> Any:
    if x is None or isinstance(x, (bool, int, float, str)):
        return x
    if isinstance(x, dict):
        return {str(k): _to_basic(v) for k, v in x.items()}
    if isinstance(x, (list, tuple, set)):
        return [_to_basic(v) for v in x]
    if is_dataclass(x):
        return _to_basic(asdict(x))
    return str(x)


def to_json(session: GameSession) -> Dict[str, Any]:
    """Return a JSON-safe snapshot of the session, assessment included if computed."""

    return _to_basic(session.snapshot())


def _row(session: GameSession) -> Dict[str, Any]:
    row: Dict[str, Any] = {"player_name": session.display_name, "age": session.age}
    for rec in (session.memory_result, session.safari_result, session.assessment):
        if rec is not None:
            row.update(asdict(rec))
    return {key: row.get(key, "") for key in _FIELDS}


def to_csv(sessions: Iterable[GameSession]) -> str:
    """One row per session with a fixed header; missing parts are left blank."""

    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=_FIELDS)
    writer.writeheader()
    for sess in sessions:
        writer.writerow(_row(sess))
    return buf.getvalue()


__all__ = ["to_json", "to_csv"]
