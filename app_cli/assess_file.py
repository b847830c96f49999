from __future__ import annotations
import argparse, json, sys, logging
from pathlib import Path
from pydantic import ValidationError
from screen_core.schemas import ResultsFileIn
from screen_core.session import GameSession
from screen_core.assessment import technical_summary
from screen_core.report_html import export_report_html
from screen_core.export import to_json

log = logging.getLogger("app_cli.assess_file")


def load_session(path: str) -> GameSession:
    payload = ResultsFileIn.model_validate_json(Path(path).read_text(encoding="utf-8"))
    session = GameSession(age=payload.age, player_name=payload.player_name)
    session.record_memory_result(payload.memory.to_record())
    session.record_safari_result(payload.safari.to_record())
    return session


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Assess saved Memory Challenge / Animal Safari results.")
    ap.add_argument("--input", "-i", required=True, help="results JSON with age, playerName, memory, safari")
    ap.add_argument("--html", help="write the results card to this HTML file")
    ap.add_argument("--json", action="store_true", help="print the session snapshot as JSON")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="[%(levelname)s] %(message)s")

    try:
        session = load_session(args.input)
    except FileNotFoundError:
        print(f"No such file: {args.input}", file=sys.stderr); return 2
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Cannot read {args.input}: {exc}", file=sys.stderr); return 2
    except ValidationError as exc:
        print(f"Invalid results file:\n{exc}", file=sys.stderr); return 2

    a = session.compute_assessment()
    if args.json:
        print(json.dumps(to_json(session), ensure_ascii=False, indent=2))
    else:
        print(f"{a.badge_icon} {a.badge} ({a.status})")
        for line in technical_summary(session.age, session.player_name, session.memory_result, session.safari_result, a):
            print("  " + line)
    if args.html:
        path = export_report_html(session, args.html)
        log.info("report written to %s", path)
        print(f"Report saved to: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
