# autoplay.py
from __future__ import annotations
import argparse, os, json, random, datetime, logging
from screen_core.session import GameSession
from screen_core.timeline import Timeline
from screen_core.memory_game import MemoryGame
from screen_core.safari_game import SafariGame
from screen_core.report_html import export_report_html
from screen_core.export import to_json
from screen_core.config import load_config

log = logging.getLogger("autoplay")


def _new_run_id() -> str:
    return datetime.datetime.now().strftime("run_%Y%m%d_%H%M%S")


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _wrong_answer(seq, rng: random.Random) -> str:
    digits = [str(d) for d in seq]
    i = rng.randrange(len(digits))
    digits[i] = str(int(digits[i]) % 9 + 1)
    return "".join(digits)


def autoplay_memory(skill: float, rng: random.Random, timeline: Timeline | None = None):
    """Simulated player: reliable up to a skill-dependent span, shaky beyond it."""
    tl = timeline or Timeline()
    game = MemoryGame(tl, rng=rng)
    game.start()
    span = 2 + round(skill * 6)
    while game.phase != "done":
        if game.phase == "input":
            ok = rng.random() < (0.95 if game.level <= span else 0.15)
            game.submit("".join(str(d) for d in game.sequence) if ok else _wrong_answer(game.sequence, rng))
        elif not tl.advance_to_next():
            break
    return game.result()


def autoplay_safari(skill: float, rng: random.Random, timeline: Timeline | None = None):
    """Simulated player: faster, more hits and fewer fruit taps with higher skill."""
    tl = timeline or Timeline()
    game = SafariGame(tl, rng=rng)
    game.start()
    while game.phase == "countdown":
        tl.advance_to_next()
    while game.phase == "playing":
        stim = game.current
        window = game.stimulus_ms
        if stim.is_target:
            tap = rng.random() < 0.5 + 0.45 * skill
        else:
            tap = rng.random() < 0.4 * (1.0 - skill)
        if tap:
            rt = int(_clamp(rng.gauss(1600 - 900 * skill, 150), 150, window - 1))
            tl.advance(rt)
            game.tap()
        tl.advance_to_next()
    return game.result()


def main():
    cfg = load_config()
    ap = argparse.ArgumentParser(description="Play both games with a simulated child and write a report.")
    ap.add_argument("--age", type=int, default=10)
    ap.add_argument("--name", default="Autoplay")
    ap.add_argument("--skill", type=float, default=0.7, help="0..1")
    ap.add_argument("--seed", type=int, default=cfg["SEED"])
    ap.add_argument("--out", default=cfg["REPORTS_DIR"])
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    rng = random.Random(args.seed)
    skill = _clamp(args.skill, 0.0, 1.0)
    session = GameSession(age=args.age, player_name=args.name)
    session.record_memory_result(autoplay_memory(skill, rng))
    session.record_safari_result(autoplay_safari(skill, rng))
    a = session.compute_assessment()
    log.info("skill=%.2f status=%s memory=%s attention=%s", skill, a.status, a.memory_score, a.attention_score)

    run_id = _new_run_id()
    os.makedirs(args.out, exist_ok=True)
    path = export_report_html(session, os.path.join(args.out, f"{run_id}.html"))
    with open(os.path.join(args.out, f"{run_id}.json"), "w", encoding="utf-8") as f:
        json.dump(to_json(session), f, ensure_ascii=False, indent=2)
    print(f"Done. Report saved to: {path}")


if __name__ == "__main__":
    main()
