from __future__ import annotations
import os, datetime, time, logging, random
from screen_core.session import GameSession
from screen_core.timeline import Timeline
from screen_core.memory_game import MemoryGame
from screen_core.safari_game import SafariGame
from screen_core.norms import norm_for_age, memory_goal, safari_goal
from screen_core.assessment import technical_summary
from screen_core.report_html import export_report_html
from screen_core.config import AGE_MIN, AGE_MAX, DEFAULT_AGE, DEBUG_TRACE, load_config


def ask_age() -> int:
    raw = input(f"How old are you? ({AGE_MIN}-{AGE_MAX}) ").strip()
    try: age = int(raw)
    except ValueError: return DEFAULT_AGE
    # the slider on the web setup page cannot leave this range either
    return max(AGE_MIN, min(AGE_MAX, age))


def wait_while(timeline: Timeline, still, on_change=None) -> None:
    """Sleep through scheduled events in real time while ``still()`` holds."""
    while still():
        due = timeline.next_due()
        if due is None: return
        time.sleep(max(0, due - timeline.now()) / 1000.0)
        timeline.advance(due - timeline.now())
        if on_change: on_change()


def play_memory(session: GameSession, rng: random.Random) -> None:
    print(f"\n== Memory Challenge ==  Goal for age {session.age}: {memory_goal(norm_for_age(session.age))}")
    input("Press Enter when you're ready! ")
    tl = Timeline(); game = MemoryGame(tl, rng=rng); game.start()
    while game.phase != "done":
        shown = {"i": None}
        def _render():
            if game.phase == "countdown": print(f"\r   {game.countdown}   ", end="", flush=True)
            elif game.phase == "showing" and shown["i"] != game.show_index:
                shown["i"] = game.show_index; print(f"\r   {game.current_digit}   ", end="", flush=True)
        _render()
        wait_while(tl, lambda: game.phase in ("countdown", "showing"), _render)
        print("\r" + " " * 12)
        while True:
            try:
                ok = game.submit(input(f"Level {game.level}: type the {game.level} numbers: "))
                break
            except ValueError as exc:
                print(exc)
        print("🎉 Correct!" if ok else f"Oops! Lives left: {'❤️ ' * game.lives}")
        wait_while(tl, lambda: game.phase == "feedback")
    res = game.result(); session.record_memory_result(res)
    print(f"Game over! Longest sequence: {res.max_level} digits ({res.total_correct}/{res.total_attempts} correct)")


def play_safari(session: GameSession, rng: random.Random) -> None:
    print(f"\n== Animal Safari ==  {safari_goal(norm_for_age(session.age))}")
    print("Press Enter for ANIMALS. Type n then Enter for FRUIT. Be quick!")
    input("Press Enter to start! ")
    tl = Timeline(); game = SafariGame(tl, rng=rng); game.start()
    wait_while(tl, lambda: game.phase == "countdown")
    while game.phase == "playing":
        stim = game.current
        t0 = time.perf_counter()
        resp = input(f"[{game.index + 1}/{len(game.stimuli)} · {game.progress:.0f}%]  {stim.emoji}  ").strip().lower()
        elapsed = int((time.perf_counter() - t0) * 1000)
        if resp != "n" and elapsed < game.stimulus_ms:
            tl.advance(elapsed)
            out = game.tap()
            print("  🎯 Animal spotted!" if out == "hit" else "  🚫 That was a fruit!")
        elif resp != "n":
            print("  ⏱ Too slow!")
        tl.advance(max(0, (tl.next_due() or tl.now()) - tl.now()))
    res = game.result(); session.record_safari_result(res)
    print(f"Safari done! Animals caught: {res.hits}/{res.total_targets}, fruit tapped: {res.false_alarms}")


def main():
    logging.basicConfig(level=logging.INFO if DEBUG_TRACE else logging.WARNING, format="[%(levelname)s] %(message)s")
    print("Brain Quest")
    session = GameSession()
    session.set_player_name(input("What's your name? ").strip())
    session.set_age(ask_age())
    norm = norm_for_age(session.age)
    print(f"Hey {session.display_name}! {norm.icon} Age {session.age} · {norm.label} Stage")
    cfg = load_config()
    rng = random.Random(cfg["SEED"])
    play_memory(session, rng)
    play_safari(session, rng)
    a = session.compute_assessment()
    print(f"\n{a.badge_icon}  {a.badge}\n{session.display_name}, {a.child_message}")
    print(f"Memory: {a.memory_score}%   Focus: {a.attention_score}%")
    for tip in a.memory_tips + a.attention_tips: print(f"  • {tip}")
    if input("\nShow technical summary for the examiner? [y/N] ").strip().lower() == "y":
        for line in technical_summary(session.age, session.player_name, session.memory_result, session.safari_result, a):
            print("  " + line)
    os.makedirs(cfg["REPORTS_DIR"], exist_ok=True)
    ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    path = export_report_html(session, os.path.join(cfg["REPORTS_DIR"], f"report_{ts}.html"))
    print(f"Report saved to: {path}")
if __name__ == "__main__": main()
