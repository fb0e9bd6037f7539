#!/usr/bin/env python3
"""
Interactive local reservations harness (no HTTP).

Usage:
  python3 scripts/reserve_local.py

What it does:
- Restores the reservation session through the same wiring the API uses
- Applies typed commands to the session (writes through to storage)
- Prints the destinations table and, when enabled, the booked destinations
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.use_cases.reservation_session import ReservationSession
from app.wiring.dependencies import get_container


def _print_header(session: ReservationSession) -> None:
    result = session.restore_result
    print("\nLocal Reservations Harness")
    print("-" * 60)
    print(f"initialized: {result.outcome.value}" + (f" ({result.reason})" if result.reason else ""))
    print("Commands: /add <name>, /toggle <name> | <time>, /show on|off, /list, /help, /quit")
    print("-" * 60)


def _print_state(session: ReservationSession) -> None:
    state = session.state
    summary = session.summary()
    print(f"\n{summary.destination_count} destinations available")
    print(f"{'Destinations':<24} Time Slots")
    for item in state.locations:
        slots = "  ".join(
            f"[{'x' if slot.booked else ' '}] {slot.time}" for slot in item.time_slots
        )
        print(f"{item.location_name:<24} {slots}")

    if state.show_booked:
        print("\n--- Booked Destinations and time ---")
        rows = session.booked_rows()
        if not rows:
            print("(none)")
        for row in rows:
            print(f"{row.location_name:<24} {row.time}")


def main() -> None:
    container = get_container()
    session: ReservationSession = container["session"]  # type: ignore[assignment]
    _print_header(session)
    _print_state(session)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd, _, arg = user_text.partition(" ")
        cmd = cmd.lower()
        arg = arg.strip()

        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /add <name>             -> add a destination with default time slots")
            print("  /toggle <name> | <time> -> book or release a time slot")
            print("  /show on|off            -> show or hide booked destinations")
            print("  /list                   -> print the current tables")
            print("  /quit                   -> exit")
            continue
        if cmd == "/list":
            _print_state(session)
            continue
        if cmd == "/add" and arg:
            session.create_location(arg)
            _print_state(session)
            continue
        if cmd == "/toggle" and "|" in arg:
            name, _, slot_time = arg.partition("|")
            session.toggle_reservation(name.strip(), slot_time.strip())
            _print_state(session)
            continue
        if cmd == "/show" and arg.lower() in ("on", "off"):
            session.set_show_booked(arg.lower() == "on")
            _print_state(session)
            continue

        print("Unrecognized command, try /help")


if __name__ == "__main__":
    main()
