#!/usr/bin/env python3
"""Play Jacks or Better video poker in the terminal."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Prompt

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from vpoker.game import (
    Deck,
    GameConfig,
    GamePhase,
    GameSession,
    EventType,
    VideoPokerError,
)
from vpoker.viz import HandDisplay


HELP = "[b]b[/] bet one  [b]m[/] bet max  [b]d[/] deal/draw  [b]1-5[/] hold  [b]q[/] quit"


def main():
    parser = argparse.ArgumentParser(
        description="Play single-hand Jacks or Better video poker"
    )
    parser.add_argument(
        "-c", "--credits",
        type=int,
        default=100,
        help="Starting credits (default: 100)",
    )
    parser.add_argument(
        "-s", "--seed",
        type=int,
        help="Random seed for the deck",
    )
    parser.add_argument(
        "--preset",
        help="Debug: fixed cards at the top of an unshuffled deck (e.g. 'As Ks Qs Js Ts')",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()
    console = Console()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    config = GameConfig(starting_credits=args.credits, seed=args.seed)
    deck = None
    if args.preset:
        try:
            deck = Deck.with_preset(args.preset)
        except ValueError as e:
            console.print(f"[red]Invalid preset: {e}[/]")
            return 1
        console.print("[yellow]Debug preset deck: shuffling disabled[/]")

    session = GameSession(config, deck=deck)
    display = HandDisplay(console)

    def on_round_ended(event):
        if event["payout"]:
            console.print(f"[bold green]{event['category'].label}! WIN {event['payout']}[/]")
        else:
            console.print("[dim]No win[/]")

    session.events.subscribe(EventType.ROUND_ENDED, on_round_ended)

    console.print("[bold]Jacks or Better[/]")
    while True:
        console.print()
        display.display(session)
        console.print(HELP)

        prompt = "Hold/draw" if session.phase is GamePhase.HOLDING else "Bet/deal"
        choice = Prompt.ask(prompt, console=console).strip().lower()

        try:
            if choice in ("q", "quit"):
                break
            elif choice == "b":
                session.bet_one()
            elif choice == "m":
                session.bet_max()
            elif choice in ("d", ""):
                session.deal()
            elif choice.isdigit():
                for ch in choice:
                    session.toggle_hold(int(ch) - 1)
            else:
                console.print(f"[yellow]Unknown command: {choice}[/]")
        except (VideoPokerError, IndexError) as e:
            console.print(f"[red]{e}[/]")

    console.print()
    console.print(f"[bold]Rounds played:[/] {session.rounds_played}")
    console.print(f"[bold]Final credits:[/] {session.credits}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
