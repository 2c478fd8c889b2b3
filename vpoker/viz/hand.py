"""Terminal display of hands, the paytable and session status."""

from typing import Optional, Sequence

import numpy as np

try:
    import matplotlib.pyplot as plt
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from vpoker.game.cards import Card, Suit
from vpoker.game.evaluator import HandCategory, HandEvaluator, MAX_BET
from vpoker.game.session import GamePhase, GameSession


RED_SUITS = {Suit.DIAMOND, Suit.HEART}

# Paying categories in paytable order (NOTHING is not listed)
PAYTABLE_ROWS = [c for c in HandCategory if c is not HandCategory.NOTHING]


def card_text(card: Optional[Card]) -> Text:
    """Colored short form of a card, or a card back when face down."""
    if card is None:
        return Text("##", style="bold white on blue")
    color = "red" if card.suit in RED_SUITS else "white"
    return Text(card.symbol, style=f"bold {color}")


def paytable_rows() -> list[list[str]]:
    """Paytable as strings: one row per paying category, one column per bet."""
    rows = []
    for category in PAYTABLE_ROWS:
        row = [category.label]
        for b in range(1, MAX_BET + 1):
            row.append(str(HandEvaluator.payout(category, b)))
        rows.append(row)
    return rows


class HandDisplay:
    """
    Render a video poker machine with rich.

    Draws the paytable with the current bet's column highlighted, the
    five cards with their HELD markers, and a credits/bet status line.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def paytable(
        self,
        bet: int = 0,
        category: Optional[HandCategory] = None,
    ) -> Table:
        """Build the paytable; the current bet and winning row are highlighted."""
        table = Table(box=box.SIMPLE_HEAVY, header_style="bold")
        table.add_column("Hand", style="bold yellow")
        for b in range(1, MAX_BET + 1):
            style = "bold white on red" if b == bet else "cyan"
            table.add_column(f"BET {b}", justify="right", style=style)

        for cat, row in zip(PAYTABLE_ROWS, paytable_rows()):
            row_style = "reverse" if cat is category else None
            table.add_row(*row, style=row_style)
        return table

    def hand(
        self,
        cards: Sequence[Optional[Card]],
        held: Optional[Sequence[bool]] = None,
    ) -> Table:
        """Build the row of cards; None renders face down."""
        held = held or [False] * len(cards)
        table = Table.grid(padding=(0, 2))
        for _ in cards:
            table.add_column(justify="center")

        table.add_row(*[
            Panel(card_text(c), width=7, box=box.ROUNDED) for c in cards
        ])
        table.add_row(*[
            Text("HELD", style="bold green") if h else Text("")
            for h in held
        ])
        table.add_row(*[Text(str(i + 1), style="dim") for i in range(len(cards))])
        return table

    def status(self, session: GameSession) -> Text:
        """Credits, bet and the current hand's category."""
        text = Text()
        text.append(f"Credits: {session.credits}", style="bold")
        text.append("   ")
        text.append(f"BET {session.bet}", style="bold cyan")
        category = session.category
        if category is not None and category.label:
            text.append("   ")
            text.append(category.label, style="bold magenta")
        result = session.last_result
        if session.phase is GamePhase.READY and result is not None and result.won:
            text.append("   ")
            text.append(f"WIN {result.payout}", style="bold green")
        return text

    def render(self, session: GameSession) -> Group:
        """Everything the player sees, as one renderable."""
        cards = session.hand or [None] * 5
        showing = session.category if session.phase is GamePhase.READY else None
        return Group(
            self.paytable(session.bet, showing),
            self.hand(cards, session.held),
            self.status(session),
        )

    def display(self, session: GameSession) -> None:
        self.console.print(self.render(session))


def display_hand(cards: Sequence[Card], console: Optional[Console] = None) -> None:
    """Convenience function to print a row of cards."""
    display = HandDisplay(console)
    display.console.print(display.hand(cards))


def plot_frequencies(
    frequencies: np.ndarray,
    title: str = "Dealt hand frequencies",
    save_path: Optional[str] = None,
) -> bool:
    """
    Plot category frequencies as a bar chart using matplotlib.

    Args:
        frequencies: One value per HandCategory, in enum order
        title: Plot title
        save_path: Optional path to save figure

    Returns:
        False if matplotlib is not installed and nothing was plotted
    """
    if not HAS_MATPLOTLIB:
        Console().print("[red]matplotlib not available. Use terminal display.[/]")
        return False

    labels = [c.label or "NOTHING" for c in HandCategory]
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.barh(np.arange(len(labels)), frequencies, color="steelblue")
    ax.set_yticks(np.arange(len(labels)))
    ax.set_yticklabels(labels)
    ax.set_xscale("log")
    ax.invert_yaxis()
    ax.set_xlabel("Frequency")
    ax.set_title(title)

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches="tight")
        plt.close(fig)
    else:
        plt.show()
    return True
