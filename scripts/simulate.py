#!/usr/bin/env python3
"""Estimate dealt-hand frequencies and the stand-pat return."""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from vpoker.analysis import (
    EXACT_COUNTS,
    simulate_deals,
    expected_deal_return,
    exact_deal_return,
)
from vpoker.analysis.returns import TOTAL_HANDS, CATEGORIES
from vpoker.viz import plot_frequencies


def main():
    parser = argparse.ArgumentParser(
        description="Simulate dealt hands and compare to exact frequencies"
    )
    parser.add_argument(
        "-n", "--hands",
        type=int,
        default=100_000,
        help="Number of hands to deal (default: 100000)",
    )
    parser.add_argument(
        "-b", "--bet",
        type=int,
        default=1,
        help="Bet per hand (default: 1)",
    )
    parser.add_argument(
        "-s", "--seed",
        type=int,
        help="Random seed",
    )
    parser.add_argument(
        "--plot",
        help="Save a frequency bar chart to this path",
    )

    args = parser.parse_args()
    console = Console()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        progress.add_task(f"Dealing {args.hands:,} hands...")
        stats = simulate_deals(args.hands, seed=args.seed, bet=args.bet)

    table = Table(title="Dealt hand frequencies", show_header=True, header_style="bold")
    table.add_column("Hand")
    table.add_column("Count", justify="right")
    table.add_column("Simulated", justify="right")
    table.add_column("Exact", justify="right")

    for category in CATEGORIES:
        exact = EXACT_COUNTS[category] / TOTAL_HANDS
        table.add_row(
            category.label or "NOTHING",
            f"{stats.count(category):,}",
            f"{stats.frequency(category) * 100:.4f}%",
            f"{exact * 100:.4f}%",
        )

    console.print(table)
    console.print()
    console.print(
        f"[bold]Stand-pat return:[/] {expected_deal_return(stats) * 100:.2f}% "
        f"(± {stats.standard_error * 100:.2f}%)"
    )
    console.print(f"[bold]Exact stand-pat return:[/] {exact_deal_return(args.bet) * 100:.2f}%")

    if args.plot:
        if plot_frequencies(stats.frequencies, save_path=args.plot):
            console.print(f"\n[bold]Plot saved to:[/] {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
