"""Visualization module."""

from .hand import HandDisplay, display_hand, paytable_rows, plot_frequencies

__all__ = [
    "HandDisplay",
    "display_hand",
    "paytable_rows",
    "plot_frequencies",
]
