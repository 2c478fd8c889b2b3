"""Paytable return analysis module."""

from .returns import (
    DealStats,
    EXACT_COUNTS,
    simulate_deals,
    expected_deal_return,
    exact_deal_return,
)

__all__ = [
    "DealStats",
    "EXACT_COUNTS",
    "simulate_deals",
    "expected_deal_return",
    "exact_deal_return",
]
