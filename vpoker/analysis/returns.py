"""
Monte Carlo analysis of dealt hands.

Deals fresh five-card hands without drawing and tallies how often each
category appears, giving the paytable's return for a player who always
stands pat. Useful as a sanity check of the deck and the evaluator against
the known combinatorial frequencies (e.g. 4 royal flushes in 2,598,960).
"""

import random
from dataclasses import dataclass
from typing import Optional

import numpy as np

from vpoker.game.cards import Deck
from vpoker.game.evaluator import HAND_SIZE, HandCategory, HandEvaluator


CATEGORIES = list(HandCategory)
CATEGORY_INDEX = {c: i for i, c in enumerate(CATEGORIES)}

# Exact five-card frequencies under these rules (A-2-3-4-5 is not a straight)
EXACT_COUNTS = {
    HandCategory.ROYAL_FLUSH: 4,
    HandCategory.STRAIGHT_FLUSH: 32,
    HandCategory.FOUR_OF_A_KIND: 624,
    HandCategory.FULL_HOUSE: 3744,
    HandCategory.FLUSH: 5112,
    HandCategory.STRAIGHT: 9180,
    HandCategory.THREE_OF_A_KIND: 54912,
    HandCategory.TWO_PAIR: 123552,
    HandCategory.JACKS_OR_BETTER: 337920,
}
TOTAL_HANDS = 2598960
EXACT_COUNTS[HandCategory.NOTHING] = TOTAL_HANDS - sum(EXACT_COUNTS.values())


@dataclass
class DealStats:
    """Results of a deal-only simulation."""
    num_hands: int
    bet: int
    counts: np.ndarray      # One count per HandCategory, enum order
    payouts: np.ndarray     # Credits won per hand

    @property
    def frequencies(self) -> np.ndarray:
        return self.counts / max(self.num_hands, 1)

    @property
    def mean_payout(self) -> float:
        return float(self.payouts.mean()) if self.num_hands else 0.0

    @property
    def standard_error(self) -> float:
        """Standard error of the return per credit wagered."""
        if self.num_hands < 2:
            return 0.0
        per_credit = self.payouts / self.bet
        return float(per_credit.std(ddof=1) / np.sqrt(self.num_hands))

    def count(self, category: HandCategory) -> int:
        return int(self.counts[CATEGORY_INDEX[category]])

    def frequency(self, category: HandCategory) -> float:
        return float(self.frequencies[CATEGORY_INDEX[category]])


def simulate_deals(
    num_hands: int,
    seed: Optional[int] = None,
    bet: int = 1,
) -> DealStats:
    """
    Deal and classify fresh hands.

    Args:
        num_hands: Number of hands to deal
        seed: Seed for the deck's random source
        bet: Bet used to price each hand

    Returns:
        DealStats with per-category counts and per-hand payouts
    """
    if num_hands < 0:
        raise ValueError("num_hands must be non-negative")
    if bet < 1:
        raise ValueError("bet must be at least 1")

    deck = Deck(rng=random.Random(seed))
    evaluator = HandEvaluator()
    counts = np.zeros(len(CATEGORIES), dtype=np.int64)
    payouts = np.zeros(num_hands, dtype=np.float64)

    # Ten disjoint hands per shuffle
    hands_per_shuffle = len(deck.cards) // HAND_SIZE
    for n in range(num_hands):
        if n % hands_per_shuffle == 0:
            deck.reset_and_shuffle()
        category = evaluator.classify(deck.deal(HAND_SIZE))
        counts[CATEGORY_INDEX[category]] += 1
        payouts[n] = evaluator.payout(category, bet)

    return DealStats(num_hands=num_hands, bet=bet, counts=counts, payouts=payouts)


def expected_deal_return(stats: DealStats) -> float:
    """Simulated return per credit wagered."""
    return stats.mean_payout / stats.bet


def exact_deal_return(bet: int = 1) -> float:
    """Exact return per credit for standing pat on every dealt hand."""
    total = sum(
        HandEvaluator.payout(category, bet) * count
        for category, count in EXACT_COUNTS.items()
    )
    return total / TOTAL_HANDS / bet
