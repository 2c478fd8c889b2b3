"""
Jacks or Better hand evaluation.

Classification works on a rank-sorted copy of the hand and decides the
category in strict precedence order, so a hand that satisfies several
predicates (four of a kind also contains three of a kind) always gets the
highest one. Ace is the lowest rank except in the ten-to-ace straight;
A-2-3-4-5 is not a straight in this ruleset.
"""

from enum import Enum
from typing import Sequence

from .cards import Card, Rank
from .errors import InvalidHandSize

HAND_SIZE = 5
MAX_BET = 5
ROYAL_FLUSH_MAX_BET_PAYOUT = 4000


class HandCategory(Enum):
    """Paying hands, highest first."""
    ROYAL_FLUSH = "royal_flush"
    STRAIGHT_FLUSH = "straight_flush"
    FOUR_OF_A_KIND = "four_of_a_kind"
    FULL_HOUSE = "full_house"
    FLUSH = "flush"
    STRAIGHT = "straight"
    THREE_OF_A_KIND = "three_of_a_kind"
    TWO_PAIR = "two_pair"
    JACKS_OR_BETTER = "jacks_or_better"
    NOTHING = "nothing"

    @property
    def label(self) -> str:
        """Display text; empty for NOTHING."""
        if self is HandCategory.NOTHING:
            return ""
        return self.name.replace("_", " ")

    @property
    def multiplier(self) -> int:
        return PAYOUT_MULTIPLIERS[self]


PAYOUT_MULTIPLIERS = {
    HandCategory.ROYAL_FLUSH: 250,
    HandCategory.STRAIGHT_FLUSH: 50,
    HandCategory.FOUR_OF_A_KIND: 25,
    HandCategory.FULL_HOUSE: 9,
    HandCategory.FLUSH: 6,
    HandCategory.STRAIGHT: 4,
    HandCategory.THREE_OF_A_KIND: 3,
    HandCategory.TWO_PAIR: 2,
    HandCategory.JACKS_OR_BETTER: 1,
    HandCategory.NOTHING: 0,
}

HIGH_PAIR_RANKS = frozenset({Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE})


def sort_by_rank(cards: Sequence[Card]) -> list[Card]:
    """Return a copy sorted by ascending rank, then suit."""
    return sorted(cards, key=lambda c: (c.rank, c.suit))


def is_flush(cards: Sequence[Card]) -> bool:
    """Check if all cards share one suit."""
    return all(c.suit == cards[0].suit for c in cards)


def _is_ace_high_pattern(cards: Sequence[Card]) -> bool:
    return cards[0].rank == Rank.ACE and cards[1].rank == Rank.TEN


def is_straight(cards: Sequence[Card]) -> bool:
    """
    Check a rank-sorted hand for five consecutive ranks.

    When the two lowest cards are ACE and TEN the ace plays above the king,
    so the ace-to-ten step is skipped and TEN..KING must ascend. Any other
    hand holding an ace is not a straight (no A-2-3-4-5).
    """
    if cards[0].rank == Rank.ACE and not _is_ace_high_pattern(cards):
        return False
    start = 1 if _is_ace_high_pattern(cards) else 0
    for i in range(start, len(cards) - 1):
        if cards[i + 1].rank != cards[i].rank + 1:
            return False
    return True


def longest_run(cards: Sequence[Card]) -> int:
    """Length of the longest run of equal ranks in a rank-sorted hand."""
    best = count = 0
    current = None
    for card in cards:
        if card.rank == current:
            count += 1
        else:
            current = card.rank
            count = 1
        best = max(best, count)
    return best


def has_pair(cards: Sequence[Card]) -> bool:
    return any(a.rank == b.rank for a, b in zip(cards, cards[1:]))


def is_full_house(cards: Sequence[Card]) -> bool:
    """
    Check a rank-sorted five-card hand for three of a kind plus a pair.

    Sorting leaves only two shapes, AAABB and AABBB, so splitting at the
    first rank change after index 1 separates the groups.
    """
    split = 2 if cards[1].rank != cards[2].rank else 3
    first, second = cards[:split], cards[split:]
    triple, pair = (second, first) if split == 2 else (first, second)
    return longest_run(triple) >= 3 and has_pair(pair)


def is_two_pair(cards: Sequence[Card]) -> bool:
    """Find an adjacent pair, then a second pair of another rank after it."""
    for i in range(len(cards) - 1):
        if cards[i].rank == cards[i + 1].rank:
            first_rank = cards[i].rank
            rest = cards[i + 2:]
            return any(
                a.rank == b.rank and a.rank != first_rank
                for a, b in zip(rest, rest[1:])
            )
    return False


def is_jacks_or_better(cards: Sequence[Card]) -> bool:
    """Check for a pair of jacks, queens, kings or aces."""
    return any(
        a.rank == b.rank and a.rank in HIGH_PAIR_RANKS
        for a, b in zip(cards, cards[1:])
    )


class HandEvaluator:
    """Classifies five-card hands and prices them against the paytable."""

    def classify(self, hand: Sequence[Card]) -> HandCategory:
        """
        Classify a five-card hand.

        Args:
            hand: Five cards in any order; duplicates are tolerated

        Returns:
            The highest-precedence matching category, NOTHING if none match
        """
        if len(hand) != HAND_SIZE:
            raise InvalidHandSize(len(hand), HAND_SIZE)

        cards = sort_by_rank(hand)
        flush = is_flush(cards)
        straight = is_straight(cards)

        if flush and straight:
            if _is_ace_high_pattern(cards):
                return HandCategory.ROYAL_FLUSH
            return HandCategory.STRAIGHT_FLUSH
        run = longest_run(cards)
        if run >= 4:
            return HandCategory.FOUR_OF_A_KIND
        if is_full_house(cards):
            return HandCategory.FULL_HOUSE
        if flush:
            return HandCategory.FLUSH
        if straight:
            return HandCategory.STRAIGHT
        if run >= 3:
            return HandCategory.THREE_OF_A_KIND
        if is_two_pair(cards):
            return HandCategory.TWO_PAIR
        if is_jacks_or_better(cards):
            return HandCategory.JACKS_OR_BETTER
        return HandCategory.NOTHING

    @staticmethod
    def payout(category: HandCategory, bet: int) -> int:
        """
        Credits won for a category at the given bet.

        A royal flush at the maximum bet pays the flat bonus instead of
        the multiplier.
        """
        if bet < 0:
            raise ValueError(f"Bet must be non-negative, got {bet}")
        if category is HandCategory.ROYAL_FLUSH and bet == MAX_BET:
            return ROYAL_FLUSH_MAX_BET_PAYOUT
        return PAYOUT_MULTIPLIERS[category] * bet


_default_evaluator = HandEvaluator()


def classify_hand(hand: Sequence[Card]) -> HandCategory:
    """Convenience function to classify a five-card hand."""
    return _default_evaluator.classify(hand)


def payout(category: HandCategory, bet: int) -> int:
    """Convenience function for the paytable lookup."""
    return HandEvaluator.payout(category, bet)
