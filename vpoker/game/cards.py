"""Card and deck representation utilities."""

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Protocol, Union

from treys import Card as TreysCard

from .errors import DeckExhausted, DuplicateCardError

logger = logging.getLogger(__name__)


class Rank(IntEnum):
    """Card ranks (1-13 where Ace is lowest)."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


class Suit(IntEnum):
    """Card suits, in tie-break order."""
    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3


# Mapping for string conversion
RANK_STR = {
    1: "A", 2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "c", 1: "d", 2: "h", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

SUIT_SYMBOLS = {0: "♣", 1: "♦", 2: "♥", 3: "♠"}

DECK_SIZE = 52


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: Rank
    suit: Suit

    def __post_init__(self):
        # Accept plain ints but always store the enum members
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "suit", Suit(self.suit))

    def __str__(self) -> str:
        return f"{self.rank.name} of {self.suit.name}S"

    def __repr__(self) -> str:
        return f"Card({self.code})"

    @property
    def code(self) -> str:
        """Two-character short form, e.g. 'As', 'Th', '2c'."""
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    @property
    def symbol(self) -> str:
        """Short form with a suit glyph, e.g. 'A♠'."""
        return f"{RANK_STR[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Th', '2c'."""
        if len(s) != 2:
            raise ValueError(f"Invalid card string: {s}")
        rank_char = s[0].upper()
        suit_char = s[1].lower()

        if rank_char not in STR_RANK:
            raise ValueError(f"Invalid rank: {rank_char}")
        if suit_char not in STR_SUIT:
            raise ValueError(f"Invalid suit: {suit_char}")

        return cls(rank=STR_RANK[rank_char], suit=STR_SUIT[suit_char])

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(self.code)


CardLike = Union[Card, str, tuple]


def to_card(value: CardLike) -> Card:
    """Coerce a Card, short code or (rank, suit) pair to a Card."""
    if isinstance(value, Card):
        return value
    if isinstance(value, str):
        return Card.from_string(value)
    rank, suit = value
    return Card(rank, suit)


def parse_cards(cards: Union[str, Iterable[CardLike]]) -> list[Card]:
    """
    Parse several cards at once.

    Accepts a whitespace/comma separated string ('As Kd 7h'), a
    concatenated string ('AsKd7h') or any iterable of card-likes.
    """
    if isinstance(cards, str):
        text = cards.replace(",", " ")
        tokens = text.split()
        if len(tokens) == 1 and len(tokens[0]) > 2:
            packed = tokens[0]
            if len(packed) % 2:
                raise ValueError(f"Invalid card string: {cards}")
            tokens = [packed[i:i + 2] for i in range(0, len(packed), 2)]
        return [Card.from_string(t) for t in tokens]
    return [to_card(c) for c in cards]


def canonical_cards() -> list[Card]:
    """All 52 cards, grouped by suit then ascending rank."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Deck:
    """
    A standard 52-card deck with a deal cursor.

    Cards before the cursor have been dealt and are not dealt again until
    the next reset_and_shuffle(). A deck built with a preset replaces the
    first positions with explicit cards and never shuffles; such a deck may
    contain duplicates and is meant for testing and debugging only.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        preset: Optional[Iterable[CardLike]] = None,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.cards: list[Card] = canonical_cards()
        self.cursor = 0
        self.is_preset = preset is not None

        if self.is_preset:
            for i, value in enumerate(preset):
                if i >= DECK_SIZE:
                    raise ValueError(f"Preset has more than {DECK_SIZE} cards")
                self.cards[i] = to_card(value)
                logger.debug("Replacing card %d with %s", i, self.cards[i])

        self.reset_and_shuffle()

    @classmethod
    def with_preset(
        cls,
        cards: Union[str, Iterable[CardLike]],
        rng: Optional[RandomSource] = None,
    ) -> "Deck":
        """Build an unshuffled deck whose first cards are given explicitly."""
        return cls(rng=rng, preset=parse_cards(cards))

    def reset_and_shuffle(self) -> None:
        """Return all cards to the deck and shuffle them (Fisher-Yates)."""
        self.cursor = 0
        if self.is_preset:
            logger.debug("Preset deck: cursor reset, shuffle skipped")
            return

        self._check_unique()
        cards = self.cards
        # j ranges over [0, i] inclusive; excluding i would give Sattolo's cycle
        for i in range(len(cards) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            cards[i], cards[j] = cards[j], cards[i]
        logger.debug("Deck shuffled")

    def deal_one(self) -> Card:
        """Deal the next card."""
        if self.cursor >= len(self.cards):
            raise DeckExhausted(1, 0)
        card = self.cards[self.cursor]
        self.cursor += 1
        return card

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the deck."""
        if n > self.remaining:
            raise DeckExhausted(n, self.remaining)
        return [self.deal_one() for _ in range(n)]

    @property
    def remaining(self) -> int:
        return len(self.cards) - self.cursor

    @property
    def dealt(self) -> list[Card]:
        return self.cards[:self.cursor]

    def _check_unique(self) -> None:
        if len(set(self.cards)) != len(self.cards):
            raise DuplicateCardError("Deck contains duplicate cards")

    def __len__(self) -> int:
        return self.remaining
