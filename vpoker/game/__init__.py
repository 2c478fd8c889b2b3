"""Game representation module."""

from .cards import Card, Deck, Rank, Suit, parse_cards
from .errors import (
    VideoPokerError,
    DeckExhausted,
    InvalidHandSize,
    DuplicateCardError,
    InvalidActionError,
    InsufficientCredits,
)
from .evaluator import (
    HandCategory,
    HandEvaluator,
    PAYOUT_MULTIPLIERS,
    MAX_BET,
    HAND_SIZE,
    classify_hand,
    payout,
)
from .events import EventBus, EventType, GameEvent
from .session import GameConfig, GamePhase, GameSession, RoundResult

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "parse_cards",
    "VideoPokerError",
    "DeckExhausted",
    "InvalidHandSize",
    "DuplicateCardError",
    "InvalidActionError",
    "InsufficientCredits",
    "HandCategory",
    "HandEvaluator",
    "PAYOUT_MULTIPLIERS",
    "MAX_BET",
    "HAND_SIZE",
    "classify_hand",
    "payout",
    "EventBus",
    "EventType",
    "GameEvent",
    "GameConfig",
    "GamePhase",
    "GameSession",
    "RoundResult",
]
