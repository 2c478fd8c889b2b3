"""
Single-hand video poker game session.

A session owns the deck, the player's hand and hold flags, the credit
balance and the current bet, and sequences a round:

    bet -> deal -> hold -> draw -> payout

Every state change is published on the session's EventBus after the
session's own state is updated, so observers always see consistent state.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .cards import Card, Deck
from .errors import DuplicateCardError, InsufficientCredits, InvalidActionError
from .evaluator import HAND_SIZE, MAX_BET, HandCategory, HandEvaluator
from .events import EventBus, EventType

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Configuration for a game session."""
    starting_credits: int = 100
    max_bet: int = MAX_BET
    seed: Optional[int] = None     # Seed for the deck's random source


class GamePhase(Enum):
    READY = "ready"        # Betting allowed, waiting for a deal
    HOLDING = "holding"    # First deal shown, holds may be toggled


@dataclass
class RoundResult:
    """Outcome of a completed round."""
    hand: list[Card]
    held: list[bool]
    category: HandCategory
    bet: int
    payout: int
    credits: int

    @property
    def won(self) -> bool:
        return self.payout > 0


@dataclass
class _RoundState:
    hand: list[Card] = field(default_factory=list)
    held: list[bool] = field(default_factory=lambda: [False] * HAND_SIZE)
    category: Optional[HandCategory] = None


class GameSession:
    """
    One player's video poker machine.

    Example:
        session = GameSession(GameConfig(seed=7))
        session.bet_max()            # deals immediately at max bet
        session.toggle_hold(0)
        result = session.draw()
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        deck: Optional[Deck] = None,
        events: Optional[EventBus] = None,
    ):
        self.config = config or GameConfig()
        if not 1 <= self.config.max_bet <= MAX_BET:
            raise ValueError(f"max_bet must be between 1 and {MAX_BET}")

        self.deck = deck if deck is not None else Deck(rng=random.Random(self.config.seed))
        self.events = events if events is not None else EventBus()
        self.evaluator = HandEvaluator()

        self.phase = GamePhase.READY
        self._credits = self.config.starting_credits
        self._bet = 0
        self._round = _RoundState()
        self._restart_bet = False
        self.last_result: Optional[RoundResult] = None
        self.rounds_played = 0

    # --- state -----------------------------------------------------------

    @property
    def credits(self) -> int:
        return self._credits

    @property
    def bet(self) -> int:
        return self._bet

    @property
    def hand(self) -> list[Card]:
        return list(self._round.hand)

    @property
    def held(self) -> list[bool]:
        return list(self._round.held)

    @property
    def category(self) -> Optional[HandCategory]:
        return self._round.category

    def is_held(self, index: int) -> bool:
        return self._round.held[index]

    def _set_credits(self, value: int) -> None:
        old = self._credits
        self._credits = value
        self.events.emit(EventType.CREDITS_CHANGED, old=old, new=value)

    def _set_bet(self, value: int) -> None:
        if value > self._credits:
            raise InsufficientCredits(value, self._credits)
        old = self._bet
        self._bet = value
        self.events.emit(EventType.BET_CHANGED, old=old, new=value)

    def _require(self, phase: GamePhase, action: str) -> None:
        if self.phase is not phase:
            raise InvalidActionError(
                f"Cannot {action} while {self.phase.value}"
            )

    # --- betting ---------------------------------------------------------

    def bet_one(self) -> int:
        """
        Raise the bet by one credit.

        The first bet after a finished round starts again from one.
        Reaching the maximum bet deals the round immediately.
        """
        self._require(GamePhase.READY, "change the bet")
        if self._restart_bet:
            self._set_bet(1)
            self._restart_bet = False
            return self._bet

        if self._bet < self.config.max_bet:
            self._set_bet(self._bet + 1)
        if self._bet >= self.config.max_bet:
            self.start_round()
        return self._bet

    def bet_max(self) -> int:
        """Bet the maximum and deal."""
        self._require(GamePhase.READY, "change the bet")
        self._restart_bet = False
        self._set_bet(self.config.max_bet)
        self.start_round()
        return self._bet

    def deal(self) -> Optional[RoundResult]:
        """
        The deal/draw button.

        Starts a round when ready (a bet must be placed), otherwise draws
        replacement cards and returns the round result.
        """
        if self.phase is GamePhase.HOLDING:
            return self.draw()
        if self._bet <= 0:
            raise InvalidActionError("Place a bet before dealing")
        self.start_round()
        return None

    # --- round -----------------------------------------------------------

    def start_round(self) -> list[Card]:
        """Take the bet, shuffle and deal a fresh hand."""
        self._require(GamePhase.READY, "start a round")
        bet = self._bet
        if bet <= 0:
            raise InvalidActionError("Place a bet before dealing")
        if bet > self._credits:
            raise InsufficientCredits(bet, self._credits)

        self._restart_bet = False
        self.deck.reset_and_shuffle()
        self._round = _RoundState(hand=self.deck.deal(HAND_SIZE))
        self._check_hand()
        self._round.category = self.evaluator.classify(self._round.hand)
        self.phase = GamePhase.HOLDING

        logger.info(
            "Round started: bet %d, dealt %s (%s)",
            bet, " ".join(c.code for c in self._round.hand),
            self._round.category.name,
        )
        self._set_credits(self._credits - bet)
        self.events.emit(EventType.ROUND_STARTED, bet=bet)
        self.events.emit(
            EventType.CARDS_DEALT,
            cards=self.hand,
            positions=list(range(HAND_SIZE)),
            category=self._round.category,
        )
        return self.hand

    def toggle_hold(self, index: int) -> bool:
        """Flip the hold flag of a card; returns the new flag."""
        self._require(GamePhase.HOLDING, "hold cards")
        if not 0 <= index < HAND_SIZE:
            raise IndexError(f"Card index must be 0-{HAND_SIZE - 1}, got {index}")
        held = not self._round.held[index]
        self._round.held[index] = held
        self.events.emit(EventType.CARD_HELD, index=index, held=held)
        return held

    def draw(self) -> RoundResult:
        """Replace unheld cards, score the hand and pay out."""
        self._require(GamePhase.HOLDING, "draw")
        positions = [i for i, h in enumerate(self._round.held) if not h]
        for i in positions:
            self._round.hand[i] = self.deck.deal_one()
        self._check_hand()
        category = self.evaluator.classify(self._round.hand)
        self._round.category = category

        won = self.evaluator.payout(category, self._bet)
        self.phase = GamePhase.READY
        self._restart_bet = True
        self.rounds_played += 1

        result = RoundResult(
            hand=self.hand,
            held=self.held,
            category=category,
            bet=self._bet,
            payout=won,
            credits=self._credits + won,
        )
        self.last_result = result
        logger.info(
            "Round ended: %s (%s), paid %d",
            " ".join(c.code for c in result.hand), category.name, won,
        )

        self.events.emit(
            EventType.CARDS_DEALT,
            cards=self.hand,
            positions=positions,
            category=category,
        )
        if won:
            self._set_credits(self._credits + won)
        self.events.emit(EventType.ROUND_ENDED, category=category, payout=won)
        return result

    def _check_hand(self) -> None:
        if self.deck.is_preset:
            return
        if len(set(self._round.hand)) != len(self._round.hand):
            raise DuplicateCardError(
                f"Duplicate card dealt: {[c.code for c in self._round.hand]}"
            )
