"""Exceptions raised by the video poker engine."""


class VideoPokerError(Exception):
    """Base class for all engine errors."""


class DeckExhausted(VideoPokerError):
    """Raised when a card is requested and no undealt cards remain."""

    def __init__(self, requested: int = 1, remaining: int = 0):
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Cannot deal {requested} card(s), only {remaining} remaining"
        )


class InvalidHandSize(VideoPokerError, ValueError):
    """Raised when a hand does not hold exactly five cards."""

    def __init__(self, size: int, expected: int = 5):
        self.size = size
        self.expected = expected
        super().__init__(f"Hand must have exactly {expected} cards, got {size}")


class DuplicateCardError(VideoPokerError):
    """
    Raised when a non-preset deck holds the same card twice.

    This is a programming error in deck construction, never a condition
    to recover from at runtime.
    """


class InvalidActionError(VideoPokerError, ValueError):
    """Raised when a session operation is not allowed in the current phase."""


class InsufficientCredits(VideoPokerError, ValueError):
    """Raised when a bet would exceed the available credits."""

    def __init__(self, bet: int, credits: int):
        self.bet = bet
        self.credits = credits
        super().__init__(f"Bet of {bet} exceeds available credits ({credits})")
