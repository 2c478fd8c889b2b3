"""Pytest configuration and fixtures."""

import random

import pytest

from vpoker.game.cards import Deck
from vpoker.game.evaluator import HandEvaluator
from vpoker.game.session import GameConfig, GameSession


@pytest.fixture
def evaluator():
    return HandEvaluator()


@pytest.fixture
def seeded_deck():
    return Deck(rng=random.Random(42))


@pytest.fixture
def make_session():
    """Build a session whose deck starts with the given cards, unshuffled."""

    def _make_session(preset="", credits=100, **config):
        deck = Deck.with_preset(preset) if preset else None
        cfg = GameConfig(starting_credits=credits, **config)
        return GameSession(cfg, deck=deck)

    return _make_session
