"""Tests for hand classification and payouts."""

import itertools
import random

import pytest
from treys import Evaluator as TreysEvaluator

from vpoker.game.cards import Rank, canonical_cards, parse_cards
from vpoker.game.errors import InvalidHandSize
from vpoker.game.evaluator import (
    HandCategory, HandEvaluator, PAYOUT_MULTIPLIERS,
    classify_hand, payout, sort_by_rank, is_straight, is_two_pair,
)


def classify(s):
    return classify_hand(parse_cards(s))


class TestCategories:
    @pytest.mark.parametrize("cards,expected", [
        ("Ts Js Qs Ks As", HandCategory.ROYAL_FLUSH),
        ("9h Th Jh Qh Kh", HandCategory.STRAIGHT_FLUSH),
        ("2d 3d 4d 5d 6d", HandCategory.STRAIGHT_FLUSH),
        ("7c 7d 7h 7s 2c", HandCategory.FOUR_OF_A_KIND),
        ("Ac Ad Ah As Kc", HandCategory.FOUR_OF_A_KIND),
        ("7c 7d 7h 2s 2c", HandCategory.FULL_HOUSE),
        ("2c 2d 7h 7s 7c", HandCategory.FULL_HOUSE),
        ("Ac Ad Kh Ks Kc", HandCategory.FULL_HOUSE),
        ("2h 9h Jh 4h Kh", HandCategory.FLUSH),
        ("As 2s 3s 4s 5s", HandCategory.FLUSH),
        ("5c 6d 7h 8s 9c", HandCategory.STRAIGHT),
        ("Tc Jd Qh Ks Ac", HandCategory.STRAIGHT),
        ("Ac 2d 3h 4s 5c", HandCategory.NOTHING),
        ("7c 7d 7h 2s 9c", HandCategory.THREE_OF_A_KIND),
        ("7c 7d 2h 2s 9c", HandCategory.TWO_PAIR),
        ("Jc Jd 3h 5s 9c", HandCategory.JACKS_OR_BETTER),
        ("Qc 3d Qh 5s 9c", HandCategory.JACKS_OR_BETTER),
        ("Kc 3d 4h Ks 9c", HandCategory.JACKS_OR_BETTER),
        ("Ac Ad 3h 5s 9c", HandCategory.JACKS_OR_BETTER),
        ("9c 9d 3h 5s 2c", HandCategory.NOTHING),
        ("Tc Td 3h 5s 2c", HandCategory.NOTHING),
        ("2c 5d 8h Js Kc", HandCategory.NOTHING),
    ])
    def test_classify(self, cards, expected):
        assert classify(cards) is expected

    def test_royal_flush_every_suit(self):
        for suit in "cdhs":
            cards = " ".join(f"{r}{suit}" for r in "TJQKA")
            assert classify(cards) is HandCategory.ROYAL_FLUSH

    def test_no_wraparound_straight(self):
        assert classify("Qc Kd Ah 2s 3c") is HandCategory.NOTHING
        assert classify("Jc Qd Kh As 2c") is HandCategory.NOTHING

    def test_ace_ten_without_face_cards(self):
        # ACE,TEN lowest but the rest do not run
        assert classify("Ac Td Jh Qs 9c") is HandCategory.NOTHING


class TestTwoPair:
    @pytest.mark.parametrize("cards", [
        "2c 2d 5h 5s 9c",   # pairs at 0 and 2
        "2c 5d 5h 9s 9c",   # pairs at 1 and 3
        "2c 2d 5h 9s 9c",   # pairs at 0 and 3
        "Ac Ad Kh Ks 9c",   # ace pair counts as two pair, not jacks or better
    ])
    def test_pair_positions(self, cards):
        assert classify(cards) is HandCategory.TWO_PAIR

    def test_second_pair_immediately_after_first(self):
        cards = sort_by_rank(parse_cards("3c 3d 4h 4s Kc"))
        assert is_two_pair(cards)

    def test_same_rank_is_not_two_pair(self):
        # Four of a kind rank-sorted looks like two adjacent pairs
        cards = sort_by_rank(parse_cards("3c 3d 3h 3s Kc"))
        assert not is_two_pair(cards)


class TestProperties:
    HANDS = [
        "Ts Js Qs Ks As",
        "7c 7d 7h 2s 2c",
        "7c 7d 2h 2s 9c",
        "Ac Ad 3h 5s 9c",
        "5c 6d 7h 8s 9c",
        "2h 9h Jh 4h Kh",
    ]

    @pytest.mark.parametrize("cards", HANDS)
    def test_order_independent(self, evaluator, cards):
        parsed = parse_cards(cards)
        expected = evaluator.classify(parsed)
        for perm in itertools.permutations(parsed):
            assert evaluator.classify(list(perm)) is expected

    def test_idempotent(self, evaluator):
        cards = parse_cards("7c 7d 2h 2s 9c")
        assert evaluator.classify(cards) is evaluator.classify(cards)

    def test_does_not_mutate_input(self, evaluator):
        cards = parse_cards("Ks 2d Ah 9c 5s")
        before = list(cards)
        evaluator.classify(cards)
        assert cards == before

    def test_accepts_tuple(self, evaluator):
        cards = tuple(parse_cards("Jc Jd 3h 5s 9c"))
        assert evaluator.classify(cards) is HandCategory.JACKS_OR_BETTER

    def test_duplicates_tolerated(self):
        assert classify("As As Ks Qs Js") is HandCategory.FLUSH
        assert classify("7c 7c 7c 7c 7c") is HandCategory.FOUR_OF_A_KIND

    @pytest.mark.parametrize("cards", ["", "As Ks Qs Js", "As Ks Qs Js Ts 9s"])
    def test_invalid_hand_size(self, cards):
        with pytest.raises(InvalidHandSize):
            classify_hand(parse_cards(cards))

    def test_invalid_hand_size_is_value_error(self):
        with pytest.raises(ValueError):
            classify_hand([])


class TestSortAndStraight:
    def test_sort_by_rank_then_suit(self):
        cards = sort_by_rank(parse_cards("Ks 2d Ah 2c As"))
        assert [c.code for c in cards] == ["Ah", "As", "2c", "2d", "Ks"]

    def test_straight_requires_sorted_input(self):
        assert is_straight(sort_by_rank(parse_cards("9c 5d 7h 8s 6c")))

    def test_broadway_straight(self):
        assert is_straight(sort_by_rank(parse_cards("Kc Ad Qh Js Tc")))

    def test_ace_low_run_is_not_straight(self):
        # Rank-sorted A-2-3-4-5 steps by one at every position
        assert not is_straight(sort_by_rank(parse_cards("5c 3d Ah 4s 2c")))
        assert not is_straight(sort_by_rank(parse_cards("As 2s 3s 4s 5s")))

    def test_ace_low_flush_pays_as_flush(self):
        assert classify("5s 4s 3s 2s As") is HandCategory.FLUSH
        assert payout(classify("5s 4s 3s 2s As"), 5) == 30


class TestPayout:
    def test_royal_flush_max_bet_bonus(self):
        assert payout(HandCategory.ROYAL_FLUSH, 5) == 4000

    def test_royal_flush_below_max_bet(self):
        assert payout(HandCategory.ROYAL_FLUSH, 3) == 750
        assert payout(HandCategory.ROYAL_FLUSH, 4) == 1000

    @pytest.mark.parametrize("category,multiplier", [
        (HandCategory.ROYAL_FLUSH, 250),
        (HandCategory.STRAIGHT_FLUSH, 50),
        (HandCategory.FOUR_OF_A_KIND, 25),
        (HandCategory.FULL_HOUSE, 9),
        (HandCategory.FLUSH, 6),
        (HandCategory.STRAIGHT, 4),
        (HandCategory.THREE_OF_A_KIND, 3),
        (HandCategory.TWO_PAIR, 2),
        (HandCategory.JACKS_OR_BETTER, 1),
        (HandCategory.NOTHING, 0),
    ])
    def test_multipliers(self, category, multiplier):
        assert PAYOUT_MULTIPLIERS[category] == multiplier
        assert category.multiplier == multiplier
        assert payout(category, 1) == multiplier
        assert payout(category, 2) == multiplier * 2

    def test_max_bet_other_categories(self):
        assert payout(HandCategory.STRAIGHT_FLUSH, 5) == 250
        assert payout(HandCategory.NOTHING, 5) == 0

    def test_zero_bet(self):
        assert payout(HandCategory.FULL_HOUSE, 0) == 0

    def test_negative_bet(self):
        with pytest.raises(ValueError):
            HandEvaluator.payout(HandCategory.FLUSH, -1)

    def test_precedence_order(self):
        multipliers = [PAYOUT_MULTIPLIERS[c] for c in HandCategory]
        assert multipliers == sorted(multipliers, reverse=True)

    def test_labels(self):
        assert HandCategory.ROYAL_FLUSH.label == "ROYAL FLUSH"
        assert HandCategory.JACKS_OR_BETTER.label == "JACKS OR BETTER"
        assert HandCategory.NOTHING.label == ""


TREYS_TO_CATEGORY = {
    "Four of a Kind": HandCategory.FOUR_OF_A_KIND,
    "Full House": HandCategory.FULL_HOUSE,
    "Flush": HandCategory.FLUSH,
    "Straight": HandCategory.STRAIGHT,
    "Three of a Kind": HandCategory.THREE_OF_A_KIND,
    "Two Pair": HandCategory.TWO_PAIR,
    "High Card": HandCategory.NOTHING,
}

WHEEL = {Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE}
BROADWAY = {Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE}
HIGH_PAIRS = {Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE}


def expected_from_treys(treys_eval, cards):
    """Translate the treys hand class into this paytable's category."""
    score = treys_eval.evaluate(
        [c.to_treys() for c in cards[:2]],
        [c.to_treys() for c in cards[2:]],
    )
    name = treys_eval.class_to_string(treys_eval.get_rank_class(score))
    ranks = {c.rank for c in cards}
    flush = len({c.suit for c in cards}) == 1

    if name in ("Royal Flush", "Straight Flush"):
        if ranks == WHEEL:
            return HandCategory.FLUSH
        if ranks == BROADWAY:
            return HandCategory.ROYAL_FLUSH
        return HandCategory.STRAIGHT_FLUSH
    if name == "Straight" and ranks == WHEEL:
        return HandCategory.FLUSH if flush else HandCategory.NOTHING
    if name == "Pair":
        pair_rank = next(r for r in ranks if sum(c.rank == r for c in cards) == 2)
        return HandCategory.JACKS_OR_BETTER if pair_rank in HIGH_PAIRS else HandCategory.NOTHING
    return TREYS_TO_CATEGORY[name]


class TestAgainstTreys:
    def test_random_hands(self, evaluator):
        treys_eval = TreysEvaluator()
        rng = random.Random(2019)
        deck = canonical_cards()
        for _ in range(3000):
            cards = rng.sample(deck, 5)
            assert evaluator.classify(cards) is expected_from_treys(treys_eval, cards)

    def test_special_hands(self, evaluator):
        treys_eval = TreysEvaluator()
        for s in ["Ts Js Qs Ks As", "As 2s 3s 4s 5s", "Ac 2d 3h 4s 5c",
                  "Tc Jd Qh Ks Ac", "Ac Ad 3h 5s 9c", "9c 9d 3h 5s 2c"]:
            cards = parse_cards(s)
            assert evaluator.classify(cards) is expected_from_treys(treys_eval, cards)
