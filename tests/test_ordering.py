"""
Tests for conditional card ordering.
"""

import itertools

import pytest

from whist_env.card import Card, Rank, Suit
from whist_env.ordering import (
    CardComparator,
    Ordering,
    RankComparator,
    RankOnlyCardComparator,
    SuitComparator,
    TrickContext,
)


class TestRankComparator:

    def test_fixed_order(self):
        ranks = RankComparator()
        ordered = sorted(Rank, key=lambda r: r.value)
        assert ordered[0] == Rank.TWO and ordered[-1] == Rank.ACE
        for low, high in zip(ordered, ordered[1:]):
            assert ranks.compare(low, high) == Ordering.LESS
            assert ranks.compare(high, low) == Ordering.GREATER

    def test_total_order_properties(self):
        ranks = RankComparator()
        for a in Rank:
            assert ranks.compare(a, a) == Ordering.EQUAL
        for a, b in itertools.product(Rank, repeat=2):
            assert ranks.compare(a, b) == -ranks.compare(b, a)
        for a, b, c in itertools.product(Rank, repeat=3):
            if ranks.compare(a, b) == Ordering.LESS and ranks.compare(b, c) == Ordering.LESS:
                assert ranks.compare(a, c) == Ordering.LESS

    def test_context_is_ignored(self):
        ranks = RankComparator()
        context = TrickContext(Suit.HEARTS, Suit.SPADES)
        assert ranks.compare(Rank.KING, Rank.QUEEN, context) == ranks.compare(Rank.KING, Rank.QUEEN)


class TestSuitComparator:

    def test_equal_suits(self):
        suits = SuitComparator()
        for suit in Suit:
            assert suits.compare(suit, suit, TrickContext(Suit.HEARTS, Suit.SPADES)) == Ordering.EQUAL

    def test_trump_outranks_everything(self):
        suits = SuitComparator()
        context = TrickContext(Suit.HEARTS, Suit.SPADES)
        for suit in (Suit.HEARTS, Suit.CLUBS, Suit.DIAMONDS):
            assert suits.compare(suit, Suit.SPADES, context) == Ordering.LESS
            assert suits.compare(Suit.SPADES, suit, context) == Ordering.GREATER

    def test_leading_suit_plays_as_trump_without_trumps(self):
        suits = SuitComparator()
        context = TrickContext(Suit.DIAMONDS)
        assert context.effective_trump == Suit.DIAMONDS
        assert suits.compare(Suit.CLUBS, Suit.DIAMONDS, context) == Ordering.LESS
        assert suits.compare(Suit.DIAMONDS, Suit.SPADES, context) == Ordering.GREATER

    def test_off_suits_are_not_transitive(self):
        suits = SuitComparator()
        context = TrickContext(Suit.HEARTS, Suit.SPADES)
        # Two unequal non-trump suits each compare greater than the other
        assert suits.compare(Suit.CLUBS, Suit.DIAMONDS, context) == Ordering.GREATER
        assert suits.compare(Suit.DIAMONDS, Suit.CLUBS, context) == Ordering.GREATER
        assert suits.compare(Suit.CLUBS, Suit.HEARTS, context) == Ordering.GREATER
        assert suits.compare(Suit.HEARTS, Suit.CLUBS, context) == Ordering.GREATER


class TestCardComparator:

    def test_rank_breaks_suit_tie(self):
        cards = CardComparator()
        context = TrickContext(Suit.CLUBS, None)
        assert cards.compare(Card(Suit.CLUBS, Rank.ACE), Card(Suit.CLUBS, Rank.KING), context) == Ordering.GREATER
        assert cards.compare(Card(Suit.CLUBS, Rank.TWO), Card(Suit.CLUBS, Rank.KING), context) == Ordering.LESS
        assert cards.compare(Card(Suit.CLUBS, Rank.TWO), Card(Suit.CLUBS, Rank.TWO), context) == Ordering.EQUAL

    def test_low_trump_beats_high_lead(self):
        cards = CardComparator()
        context = TrickContext(Suit.HEARTS, Suit.SPADES)
        assert cards.compare(Card(Suit.SPADES, Rank.TWO), Card(Suit.HEARTS, Rank.ACE), context) == Ordering.GREATER
        assert cards.compare(Card(Suit.HEARTS, Rank.ACE), Card(Suit.SPADES, Rank.TWO), context) == Ordering.LESS

    def test_rank_only_comparator_ignores_suits(self):
        cards = RankOnlyCardComparator()
        assert cards.compare(Card(Suit.HEARTS, Rank.NINE), Card(Suit.SPADES, Rank.NINE)) == Ordering.EQUAL
        assert cards.compare(Card(Suit.HEARTS, Rank.TEN), Card(Suit.SPADES, Rank.NINE)) == Ordering.GREATER


if __name__ == "__main__":
    pytest.main([__file__])
