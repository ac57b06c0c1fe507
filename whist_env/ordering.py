"""
Conditional ordering for cards.

Trick-taking games do not order cards with a fixed total order: whether
one card beats another depends on the suit that was led and on trumps.
Each comparator here orders one value type given an explicit context.
"""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Generic, NamedTuple, Optional, TypeVar

from whist_env.card import Card, Rank, Suit


T = TypeVar("T")
C = TypeVar("C")


class Ordering(IntEnum):
    """Result of a conditional comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


class TrickContext(NamedTuple):
    """Leading suit of the trick and the optional trumps of the deal."""
    leading_suit: Suit
    trumps: Optional[Suit] = None

    @property
    def effective_trump(self) -> Suit:
        """Trumps if set, otherwise the leading suit plays as trump."""
        return self.trumps if self.trumps is not None else self.leading_suit


class ConditionalComparator(ABC, Generic[T, C]):
    """Orders two values of a type relative to an external context."""

    @abstractmethod
    def compare(self, a: T, b: T, context: C) -> Ordering:
        """Compare a against b under context."""
        pass


class RankComparator(ConditionalComparator[Rank, None]):
    """Fixed total order on ranks; the context is ignored."""

    def compare(self, a: Rank, b: Rank, context: None = None) -> Ordering:
        if a.value < b.value:
            return Ordering.LESS
        if a.value > b.value:
            return Ordering.GREATER
        return Ordering.EQUAL


class SuitComparator(ConditionalComparator[Suit, TrickContext]):
    """
    Suit order inside a trick.

    Equal suits compare EQUAL. Otherwise a is LESS only when b is the
    effective trump, and GREATER in every other case. Two unequal
    non-trump suits therefore each compare GREATER than the other: the
    relation is not transitive and must never drive a general sort.
    """

    def compare(self, a: Suit, b: Suit, context: TrickContext) -> Ordering:
        if a == b:
            return Ordering.EQUAL
        if b == context.effective_trump:
            return Ordering.LESS
        return Ordering.GREATER


class CardComparator(ConditionalComparator[Card, TrickContext]):
    """Suit first under the trick context, then rank on equal suits."""

    def __init__(self):
        self.suits = SuitComparator()
        self.ranks = RankComparator()

    def compare(self, a: Card, b: Card, context: TrickContext) -> Ordering:
        by_suit = self.suits.compare(a.suit, b.suit, context)
        if by_suit != Ordering.EQUAL:
            return by_suit
        return self.ranks.compare(a.rank, b.rank)


class RankOnlyCardComparator(ConditionalComparator[Card, None]):
    """Card order for higher-or-lower: ranks only, suits ignored."""

    def __init__(self):
        self.ranks = RankComparator()

    def compare(self, a: Card, b: Card, context: None = None) -> Ordering:
        return self.ranks.compare(a.rank, b.rank)


CARDS = CardComparator()
