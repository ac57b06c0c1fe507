"""
Card module for the Whist environment.
Defines Card, Suit, and Rank classes plus the canonical 52-card deck
and the card <-> ordinal mapping used for encoding.
"""

from enum import Enum
from typing import Dict, List


class Suit(Enum):
    """Card suits. No inherent order outside of a trick."""
    HEARTS = "♥"
    CLUBS = "♣"
    DIAMONDS = "♦"
    SPADES = "♠"

    def __str__(self):
        return self.value


class Rank(Enum):
    """Card ranks (2 lowest, Ace highest). The value is the rank's strength."""
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
    ACE = 14

    def __str__(self):
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]


# Ordinals are declared explicitly so encodings survive a reordering of
# the enum members above.
SUIT_ORDINALS: Dict[Suit, int] = {
    Suit.HEARTS: 0,
    Suit.CLUBS: 1,
    Suit.DIAMONDS: 2,
    Suit.SPADES: 3,
}

RANK_ORDINALS: Dict[Rank, int] = {
    Rank.ACE: 0,
    Rank.KING: 1,
    Rank.QUEEN: 2,
    Rank.JACK: 3,
    Rank.TEN: 4,
    Rank.NINE: 5,
    Rank.EIGHT: 6,
    Rank.SEVEN: 7,
    Rank.SIX: 8,
    Rank.FIVE: 9,
    Rank.FOUR: 10,
    Rank.THREE: 11,
    Rank.TWO: 12,
}

SUITS_BY_ORDINAL: Dict[int, Suit] = {i: s for s, i in SUIT_ORDINALS.items()}
RANKS_BY_ORDINAL: Dict[int, Rank] = {i: r for r, i in RANK_ORDINALS.items()}


class Card:
    """An immutable playing card with suit and rank."""

    __slots__ = ("_suit", "_rank")

    def __init__(self, suit: Suit, rank: Rank):
        if not isinstance(suit, Suit) or not isinstance(rank, Rank):
            raise TypeError(f"Card needs a Suit and a Rank, got {suit!r}, {rank!r}")
        object.__setattr__(self, "_suit", suit)
        object.__setattr__(self, "_rank", rank)

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> Rank:
        return self._rank

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    def __reduce__(self):
        return (Card, (self._suit, self._rank))

    def __str__(self):
        return f"{self.rank}{self.suit}"

    def __repr__(self):
        return f"Card({self.suit.name}, {self.rank.name})"

    def __eq__(self, other):
        if not isinstance(other, Card):
            return False
        return self.suit == other.suit and self.rank == other.rank

    def __hash__(self):
        return hash((self.suit, self.rank))


def card_index(card: Card) -> int:
    """Stable ordinal 0..51: suit_ordinal * 13 + rank_ordinal."""
    return SUIT_ORDINALS[card.suit] * 13 + RANK_ORDINALS[card.rank]


def card_from_index(index: int) -> Card:
    """
    Inverse of card_index.

    Raises:
        ValueError: If index is outside 0..51
    """
    if not 0 <= index < 52:
        raise ValueError(f"Card index must be in 0..51, got {index}")
    return Card(SUITS_BY_ORDINAL[index // 13], RANKS_BY_ORDINAL[index % 13])


def parse_card(text: str) -> Card:
    """
    Parse a card written the way str(Card) prints it, e.g. "10♥" or "QS".
    Suit letters H/C/D/S are accepted as well as the symbols.
    """
    text = text.strip().upper()
    if len(text) < 2:
        raise ValueError(f"Cannot parse card: {text!r}")
    rank_str, suit_str = text[:-1], text[-1]
    letters = {"H": Suit.HEARTS, "C": Suit.CLUBS, "D": Suit.DIAMONDS, "S": Suit.SPADES}
    suit = letters.get(suit_str)
    if suit is None:
        suit = next((s for s in Suit if s.value == suit_str), None)
    rank = next((r for r in Rank if str(r) == rank_str), None)
    if suit is None or rank is None:
        raise ValueError(f"Cannot parse card: {text!r}")
    return Card(suit, rank)


def create_deck() -> List[Card]:
    """Create the canonical 52-card deck in ordinal order."""
    deck = []
    for suit in sorted(Suit, key=SUIT_ORDINALS.get):
        for rank in sorted(Rank, key=RANK_ORDINALS.get):
            deck.append(Card(suit, rank))
    return deck
