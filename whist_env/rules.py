"""
Rules module for the Whist environment.
Contains rule constants, legality checks and trick resolution.
"""

from typing import List, Optional, Sequence

from whist_env.card import Card, Suit
from whist_env.ordering import CARDS, Ordering, TrickContext


# Game constants
NUM_PLAYERS = 4
CARDS_PER_PLAYER = 13
TOTAL_CARDS = 52
TRICK_SIZE = NUM_PLAYERS
TRICKS_PER_DEAL = TOTAL_CARDS // TRICK_SIZE

# Trump candidates for a deal: the four suits plus "no trumps"
TRUMP_OPTIONS = (Suit.HEARTS, Suit.CLUBS, Suit.DIAMONDS, Suit.SPADES, None)


def must_follow_suit(hand: Sequence[Optional[Card]], led_suit: Optional[Suit]) -> bool:
    """True if the hand holds a card of the led suit."""
    if led_suit is None:
        return False
    return any(card is not None and card.suit == led_suit for card in hand)


def get_legal_slots(hand: Sequence[Optional[Card]], led_suit: Optional[Suit]) -> List[int]:
    """
    Slot indices that can legally be played.

    Args:
        hand: Player's hand slots (None marks an empty slot)
        led_suit: Suit led in the trick (None if leading)

    Returns:
        Every occupied slot, or only those of the led suit when the
        player can follow it
    """
    occupied = [i for i, card in enumerate(hand) if card is not None]
    if not must_follow_suit(hand, led_suit):
        return occupied
    return [i for i in occupied if hand[i].suit == led_suit]


def validate_card_play(card: Card, hand: Sequence[Optional[Card]], led_suit: Optional[Suit]) -> bool:
    """True if card is in hand and respects follow-suit."""
    if card not in hand:
        return False
    if must_follow_suit(hand, led_suit):
        return card.suit == led_suit
    return True


def can_win_trick(card: Card, context: TrickContext) -> bool:
    """Only cards of the leading suit or of the effective trump can take a trick."""
    return card.suit in (context.leading_suit, context.effective_trump)


def winning_index(cards: Sequence[Card], trumps: Optional[Suit]) -> int:
    """
    Index of the card currently winning a (possibly partial) trick.

    Every card is measured against the lead's context. Cards that neither
    follow the lead nor trump are discarded before comparing, so the
    non-transitive suit order is only ever applied to the lead suit and
    the trump suit, where it is consistent.

    Raises:
        ValueError: If no cards were played
    """
    if not cards:
        raise ValueError("No cards played")

    context = TrickContext(cards[0].suit, trumps)
    best = 0
    for i in range(1, len(cards)):
        card = cards[i]
        if not can_win_trick(card, context):
            continue
        if CARDS.compare(card, cards[best], context) == Ordering.GREATER:
            best = i
    return best


def determine_trick_winner(cards_played: Sequence[tuple], trumps: Optional[Suit]) -> int:
    """
    Determine winner of a trick.

    Args:
        cards_played: List of (player_id, card) tuples in play order
        trumps: Trump suit of the deal (None for no trumps)

    Returns:
        Player ID of trick winner
    """
    cards = [card for _, card in cards_played]
    return cards_played[winning_index(cards, trumps)][0]
