"""
Utility module for the Whist environment.
Contains logging setup and formatting helpers.
"""

import logging
from typing import Dict, List, Optional, Sequence

from whist_env.card import Card, Suit


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None):
    """Set up logging configuration for the game."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def format_trumps(trumps: Optional[Suit]) -> str:
    return trumps.name.title() if trumps is not None else "No Trumps"


def format_hand(hand: Sequence[Optional[Card]], sort_by_suit: bool = True) -> str:
    """
    Format a hand of cards for display.

    Args:
        hand: Cards or hand slots (None slots are skipped)
        sort_by_suit: Whether to group by suit then rank

    Returns:
        Formatted string representation
    """
    cards = [card for card in hand if card is not None]
    if not cards:
        return "Empty hand"

    if not sort_by_suit:
        return ', '.join(str(card) for card in cards)

    by_suit: Dict[Suit, List[Card]] = {}
    for card in cards:
        by_suit.setdefault(card.suit, []).append(card)

    suit_strings = []
    for suit in [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]:
        if suit in by_suit:
            ranked = sorted(by_suit[suit], key=lambda c: c.rank.value)
            suit_strings.append(f"{suit}: {' '.join(str(card) for card in ranked)}")
    return ' | '.join(suit_strings)


def format_slots(hand: Sequence[Optional[Card]]) -> str:
    """Hand slots with their indices, e.g. '0:A♠ 1:-- 2:10♥'."""
    return ' '.join(f"{i}:{card if card is not None else '--'}" for i, card in enumerate(hand))


def format_trick(trick: Sequence[tuple]) -> str:
    """Format (player_id, card) pairs in play order."""
    if not trick:
        return "(empty)"
    return ', '.join(f"P{player_id} {card}" for player_id, card in trick)


class GameLogger:
    """Logging helper for deal events."""

    def __init__(self, name: str = "WhistGame", log_file: Optional[str] = None):
        self.logger = logging.getLogger(name)

        if log_file:
            fh = logging.FileHandler(log_file)
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            self.logger.addHandler(fh)

    def log_deal_start(self, deal_number: int, trumps: Optional[Suit]):
        """Log start of a new deal."""
        self.logger.info(f"=== Deal {deal_number} - Trumps: {format_trumps(trumps)} ===")

    def log_hand(self, player_name: str, hand: Sequence[Optional[Card]]):
        self.logger.debug(f"{player_name} hand: {format_hand(hand)}")

    def log_card_play(self, player_name: str, card: Card, trick_state: str):
        """Log a card play."""
        self.logger.debug(f"{player_name} plays {card} ({trick_state})")

    def log_trick_winner(self, winner_name: str, trick: Sequence[tuple]):
        """Log trick winner and cards played."""
        self.logger.info(f"{winner_name} wins trick: {format_trick(trick)}")

    def log_deal_end(self, deal_number: int, tricks_won: Dict[str, int]):
        """Log deal completion."""
        self.logger.info(f"=== Deal {deal_number} complete ===")
        for name, tricks in tricks_won.items():
            self.logger.info(f"{name}: {tricks} tricks")
