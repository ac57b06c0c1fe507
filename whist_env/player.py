"""
Player module for the Whist environment.
Defines player state and the bot strategy interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from whist_env.card import Card, Suit
from whist_env.rules import CARDS_PER_PLAYER


class Player:
    """
    A seat at the table.

    The hand is a fixed row of slots. Slots are filled at deal time and
    emptied as cards are played; they are never re-sorted, so a slot
    index keeps naming the same card for the whole deal.
    """

    def __init__(self, player_id: int, name: str = None):
        self.player_id = player_id
        self.name = name or f"Player {player_id}"
        self.hand: List[Optional[Card]] = [None] * CARDS_PER_PLAYER
        self.score = 0

    def receive_cards(self, cards: Sequence[Card]):
        """Fill the hand slots with a freshly dealt hand."""
        if len(cards) > CARDS_PER_PLAYER:
            raise ValueError(f"A hand holds at most {CARDS_PER_PLAYER} cards, got {len(cards)}")
        self.hand = list(cards) + [None] * (CARDS_PER_PLAYER - len(cards))

    def take_card(self, slot: int) -> Card:
        """
        Remove and return the card in a slot.

        Raises:
            ValueError: If the slot is empty
        """
        card = self.hand[slot]
        if card is None:
            raise ValueError(f"Slot {slot} of {self.name} is empty")
        self.hand[slot] = None
        return card

    def held_cards(self) -> List[Card]:
        """Cards still in hand, in slot order."""
        return [card for card in self.hand if card is not None]

    def has_suit(self, suit: Suit) -> bool:
        """Check if player has any cards of given suit."""
        return any(card is not None and card.suit == suit for card in self.hand)

    def is_empty(self) -> bool:
        return all(card is None for card in self.hand)

    def reset_deal(self):
        """Reset player state for a new deal."""
        self.hand = [None] * CARDS_PER_PLAYER
        self.score = 0

    def __int__(self):
        return self.player_id

    def __str__(self):
        return f"{self.name} (Tricks: {self.score})"

    def __repr__(self):
        return f"Player(id={self.player_id}, score={self.score}, hand={self.held_cards()})"


class BotInterface(ABC):
    """Abstract interface that all bots must implement."""

    @abstractmethod
    def choose_action(self, observation, legal_actions: List):
        """
        Choose the next action.

        Args:
            observation: What the acting player can see (game specific)
            legal_actions: Actions the game currently accepts

        Returns:
            One element of legal_actions
        """
        pass
