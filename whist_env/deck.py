"""
Deck module for the Whist environment.
Handles deck creation, shuffling, and dealing cards to players.
"""

import random
from typing import Dict, List, Optional

from whist_env.card import Card, create_deck
from whist_env.errors import DeckExhaustedError


class Deck:
    """
    Manages a deck of cards with shuffling and dealing capabilities.

    The deck never touches the global random module: it shuffles with the
    generator handed to it, so a seeded generator reproduces the deal.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.cards = create_deck()
        self.shuffle()

    def shuffle(self):
        """Shuffle the remaining cards with the deck's generator."""
        self.rng.shuffle(self.cards)

    def deal_hand(self, size: int) -> List[Card]:
        """
        Deal a hand of specified size from the top of the deck.

        Raises:
            DeckExhaustedError: If not enough cards remain
        """
        if len(self.cards) < size:
            raise DeckExhaustedError(size, len(self.cards))

        hand = []
        for _ in range(size):
            hand.append(self.cards.pop())
        return hand

    def deal_round(self, num_players: int = 4) -> Dict[int, List[Card]]:
        """
        Deal every remaining card round-robin, one at a time.

        Card i goes to player i % num_players, so each hand is in the
        order it was received.

        Returns:
            Dictionary mapping player_id to their hand
        """
        if num_players <= 0 or len(self.cards) % num_players:
            raise ValueError(
                f"Cannot split {len(self.cards)} cards evenly between {num_players} players"
            )

        hands: Dict[int, List[Card]] = {player_id: [] for player_id in range(num_players)}
        i = 0
        while self.cards:
            hands[i % num_players].append(self.cards.pop())
            i += 1
        return hands

    def cards_remaining(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)

    def is_empty(self) -> bool:
        """Check if deck is empty."""
        return len(self.cards) == 0

    def reset(self, rng: Optional[random.Random] = None):
        """Reset deck to full 52 cards and shuffle."""
        if rng is not None:
            self.rng = rng
        self.cards = create_deck()
        self.shuffle()
