"""
Heuristic bot implementation for the Whist environment.
Uses simple rule-based card selection.
"""

from typing import List, Optional

from whist_env.card import Card, Suit
from whist_env.player import BotInterface
from whist_env.rules import winning_index
from whist_env.whist import Observation


class HeuristicBot(BotInterface):
    """Rule-based bot: win cheaply when possible, otherwise shed low cards."""

    def __init__(self, name: str = "HeuristicBot"):
        self.name = name

    def choose_action(self, observation: Observation, legal_actions: List[int]) -> int:
        """Strategic card selection over hand slots."""
        if not legal_actions:
            raise ValueError("No valid plays available")

        if len(legal_actions) == 1:
            return legal_actions[0]

        hand = observation.hand
        if not observation.trick:  # Leading
            return self._choose_lead_slot(hand, legal_actions, observation.trumps)
        return self._choose_follow_slot(hand, legal_actions, observation.trumps, observation.trick)

    def _choose_lead_slot(self, hand, legal_actions: List[int], trumps: Optional[Suit]) -> int:
        """Choose card when leading the trick."""
        # Prefer high non-trump cards to start tricks
        non_trump = [i for i in legal_actions if hand[i].suit != trumps]
        if non_trump:
            return max(non_trump, key=lambda i: hand[i].rank.value)

        # If only trump, play lowest trump
        return min(legal_actions, key=lambda i: hand[i].rank.value)

    def _choose_follow_slot(self, hand, legal_actions: List[int], trumps: Optional[Suit],
                            trick: List[Card]) -> int:
        """Choose card when following in a trick."""
        def cost(i: int):
            # Spend trumps last
            return (hand[i].suit == trumps, hand[i].rank.value)

        # Try to win with the cheapest possible card
        winning = [i for i in legal_actions
                   if winning_index(list(trick) + [hand[i]], trumps) == len(trick)]
        if winning:
            return min(winning, key=cost)

        # Can't win, play lowest card
        return min(legal_actions, key=cost)

    def __str__(self):
        return self.name
