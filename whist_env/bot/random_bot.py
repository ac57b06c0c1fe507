"""
Random bot implementation for the Whist environment.
Provides a baseline bot that makes random legal moves.
"""

import random
from typing import List, Optional

from whist_env.player import BotInterface


class RandomBot(BotInterface):
    """Bot that picks uniformly among the legal actions."""

    def __init__(self, name: str = "RandomBot", seed: Optional[int] = None):
        self.name = name
        self.rng = random.Random(seed)

    def choose_action(self, observation, legal_actions: List):
        """Choose a random legal action."""
        if not legal_actions:
            raise ValueError("No valid plays available")
        return self.rng.choice(legal_actions)

    def __str__(self):
        return self.name
