"""
A single-player higher-or-lower game over one shuffled deck.

The player sees the face-up card and calls whether the next card drawn
will rank higher or lower. Each correct call extends the streak; any
miss, including an equal rank, resets it.
"""

import logging
import random
from enum import Enum
from typing import List, Optional, Tuple

from whist_env.card import Card
from whist_env.deck import Deck
from whist_env.errors import InvalidActionError
from whist_env.game import Game
from whist_env.ordering import Ordering, RankOnlyCardComparator

logger = logging.getLogger(__name__)


class Action(Enum):
    HIGHER = 0
    LOWER = 1

    @classmethod
    def from_code(cls, code: int) -> "Action":
        """
        Raises:
            InvalidActionError: If code is not 0 or 1
        """
        for action in cls:
            if action.value == code:
                return action
        raise InvalidActionError(code, "expected 0 (HIGHER) or 1 (LOWER)")

    def __int__(self):
        return self.value


class HighLow(Game):
    """Higher-or-lower behind the Game contract."""

    PLAYER = 0

    def __init__(self, seed: Optional[int] = None):
        self._master_rng = random.Random(seed)
        self.rng = random.Random()
        self.comparator = RankOnlyCardComparator()
        self.deck = Deck(self.rng)
        self.card: Optional[Card] = None
        self.score = 0
        self.reset()

    def reset(self, seed: Optional[int] = None) -> Card:
        if seed is None:
            seed = self._master_rng.getrandbits(64)
        self.rng.seed(seed)
        self.deck.reset(self.rng)
        self.card = self.deck.deal_hand(1)[0]
        self.score = 0
        return self.card

    def current_player(self) -> int:
        return self.PLAYER

    def legal_actions(self) -> List[Action]:
        return [Action.HIGHER, Action.LOWER]

    def observation(self) -> Card:
        return self.card

    def step(self, action) -> Tuple[Card, int, bool]:
        """
        Draw the next card and score the call.

        Returns:
            (new face-up card, current streak, done). Once the deck is
            empty the last card and streak are returned with done=True.
        """
        if not isinstance(action, Action):
            action = Action.from_code(action)

        if self.deck.is_empty():
            return self.card, self.score, True

        drawn = self.deck.deal_hand(1)[0]
        outcome = self.comparator.compare(drawn, self.card)

        if action == Action.HIGHER and outcome == Ordering.GREATER:
            self.score += 1
        elif action == Action.LOWER and outcome == Ordering.LESS:
            self.score += 1
        else:
            self.score = 0
        logger.debug("%s after %s called %s: streak %d", drawn, self.card, action.name, self.score)

        self.card = drawn
        return self.card, self.score, self.deck.is_empty()

    def is_done(self) -> bool:
        return self.deck.is_empty()

    def render(self):
        print(f"Current card: {self.card}")
        print(f"Score: {self.score}")
