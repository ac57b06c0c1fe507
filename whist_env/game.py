"""
Game contract shared by every variant.

A driver (a human loop, a bot runner or a training script) only talks to
this interface, so it can play any game without knowing its internals.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple


class Game(ABC):
    """Turn-based environment with a reset/step loop."""

    @abstractmethod
    def current_player(self) -> Any:
        """Whose action is awaited. Never raises."""
        pass

    @abstractmethod
    def legal_actions(self) -> List[Any]:
        """All actions the current player may take in the current state."""
        pass

    @abstractmethod
    def observation(self) -> Any:
        """Snapshot of what the current player is allowed to see."""
        pass

    @abstractmethod
    def step(self, action) -> Tuple[Any, float, bool]:
        """
        Apply one action.

        Returns:
            (observation for the player now to act, reward, done)

        Raises:
            InvalidActionError: If action is not in legal_actions()
        """
        pass

    @abstractmethod
    def reset(self, seed: Optional[int] = None):
        """Discard all state and start a new episode."""
        pass

    @abstractmethod
    def is_done(self) -> bool:
        """Whether the episode has concluded."""
        pass

    def render(self):
        """Print a human readable view of the state."""
        print(self)
