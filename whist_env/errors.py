"""
Exceptions raised by the Whist environment.
Rule violations subclass ValueError so callers catching ValueError keep working.
"""


class WhistEnvError(Exception):
    """Base class for all environment errors."""


class InvalidActionError(WhistEnvError, ValueError):
    """An action outside legal_actions() was passed to step()."""

    def __init__(self, action, reason: str):
        self.action = action
        self.reason = reason
        super().__init__(f"Invalid action {action!r}: {reason}")


class GameOverError(InvalidActionError):
    """step() was called after the episode finished."""

    def __init__(self, action=None):
        super().__init__(action, "the deal is already finished; call reset()")


class DeckExhaustedError(WhistEnvError, ValueError):
    """More cards were requested than remain in the deck."""

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(f"Not enough cards in deck. Need {requested}, have {remaining}")
