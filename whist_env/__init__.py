"""Whist environment: conditional card ordering and a four-player trick-taking engine."""

__version__ = "0.1.0"

from .card import Card, Rank, Suit, card_from_index, card_index, create_deck
from .ordering import (
    CardComparator,
    ConditionalComparator,
    Ordering,
    RankComparator,
    RankOnlyCardComparator,
    SuitComparator,
    TrickContext,
)
from .errors import DeckExhaustedError, GameOverError, InvalidActionError, WhistEnvError
from .game import Game
from .player import BotInterface, Player
from .whist import Observation, TrickRecord, Whist
from .highlow import Action, HighLow
