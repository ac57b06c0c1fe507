"""
Feature encoding for automated agents.
Converts Whist observations into fixed-size numpy vectors.
"""

from typing import Iterable, List, Optional, Sequence

import numpy as np

from whist_env.card import Card, Suit, SUIT_ORDINALS, card_from_index, card_index
from whist_env.rules import CARDS_PER_PLAYER, TOTAL_CARDS


NUM_TRUMP_OPTIONS = 5  # four suits + no trumps
NO_TRUMPS_INDEX = 4
OBSERVATION_SIZE = 3 * TOTAL_CARDS + NUM_TRUMP_OPTIONS  # hand + seen + trick + trumps


def encode_cards(cards: Iterable[Optional[Card]]) -> np.ndarray:
    """Binary 52-dim vector, 1 where the card is present. Empty slots are ignored."""
    vec = np.zeros(TOTAL_CARDS, dtype=np.float32)
    for card in cards:
        if card is not None:
            vec[card_index(card)] = 1.0
    return vec


def encode_trumps(trumps: Optional[Suit]) -> np.ndarray:
    """One-hot over the four suits plus no trumps."""
    vec = np.zeros(NUM_TRUMP_OPTIONS, dtype=np.float32)
    vec[NO_TRUMPS_INDEX if trumps is None else SUIT_ORDINALS[trumps]] = 1.0
    return vec


def encode_observation(observation) -> np.ndarray:
    """
    Flat observation vector:

    - [0:52)    : current player's hand
    - [52:104)  : every card played so far in the deal
    - [104:156) : cards in the current trick
    - [156:161) : trumps one-hot
    """
    return np.concatenate([
        encode_cards(observation.hand),
        encode_cards(observation.seen),
        encode_cards(observation.trick),
        encode_trumps(observation.trumps),
    ])


def legal_action_mask(legal_actions: Sequence[int]) -> np.ndarray:
    """Boolean mask over the 13 hand slots, True where the slot may be played."""
    mask = np.zeros(CARDS_PER_PLAYER, dtype=bool)
    if len(legal_actions):
        mask[np.asarray(legal_actions, dtype=int)] = True
    return mask


def decode_cards(vec: np.ndarray) -> List[Card]:
    """Cards whose bit is set in a 52-dim vector, in ordinal order."""
    return [card_from_index(int(i)) for i in np.flatnonzero(vec[:TOTAL_CARDS])]
