"""
Tests for observation encoding.
"""

import numpy as np
import pytest

from whist_env.card import Card, Rank, Suit, card_index
from whist_env.encoding import (
    OBSERVATION_SIZE,
    decode_cards,
    encode_cards,
    encode_observation,
    encode_trumps,
    legal_action_mask,
)
from whist_env.whist import Whist


class TestEncoding:

    def test_encode_cards_skips_empty_slots(self):
        cards = [Card(Suit.HEARTS, Rank.TWO), None, Card(Suit.SPADES, Rank.ACE)]
        vec = encode_cards(cards)
        assert vec.shape == (52,)
        assert vec.sum() == 2
        assert vec[12] == 1 and vec[39] == 1
        assert decode_cards(vec) == [cards[0], cards[2]]

    def test_encode_trumps(self):
        assert encode_trumps(None).tolist() == [0, 0, 0, 0, 1]
        assert encode_trumps(Suit.CLUBS).tolist() == [0, 1, 0, 0, 0]

    def test_observation_layout(self):
        game = Whist(seed=21)
        game.step(game.legal_actions()[0])
        obs = game.observation()
        vec = encode_observation(obs)

        assert vec.shape == (OBSERVATION_SIZE,)
        assert vec[:52].sum() == 13
        assert vec[52:104].sum() == 1
        assert vec[104:156].sum() == 1
        assert vec[156:].sum() == 1
        assert vec[52 + card_index(obs.trick[0])] == 1

    def test_legal_action_mask(self):
        mask = legal_action_mask([0, 3, 12])
        assert mask.dtype == bool
        assert np.flatnonzero(mask).tolist() == [0, 3, 12]
        assert not legal_action_mask([]).any()


if __name__ == "__main__":
    pytest.main([__file__])
