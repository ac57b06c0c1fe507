"""
Tests for the bots and the bot runner.
"""

import pytest

from whist_env.bot import BOT_TYPES, HeuristicBot, RandomBot
from whist_env.card import Card, Rank, Suit
from whist_env.run import create_bot, main, play_deal, run_bot_deals, run_highlow
from whist_env.whist import Observation, Whist


def observation(hand, trick=(), trumps=None):
    return Observation(
        hand=tuple(hand) + (None,) * (13 - len(hand)),
        seen=tuple(trick),
        trumps=trumps,
        trick=tuple(trick),
        player_id=1,
    )


class TestRandomBot:

    def test_only_legal_actions(self):
        bot = RandomBot(seed=1)
        for _ in range(20):
            assert bot.choose_action(None, [2, 5, 7]) in (2, 5, 7)

    def test_no_actions(self):
        with pytest.raises(ValueError):
            RandomBot().choose_action(None, [])


class TestHeuristicBot:

    def test_wins_cheaply(self):
        hand = [Card(Suit.HEARTS, Rank.ACE), Card(Suit.HEARTS, Rank.TWO), Card(Suit.HEARTS, Rank.QUEEN)]
        obs = observation(hand, trick=[Card(Suit.HEARTS, Rank.JACK)])
        assert HeuristicBot().choose_action(obs, [0, 1, 2]) == 2

    def test_ducks_when_it_cannot_win(self):
        hand = [Card(Suit.HEARTS, Rank.KING), Card(Suit.HEARTS, Rank.THREE)]
        obs = observation(hand, trick=[Card(Suit.HEARTS, Rank.ACE)])
        assert HeuristicBot().choose_action(obs, [0, 1]) == 1

    def test_prefers_ruffing_over_losing(self):
        hand = [Card(Suit.SPADES, Rank.TWO), Card(Suit.CLUBS, Rank.KING)]
        obs = observation(hand, trick=[Card(Suit.HEARTS, Rank.ACE)], trumps=Suit.SPADES)
        assert HeuristicBot().choose_action(obs, [0, 1]) == 0

    def test_leads_high_non_trump(self):
        hand = [Card(Suit.SPADES, Rank.TWO), Card(Suit.HEARTS, Rank.KING), Card(Suit.SPADES, Rank.ACE)]
        obs = observation(hand, trumps=Suit.SPADES)
        assert HeuristicBot().choose_action(obs, [0, 1, 2]) == 1


class TestRunner:

    def test_create_bot(self):
        assert isinstance(create_bot('heuristic', 0), HeuristicBot)
        assert set(BOT_TYPES) == {'random', 'heuristic'}
        with pytest.raises(ValueError):
            create_bot('oracle', 0)

    def test_play_deal(self):
        game = Whist(seed=31)
        bots = [HeuristicBot(), RandomBot(seed=1), HeuristicBot(), RandomBot(seed=2)]
        scores = play_deal(game, bots)
        assert game.is_done()
        assert sum(scores.values()) == 13

    def test_run_bot_deals(self):
        totals = run_bot_deals(['heuristic', 'random', 'random', 'heuristic'], deals=3, seed=4)
        assert sum(totals.values()) == 39

    def test_seeded_runs_repeat(self):
        bots = ['random'] * 4
        assert run_bot_deals(bots, deals=2, seed=8) == run_bot_deals(bots, deals=2, seed=8)

    def test_run_highlow(self):
        streaks = run_highlow(episodes=2, seed=5)
        assert len(streaks) == 2
        assert all(0 <= s <= 51 for s in streaks)

    def test_main(self, capsys):
        totals = main(['--bots', 'heuristic', '--deals', '2', '--seed', '3'])
        assert sum(totals.values()) == 26
        assert "Tricks won over 2 deal(s)" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__])
