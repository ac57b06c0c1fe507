#!/usr/bin/env python3
"""
Main entry point for the Whist environment.
Plays deals between bots, or higher-or-lower episodes, and prints a summary.
"""

import argparse
import logging
from typing import Dict, List, Optional

from whist_env.bot import BOT_TYPES
from whist_env.highlow import HighLow
from whist_env.player import BotInterface
from whist_env.rules import NUM_PLAYERS
from whist_env.utils import GameLogger, setup_logging
from whist_env.whist import Whist


def create_bot(bot_type: str, seat: int, seed: Optional[int] = None) -> BotInterface:
    """Create a bot of specified type for a seat."""
    if bot_type not in BOT_TYPES:
        raise ValueError(f"Unknown bot type: {bot_type}. Available: {list(BOT_TYPES.keys())}")

    name = f"{bot_type.title()}Bot_{seat}"
    if bot_type == 'random':
        return BOT_TYPES[bot_type](name, seed=None if seed is None else seed + seat)
    return BOT_TYPES[bot_type](name)


def play_deal(game: Whist, bots: List[BotInterface], game_logger: Optional[GameLogger] = None,
              deal_number: int = 1) -> Dict[int, int]:
    """
    Play the current deal of game to the end.

    Returns:
        Tricks won by player id
    """
    if game_logger:
        game_logger.log_deal_start(deal_number, game.trumps)
        for player in game.players:
            game_logger.log_hand(player.name, player.hand)

    observation = game.observation()
    done = game.is_done()
    while not done:
        player = game.current_player()
        action = bots[player.player_id].choose_action(observation, game.legal_actions())
        tricks_before = game.tricks_played
        card = player.hand[action]
        observation, _, done = game.step(action)
        if game_logger:
            game_logger.log_card_play(player.name, card, f"trick {tricks_before + 1}")
            if game.tricks_played > tricks_before:
                record = game.last_trick
                game_logger.log_trick_winner(game.players[record.winner_id].name, record.plays)

    scores = game.scores()
    if game_logger:
        game_logger.log_deal_end(deal_number, {p.name: p.score for p in game.players})
    return scores


def run_bot_deals(bot_types: List[str], deals: int = 1, seed: Optional[int] = None,
                  game_logger: Optional[GameLogger] = None) -> Dict[int, int]:
    """Play several deals with bots only; returns tricks won in total by seat."""
    bots = [create_bot(bot_type, seat, seed) for seat, bot_type in enumerate(bot_types)]
    game = Whist(seed=seed)
    totals = {seat: 0 for seat in range(NUM_PLAYERS)}

    for deal_number in range(1, deals + 1):
        if deal_number > 1:
            game.reset()
        for seat, tricks in play_deal(game, bots, game_logger, deal_number).items():
            totals[seat] += tricks
    return totals


def run_highlow(episodes: int = 1, seed: Optional[int] = None) -> List[int]:
    """Play higher-or-lower episodes with a random bot; returns the best streak of each."""
    bot = create_bot('random', 0, seed)
    game = HighLow(seed=seed)
    best_streaks = []

    for episode in range(episodes):
        if episode > 0:
            game.reset()
        best, done = 0, False
        observation = game.observation()
        while not done:
            observation, score, done = game.step(bot.choose_action(observation, game.legal_actions()))
            best = max(best, score)
        best_streaks.append(best)
    return best_streaks


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Simulate Whist deals between bots")
    parser.add_argument('--game', choices=['whist', 'highlow'], default='whist',
                        help='Game to simulate')
    parser.add_argument('--bots', nargs='*', choices=sorted(BOT_TYPES),
                        help='Bot type per seat (missing seats get random bots)')
    parser.add_argument('--deals', type=int, default=1,
                        help='Number of deals / episodes to play')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for reproducible deals')
    parser.add_argument('--log-file', default=None,
                        help='Also write the log to this file')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable verbose logging')

    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    if args.game == 'highlow':
        streaks = run_highlow(args.deals, args.seed)
        print(f"Best streaks: {streaks}")
        return streaks

    bot_types = list(args.bots or [])
    if len(bot_types) < NUM_PLAYERS:
        bot_types.extend(['random'] * (NUM_PLAYERS - len(bot_types)))
    bot_types = bot_types[:NUM_PLAYERS]

    totals = run_bot_deals(bot_types, args.deals, args.seed, GameLogger())

    print(f"\nTricks won over {args.deals} deal(s):")
    for seat, tricks in totals.items():
        print(f"  {bot_types[seat].title()}Bot_{seat}: {tricks}")
    return totals


if __name__ == "__main__":
    main()
