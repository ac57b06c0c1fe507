"""Bots that drive the Whist environment through its Game contract."""

from whist_env.bot.random_bot import RandomBot
from whist_env.bot.heuristic_bot import HeuristicBot

BOT_TYPES = {
    'random': RandomBot,
    'heuristic': HeuristicBot,
}
