"""
Command-line interface for playing Whist interactively.
The human sits in seat 0; the other seats are filled with bots.
"""

import argparse
from typing import List, Optional

from whist_env.bot import BOT_TYPES
from whist_env.card import Card, Suit, parse_card
from whist_env.highlow import Action, HighLow
from whist_env.player import Player
from whist_env.rules import NUM_PLAYERS
from whist_env.utils import format_trick, format_trumps, setup_logging
from whist_env.whist import Observation, TrickRecord, Whist

HUMAN_SEAT = 0


def display_hand(hand: List[Optional[Card]], title: str = "Your Hand"):
    """Display player's hand in organized format."""
    print(f"\n{title}:")

    by_suit = {}
    for card in hand:
        if card is not None:
            by_suit.setdefault(card.suit, []).append(card)

    for suit in by_suit:
        by_suit[suit].sort(key=lambda c: c.rank.value, reverse=True)

    for suit in [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]:
        if suit in by_suit:
            cards_str = ' '.join(str(card) for card in by_suit[suit])
            print(f"  {suit}: {cards_str}")


def get_human_card_play(player: Player, observation: Observation, legal_actions: List[int]) -> int:
    """Ask the human for a card and return its hand slot."""
    print(f"\n{player.name}'s turn to play:")
    display_hand(list(observation.hand))

    if observation.trick:
        print(f"Led suit: {observation.led_suit}")
        print("Cards played:", ', '.join(str(card) for card in observation.trick))
    else:
        print("You are leading")

    print(f"Trump: {format_trumps(observation.trumps)}")

    valid_cards = {observation.hand[slot]: slot for slot in legal_actions}
    print("\nValid plays:", ', '.join(str(card) for card in valid_cards))

    while True:
        try:
            card = parse_card(input("Enter card to play: "))
        except ValueError:
            print("Please enter a card like 'QS', '10H' or 'A♦'.")
            continue
        if card in valid_cards:
            return valid_cards[card]
        print("Invalid card. Choose from valid plays.")


def display_trick_result(game: Whist, record: TrickRecord):
    """Display the result of a completed trick."""
    print(f"\nTrick won by {game.players[record.winner_id].name}")
    print(f"Cards: {format_trick(record.plays)}")


def display_final_results(players: List[Player]):
    """Display tricks won at the end of the deal."""
    print(f"\n{'=' * 40}")
    print("DEAL COMPLETE!")
    print(f"{'=' * 40}")
    for player in sorted(players, key=lambda p: p.score, reverse=True):
        print(f"  {player.name}: {player.score} tricks")


def confirm_continue() -> bool:
    """Ask player if they want to continue."""
    try:
        response = input("\nPress Enter to play another deal or 'q' to quit: ").strip().lower()
        return response != 'q'
    except (KeyboardInterrupt, EOFError):
        return False


def play_whist(bot_type: str = 'heuristic', seed: Optional[int] = None):
    """Play deals until the human quits."""
    bots = {seat: BOT_TYPES[bot_type](f"{bot_type.title()}Bot_{seat}") for seat in range(1, NUM_PLAYERS)}
    game = Whist(seed=seed)
    game.players[HUMAN_SEAT].name = "You"
    for seat, bot in bots.items():
        game.players[seat].name = str(bot)

    while True:
        print(f"\n=== New deal - Trumps: {format_trumps(game.trumps)} ===")
        observation, done = game.observation(), game.is_done()
        while not done:
            player = game.current_player()
            if player.player_id == HUMAN_SEAT:
                action = get_human_card_play(player, observation, game.legal_actions())
            else:
                action = bots[player.player_id].choose_action(observation, game.legal_actions())
                print(f"{player.name} plays {player.hand[action]}")
            tricks_before = game.tricks_played
            observation, _, done = game.step(action)
            if game.tricks_played > tricks_before:
                display_trick_result(game, game.last_trick)

        display_final_results(game.players)
        if not confirm_continue():
            return
        game.reset()


def play_highlow(seed: Optional[int] = None):
    """Play one higher-or-lower episode."""
    game = HighLow(seed=seed)
    done = False
    while not done:
        game.render()
        choice = input("Higher or lower? (h/l, q to quit): ").strip().lower()
        if choice == 'q':
            return
        if choice not in ('h', 'l'):
            print("Please enter 'h' or 'l'")
            continue
        _, _, done = game.step(Action.HIGHER if choice == 'h' else Action.LOWER)
    print(f"Deck exhausted. Final streak: {game.score}")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Play Whist against bots")
    parser.add_argument('--game', choices=['whist', 'highlow'], default='whist')
    parser.add_argument('--bot', choices=sorted(BOT_TYPES), default='heuristic',
                        help='Bot type for the other three seats')
    parser.add_argument('--seed', type=int, default=None)
    args = parser.parse_args(argv)

    setup_logging()

    try:
        if args.game == 'highlow':
            play_highlow(args.seed)
        else:
            play_whist(args.bot, args.seed)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")


if __name__ == "__main__":
    main()
