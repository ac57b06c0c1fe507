"""
Whist module: a four-player trick-taking deal behind the Game contract.

One Whist instance plays one deal at a time. Every step plays a single
card for the current player; the fourth card of a trick resolves it in
the same step, the winner scores a trick and leads the next one. The
deal is over after 13 tricks, when every hand is empty.
"""

import logging
import operator
import random
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from whist_env.card import Card, Suit, create_deck
from whist_env.deck import Deck
from whist_env.errors import GameOverError, InvalidActionError
from whist_env.game import Game
from whist_env.player import Player
from whist_env.rules import (
    CARDS_PER_PLAYER,
    NUM_PLAYERS,
    TRICK_SIZE,
    TRUMP_OPTIONS,
    determine_trick_winner,
    get_legal_slots,
)
from whist_env.utils import format_slots, format_trick, format_trumps

logger = logging.getLogger(__name__)

# Default for the trumps option: draw trumps for every deal
RANDOM_TRUMPS = object()


class Observation(NamedTuple):
    """What the player to act can see. Other hands are never included."""
    hand: Tuple[Optional[Card], ...]
    seen: Tuple[Card, ...]
    trumps: Optional[Suit]
    trick: Tuple[Card, ...]
    player_id: int

    @property
    def led_suit(self) -> Optional[Suit]:
        return self.trick[0].suit if self.trick else None


class TrickRecord(NamedTuple):
    """A completed trick: (player_id, card) plays in order and the winner."""
    plays: Tuple[Tuple[int, Card], ...]
    winner_id: int

    @property
    def leader_id(self) -> int:
        return self.plays[0][0]

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(card for _, card in self.plays)


class Whist(Game):
    """
    Four-player whist deal.

    Actions are hand slot indices (0..12). Randomness comes from a
    generator owned by the instance: the master generator is seeded once
    at construction and hands out one seed per episode, so Whist(seed=s)
    replays the same sequence of deals and reset(seed=e) replays one deal.

    Passing trumps (a Suit, or None for no trumps) fixes the trumps of
    every deal; the hands dealt for a seed are the same either way.
    """

    def __init__(self, seed: Optional[int] = None, trumps=RANDOM_TRUMPS):
        if trumps is not RANDOM_TRUMPS and trumps not in TRUMP_OPTIONS:
            raise ValueError(f"trumps must be a Suit or None, got {trumps!r}")
        self._master_rng = random.Random(seed)
        self._trumps_override = trumps
        self.episode_seed: Optional[int] = None
        self.rng = random.Random()
        self.deck = Deck(self.rng)
        self.players = [Player(i) for i in range(NUM_PLAYERS)]
        self.trumps: Optional[Suit] = None
        self.trick: List[Tuple[int, Card]] = []
        self.seen: List[Card] = []
        self.history: List[TrickRecord] = []
        self._current = 0
        self._done = False
        self.reset()

    @classmethod
    def from_hands(cls, hands: Sequence[Sequence[Card]], trumps: Optional[Suit] = None,
                   first_player: int = 0) -> "Whist":
        """
        Set up a deal from known hands instead of shuffling.

        Cards not in any hand stay in the deck as the undealt remainder.

        Raises:
            ValueError: If there are not four equally sized hands of
                distinct cards
        """
        if len(hands) != NUM_PLAYERS:
            raise ValueError(f"Whist needs exactly {NUM_PLAYERS} hands, got {len(hands)}")
        sizes = {len(hand) for hand in hands}
        if len(sizes) != 1 or sizes.pop() > CARDS_PER_PLAYER:
            raise ValueError(f"Hands must all hold the same number of cards, at most {CARDS_PER_PLAYER}")
        dealt = [card for hand in hands for card in hand]
        dealt_set = set(dealt)
        if len(dealt_set) != len(dealt):
            raise ValueError("A card appears more than once across the hands")
        if not 0 <= first_player < NUM_PLAYERS:
            raise ValueError(f"first_player must be in 0..{NUM_PLAYERS - 1}")

        game = cls(trumps=trumps)
        game.deck.cards = [card for card in create_deck() if card not in dealt_set]
        for player, hand in zip(game.players, hands):
            player.reset_deal()
            player.receive_cards(hand)
        game.trick = []
        game.seen = []
        game.history = []
        game._current = first_player
        game._done = all(player.is_empty() for player in game.players)
        return game

    # ------------------------------------------------------------------
    #  Game contract
    # ------------------------------------------------------------------

    def reset(self, seed: Optional[int] = None) -> Observation:
        """
        Shuffle, fix trumps and deal 13 cards to each player.

        Args:
            seed: Seed for this deal; drawn from the master generator if omitted

        Returns:
            Observation for the first player
        """
        if seed is None:
            seed = self._master_rng.getrandbits(64)
        self.episode_seed = seed
        self.rng.seed(seed)

        drawn = self.rng.choice(TRUMP_OPTIONS)
        self.trumps = drawn if self._trumps_override is RANDOM_TRUMPS else self._trumps_override
        self.deck.reset(self.rng)
        hands = self.deck.deal_round(NUM_PLAYERS)
        for player in self.players:
            player.reset_deal()
            player.receive_cards(hands[player.player_id])

        self.trick = []
        self.seen = []
        self.history = []
        self._current = 0
        self._done = False

        logger.debug("New deal (seed=%s), trumps: %s", seed, format_trumps(self.trumps))
        return self.observation()

    def current_player(self) -> Player:
        return self.players[self._current]

    def legal_actions(self) -> List[int]:
        if self._done:
            return []
        return get_legal_slots(self.current_player().hand, self.led_suit)

    def legal_cards(self) -> List[Card]:
        """The cards behind legal_actions(), in slot order."""
        hand = self.current_player().hand
        return [hand[slot] for slot in self.legal_actions()]

    def observation(self) -> Observation:
        player = self.current_player()
        return Observation(
            hand=tuple(player.hand),
            seen=tuple(self.seen),
            trumps=self.trumps,
            trick=tuple(card for _, card in self.trick),
            player_id=player.player_id,
        )

    def step(self, action: int) -> Tuple[Observation, float, bool]:
        """
        Play the card in hand slot `action` for the current player.

        Returns:
            (observation for the next player, reward, done). The reward
            is always 0; tricks won are tracked in the players' scores.

        Raises:
            GameOverError: If the deal is already finished
            InvalidActionError: If the slot is not a legal play; the
                state is left untouched
        """
        if self._done:
            raise GameOverError(action)
        slot = self._validate(action)

        player = self.current_player()
        card = player.take_card(slot)
        self.trick.append((player.player_id, card))
        self.seen.append(card)
        logger.debug("%s plays %s", player.name, card)

        if len(self.trick) < TRICK_SIZE:
            self._current = (self._current + 1) % NUM_PLAYERS
            return self.observation(), 0.0, False

        self._resolve_trick()
        self._done = all(p.is_empty() for p in self.players)
        if self._done:
            logger.debug("Deal finished, tricks: %s", self.scores())
        return self.observation(), 0.0, self._done

    def is_done(self) -> bool:
        return self._done

    def render(self):
        player = self.current_player()
        print(f"Player: {player}  [{format_slots(player.hand)}]")
        print(f"Trick: {format_trick(self.trick)}")
        print(f"Trump: {format_trumps(self.trumps)}")

    # ------------------------------------------------------------------
    #  State helpers
    # ------------------------------------------------------------------

    @property
    def led_suit(self) -> Optional[Suit]:
        return self.trick[0][1].suit if self.trick else None

    @property
    def last_trick(self) -> Optional[TrickRecord]:
        return self.history[-1] if self.history else None

    @property
    def tricks_played(self) -> int:
        return len(self.history)

    def scores(self) -> Dict[int, int]:
        """Tricks won so far, by player id."""
        return {player.player_id: player.score for player in self.players}

    def zones(self) -> Dict[str, List[Card]]:
        """
        The four disjoint places a card can be: in a hand, in the current
        trick, among earlier played cards, or still undealt.
        """
        in_trick = [card for _, card in self.trick]
        return {
            "hands": [card for player in self.players for card in player.held_cards()],
            "trick": in_trick,
            "played": self.seen[:len(self.seen) - len(in_trick)],
            "undealt": list(self.deck.cards),
        }

    def _validate(self, action) -> int:
        if isinstance(action, bool):
            raise InvalidActionError(action, "actions are hand slot indices")
        try:
            slot = operator.index(action)
        except TypeError:
            raise InvalidActionError(action, "actions are hand slot indices") from None
        if not 0 <= slot < CARDS_PER_PLAYER:
            raise InvalidActionError(action, f"slot must be in 0..{CARDS_PER_PLAYER - 1}")
        hand = self.current_player().hand
        if hand[slot] is None:
            raise InvalidActionError(action, f"slot {slot} is empty")
        if slot not in get_legal_slots(hand, self.led_suit):
            raise InvalidActionError(action, f"{hand[slot]} does not follow {self.led_suit}")
        return slot

    def _resolve_trick(self):
        winner_id = determine_trick_winner(self.trick, self.trumps)
        winner = self.players[winner_id]
        winner.score += 1
        self.history.append(TrickRecord(tuple(self.trick), winner_id))
        logger.debug("%s wins trick %d: %s", winner.name, len(self.history), format_trick(self.trick))

        self._current = winner_id
        self.trick = []

    def __str__(self):
        return (f"Whist(trumps={format_trumps(self.trumps)}, trick={len(self.history) + 1}, "
                f"to_play={self.current_player().player_id})")
