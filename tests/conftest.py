"""
Pytest configuration and shared fixtures for texaspoker tests.
"""

import random

import pytest
from texaspoker.agents import CallAgent
from texaspoker.core.card import Card, Deck, Rank, Suit, parse_cards
from texaspoker.core.player import Player
from texaspoker.core.game import TexasHoldemGame
from texaspoker.core.rules import GamePhase
from texaspoker.core.state import HandState


@pytest.fixture
def rng():
    """A seeded random generator."""
    return random.Random(1234)


@pytest.fixture
def deck():
    """Create a fresh unshuffled deck."""
    return Deck.standard()


@pytest.fixture
def sample_player():
    """Create a sample player with 1000 chips."""
    return Player(player_id="test_player", name="Tester", chips=1000, seat=0)


@pytest.fixture
def two_player_game(rng):
    """Create a 2-player game (heads-up)."""
    return TexasHoldemGame(
        num_players=2,
        big_blind=20,
        small_blind=10,
        buy_in=1000,
        rng=rng,
    )


@pytest.fixture
def three_player_game(rng):
    """Create a 3-player game."""
    return TexasHoldemGame(
        player_names=["Alice", "Bob", "Charlie"],
        big_blind=20,
        small_blind=10,
        buy_in=1000,
        rng=rng,
    )


@pytest.fixture
def six_player_game(rng):
    """Create a 6-player game."""
    return TexasHoldemGame(
        num_players=6,
        big_blind=20,
        small_blind=10,
        buy_in=1000,
        rng=rng,
    )


@pytest.fixture
def call_agents():
    """Build check/call agents for every player at a table."""
    def build(game):
        return {p.player_id: CallAgent(p.player_id) for p in game.players}
    return build


@pytest.fixture
def make_state():
    """
    Build a HandState by hand for betting tests.

    Seats are named p0, p1, ...; the dealer sits on seat 0.
    """
    def build(chips, phase=GamePhase.FLOP, current_bet=0, bets=None,
              small_blind_position=1, big_blind_position=2):
        players = [
            Player(player_id=f"p{i}", name=f"P{i}", chips=c, seat=i)
            for i, c in enumerate(chips)
        ]
        pot = 0
        for player, bet in zip(players, bets or []):
            if bet:
                pot += player.place_bet(bet)
        return HandState(
            players=players,
            deck=Deck.standard(),
            phase=phase,
            pot=pot,
            current_bet=current_bet,
            dealer_position=0,
            small_blind_position=small_blind_position % len(players),
            big_blind_position=big_blind_position % len(players),
            big_blind=20,
        )
    return build


@pytest.fixture
def sample_hand():
    """Create a sample 5-card hand (pair of aces)."""
    return parse_cards("A♠ A♥ K♦ Q♣ J♠")


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card(Rank.TEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.ACE, Suit.SPADES),
    ]


@pytest.fixture
def straight_flush():
    """Create a straight flush (6-high)."""
    return parse_cards("2♥ 3♥ 4♥ 5♥ 6♥")


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return parse_cards("A♠ 2♥ 3♦ 4♣ 5♠")
