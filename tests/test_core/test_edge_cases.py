"""
Tests for edge cases and boundary conditions.

These tests verify:
- Short stacks posting blinds
- All-in hands running out the board
- Busted players leaving the table
- The session ending when one player holds every chip
"""

import asyncio
import logging

import pytest
from texaspoker.agents import CallAgent, ScriptedAgent
from texaspoker.core.game import TexasHoldemGame
from texaspoker.core.rules import GamePhase


class TestShortStacks:
    """Blinds and calls for less than a full amount."""

    def test_short_big_blind_is_all_in(self, two_player_game):
        game = two_player_game
        game.players[1].chips = 15
        game.start_hand()

        assert game.players[1].all_in
        assert game.pot_total == 25
        assert game.state.current_bet == 20

    def test_short_big_blind_hand_completes(self, two_player_game, call_agents):
        game = two_player_game
        game.players[1].chips = 15
        result = asyncio.run(game.play_hand(call_agents(game)))

        assert result.showdown
        assert result.amount == 35
        assert len(result.board) == 5
        assert sum(p.chips for p in game.players) == 1015

    def test_short_small_blind(self, three_player_game):
        game = three_player_game
        game.players[1].chips = 4
        game.start_hand()

        assert game.players[1].current_bet == 4
        assert game.players[1].all_in
        assert game.pot_total == 24


class TestAllIn:
    """Hands where nobody can bet any more."""

    def test_all_in_preflop_runs_out_the_board(self, two_player_game):
        game = two_player_game
        events = []
        game.on_event = events.append
        agents = {
            "0": ScriptedAgent("0", [{"action": "RAISE", "amount": 1000}]),
            "1": CallAgent("1"),
        }
        result = asyncio.run(game.play_hand(agents))

        assert result.showdown
        assert result.amount == 2000
        assert len(result.board) == 5
        assert [e.event for e in events] == ["HOLE_CARDS", "FLOP", "TURN", "RIVER", "SHOWDOWN"]
        assert sorted(p.chips for p in game.players) == [0, 2000]

    def test_session_ends_after_all_in(self, two_player_game):
        game = two_player_game
        agents = {
            "0": ScriptedAgent("0", [{"action": "RAISE", "amount": 1000}]),
            "1": CallAgent("1"),
        }
        asyncio.run(game.play_hand(agents))

        assert not game.is_game_running()
        assert asyncio.run(game.play_hand(agents)) is None
        assert game.leader().chips == 2000


class TestBustedPlayers:
    """Players without chips leave the table before the next hand."""

    def test_busted_player_removed(self, three_player_game):
        game = three_player_game
        game.players[2].chips = 0
        assert game.start_hand()

        assert [p.name for p in game.players] == ["Alice", "Bob"]
        assert [p.seat for p in game.players] == [0, 1]
        assert game.state.num_players == 2
        # Heads-up now: the dealer posts the small blind
        assert game.state.small_blind_position == game.state.dealer_position

    def test_button_moves_past_busted_seat(self):
        """A bust left of the button does not give the same player the deal twice."""
        game = TexasHoldemGame(player_names=["A", "B", "C"])
        game.start_hand()
        game.start_hand()
        assert game.players[game.state.dealer_position].name == "B"

        game.players[0].chips = 0
        game.start_hand()
        assert game.players[game.state.dealer_position].name == "C"
        game.start_hand()
        assert game.players[game.state.dealer_position].name == "B"

    def test_button_skips_busted_next_dealer(self):
        game = TexasHoldemGame(player_names=["A", "B", "C", "D"])
        game.start_hand()
        assert game.players[game.state.dealer_position].name == "A"

        game.players[1].chips = 0
        game.start_hand()
        assert game.players[game.state.dealer_position].name == "C"

    def test_remove_busted_players_returns_them(self, three_player_game):
        game = three_player_game
        game.players[0].chips = 0
        removed = game.remove_busted_players()
        assert [p.name for p in removed] == ["Alice"]
        assert [p.player_id for p in game.players] == ["1", "2"]
        assert game.remove_busted_players() == []

    def test_not_enough_players(self, three_player_game, caplog):
        game = three_player_game
        game.players[0].chips = 0
        game.players[1].chips = 0

        with caplog.at_level(logging.WARNING):
            assert not game.start_hand()
        assert "not enough players" in caplog.text
        assert game.state is None
        assert game.hand_number == 0

    def test_leader(self, three_player_game):
        game = three_player_game
        game.players[1].chips = 2500
        assert game.leader().name == "Bob"


class TestQueriesOutsideAHand:
    """Table queries before the first hand."""

    def test_defaults(self, three_player_game):
        game = three_player_game
        assert game.phase == GamePhase.SETUP
        assert game.pot_total == 0
        assert game.is_game_running()

    def test_player_view_without_hand(self, three_player_game):
        with pytest.raises(KeyError):
            three_player_game.get_player_view("0")
