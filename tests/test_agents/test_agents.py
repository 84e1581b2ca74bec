"""
Tests for agents and response normalization.
"""

import asyncio
import random

import pytest
from texaspoker.agents import (
    BaseAgent, CallAgent, RandomAgent, ScriptedAgent, normalize_action, safe_default,
)
from texaspoker.core.betting import legal_actions
from texaspoker.core.rules import Action, ActionType


@pytest.fixture
def view(make_state):
    """Build the view for seat 2 from a hand-made state."""
    def build(chips=(1000, 1000, 1000), current_bet=0, bets=None):
        state = make_state(list(chips), current_bet=current_bet, bets=bets)
        player = state.players[2]
        return state.get_player_view(player, legal_actions(state, player))
    return build


def is_legal(action, game_state):
    legal = {a["type"]: a for a in game_state["private_info"]["legal_actions"]}
    if action.type.value not in legal:
        return False
    if action.type == ActionType.CALL:
        return action.amount == legal["CALL"]["amount"]
    if action.type == ActionType.RAISE:
        return legal["RAISE"]["min"] <= action.amount <= legal["RAISE"]["max"]
    return True


class TestSafeDefault:

    def test_fold_when_facing_a_bet(self):
        assert safe_default(20) == Action.fold()

    def test_check_otherwise(self):
        assert safe_default(0) == Action.check()


class TestNormalizeAction:
    """Tests for turning raw responses into legal actions."""

    @pytest.mark.parametrize("raw", [
        {"action": "DANCE"},
        {"amount": 10},
        {"action": "RAISE", "amount": -5},
        "CALL",
        None,
    ])
    def test_malformed_response(self, view, raw):
        assert normalize_action(raw, view(current_bet=50, bets=[0, 50, 0])) == Action.fold()
        assert normalize_action(raw, view()) == Action.check()

    def test_action_is_case_insensitive(self, view):
        action = normalize_action({"action": " call "}, view(current_bet=50, bets=[0, 50, 0]))
        assert action == Action.call(50)

    def test_call_uses_legal_amount(self, view):
        action = normalize_action({"action": "CALL", "amount": 5}, view(current_bet=50, bets=[0, 50, 0]))
        assert action == Action.call(50)

    def test_short_call_is_all_in(self, view):
        game_state = view(chips=(1000, 1000, 30), current_bet=50, bets=[0, 50, 0])
        assert normalize_action({"action": "CALL"}, game_state) == Action.call(30)

    def test_check_facing_bet_folds(self, view):
        action = normalize_action({"action": "CHECK"}, view(current_bet=50, bets=[0, 50, 0]))
        assert action == Action.fold()

    def test_call_with_nothing_to_call_checks(self, view):
        assert normalize_action({"action": "CALL", "amount": 20}, view()) == Action.check()

    def test_raise_in_range(self, view):
        game_state = view(current_bet=50, bets=[0, 50, 0])
        assert normalize_action({"action": "RAISE", "amount": 120}, game_state) == Action.raise_to(120)
        assert normalize_action({"action": "RAISE", "amount": 1000}, game_state) == Action.raise_to(1000)

    @pytest.mark.parametrize("amount", [50, 1001])
    def test_raise_out_of_range(self, view, amount):
        action = normalize_action({"action": "RAISE", "amount": amount}, view(current_bet=50, bets=[0, 50, 0]))
        assert action == Action.fold()

    def test_fold_always_allowed(self, view):
        assert normalize_action({"action": "FOLD"}, view()) == Action.fold()


class TestBaseAgent:
    """Tests for the agent interface."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            BaseAgent("0")

    def test_async_act_is_awaited(self, view):
        class SlowAgent(BaseAgent):
            async def act(self, game_state, legal_actions):
                await asyncio.sleep(0)
                return {"action": "RAISE", "amount": 80}

        action = asyncio.run(SlowAgent("p2").decide(view()))
        assert action == Action.raise_to(80)

    def test_decide_passes_legal_actions(self, view):
        seen = []

        class RecordingAgent(BaseAgent):
            def act(self, game_state, legal_actions):
                seen.append(legal_actions)
                return {"action": "CHECK"}

        game_state = view()
        asyncio.run(RecordingAgent("p2").decide(game_state))
        assert seen == [game_state["private_info"]["legal_actions"]]

    def test_repr(self):
        assert repr(CallAgent("7")) == "CallAgent(7, Caller-7)"


class TestSimpleAgents:
    """Tests for the bundled agents."""

    def test_call_agent_checks(self, view):
        assert asyncio.run(CallAgent("p2").decide(view())) == Action.check()

    def test_call_agent_calls(self, view):
        game_state = view(current_bet=50, bets=[0, 50, 0])
        assert asyncio.run(CallAgent("p2").decide(game_state)) == Action.call(50)

    def test_scripted_agent_replays_then_calls(self, view):
        agent = ScriptedAgent("p2", [{"action": "RAISE", "amount": 60}, {"action": "FOLD"}])
        game_state = view()
        assert asyncio.run(agent.decide(game_state)) == Action.raise_to(60)
        assert asyncio.run(agent.decide(game_state)) == Action.fold()
        assert asyncio.run(agent.decide(game_state)) == Action.check()

    def test_random_agent_is_always_legal(self, view):
        agent = RandomAgent("p2", rng=random.Random(42))
        states = [
            view(),
            view(current_bet=50, bets=[0, 50, 0]),
            view(chips=(1000, 1000, 30), current_bet=50, bets=[0, 50, 0]),
            view(chips=(1000, 1000, 60), current_bet=20, bets=[0, 20, 0]),
        ]
        for _ in range(50):
            for game_state in states:
                assert is_legal(asyncio.run(agent.decide(game_state)), game_state)

    def test_random_agent_folds_to_expensive_call(self, view):
        agent = RandomAgent("p2", rng=random.Random(1), fold_probability=1.0, raise_probability=0.0)
        game_state = view(chips=(1000, 1000, 60), current_bet=50, bets=[0, 50, 0])
        assert asyncio.run(agent.decide(game_state)) == Action.fold()

    def test_random_agent_raises_by_big_blinds(self, view):
        agent = RandomAgent("p2", rng=random.Random(1), fold_probability=0.0, raise_probability=1.0)
        game_state = view(current_bet=50, bets=[0, 50, 0])
        for _ in range(20):
            action = asyncio.run(agent.decide(game_state))
            assert action.type == ActionType.RAISE
            assert action.amount in (90, 110, 130)

    def test_random_agent_seeded_is_reproducible(self, view):
        game_state = view(current_bet=50, bets=[0, 50, 0])
        a = RandomAgent("p2", rng=random.Random(5))
        b = RandomAgent("p2", rng=random.Random(5))
        for _ in range(20):
            assert asyncio.run(a.decide(game_state)) == asyncio.run(b.decide(game_state))
