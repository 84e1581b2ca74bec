"""
Simple agent implementations.

Useful for testing, simulations and as baselines.
"""

import random
from typing import Dict, List, Any, Iterable, Optional

from texaspoker.agents.base import BaseAgent


class RandomAgent(BaseAgent):
    """
    An agent that plays on probabilities only, ignoring its cards.

    - Folds with `fold_probability` when the call costs more than half
      its chips
    - Raises with `raise_probability` when it holds more than twice the
      table bet, to the table bet plus 2-4 big blinds
    - Otherwise calls, or checks when there is nothing to call
    """

    def __init__(
        self,
        player_id: str,
        name: Optional[str] = None,
        rng: Optional[random.Random] = None,
        fold_probability: float = 0.3,
        raise_probability: float = 0.15,
    ):
        """
        Initialize the random agent.

        Args:
            player_id: Unique identifier
            name: Optional name
            rng: Random generator, seed it for reproducible play
            fold_probability: Probability of folding to an expensive call (0-1)
            raise_probability: Probability of raising (0-1)
        """
        super().__init__(player_id, name or f"Random-{player_id}")
        self.rng = rng or random.Random()
        self.fold_probability = fold_probability
        self.raise_probability = raise_probability

    def act(
        self,
        game_state: Dict[str, Any],
        legal_actions: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        public = game_state["public_info"]
        private = game_state["private_info"]
        table_bet = public["current_bet"]
        chips = private["chips"]
        to_call = private["amount_to_call"]

        roll = self.rng.random()

        if to_call > chips * 0.5 and roll < self.fold_probability:
            return {"action": "FOLD", "amount": 0}

        if roll < self.raise_probability and chips > table_bet * 2:
            target = table_bet + public["big_blind"] * self.rng.randint(2, 4)
            target = min(target, chips + private["current_bet"])
            return {"action": "RAISE", "amount": target}

        if to_call > 0:
            return {"action": "CALL", "amount": min(to_call, chips)}

        return {"action": "CHECK", "amount": 0}


class CallAgent(BaseAgent):
    """
    An agent that always calls (or checks).

    Useful for testing and as a simple baseline.
    """

    def __init__(self, player_id: str, name: Optional[str] = None):
        super().__init__(player_id, name or f"Caller-{player_id}")

    def act(
        self,
        game_state: Dict[str, Any],
        legal_actions: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """Always check or call."""
        for action in legal_actions:
            if action["type"] == "CHECK":
                return {"action": "CHECK", "amount": 0}
            if action["type"] == "CALL":
                return {"action": "CALL", "amount": action["amount"]}

        return {"action": "FOLD", "amount": 0}


class ScriptedAgent(CallAgent):
    """
    An agent that replays a fixed list of decisions, then checks or calls.

    Usage:
        ScriptedAgent("1", [{"action": "RAISE", "amount": 40}, {"action": "FOLD"}])
    """

    def __init__(
        self,
        player_id: str,
        script: Iterable[Dict[str, Any]],
        name: Optional[str] = None,
    ):
        super().__init__(player_id, name or f"Scripted-{player_id}")
        self.script = list(script)

    def act(
        self,
        game_state: Dict[str, Any],
        legal_actions: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        if self.script:
            return self.script.pop(0)
        return super().act(game_state, legal_actions)
