"""
Base Agent Interface for texaspoker.

This module defines the abstract base class for all poker agents, the
collaborators the betting round asks for decisions.

Usage:
    class MyAgent(BaseAgent):
        def act(self, game_state, legal_actions):
            return {"action": "CALL", "amount": 20}

    action = await MyAgent("0").decide(view)

`act` may also be a coroutine, for agents waiting on a human or a remote
model; `decide` awaits it either way.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
import inspect
import logging

from pydantic import ValidationError

from texaspoker.core.rules import Action, ActionType
from texaspoker.schemas import ActionRequest


logger = logging.getLogger(__name__)


def safe_default(amount_to_call: int) -> Action:
    """Fold when facing a bet, check otherwise."""
    return Action.fold() if amount_to_call > 0 else Action.check()


def normalize_action(raw: Any, game_state: Dict[str, Any]) -> Action:
    """
    Turn an agent's raw response into a legal Action.

    Malformed or out-of-range responses become the safe default. A CALL
    always uses the legal call amount.

    Args:
        raw: Response dict, e.g. {"action": "RAISE", "amount": 60}
        game_state: The view the agent decided on
    """
    private = game_state.get("private_info", {})
    to_call = private.get("amount_to_call", 0)
    legal = {a["type"]: a for a in private.get("legal_actions", [])}

    try:
        request = ActionRequest.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Invalid response {raw!r}, using safe default: {e.error_count()} error(s)")
        return safe_default(to_call)

    action_type = ActionType(request.action)

    if action_type == ActionType.FOLD:
        return Action.fold()

    if action_type == ActionType.CHECK and "CHECK" in legal:
        return Action.check()

    if action_type == ActionType.CALL and "CALL" in legal:
        return Action.call(legal["CALL"]["amount"])

    if action_type == ActionType.RAISE and "RAISE" in legal:
        bounds = legal["RAISE"]
        if bounds["min"] <= request.amount <= bounds["max"]:
            return Action.raise_to(request.amount)

    logger.warning(f"Illegal response {raw!r} (to call: {to_call}), using safe default")
    return safe_default(to_call)


class BaseAgent(ABC):
    """
    Abstract base class for poker agents.

    Attributes:
        player_id: Player this agent decides for
        name: Human-readable name
    """

    def __init__(self, player_id: str, name: Optional[str] = None):
        self.player_id = player_id
        self.name = name or f"Agent-{player_id}"

    @abstractmethod
    def act(
        self,
        game_state: Dict[str, Any],
        legal_actions: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """
        Choose an action given the current game state.

        Args:
            game_state: Dictionary containing:
                - public_info: pot, table bet, board, phase, players
                - private_info: own hand, chips, current bet,
                  amount_to_call, legal_actions
            legal_actions: List of legal action dicts, each containing:
                - type: Action type (FOLD, CHECK, CALL, RAISE)
                - amount: Required amount (for CALL)
                - min/max: Valid new table bet (for RAISE)

        Returns:
            Action dictionary with:
                - action: Action type string
                - amount: Call amount, or new table bet for RAISE

        Example:
            return {"action": "RAISE", "amount": 100}
        """

    async def decide(self, game_state: Dict[str, Any]) -> Action:
        """Ask the agent and normalize its answer into a legal Action."""
        legal_actions = game_state.get("private_info", {}).get("legal_actions", [])
        raw = self.act(game_state, legal_actions)
        if inspect.isawaitable(raw):
            raw = await raw
        return normalize_action(raw, game_state)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.player_id}, {self.name})"
