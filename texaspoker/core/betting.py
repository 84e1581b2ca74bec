"""
Betting round orchestration.

A BettingRound runs exactly one betting phase to completion:
- asks each player who still owes a decision for an action, in seat order
- validates the action before touching any chips
- moves chips from stacks into the pot
- reopens the action for everybody else when the table bet is raised

Player decisions come from collaborators exposing an async
`decide(view) -> Action` method (see texaspoker.agents).
"""

from __future__ import annotations
from typing import List, Dict, Optional, Any, Mapping, Set
from dataclasses import dataclass, field
import logging

from texaspoker.core.errors import InvalidActionError
from texaspoker.core.player import Player
from texaspoker.core.rules import Action, ActionType, GamePhase, get_first_to_act
from texaspoker.core.state import HandState


logger = logging.getLogger(__name__)


@dataclass
class ActionRecord:
    """Records a player action for the phase history."""
    player_id: str
    action: Action
    phase: GamePhase
    pot_after: int


@dataclass
class BettingResult:
    """Outcome of one betting phase."""
    phase: GamePhase
    closing_bet: int
    pot: int
    folded_out: bool
    actions: List[ActionRecord] = field(default_factory=list)


def legal_actions(state: HandState, player: Player) -> List[Dict[str, Any]]:
    """
    Get legal actions for a player.

    Returns:
        List of action dicts with type and constraints
    """
    if not player.can_act:
        return []

    actions = [{"type": ActionType.FOLD.value}]
    to_call = state.amount_to_call(player)

    if to_call == 0:
        actions.append({"type": ActionType.CHECK.value})
    else:
        actions.append({
            "type": ActionType.CALL.value,
            "amount": min(to_call, player.chips),
        })

    max_raise = player.chips + player.current_bet
    if max_raise > state.current_bet:
        actions.append({
            "type": ActionType.RAISE.value,
            "min": state.current_bet + 1,
            "max": max_raise,
        })

    return actions


class BettingRound:
    """
    Runs one betting phase.

    Usage:
        result = await BettingRound(state, agents).run()

    `agents` maps player_id to the collaborator deciding for that player.
    """

    def __init__(self, state: HandState, agents: Mapping[str, Any]):
        self.state = state
        self.agents = agents
        self.pending: Set[str] = set()
        self.actions: List[ActionRecord] = []

    def _initial_pending(self) -> Set[str]:
        can_act = self.state.players_who_can_act
        if len(can_act) >= 2:
            return {p.player_id for p in can_act}
        # Everybody else is all-in: only a player still facing a bet decides
        return {p.player_id for p in can_act if self.state.amount_to_call(p) > 0}

    async def run(self) -> BettingResult:
        """Run the phase until nobody owes a decision or one player is left."""
        state = self.state
        self.pending = self._initial_pending()
        seat = get_first_to_act(
            state.phase,
            state.num_players,
            state.small_blind_position,
            state.big_blind_position,
        )

        logger.debug(f"{state.phase.name} betting starts at seat {seat}, pending={sorted(self.pending)}")

        while self.pending and len(state.players_in_hand) >= 2:
            player = state.players[seat]
            if player.can_act and player.player_id in self.pending:
                view = state.get_player_view(player, legal_actions(state, player))
                action = await self.agents[player.player_id].decide(view)
                self.apply_action(player, action)
            seat = (seat + 1) % state.num_players

        result = BettingResult(
            phase=state.phase,
            closing_bet=state.current_bet,
            pot=state.pot,
            folded_out=len(state.players_in_hand) < 2,
            actions=list(self.actions),
        )
        state.end_betting_round()
        return result

    def apply_action(self, player: Player, action: Action) -> None:
        """
        Validate and apply one action.

        Raises:
            InvalidActionError: If the action is illegal. State is left
                untouched in that case.
        """
        self._validate(player, action)

        state = self.state
        if action.type == ActionType.FOLD:
            player.fold()
        elif action.type == ActionType.CHECK:
            player.check()
        elif action.type == ActionType.CALL:
            state.pot += player.call(action.amount)
        elif action.type == ActionType.RAISE:
            state.pot += player.raise_to(action.amount)
            state.current_bet = action.amount

        self.pending.discard(player.player_id)
        if action.type == ActionType.RAISE:
            # A raise reopens the action for everybody who can still act
            self.pending.update(
                p.player_id for p in state.players_who_can_act if p is not player
            )

        self.actions.append(ActionRecord(player.player_id, action, state.phase, state.pot))
        logger.debug(f"{player.name}: {action} (pot={state.pot}, bet={state.current_bet})")

    def _validate(self, player: Player, action: Action) -> None:
        state = self.state
        if player.folded:
            raise InvalidActionError(f"{player.name} has already folded")
        if not player.can_act:
            raise InvalidActionError(f"{player.name} cannot act ({player.state.name})")

        to_call = state.amount_to_call(player)

        if action.type == ActionType.CHECK:
            if to_call > 0:
                raise InvalidActionError(f"Cannot check, must call {to_call}")
        elif action.type == ActionType.CALL:
            if to_call == 0:
                raise InvalidActionError("Nothing to call, use CHECK")
            if action.amount > player.chips:
                raise InvalidActionError(
                    f"{player.name} cannot call {action.amount} with {player.chips} chips"
                )
            expected = min(to_call, player.chips)
            if action.amount != expected:
                raise InvalidActionError(f"Call amount must be {expected}, got {action.amount}")
        elif action.type == ActionType.RAISE:
            if action.amount <= state.current_bet:
                raise InvalidActionError(
                    f"Raise must exceed the table bet of {state.current_bet}, got {action.amount}"
                )
            needed = action.amount - player.current_bet
            if needed > player.chips:
                raise InvalidActionError(
                    f"{player.name} cannot raise to {action.amount} with {player.chips} chips"
                )
