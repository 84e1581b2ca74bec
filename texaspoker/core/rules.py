"""
Texas Hold'em Rules and Constants.

Key rules:

1. Blinds rotate one seat per hand. The small blind sits left of the
   dealer and the big blind left of the small blind. Heads-up, the dealer
   posts the small blind.

2. Preflop action starts left of the big blind; every later phase starts
   left of the small blind.

3. A raise names the new table bet (a total, not an increment) and must
   exceed the current table bet. A call names the chips needed to match it.

4. A single pot: unequal all-in stacks are not split into side pots.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple


class GamePhase(Enum):
    """Phases of a Texas Hold'em hand."""
    SETUP = auto()        # Before hole cards are dealt
    PREFLOP = auto()      # After hole cards dealt, before flop
    FLOP = auto()         # After 3 community cards
    TURN = auto()         # After 4th community card
    RIVER = auto()        # After 5th community card
    SHOWDOWN = auto()     # Pot resolved, hand complete


# Phases in which players bet, in order
BETTING_PHASES = (GamePhase.PREFLOP, GamePhase.FLOP, GamePhase.TURN, GamePhase.RIVER)


class ActionType(Enum):
    """Possible player actions."""
    FOLD = "FOLD"
    CHECK = "CHECK"
    CALL = "CALL"
    RAISE = "RAISE"


@dataclass(frozen=True)
class Action:
    """
    A player decision.

    For CALL, `amount` is the chips added to match the table bet.
    For RAISE, `amount` is the new absolute table bet.
    """
    type: ActionType
    amount: int = 0

    @classmethod
    def fold(cls) -> Action:
        return cls(ActionType.FOLD)

    @classmethod
    def check(cls) -> Action:
        return cls(ActionType.CHECK)

    @classmethod
    def call(cls, amount: int) -> Action:
        return cls(ActionType.CALL, amount)

    @classmethod
    def raise_to(cls, amount: int) -> Action:
        return cls(ActionType.RAISE, amount)

    def __str__(self) -> str:
        if self.type in (ActionType.CALL, ActionType.RAISE):
            return f"{self.type.value} {self.amount}"
        return self.type.value


# Default game settings
DEFAULT_SMALL_BLIND = 10
DEFAULT_BIG_BLIND = 20
DEFAULT_BUY_IN = 1000
MIN_PLAYERS = 2
MAX_PLAYERS = 9

# Cards per phase
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
TOTAL_COMMUNITY_CARDS = 5

COMMUNITY_CARDS_BY_PHASE = {
    GamePhase.FLOP: FLOP_CARDS,
    GamePhase.TURN: TURN_CARDS,
    GamePhase.RIVER: RIVER_CARDS,
}


def get_blind_positions(num_players: int, dealer_position: int) -> Tuple[int, int]:
    """
    Calculate small blind and big blind positions.

    In heads-up play the dealer posts the small blind.

    Args:
        num_players: Number of seated players
        dealer_position: Position of the dealer (0-indexed)

    Returns:
        Tuple of (small_blind_position, big_blind_position)
    """
    if num_players < MIN_PLAYERS:
        raise ValueError(f"Need at least {MIN_PLAYERS} players")

    if num_players == 2:
        sb_pos = dealer_position % num_players
    else:
        sb_pos = (dealer_position + 1) % num_players
    bb_pos = (sb_pos + 1) % num_players
    return sb_pos, bb_pos


def get_first_to_act(
    phase: GamePhase,
    num_players: int,
    small_blind_position: int,
    big_blind_position: int,
) -> int:
    """
    Get the seat that opens the betting in a phase.

    Preflop: left of the big blind. Later phases: left of the small blind.
    The seat may belong to a player who cannot act; the caller skips it.
    """
    if phase == GamePhase.PREFLOP:
        return (big_blind_position + 1) % num_players
    return (small_blind_position + 1) % num_players
