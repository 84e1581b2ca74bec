"""
Player class for Texas Hold'em.

Manages player state including:
- Chips (stack)
- Hole cards
- Bet in the current betting phase and in the whole hand
- Player state (active, folded, all-in, out)
"""

from __future__ import annotations
from typing import List, Dict, Any
from dataclasses import dataclass, field
from enum import Enum, auto

from texaspoker.core.card import Card
from texaspoker.core.errors import InvalidActionError


class PlayerState(Enum):
    """Player states during a hand."""
    ACTIVE = auto()       # Still in the hand, can act
    FOLDED = auto()       # Has folded
    ALL_IN = auto()       # All-in, no more actions
    OUT = auto()          # Out of the game (no chips)


@dataclass
class Player:
    """
    A player in the Texas Hold'em game.

    Attributes:
        player_id: Unique identifier for the player
        name: Display name
        chips: Current chip count
        hole_cards: The player's private cards (0-2 cards)
        current_bet: Amount bet in the current betting phase
        total_bet: Total amount bet in the current hand
        state: Current player state
        seat: Seat position at the table (0-indexed)
    """
    player_id: str
    name: str
    chips: int
    seat: int = 0
    hole_cards: List[Card] = field(default_factory=list)
    current_bet: int = 0
    total_bet: int = 0
    state: PlayerState = PlayerState.ACTIVE
    last_action: str = ""

    def __post_init__(self):
        if self.chips < 0:
            raise ValueError(f"Chips cannot be negative, got {self.chips}")

    def reset_for_new_hand(self) -> None:
        """Clear cards and bets; players without chips sit the hand out."""
        self.hole_cards = []
        self.current_bet = 0
        self.total_bet = 0
        self.last_action = ""
        self.state = PlayerState.ACTIVE if self.chips > 0 else PlayerState.OUT

    def reset_for_new_round(self) -> None:
        """Reset the per-phase bet (flop, turn, river)."""
        self.current_bet = 0

    def give_card(self, card: Card) -> None:
        """Add one hole card to the player's hand."""
        if len(self.hole_cards) >= 2:
            raise ValueError(f"{self.name} already holds {len(self.hole_cards)} cards")
        self.hole_cards = self.hole_cards + [card]

    def place_bet(self, amount: int) -> int:
        """
        Move chips from the stack into the current bet.

        Raises:
            InvalidActionError: If the player has folded or the amount
                exceeds the stack. Nothing is changed in that case.
        """
        if self.folded:
            raise InvalidActionError(f"{self.name} has already folded")
        if amount < 0:
            raise InvalidActionError(f"{self.name} cannot bet a negative amount ({amount})")
        if amount > self.chips:
            raise InvalidActionError(f"{self.name} does not have enough chips to bet {amount}")

        self.chips -= amount
        self.current_bet += amount
        self.total_bet += amount

        if self.chips == 0:
            self.state = PlayerState.ALL_IN

        return amount

    def post_blind(self, amount: int) -> int:
        """
        Post a forced blind, capped at the stack.

        Returns:
            Actual amount posted (may be less if all-in)
        """
        actual = self.place_bet(min(amount, self.chips))
        self.last_action = f"BLIND {actual}"
        return actual

    def fold(self) -> None:
        """Fold the hand."""
        if self.folded:
            raise InvalidActionError(f"{self.name} has already folded")
        self.state = PlayerState.FOLDED
        self.last_action = "FOLD"

    def check(self) -> None:
        """Check (pass without betting)."""
        self.last_action = "CHECK"

    def call(self, amount: int) -> int:
        """
        Call by adding `amount` chips to the current bet.

        Returns:
            Amount added to the pot
        """
        actual = self.place_bet(amount)
        self.last_action = f"CALL {actual}"
        return actual

    def raise_to(self, total_amount: int) -> int:
        """
        Raise the current bet to `total_amount`.

        Returns:
            Amount added to the pot
        """
        actual = self.place_bet(total_amount - self.current_bet)
        self.last_action = f"RAISE {self.current_bet}"
        return actual

    def win(self, amount: int) -> None:
        """Add won chips to the stack."""
        self.chips += amount

    @property
    def folded(self) -> bool:
        return self.state == PlayerState.FOLDED

    @property
    def all_in(self) -> bool:
        return self.state == PlayerState.ALL_IN

    @property
    def is_in_hand(self) -> bool:
        """Check if player is still in the hand (not folded, not out)."""
        return self.state in (PlayerState.ACTIVE, PlayerState.ALL_IN)

    @property
    def can_act(self) -> bool:
        """Check if player can take an action."""
        return self.state == PlayerState.ACTIVE and self.chips > 0

    def to_dict(self, hide_cards: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for snapshots and agent views.

        Args:
            hide_cards: If True, don't include hole cards
        """
        result = {
            "id": self.player_id,
            "name": self.name,
            "seat": self.seat,
            "chips": self.chips,
            "bet": self.current_bet,
            "total_bet": self.total_bet,
            "state": self.state.name,
            "last_action": self.last_action,
        }

        if not hide_cards:
            result["cards"] = [card.to_dict() for card in self.hole_cards]

        return result

    def to_public_dict(self) -> Dict[str, Any]:
        """Get public information (visible to all players)."""
        return self.to_dict(hide_cards=True)

    def to_private_dict(self) -> Dict[str, Any]:
        """Get private information (only for this player)."""
        return self.to_dict(hide_cards=False)

    def __repr__(self) -> str:
        return (
            f"Player({self.player_id}, chips={self.chips}, "
            f"bet={self.current_bet}, state={self.state.name})"
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.chips} chips)"
