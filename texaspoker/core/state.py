"""
Round state for a single hand.

HandState is the one mutable owner of everything that changes during a
hand: seats, deck, board, pot and the table bet. The round controller
creates one per hand and hands it by reference to the betting round.
"""

from __future__ import annotations
from typing import List, Dict, Optional, Any
from dataclasses import dataclass, field

from texaspoker.core.card import Card, Deck
from texaspoker.core.player import Player
from texaspoker.core.rules import GamePhase


@dataclass
class HandState:
    """
    Everything the table knows about the hand in progress.

    Attributes:
        players: Seated players, indexed by seat
        deck: Remaining (undealt) cards
        phase: Current phase of the hand
        community_cards: Board cards revealed so far (0-5)
        pot: Chips in the pot
        current_bet: Amount every active player must match this phase
        dealer_position / small_blind_position / big_blind_position: Seats
        big_blind: Big blind amount for this hand
        hand_number: 1-based hand counter
    """
    players: List[Player]
    deck: Deck
    phase: GamePhase = GamePhase.SETUP
    community_cards: List[Card] = field(default_factory=list)
    pot: int = 0
    current_bet: int = 0
    dealer_position: int = 0
    small_blind_position: int = 0
    big_blind_position: int = 0
    big_blind: int = 0
    hand_number: int = 0

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def players_in_hand(self) -> List[Player]:
        """Players who have not folded (all-in players included)."""
        return [p for p in self.players if p.is_in_hand]

    @property
    def players_who_can_act(self) -> List[Player]:
        """Players who are neither folded nor all-in."""
        return [p for p in self.players if p.can_act]

    def get_player(self, player_id: str) -> Optional[Player]:
        """Get player by ID."""
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def amount_to_call(self, player: Player) -> int:
        """Chips the player must add to match the table bet."""
        return max(0, self.current_bet - player.current_bet)

    def end_betting_round(self) -> None:
        """Clear per-phase bets and the table bet."""
        for player in self.players:
            player.reset_for_new_round()
        self.current_bet = 0

    def public_info(self) -> Dict[str, Any]:
        """Information visible to everybody at the table."""
        return {
            "phase": self.phase.name,
            "hand_number": self.hand_number,
            "pot": self.pot,
            "current_bet": self.current_bet,
            "big_blind": self.big_blind,
            "board": [c.to_dict() for c in self.community_cards],
            "dealer_position": self.dealer_position,
            "small_blind_position": self.small_blind_position,
            "big_blind_position": self.big_blind_position,
            "players": [p.to_public_dict() for p in self.players],
        }

    def get_player_view(
        self,
        player: Player,
        legal_actions: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        """
        Get the state as seen by one player.

        Returns:
            Dict with public_info (table state) and private_info (the
            player's own cards, stack, bet, amount to call, legal actions)
        """
        return {
            "public_info": self.public_info(),
            "private_info": {
                "id": player.player_id,
                "hand": [c.to_dict() for c in player.hole_cards],
                "chips": player.chips,
                "current_bet": player.current_bet,
                "amount_to_call": self.amount_to_call(player),
                "legal_actions": legal_actions or [],
            },
        }
