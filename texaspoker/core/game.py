"""
Texas Hold'em Game Engine - Round Controller.

This module sequences one hand of Texas Hold'em:
- Setup: reset players, shuffle a fresh deck, rotate dealer and blinds
- Hole cards dealt in two passes, blinds posted
- Betting phases: preflop, flop, turn, river (burn + reveal before each
  post-flop phase)
- Showdown, or resolution without showdown when everybody else folded

It also keeps the table-level session state between hands (seats, button,
hand counter) and removes busted players before each new hand.
"""

from __future__ import annotations
from typing import Callable, List, Dict, Optional, Any, Mapping
from dataclasses import dataclass, field
import logging
import random

from texaspoker.core.card import Card, Deck
from texaspoker.core.player import Player
from texaspoker.core.hand import BestHand, HandRank, best_hand, compare_hands
from texaspoker.core.state import HandState
from texaspoker.core.betting import BettingResult, BettingRound, legal_actions
from texaspoker.core.rules import (
    GamePhase, BETTING_PHASES, COMMUNITY_CARDS_BY_PHASE,
    get_blind_positions,
    DEFAULT_BIG_BLIND, DEFAULT_SMALL_BLIND, DEFAULT_BUY_IN,
    HOLE_CARDS, MIN_PLAYERS, MAX_PLAYERS,
)
from texaspoker.schemas import HandSnapshot, TableConfig


logger = logging.getLogger(__name__)


@dataclass
class HandResult:
    """Outcome of a completed hand."""
    hand_number: int
    winner_id: str
    amount: int
    showdown: bool
    board: List[Card] = field(default_factory=list)
    hand_rank: Optional[HandRank] = None
    description: str = ""
    best_cards: List[Card] = field(default_factory=list)
    shown_hands: Dict[str, BestHand] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.winner_id,
            "amount": self.amount,
            "hand_type": self.hand_rank.name if self.hand_rank else None,
            "description": self.description or None,
            "cards": [str(c) for c in self.best_cards] or None,
        }


class TexasHoldemGame:
    """
    Texas Hold'em table running one hand at a time.

    Usage:
        game = TexasHoldemGame(num_players=3, rng=random.Random(42))
        agents = {p.player_id: CallAgent(p.player_id) for p in game.players}

        result = asyncio.run(game.play_hand(agents))
    """

    def __init__(
        self,
        num_players: int = 2,
        big_blind: int = DEFAULT_BIG_BLIND,
        small_blind: int = DEFAULT_SMALL_BLIND,
        buy_in: int = DEFAULT_BUY_IN,
        player_ids: Optional[List[str]] = None,
        player_names: Optional[List[str]] = None,
        rng: Optional[random.Random] = None,
        on_event: Optional[Callable[[HandSnapshot], Any]] = None,
    ):
        """
        Initialize a new table.

        Args:
            num_players: Number of players (2-9), ignored when names are given
            big_blind: Big blind amount
            small_blind: Small blind amount
            buy_in: Starting chips for each player
            player_ids: Optional list of player IDs
            player_names: Optional list of display names
            rng: Random generator used for shuffling
            on_event: Called with a HandSnapshot after deals and at the end
        """
        if player_names is not None:
            num_players = len(player_names)
        if num_players < MIN_PLAYERS or num_players > MAX_PLAYERS:
            raise ValueError(f"Number of players must be {MIN_PLAYERS}-{MAX_PLAYERS}")

        self.big_blind = big_blind
        self.small_blind = small_blind
        self.buy_in = buy_in
        self.rng = rng or random.Random()
        self.on_event = on_event

        if player_ids is None:
            player_ids = [str(i) for i in range(num_players)]
        if player_names is None:
            player_names = [f"Player {pid}" for pid in player_ids]
        if len(player_ids) != num_players or len(set(player_ids)) != num_players:
            raise ValueError("Player IDs must be unique, one per player")

        self.players: List[Player] = [
            Player(player_id=pid, name=name, chips=buy_in, seat=i)
            for i, (pid, name) in enumerate(zip(player_ids, player_names))
        ]

        # The first hand moves the button onto seat 0
        self.dealer_position = -1
        self.hand_number = 0
        self.state: Optional[HandState] = None

    @classmethod
    def from_config(
        cls,
        config: TableConfig,
        rng: Optional[random.Random] = None,
        on_event: Optional[Callable[[HandSnapshot], Any]] = None,
    ) -> TexasHoldemGame:
        """Create a table from a validated TableConfig."""
        return cls(
            big_blind=config.big_blind,
            small_blind=config.small_blind,
            buy_in=config.buy_in,
            player_names=config.player_names,
            rng=rng,
            on_event=on_event,
        )

    @property
    def num_players(self) -> int:
        """Number of players seated at the table."""
        return len(self.players)

    @property
    def pot_total(self) -> int:
        """Chips in the pot of the current hand."""
        return self.state.pot if self.state else 0

    @property
    def phase(self) -> GamePhase:
        return self.state.phase if self.state else GamePhase.SETUP

    @property
    def community_cards(self) -> List[Card]:
        return self.state.community_cards if self.state else []

    def is_game_running(self) -> bool:
        """Check if the game can continue (at least 2 players with chips)."""
        return sum(1 for p in self.players if p.chips > 0) >= MIN_PLAYERS

    def leader(self) -> Player:
        """The player with the most chips."""
        return max(self.players, key=lambda p: p.chips)

    def remove_busted_players(self) -> List[Player]:
        """
        Remove players without chips from the table.

        Returns:
            The removed players
        """
        busted = [p for p in self.players if p.chips == 0]
        if busted:
            next_dealer = self._next_dealer()
            self.players = [p for p in self.players if p.chips > 0]
            for seat, player in enumerate(self.players):
                player.seat = seat
            if next_dealer is not None:
                # The next rotation lands on the first survivor left of the old button
                self.dealer_position = next_dealer.seat - 1
            logger.info(f"Removed busted players: {[p.name for p in busted]}")
        return busted

    def _next_dealer(self) -> Optional[Player]:
        """First player with chips clockwise from the current button."""
        n = self.num_players
        for i in range(n):
            player = self.players[(self.dealer_position + 1 + i) % n]
            if player.chips > 0:
                return player
        return None

    def start_hand(self) -> bool:
        """
        Set up a new hand: reset, shuffle, rotate blinds, deal, post blinds.

        Returns:
            True if hand started successfully, False otherwise
        """
        if not self.is_game_running():
            logger.warning("Cannot start hand: not enough players with chips")
            return False

        self.remove_busted_players()
        self.hand_number += 1
        logger.info(f"Starting hand #{self.hand_number}")

        for player in self.players:
            player.reset_for_new_hand()

        self.dealer_position = (self.dealer_position + 1) % self.num_players
        sb_pos, bb_pos = get_blind_positions(self.num_players, self.dealer_position)

        self.state = HandState(
            players=self.players,
            deck=Deck.standard().shuffle(self.rng),
            phase=GamePhase.SETUP,
            dealer_position=self.dealer_position,
            small_blind_position=sb_pos,
            big_blind_position=bb_pos,
            big_blind=self.big_blind,
            hand_number=self.hand_number,
        )

        self._deal_hole_cards()
        self._post_blinds()
        self.state.phase = GamePhase.PREFLOP
        self._emit("HOLE_CARDS")
        return True

    def _deal_hole_cards(self) -> None:
        """Deal 2 hole cards to each player, one card per pass."""
        state = self.state
        for _ in range(HOLE_CARDS):
            for player in state.players:
                card, state.deck = state.deck.deal_one()
                player.give_card(card)

    def _post_blinds(self) -> None:
        """Post small and big blinds."""
        state = self.state
        sb_player = state.players[state.small_blind_position]
        bb_player = state.players[state.big_blind_position]

        sb_amount = sb_player.post_blind(self.small_blind)
        bb_amount = bb_player.post_blind(self.big_blind)

        state.pot = sb_amount + bb_amount
        state.current_bet = self.big_blind

        logger.debug(f"Blinds posted: SB={sb_amount} ({sb_player.name}) BB={bb_amount} ({bb_player.name})")

    def deal_community(self, phase: GamePhase) -> List[Card]:
        """
        Burn one card and reveal the community cards for a phase.

        Returns:
            The revealed cards
        """
        state = self.state
        _, state.deck = state.deck.burn()
        cards, state.deck = state.deck.deal(COMMUNITY_CARDS_BY_PHASE[phase])
        state.community_cards = state.community_cards + cards
        state.phase = phase
        state.current_bet = 0

        logger.debug(f"{phase.name}: {' '.join(str(c) for c in state.community_cards)}")
        self._emit(phase.name)
        return cards

    async def play_betting_round(self, agents: Mapping[str, Any]) -> BettingResult:
        """Run the betting for the current phase."""
        return await BettingRound(self.state, agents).run()

    async def play_hand(self, agents: Mapping[str, Any]) -> Optional[HandResult]:
        """
        Play a complete hand.

        Args:
            agents: Maps every seated player_id to its decision maker

        Returns:
            The hand result, or None when the hand could not start
        """
        missing = [p.player_id for p in self.players if p.chips > 0 and p.player_id not in agents]
        if missing:
            raise ValueError(f"No agent for players {missing}")

        if not self.start_hand():
            return None

        for phase in BETTING_PHASES:
            if phase != GamePhase.PREFLOP:
                self.deal_community(phase)
            await self.play_betting_round(agents)
            if len(self.state.players_in_hand) <= 1:
                return self.resolve_without_showdown()

        return self.showdown()

    def _award(self, player: Player) -> int:
        amount = self.state.pot
        player.win(amount)
        self.state.pot = 0
        self.state.phase = GamePhase.SHOWDOWN
        return amount

    def resolve_without_showdown(self) -> HandResult:
        """Give the pot to the only player left; no cards are shown."""
        winner = self.state.players_in_hand[0]
        amount = self._award(winner)

        logger.info(f"{winner.name} wins {amount} (everybody else folded)")
        result = HandResult(
            hand_number=self.hand_number,
            winner_id=winner.player_id,
            amount=amount,
            showdown=False,
            board=list(self.state.community_cards),
        )
        self._emit("WIN_BY_FOLD", [result.to_dict()])
        return result

    def _showdown_order(self) -> List[Player]:
        """Players still in the hand, clockwise from the dealer's left."""
        n = self.num_players
        seats = [(self.dealer_position + 1 + i) % n for i in range(n)]
        return [self.players[s] for s in seats if self.players[s].is_in_hand]

    def showdown(self) -> HandResult:
        """
        Evaluate every remaining hand and award the whole pot.

        A true tie goes to the tied player closest to the dealer's left.
        """
        state = self.state
        shown: Dict[str, BestHand] = {}
        winner: Optional[Player] = None

        for player in self._showdown_order():
            hand = best_hand(player.hole_cards + state.community_cards)
            shown[player.player_id] = hand
            if winner is None or compare_hands(hand, shown[winner.player_id]) > 0:
                winner = player

        winning_hand = shown[winner.player_id]
        amount = self._award(winner)

        logger.info(f"{winner.name} wins {amount} with {winning_hand.description}")
        result = HandResult(
            hand_number=self.hand_number,
            winner_id=winner.player_id,
            amount=amount,
            showdown=True,
            board=list(state.community_cards),
            hand_rank=winning_hand.rank,
            description=winning_hand.description,
            best_cards=list(winning_hand.cards),
            shown_hands=shown,
        )
        self._emit("SHOWDOWN", [result.to_dict()])
        return result

    def get_player_view(self, player_id: str) -> Dict[str, Any]:
        """Get the state as seen by one player, including legal actions."""
        player = self.state.get_player(player_id) if self.state else None
        if player is None:
            raise KeyError(f"No player {player_id!r} in the current hand")
        return self.state.get_player_view(player, legal_actions(self.state, player))

    def snapshot(self, event: str, winners: Optional[List[Dict[str, Any]]] = None) -> HandSnapshot:
        """Public snapshot of the hand for presentation."""
        info = self.state.public_info()
        return HandSnapshot.model_validate({
            "event": event,
            **info,
            "winners": winners or [],
        })

    def _emit(self, event: str, winners: Optional[List[Dict[str, Any]]] = None) -> None:
        if self.on_event is not None:
            self.on_event(self.snapshot(event, winners))
