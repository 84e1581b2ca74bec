"""
texaspoker Core - Pure Python Texas Hold'em Game Logic

This module contains all game logic; agents and presentation live outside.
"""

from texaspoker.core.card import Card, Deck, Rank, Suit
from texaspoker.core.errors import (
    PokerError, InvalidCardError, InvalidDealError, InvalidActionError,
)
from texaspoker.core.player import Player, PlayerState
from texaspoker.core.hand import HandRank, BestHand, best_hand, get_rank, compare_hands
from texaspoker.core.rules import GamePhase, ActionType, Action
from texaspoker.core.state import HandState
from texaspoker.core.betting import BettingRound, BettingResult, legal_actions
from texaspoker.core.game import TexasHoldemGame, HandResult

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "PokerError",
    "InvalidCardError",
    "InvalidDealError",
    "InvalidActionError",
    "Player",
    "PlayerState",
    "HandRank",
    "BestHand",
    "best_hand",
    "get_rank",
    "compare_hands",
    "GamePhase",
    "ActionType",
    "Action",
    "HandState",
    "BettingRound",
    "BettingResult",
    "legal_actions",
    "TexasHoldemGame",
    "HandResult",
]
