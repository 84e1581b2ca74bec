"""
texaspoker - Texas Hold'em Hand Engine

A pure Python core for a single table of Texas Hold'em:
- Card/Deck model with seeded shuffling
- Best-of-seven hand evaluation
- Betting round orchestration with pluggable async agents
- Round controller from blinds to showdown

Usage:
    from texaspoker.core import Card, Deck, Player, TexasHoldemGame
    from texaspoker.agents import BaseAgent, RandomAgent
"""

__version__ = "0.2.0"

from texaspoker.core.card import Card, Deck
from texaspoker.core.player import Player
from texaspoker.core.game import TexasHoldemGame, HandResult
from texaspoker.core.hand import HandRank, best_hand

__all__ = [
    "Card",
    "Deck",
    "Player",
    "TexasHoldemGame",
    "HandResult",
    "HandRank",
    "best_hand",
    "__version__",
]
