"""
texaspoker Agents - decision makers for seated players

This module provides the base agent interface and sample implementations.
"""

from texaspoker.agents.base import BaseAgent, normalize_action, safe_default
from texaspoker.agents.random_agent import RandomAgent, CallAgent, ScriptedAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "CallAgent",
    "ScriptedAgent",
    "normalize_action",
    "safe_default",
]
