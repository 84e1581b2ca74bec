"""
Exceptions raised by the poker core.

All of them are precondition failures reported synchronously to the caller
of the violating operation. They subclass ValueError so callers that only
care about "bad input" can keep catching that.
"""


class PokerError(Exception):
    """Base class for all poker core errors."""


class InvalidCardError(PokerError, ValueError):
    """A card was built from a rank or suit outside the fixed sets."""


class InvalidDealError(PokerError, ValueError):
    """More cards were requested than remain in the deck."""


class InvalidActionError(PokerError, ValueError):
    """A player action is not legal in the current betting state."""
