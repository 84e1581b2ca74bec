"""
Card and Deck classes for Texas Hold'em.

Cards are immutable values identified by a rank symbol (2-10, J, Q, K, A)
and a suit symbol (♠ ♥ ♦ ♣). The deck is an immutable ordered sequence:
shuffling and dealing return new decks instead of mutating the old one, so
the round controller can swap its deck reference in a single assignment.
"""

from __future__ import annotations
import random
from collections import Counter
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union
from enum import IntEnum

from texaspoker.core.errors import InvalidCardError, InvalidDealError


class Suit(IntEnum):
    """Card suits."""
    SPADES = 0    # ♠
    HEARTS = 1    # ♥
    DIAMONDS = 2  # ♦
    CLUBS = 3     # ♣


class Rank(IntEnum):
    """Card ranks, valued 2 (lowest) to 14 (Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}

SUIT_CHARS = {
    Suit.SPADES: "s",
    Suit.HEARTS: "h",
    Suit.DIAMONDS: "d",
    Suit.CLUBS: "c",
}

RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# The fixed symbol sets, in deck order
SUITS: Tuple[str, ...] = tuple(SUIT_SYMBOLS[s] for s in Suit)
RANKS: Tuple[str, ...] = tuple(RANK_SYMBOLS[r] for r in Rank)

# Reverse mappings
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_RANK["T"] = Rank.TEN  # Also accept "T"
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}


def _coerce_rank(rank: Union[Rank, str]) -> Rank:
    if isinstance(rank, Rank):
        return rank
    if isinstance(rank, str) and rank.upper() in SYMBOL_TO_RANK:
        return SYMBOL_TO_RANK[rank.upper()]
    raise InvalidCardError(f"Invalid rank: {rank!r}. Must be one of {', '.join(RANKS)}")


def _coerce_suit(suit: Union[Suit, str]) -> Suit:
    if isinstance(suit, Suit):
        return suit
    if isinstance(suit, str):
        if suit in SYMBOL_TO_SUIT:
            return SYMBOL_TO_SUIT[suit]
        if suit.lower() in CHAR_TO_SUIT:
            return CHAR_TO_SUIT[suit.lower()]
    raise InvalidCardError(f"Invalid suit: {suit!r}. Must be one of {', '.join(SUITS)}")


class Card:
    """
    An immutable playing card.

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - Rank and suit symbols: Card("A", "♠"), Card("10", "♥")
    - String notation: Card.from_string("As"), Card.from_string("10♠")

    `value` is the numeric rank, 2 through 14 (Ace high).
    """

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank: Union[Rank, str], suit: Union[Suit, str]):
        object.__setattr__(self, "_rank", _coerce_rank(rank))
        object.__setattr__(self, "_suit", _coerce_suit(suit))

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    def __reduce__(self):
        # copy, deepcopy and pickle rebuild through __init__
        return (Card, (self._rank, self._suit))

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts formats:
        - "As", "Kh", "Td", "2c" (rank + suit char)
        - "A♠", "K♥", "10♦", "2♣" (rank + suit symbol)
        """
        s = s.strip()
        if len(s) < 2:
            raise InvalidCardError(f"Invalid card string: {s!r}")
        return cls(s[:-1], s[-1])

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def value(self) -> int:
        """Numeric value, 2-14."""
        return int(self._rank)

    @property
    def rank_symbol(self) -> str:
        return RANK_SYMBOLS[self._rank]

    @property
    def suit_symbol(self) -> str:
        return SUIT_SYMBOLS[self._suit]

    def to_int(self) -> int:
        """Return a unique integer 0-51 for this card."""
        return (self.value - 2) * 4 + int(self._suit)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return False

    def __hash__(self) -> int:
        return self.to_int()

    def __lt__(self, other: Card) -> bool:
        """Compare by rank only (for sorting)."""
        return self._rank < other._rank

    def __repr__(self) -> str:
        return f"Card({self.rank_symbol}{SUIT_CHARS[self._suit]})"

    def __str__(self) -> str:
        return f"{self.rank_symbol}{self.suit_symbol}"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self._suit in (Suit.HEARTS, Suit.DIAMONDS) else "black"

    def to_dict(self) -> dict:
        """Convert to dictionary for snapshot events."""
        return {
            "rank": self.rank_symbol,
            "suit": self.suit_symbol,
            "value": self.value,
            "text": str(self),
            "color": self.color,
        }


class Deck:
    """
    An immutable ordered deck of cards.

    Usage:
        deck = Deck.standard().shuffle(random.Random(42))
        hole_cards, deck = deck.deal(2)
        _, deck = deck.burn()
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card]):
        self._cards: Tuple[Card, ...] = tuple(cards)

    @classmethod
    def standard(cls) -> Deck:
        """A full 52-card deck in suit-major order."""
        return cls(Card(rank, suit) for suit in Suit for rank in Rank)

    def shuffle(self, rng: Optional[random.Random] = None) -> Deck:
        """
        Return a new deck holding a uniform random permutation of this one.

        Args:
            rng: Random generator to draw from. Pass a seeded instance
                for reproducible deals.
        """
        rng = rng or random.Random()
        cards = list(self._cards)
        rng.shuffle(cards)  # Fisher-Yates
        return Deck(cards)

    def deal(self, n: int = 1) -> Tuple[List[Card], Deck]:
        """
        Deal n cards from the top of the deck.

        Returns:
            Tuple of (dealt cards, deck holding the remainder)

        Raises:
            InvalidDealError: If not enough cards remain.
        """
        if n < 0:
            raise InvalidDealError(f"Cannot deal a negative number of cards ({n})")
        if n > len(self._cards):
            raise InvalidDealError(f"Cannot deal {n} cards, only {len(self._cards)} remain")
        return list(self._cards[:n]), Deck(self._cards[n:])

    def deal_one(self) -> Tuple[Card, Deck]:
        """Deal a single card."""
        cards, rest = self.deal(1)
        return cards[0], rest

    def burn(self) -> Tuple[Card, Deck]:
        """Burn (discard) the top card."""
        return self.deal_one()

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Deck({self.remaining} cards remaining)"


def count_by_value(cards: Sequence[Card]) -> Dict[int, int]:
    """Map each card value to the number of cards holding it."""
    return dict(Counter(c.value for c in cards))


def count_by_suit(cards: Sequence[Card]) -> Dict[Suit, int]:
    """Map each suit to the number of cards holding it."""
    return dict(Counter(c.suit for c in cards))


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse multiple space-separated cards from a string.

    Accepts "As Kh Td", "A♠ K♥ 10♦" or a mix of both.
    """
    return [Card.from_string(s) for s in cards_str.split()]
