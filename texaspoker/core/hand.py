"""
Hand Evaluation for Texas Hold'em.

This module picks the best 5-card hand out of 5-7 candidate cards by
enumerating every 5-card subset, classifying each one and keeping the best.
Hands of the same category are ordered by a category-specific tie-break.

Hand Rankings (best to worst):
10. Royal Flush: A♠ K♠ Q♠ J♠ 10♠
9. Straight Flush: 5 consecutive cards of same suit
8. Four of a Kind: 4 cards of same rank
7. Full House: 3 of a kind + pair
6. Flush: 5 cards of same suit
5. Straight: 5 consecutive cards
4. Three of a Kind: 3 cards of same rank
3. Two Pair: 2 different pairs
2. One Pair: 2 cards of same rank
1. High Card: No made hand

Note: Ace can be low in A-2-3-4-5 straight (wheel).
"""

from __future__ import annotations
from typing import Dict, List, NamedTuple, Optional, Sequence
from itertools import combinations
from enum import IntEnum

from texaspoker.core.card import Card, Rank, count_by_suit, count_by_value


class HandRank(IntEnum):
    """Hand categories, worst (lowest value) to best (highest value)."""
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10


# Hand rank names for display
HAND_RANK_NAMES = {
    HandRank.ROYAL_FLUSH: "Royal Flush",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FLUSH: "Flush",
    HandRank.STRAIGHT: "Straight",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.ONE_PAIR: "One Pair",
    HandRank.HIGH_CARD: "High Card",
}

HAND_SIZE = 5
WHEEL_VALUES = [2, 3, 4, 5, 14]

# Categories whose tie-break starts with the value(s) repeated `count` times
_GROUP_COUNTS = {
    HandRank.ONE_PAIR: (2,),
    HandRank.TWO_PAIR: (2,),
    HandRank.THREE_OF_A_KIND: (3,),
    HandRank.FULL_HOUSE: (3, 2),
    HandRank.FOUR_OF_A_KIND: (4,),
}


class BestHand(NamedTuple):
    """The best 5 cards found among the candidates, and their category."""
    cards: List[Card]
    rank: HandRank

    @property
    def description(self) -> str:
        return get_hand_description(self.cards)


def _check_hand_size(cards: Sequence[Card]) -> None:
    if len(cards) != HAND_SIZE:
        raise ValueError(f"Need exactly {HAND_SIZE} cards, got {len(cards)}")


def is_straight(cards: Sequence[Card]) -> bool:
    """
    Check whether five cards form a straight.

    Values sorted ascending must step by exactly one, except for the wheel
    (A-2-3-4-5) where the Ace plays low.
    """
    _check_hand_size(cards)
    values = sorted(c.value for c in cards)
    if values == WHEEL_VALUES:
        return True
    return all(b - a == 1 for a, b in zip(values, values[1:]))


def is_flush(cards: Sequence[Card]) -> bool:
    """Check whether five cards share one suit."""
    _check_hand_size(cards)
    return len(count_by_suit(cards)) == 1


def _is_royal(cards: Sequence[Card]) -> bool:
    values = sorted(c.value for c in cards)
    return values[0] == Rank.TEN and values[-1] == Rank.ACE


def get_rank(cards: Sequence[Card]) -> HandRank:
    """
    Classify exactly five cards.

    The checks run from the strongest category to the weakest, so the
    first match wins.

    Raises:
        ValueError: If not exactly 5 cards are provided
    """
    _check_hand_size(cards)

    straight = is_straight(cards)
    flush = is_flush(cards)
    counts = sorted(count_by_value(cards).values(), reverse=True)

    if straight and flush and _is_royal(cards):
        return HandRank.ROYAL_FLUSH
    if straight and flush:
        return HandRank.STRAIGHT_FLUSH
    if counts[0] == 4:
        return HandRank.FOUR_OF_A_KIND
    if counts == [3, 2]:
        return HandRank.FULL_HOUSE
    if flush:
        return HandRank.FLUSH
    if straight:
        return HandRank.STRAIGHT
    if counts[0] == 3:
        return HandRank.THREE_OF_A_KIND
    if counts.count(2) == 2:
        return HandRank.TWO_PAIR
    if counts.count(2) == 1:
        return HandRank.ONE_PAIR
    return HandRank.HIGH_CARD


def _values_with_count(counts: Dict[int, int], count: int) -> List[int]:
    """Values appearing exactly `count` times, highest first."""
    return sorted((v for v, c in counts.items() if c == count), reverse=True)


def _descending_values(cards: Sequence[Card], rank: HandRank) -> List[int]:
    """Card values sorted high to low; the wheel's Ace counts as 1."""
    values = sorted((c.value for c in cards), reverse=True)
    if rank in (HandRank.STRAIGHT, HandRank.STRAIGHT_FLUSH) and sorted(values) == WHEEL_VALUES:
        return [5, 4, 3, 2, 1]
    return values


def _compare_sequences(a: Sequence[int], b: Sequence[int]) -> int:
    for x, y in zip(a, b):
        if x > y:
            return 1
        if x < y:
            return -1
    return 0


def compare_same_rank(hand_a: Sequence[Card], hand_b: Sequence[Card], rank: HandRank) -> int:
    """
    Break the tie between two 5-card hands of the same category.

    Repeated-value categories first compare the repeated values (the pair,
    both pairs high to low, the trips, trips then pair, the quads). When
    those are equal, or for categories without repeated structure, both
    hands are compared card by card from the highest value down.

    Returns:
        1 if hand_a wins, -1 if hand_b wins, 0 on a true tie
    """
    _check_hand_size(hand_a)
    _check_hand_size(hand_b)

    if rank in _GROUP_COUNTS:
        counts_a = count_by_value(hand_a)
        counts_b = count_by_value(hand_b)
        for count in _GROUP_COUNTS[rank]:
            result = _compare_sequences(
                _values_with_count(counts_a, count),
                _values_with_count(counts_b, count),
            )
            if result:
                return result

    return _compare_sequences(_descending_values(hand_a, rank), _descending_values(hand_b, rank))


def best_hand(cards: Sequence[Card]) -> BestHand:
    """
    Find the best 5-card hand among 5-7 distinct cards.

    Every 5-card subset is classified; a subset replaces the best seen so
    far only when it is strictly better, so on a true tie the earlier
    subset is kept.

    Args:
        cards: Hole cards plus whatever community cards are available

    Raises:
        ValueError: If not 5-7 cards are provided, or cards repeat
    """
    if len(cards) < HAND_SIZE or len(cards) > 7:
        raise ValueError(f"Need 5-7 cards, got {len(cards)}")
    if len(set(cards)) != len(cards):
        raise ValueError(f"Duplicate cards in {[str(c) for c in cards]}")

    best: Optional[BestHand] = None
    for combo in combinations(cards, HAND_SIZE):
        candidate = BestHand(list(combo), get_rank(combo))
        if best is None or compare_hands(candidate, best) > 0:
            best = candidate
    return best


def compare_hands(hand_a: BestHand, hand_b: BestHand) -> int:
    """
    Compare two evaluated hands.

    Returns:
        1 if hand_a wins, -1 if hand_b wins, 0 if tie
    """
    if hand_a.rank != hand_b.rank:
        return 1 if hand_a.rank > hand_b.rank else -1
    return compare_same_rank(hand_a.cards, hand_b.cards, hand_a.rank)


def get_hand_description(cards: Sequence[Card]) -> str:
    """Get a human-readable description of the hand."""
    if len(cards) < HAND_SIZE:
        return "Incomplete hand"

    best_cards, hand_type = best_hand(cards)
    counts = count_by_value(best_cards)
    high = max(c.value for c in best_cards)

    if hand_type == HandRank.ROYAL_FLUSH:
        return "Royal Flush"
    elif hand_type == HandRank.STRAIGHT_FLUSH:
        return f"Straight Flush, {_rank_name(_descending_values(best_cards, hand_type)[0])} high"
    elif hand_type == HandRank.FOUR_OF_A_KIND:
        return f"Four of a Kind, {_rank_name(_values_with_count(counts, 4)[0])}s"
    elif hand_type == HandRank.FULL_HOUSE:
        trips = _values_with_count(counts, 3)[0]
        pair = _values_with_count(counts, 2)[0]
        return f"Full House, {_rank_name(trips)}s full of {_rank_name(pair)}s"
    elif hand_type == HandRank.FLUSH:
        return f"Flush, {_rank_name(high)} high"
    elif hand_type == HandRank.STRAIGHT:
        top = _descending_values(best_cards, hand_type)[0]
        if top == Rank.FIVE:
            return "Straight, Five high (Wheel)"
        return f"Straight, {_rank_name(top)} high"
    elif hand_type == HandRank.THREE_OF_A_KIND:
        return f"Three of a Kind, {_rank_name(_values_with_count(counts, 3)[0])}s"
    elif hand_type == HandRank.TWO_PAIR:
        pairs = _values_with_count(counts, 2)
        return f"Two Pair, {_rank_name(pairs[0])}s and {_rank_name(pairs[1])}s"
    elif hand_type == HandRank.ONE_PAIR:
        return f"Pair of {_rank_name(_values_with_count(counts, 2)[0])}s"
    else:
        return f"High Card, {_rank_name(high)}"


def _rank_name(value: int) -> str:
    """Get the name of a rank from its value."""
    names = {
        Rank.TWO: "Two", Rank.THREE: "Three", Rank.FOUR: "Four",
        Rank.FIVE: "Five", Rank.SIX: "Six", Rank.SEVEN: "Seven",
        Rank.EIGHT: "Eight", Rank.NINE: "Nine", Rank.TEN: "Ten",
        Rank.JACK: "Jack", Rank.QUEEN: "Queen", Rank.KING: "King",
        Rank.ACE: "Ace"
    }
    return names[Rank(value)]
