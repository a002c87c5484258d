"""
Starting-hand categories and straight pattern checks.

These are heuristics layered on top of the ranking service, not a hand
evaluator. Every function is pure and works on the wire-form ``Card``.
"""

from typing import List, Sequence

from donkey.config.poker import WEAK_HAND_RANK_CEILING
from donkey.poker.core.cards import Card, Rank

_WHEEL_DRAW = {Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR}
_WHEEL = _WHEEL_DRAW | {Rank.FIVE}


def _sorted_values(hole_cards: Sequence[Card]) -> List[int]:
    return sorted(card.value for card in hole_cards)


def _is_suited(hole_cards: Sequence[Card]) -> bool:
    return hole_cards[0].suit == hole_cards[1].suit


def is_premium_hand(hole_cards: Sequence[Card]) -> bool:
    """AA, KK, QQ or AK (suited or not)."""
    if len(hole_cards) != 2:
        return False

    low, high = _sorted_values(hole_cards)
    if low == high:
        return low in (Rank.ACE, Rank.KING, Rank.QUEEN)
    return (low, high) == (Rank.KING, Rank.ACE)


def is_strong_hand(hole_cards: Sequence[Card]) -> bool:
    """JJ, TT, AQ, AJ or KQ (suited or not)."""
    if len(hole_cards) != 2:
        return False

    low, high = _sorted_values(hole_cards)
    if low == high:
        return low in (Rank.JACK, Rank.TEN)
    return (low, high) in (
        (Rank.QUEEN, Rank.ACE),
        (Rank.JACK, Rank.ACE),
        (Rank.QUEEN, Rank.KING),
    )


def is_playable_hand(hole_cards: Sequence[Card]) -> bool:
    """Medium pairs, suited aces, suited connectors and one-gappers from 7 up."""
    if len(hole_cards) != 2:
        return False

    low, high = _sorted_values(hole_cards)

    # 66 through 99
    if low == high:
        return Rank.SIX <= low <= Rank.NINE

    if not _is_suited(hole_cards):
        return False

    # A2s through A9s
    if high == Rank.ACE and Rank.TWO <= low <= Rank.NINE:
        return True

    # 78s and up, 79s and up
    return high - low in (1, 2) and low >= Rank.SEVEN


def is_weak_hand(hole_cards: Sequence[Card]) -> bool:
    """Both of the first two cards below eight."""
    if len(hole_cards) < 2:
        return False
    return all(card.value < WEAK_HAND_RANK_CEILING for card in hole_cards[:2])


def _distinct_values(cards: Sequence[Card]) -> List[int]:
    return sorted({card.value for card in cards})


def _run_lengths(values: List[int]) -> List[int]:
    """Length of the consecutive run starting at each index of ``values``."""
    lengths = [1] * len(values)
    for i in range(len(values) - 2, -1, -1):
        if values[i + 1] == values[i] + 1:
            lengths[i] = lengths[i + 1] + 1
    return lengths


def has_open_ended_straight_draw(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> bool:
    """Four to a straight that can be completed at either end.

    A-2-3-4 also counts, with the ace playing low.
    """
    values = _distinct_values(list(hole_cards) + list(community_cards))

    for start, length in zip(values, _run_lengths(values)):
        if length == 4:
            low, high = start, start + 3
            if low > 1 and high < Rank.ACE:
                return True

    return _WHEEL_DRAW.issubset(values)


def has_straight(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> bool:
    """Five or more consecutive ranks among all known cards, or the wheel."""
    values = _distinct_values(list(hole_cards) + list(community_cards))

    if any(length >= 5 for length in _run_lengths(values)):
        return True

    return _WHEEL.issubset(values)
