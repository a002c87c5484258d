"""
Hand evaluation: starting-hand categories, straight patterns and the
ranking-service interface.
"""

from donkey.poker.evaluation.hand_patterns import (
    has_open_ended_straight_draw,
    has_straight,
    is_playable_hand,
    is_premium_hand,
    is_strong_hand,
    is_weak_hand,
)
from donkey.poker.evaluation.ranking import (
    HandRanking,
    HandRankingOracle,
    NullOracle,
    encode_cards,
)

__all__ = [
    # Hand patterns
    "has_open_ended_straight_draw",
    "has_straight",
    "is_playable_hand",
    "is_premium_hand",
    "is_strong_hand",
    "is_weak_hand",
    # Ranking service
    "HandRanking",
    "HandRankingOracle",
    "NullOracle",
    "encode_cards",
]
