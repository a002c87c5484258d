"""
Core poker records: cards and the host's game-state snapshot.
"""

from donkey.poker.core.cards import Card, Rank, Suit, cards_from_list, rank_value
from donkey.poker.core.game_state import ACTIVE_STATUS, GameKey, GameState, PlayerState

__all__ = [
    # Cards
    "Card",
    "Rank",
    "Suit",
    "cards_from_list",
    "rank_value",
    # Game State
    "ACTIVE_STATUS",
    "GameKey",
    "GameState",
    "PlayerState",
]
