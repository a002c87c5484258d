"""
Poker decision system for the donkey bot.

This package provides:
- Core records (cards, game-state snapshot)
- Hand evaluation (starting-hand categories, straight patterns, ranking service interface)
- Betting decisions (phase classifier, threshold table, policy)
- Adaptive play (factors and the game-log feedback loop)
"""

from donkey.poker.adaptive import (
    AdaptiveFactors,
    AdaptiveFactorsStore,
    FeedbackLoop,
    GameLog,
    GameLogSource,
)
from donkey.poker.betting import (
    BetDecision,
    BettingAction,
    BettingRound,
    classify_phase,
    decide_bet,
)
from donkey.poker.core import Card, GameState, PlayerState
from donkey.poker.evaluation import HandRanking, HandRankingOracle, NullOracle

__all__ = [
    # Core
    "Card",
    "GameState",
    "PlayerState",
    # Evaluation
    "HandRanking",
    "HandRankingOracle",
    "NullOracle",
    # Betting
    "BetDecision",
    "BettingAction",
    "BettingRound",
    "classify_phase",
    "decide_bet",
    # Adaptive
    "AdaptiveFactors",
    "AdaptiveFactorsStore",
    "FeedbackLoop",
    "GameLog",
    "GameLogSource",
]
