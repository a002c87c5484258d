"""
Adaptive play: factors that scale the decision thresholds and the game-log
feedback loop that tunes them.
"""

from donkey.poker.adaptive.factors import (
    AdaptiveFactors,
    AdaptiveFactorsStore,
    clamp_factor,
    factors_from_rates,
)
from donkey.poker.adaptive.feedback import FeedbackLoop, GameLogSource
from donkey.poker.adaptive.game_log import GameAnalysis, GameLog, analyze_game_logs

__all__ = [
    "AdaptiveFactors",
    "AdaptiveFactorsStore",
    "FeedbackLoop",
    "GameAnalysis",
    "GameLog",
    "GameLogSource",
    "analyze_game_logs",
    "clamp_factor",
    "factors_from_rates",
]
