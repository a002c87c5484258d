"""
Betting module for the donkey bot.

This package provides the betting phases and actions, the phase threshold
table and the decision policy built on them.
"""

from donkey.poker.betting.actions import BettingAction, BettingRound
from donkey.poker.betting.decision import BetDecision, decide_bet, fold, raise_by, stay_in
from donkey.poker.betting.phase import classify_phase
from donkey.poker.betting.rules import PHASE_RULES, PhaseRules, Tier

__all__ = [
    "BetDecision",
    "BettingAction",
    "BettingRound",
    "PHASE_RULES",
    "PhaseRules",
    "Tier",
    "classify_phase",
    "decide_bet",
    "fold",
    "raise_by",
    "stay_in",
]
