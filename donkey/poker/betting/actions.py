"""
Betting rounds and actions for Texas Hold'em poker.

This module defines the betting phases the bot distinguishes and the actions
it can take. The host only ever sees an amount; the action is kept so fold and
check stay distinguishable in logs and tests.
"""

from enum import IntEnum


class BettingRound(IntEnum):
    """Betting rounds in Texas Hold'em."""

    PRE_FLOP = 0
    FLOP = 1
    TURN = 2
    RIVER = 3


class BettingAction(IntEnum):
    """Possible betting actions."""

    FOLD = 0
    CHECK = 1
    CALL = 2
    RAISE = 3
