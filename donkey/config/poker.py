"""Poker decision configuration constants.

Multipliers are expressed in small blinds. Raise sizes scale with the
aggressiveness factor; price caps and oracle ranks scale with the looseness
factor.
"""

# Pre-flop raise sizes
PREFLOP_PREMIUM_RAISE_BLINDS = 3  # AA, KK, QQ, AK
PREFLOP_STRONG_RAISE_BLINDS = 2  # JJ, TT, AQ, AJ, KQ

# Pre-flop price caps for playable hands
PREFLOP_LIMP_CAP_BLINDS = 2  # Limp when nobody has raised
PREFLOP_CALL_CAP_BLINDS = 4  # Call a modest raise

# Flop tiers (oracle rank after looseness scaling)
FLOP_RAISE_RANK = 6
FLOP_RAISE_BLINDS = 2
FLOP_CALL_RANK = 4
FLOP_CALL_CAP_BLINDS = 3
FLOP_MARGINAL_RANK = 2
FLOP_MARGINAL_CAP_BLINDS = 2
FLOP_DRAW_CAP_BLINDS = 3

# Turn tiers
TURN_BIG_RAISE_RANK = 7
TURN_BIG_RAISE_BLINDS = 3
TURN_RAISE_RANK = 5
TURN_RAISE_BLINDS = 2
TURN_RAISE_CAP_BLINDS = 4  # Above this price the hand only calls
TURN_CALL_RANK = 3
TURN_CALL_CAP_BLINDS = 3
TURN_DRAW_CAP_BLINDS = 2  # Worse pot odds with one card to come

# River tiers
RIVER_STRAIGHT_RAISE_BLINDS = 4  # Made straight, value bet without the oracle
RIVER_BIG_RAISE_RANK = 8
RIVER_BIG_RAISE_BLINDS = 4
RIVER_RAISE_RANK = 6
RIVER_RAISE_BLINDS = 2
RIVER_CALL_RANK = 4
RIVER_CALL_CAP_BLINDS = 3
RIVER_MARGINAL_RANK = 2
RIVER_MARGINAL_CAP_BLINDS = 1

# Fallbacks
PROBE_BET_PROBABILITY = 0.1  # Chance of a small bet when the oracle is down and nothing is owed
PROBE_BET_BLINDS = 1

# Adaptive factors
FACTOR_NEUTRAL = 1.0
FACTOR_MIN = 0.5
FACTOR_MAX = 2.0

# (win rate strictly above, aggressiveness); last entry is the floor
AGGRESSIVENESS_TIERS = ((0.6, 1.3), (0.4, 1.1), (0.2, 0.9))
AGGRESSIVENESS_FLOOR = 0.7

# (fold rate strictly above, looseness); last entry is the floor
LOOSENESS_TIERS = ((0.7, 1.2), (0.5, 1.0), (0.3, 0.9))
LOOSENESS_FLOOR = 0.8

# Feedback loop
GAME_LOG_WINDOW_SIZE = 10  # Recent games kept for analysis
GAME_LOG_REFRESH_EVERY_ROUNDS = 5  # Refresh when round % N == 0
WEAK_HAND_RANK_CEILING = 8  # Both hole cards below this rank count as weak (bluff detection)
