"""Phase threshold table for the decision policy.

Each phase is a list of tiers evaluated top-down. A tier qualifies either by
starting-hand category (pre-flop) or by looseness-adjusted ranking-service
rank (post-flop). A qualifying tier whose price cap is exceeded falls through
to the next tier unless it names an ``over_cap_action``.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

from donkey.config.poker import (
    FLOP_CALL_CAP_BLINDS,
    FLOP_CALL_RANK,
    FLOP_DRAW_CAP_BLINDS,
    FLOP_MARGINAL_CAP_BLINDS,
    FLOP_MARGINAL_RANK,
    FLOP_RAISE_BLINDS,
    FLOP_RAISE_RANK,
    PREFLOP_CALL_CAP_BLINDS,
    PREFLOP_LIMP_CAP_BLINDS,
    PREFLOP_PREMIUM_RAISE_BLINDS,
    PREFLOP_STRONG_RAISE_BLINDS,
    RIVER_BIG_RAISE_BLINDS,
    RIVER_BIG_RAISE_RANK,
    RIVER_CALL_CAP_BLINDS,
    RIVER_CALL_RANK,
    RIVER_MARGINAL_CAP_BLINDS,
    RIVER_MARGINAL_RANK,
    RIVER_RAISE_BLINDS,
    RIVER_RAISE_RANK,
    RIVER_STRAIGHT_RAISE_BLINDS,
    TURN_BIG_RAISE_BLINDS,
    TURN_BIG_RAISE_RANK,
    TURN_CALL_CAP_BLINDS,
    TURN_CALL_RANK,
    TURN_DRAW_CAP_BLINDS,
    TURN_RAISE_BLINDS,
    TURN_RAISE_CAP_BLINDS,
    TURN_RAISE_RANK,
)
from donkey.poker.betting.actions import BettingAction, BettingRound
from donkey.poker.core.cards import Card
from donkey.poker.evaluation.hand_patterns import (
    is_playable_hand,
    is_premium_hand,
    is_strong_hand,
)

HandCategory = Callable[[Sequence[Card]], bool]


@dataclass(frozen=True)
class Tier:
    """One row of a phase's threshold table."""

    label: str
    action: BettingAction  # RAISE or CALL (stay in)
    raise_blinds: int = 0
    price_cap_blinds: Optional[int] = None
    over_cap_action: Optional[BettingAction] = None
    min_rank: Optional[int] = None
    category: Optional[HandCategory] = None

    def qualifies(self, hole_cards: Sequence[Card], adjusted_rank: Optional[float]) -> bool:
        if self.category is not None:
            return self.category(hole_cards)
        if self.min_rank is not None:
            return adjusted_rank is not None and adjusted_rank >= self.min_rank
        return False


@dataclass(frozen=True)
class PhaseRules:
    """Threshold table for one betting phase."""

    tiers: Tuple[Tier, ...]
    uses_oracle: bool = True
    draw_cap_blinds: Optional[int] = None  # None: draws are not played
    straight_raise_blinds: Optional[int] = None  # Made straight bets before the oracle is asked


PREFLOP_RULES = PhaseRules(
    tiers=(
        Tier("premium hand", BettingAction.RAISE, PREFLOP_PREMIUM_RAISE_BLINDS, category=is_premium_hand),
        Tier("strong hand", BettingAction.RAISE, PREFLOP_STRONG_RAISE_BLINDS, category=is_strong_hand),
        Tier(
            "playable hand, limp",
            BettingAction.CALL,
            price_cap_blinds=PREFLOP_LIMP_CAP_BLINDS,
            category=is_playable_hand,
        ),
        Tier(
            "playable hand, call",
            BettingAction.CALL,
            price_cap_blinds=PREFLOP_CALL_CAP_BLINDS,
            category=is_playable_hand,
        ),
    ),
    uses_oracle=False,
)

FLOP_RULES = PhaseRules(
    tiers=(
        Tier("very strong hand", BettingAction.RAISE, FLOP_RAISE_BLINDS, min_rank=FLOP_RAISE_RANK),
        Tier(
            "good hand",
            BettingAction.CALL,
            price_cap_blinds=FLOP_CALL_CAP_BLINDS,
            min_rank=FLOP_CALL_RANK,
        ),
        Tier(
            "marginal hand",
            BettingAction.CALL,
            price_cap_blinds=FLOP_MARGINAL_CAP_BLINDS,
            min_rank=FLOP_MARGINAL_RANK,
        ),
    ),
    draw_cap_blinds=FLOP_DRAW_CAP_BLINDS,
)

TURN_RULES = PhaseRules(
    tiers=(
        Tier("very strong hand", BettingAction.RAISE, TURN_BIG_RAISE_BLINDS, min_rank=TURN_BIG_RAISE_RANK),
        Tier(
            "strong hand",
            BettingAction.RAISE,
            TURN_RAISE_BLINDS,
            price_cap_blinds=TURN_RAISE_CAP_BLINDS,
            over_cap_action=BettingAction.CALL,
            min_rank=TURN_RAISE_RANK,
        ),
        Tier(
            "good hand",
            BettingAction.CALL,
            price_cap_blinds=TURN_CALL_CAP_BLINDS,
            min_rank=TURN_CALL_RANK,
        ),
    ),
    draw_cap_blinds=TURN_DRAW_CAP_BLINDS,
)

RIVER_RULES = PhaseRules(
    tiers=(
        Tier("premium hand", BettingAction.RAISE, RIVER_BIG_RAISE_BLINDS, min_rank=RIVER_BIG_RAISE_RANK),
        Tier("very strong hand", BettingAction.RAISE, RIVER_RAISE_BLINDS, min_rank=RIVER_RAISE_RANK),
        Tier(
            "good hand",
            BettingAction.CALL,
            price_cap_blinds=RIVER_CALL_CAP_BLINDS,
            min_rank=RIVER_CALL_RANK,
        ),
        Tier(
            "marginal hand",
            BettingAction.CALL,
            price_cap_blinds=RIVER_MARGINAL_CAP_BLINDS,
            min_rank=RIVER_MARGINAL_RANK,
        ),
    ),
    straight_raise_blinds=RIVER_STRAIGHT_RAISE_BLINDS,
)

PHASE_RULES: Dict[BettingRound, PhaseRules] = {
    BettingRound.PRE_FLOP: PREFLOP_RULES,
    BettingRound.FLOP: FLOP_RULES,
    BettingRound.TURN: TURN_RULES,
    BettingRound.RIVER: RIVER_RULES,
}
