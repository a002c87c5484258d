"""
Betting decision logic for the donkey bot.

One policy covers every phase: the phase selects a row set from
``PHASE_RULES`` and the tiers are walked top-down. The policy is a pure
function of the game state, the adaptive factors, the oracle's answer and the
injected RNG.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence

from donkey.config.poker import PROBE_BET_BLINDS, PROBE_BET_PROBABILITY
from donkey.exceptions import OracleUnavailableError
from donkey.poker.adaptive.factors import AdaptiveFactors
from donkey.poker.betting.actions import BettingAction, BettingRound
from donkey.poker.betting.phase import classify_phase
from donkey.poker.betting.rules import PHASE_RULES, PhaseRules, Tier
from donkey.poker.core.cards import Card
from donkey.poker.core.game_state import GameState, PlayerState
from donkey.poker.evaluation.hand_patterns import has_open_ended_straight_draw, has_straight
from donkey.poker.evaluation.ranking import HandRanking, HandRankingOracle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BetDecision:
    """What the bot decided. The host only receives ``amount``."""

    amount: int
    action: BettingAction
    phase: BettingRound
    reason: str


def scaled(small_blind: int, blinds: float, factor: float) -> int:
    """``small_blind * blinds * factor`` truncated to whole chips."""
    return int(small_blind * blinds * factor)


def stay_in(game_state: GameState, phase: BettingRound, reason: str) -> BetDecision:
    """Check when nothing is owed, otherwise call. Never raises."""
    if game_state.current_buy_in == 0:
        return BetDecision(0, BettingAction.CHECK, phase, reason)
    return BetDecision(game_state.current_buy_in, BettingAction.CALL, phase, reason)


def raise_by(game_state: GameState, amount: int, phase: BettingRound, reason: str) -> BetDecision:
    """Raise on top of the current buy-in, never below the table minimum."""
    total = game_state.current_buy_in + max(amount, game_state.minimum_raise)
    return BetDecision(total, BettingAction.RAISE, phase, reason)


def fold(game_state: GameState, phase: BettingRound, reason: str) -> BetDecision:
    """Give up the hand. Surfaces as a check when nothing is owed."""
    action = BettingAction.CHECK if game_state.current_buy_in == 0 else BettingAction.FOLD
    return BetDecision(0, action, phase, reason)


def _blind_fallback(game_state: GameState, phase: BettingRound) -> BetDecision:
    """No hole cards to judge: open for a small blind into an unopened pot."""
    # Exactly one small blind, not floored at minimum_raise like raise_by
    if game_state.every_active_bet_is_zero():
        return BetDecision(game_state.small_blind, BettingAction.RAISE, phase, "unopened pot, blind bet")
    return fold(game_state, phase, "no hole cards")


def _consult_oracle(oracle: HandRankingOracle, cards: Sequence[Card]) -> Optional[HandRanking]:
    try:
        return oracle.rank(cards)
    except OracleUnavailableError as e:
        logger.warning("Ranking unavailable: %s", e)
        return None


def _apply_tier(
    tier: Tier,
    game_state: GameState,
    factors: AdaptiveFactors,
    phase: BettingRound,
    reason: str,
) -> Optional[BetDecision]:
    action = tier.action
    if tier.price_cap_blinds is not None:
        cap = scaled(game_state.small_blind, tier.price_cap_blinds, factors.looseness)
        if game_state.current_buy_in > cap:
            if tier.over_cap_action is None:
                return None
            action = tier.over_cap_action

    if action == BettingAction.RAISE:
        amount = scaled(game_state.small_blind, tier.raise_blinds, factors.aggressiveness)
        return raise_by(game_state, amount, phase, reason)
    return stay_in(game_state, phase, reason)


def _probe_fallback(game_state: GameState, phase: BettingRound, rng: random.Random) -> BetDecision:
    """Oracle is down and nothing else applies: occasionally bet into an unopened pot."""
    if game_state.every_active_bet_is_zero() and rng.random() < PROBE_BET_PROBABILITY:
        amount = game_state.small_blind * PROBE_BET_BLINDS
        return raise_by(game_state, amount, phase, "ranking unavailable, probe bet")
    return fold(game_state, phase, "ranking unavailable")


def decide_bet(
    game_state: GameState,
    player: PlayerState,
    factors: AdaptiveFactors,
    oracle: HandRankingOracle,
    rng: random.Random,
    rules: Optional[PhaseRules] = None,
) -> BetDecision:
    """
    Decide how many chips to commit for ``player``.

    Args:
        game_state: Snapshot sent by the host.
        player: Our own seat in ``game_state``.
        factors: Adaptive factors snapshot for this call.
        oracle: Ranking service adapter; ``None`` answers mean unavailable.
        rng: Seeded Random used only by the probe-bet fallback.
        rules: Threshold table override; defaults to the phase's row set.

    Returns:
        The decision; ``amount`` is never negative.
    """
    phase = classify_phase(game_state.community_cards)
    hole_cards = player.hole_cards
    if not hole_cards:
        return _blind_fallback(game_state, phase)

    rules = rules or PHASE_RULES[phase]
    community_cards = game_state.community_cards

    # Made straight on the river, no draws left to fear
    if rules.straight_raise_blinds is not None and has_straight(hole_cards, community_cards):
        amount = scaled(game_state.small_blind, rules.straight_raise_blinds, factors.aggressiveness)
        return raise_by(game_state, amount, phase, "made straight")

    ranking = None
    adjusted_rank = None
    if rules.uses_oracle:
        ranking = _consult_oracle(oracle, game_state.known_cards(player))
        if ranking is not None:
            adjusted_rank = ranking.rank * factors.looseness

    for tier in rules.tiers:
        if not tier.qualifies(hole_cards, adjusted_rank):
            continue
        reason = tier.label if adjusted_rank is None else f"{tier.label} (rank {adjusted_rank:.1f})"
        decision = _apply_tier(tier, game_state, factors, phase, reason)
        if decision is not None:
            return decision

    if rules.draw_cap_blinds is not None and has_open_ended_straight_draw(hole_cards, community_cards):
        cap = scaled(game_state.small_blind, rules.draw_cap_blinds, factors.looseness)
        if game_state.current_buy_in <= cap:
            return stay_in(game_state, phase, "open-ended straight draw")

    if rules.uses_oracle and ranking is None:
        return _probe_fallback(game_state, phase, rng)

    return fold(game_state, phase, "weak hand or too expensive")
