"""The bot as the LeanPoker host sees it.

``Player`` wires the decision policy to its collaborators: the ranking
oracle, the adaptive factor store and the game-log feedback loop. The host
calls ``bet_request`` once per turn and ``showdown`` at the end of each hand.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from donkey.config.server import PLAYER_NAME, PLAYER_VERSION
from donkey.exceptions import OwnPlayerNotFoundError
from donkey.poker.adaptive import AdaptiveFactors, AdaptiveFactorsStore, FeedbackLoop, GameLogSource
from donkey.poker.betting import BetDecision, decide_bet
from donkey.poker.core import GameState, PlayerState
from donkey.poker.evaluation import HandRankingOracle, NullOracle

logger = logging.getLogger(__name__)


class Player:
    """Decision maker for one seat."""

    def __init__(
        self,
        identity: str = PLAYER_NAME,
        oracle: Optional[HandRankingOracle] = None,
        log_source: Optional[GameLogSource] = None,
        factors: Optional[AdaptiveFactorsStore] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the player.

        Args:
            identity: Registered name to find our seat by.
            oracle: Ranking service adapter. Defaults to one that is never available.
            log_source: Game-log fetcher. ``None`` keeps the factors neutral.
            factors: Factor store, shared with the feedback loop.
            rng: Random source for the probe-bet fallback.
        """
        self.identity = identity
        self.oracle: HandRankingOracle = oracle or NullOracle()
        self.factors = factors or AdaptiveFactorsStore()
        self.feedback = FeedbackLoop(log_source, self.factors, identity)
        self.rng = rng or random.Random()

    def own_player(self, game_state: GameState) -> PlayerState:
        """Our seat in ``game_state``.

        Raises:
            OwnPlayerNotFoundError: if no seat carries our name.
        """
        player = game_state.find_player(self.identity)
        if player is None:
            raise OwnPlayerNotFoundError(self.identity)
        return player

    def decide(self, game_state: GameState) -> BetDecision:
        """Full decision for this turn, including the reason behind it."""
        player = self.own_player(game_state)
        self.feedback.observe(game_state)

        decision = decide_bet(
            game_state,
            player,
            self.factors.snapshot(),
            self.oracle,
            self.rng,
        )
        logger.info(
            "Game %s round %d %s: %s %d (%s)",
            game_state.game_id,
            game_state.round,
            decision.phase.name,
            decision.action.name,
            decision.amount,
            decision.reason,
        )
        return decision

    def bet_request(self, game_state: GameState) -> int:
        """Chips to commit this turn: 0 checks or folds, ``current_buy_in`` calls."""
        return max(0, self.decide(game_state).amount)

    def showdown(self, game_state: GameState) -> None:
        """End of hand: remember the game so its log feeds the next refresh."""
        self.feedback.remember(game_state.key)
        logger.debug("Showdown for game %s round %d", game_state.game_id, game_state.round)

    def current_factors(self) -> AdaptiveFactors:
        return self.factors.snapshot()

    def version(self) -> str:
        return PLAYER_VERSION

    def close(self, timeout: float = 1.0) -> None:
        """Let an in-flight log refresh finish before shutdown."""
        self.feedback.wait(timeout)
