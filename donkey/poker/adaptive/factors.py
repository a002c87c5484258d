"""Adaptive factors that scale the decision thresholds.

``AdaptiveFactors`` is an immutable snapshot handed to the decision policy.
``AdaptiveFactorsStore`` is the process-lifetime holder shared between the
decision path and the background log refresh.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Sequence, Tuple

from donkey.config.poker import (
    AGGRESSIVENESS_FLOOR,
    AGGRESSIVENESS_TIERS,
    FACTOR_MAX,
    FACTOR_MIN,
    FACTOR_NEUTRAL,
    LOOSENESS_FLOOR,
    LOOSENESS_TIERS,
)

logger = logging.getLogger(__name__)


def clamp_factor(value: float) -> float:
    return max(FACTOR_MIN, min(FACTOR_MAX, value))


@dataclass(frozen=True)
class AdaptiveFactors:
    """Multipliers applied by the decision policy.

    Attributes:
        aggressiveness: Scales raise sizes. Above 1.0 raises bigger.
        looseness: Scales oracle ranks and the prices the bot will pay.
            Above 1.0 plays more hands.
    """

    aggressiveness: float = FACTOR_NEUTRAL
    looseness: float = FACTOR_NEUTRAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "aggressiveness", clamp_factor(self.aggressiveness))
        object.__setattr__(self, "looseness", clamp_factor(self.looseness))

    @classmethod
    def neutral(cls) -> AdaptiveFactors:
        return cls()


def _step(rate: float, tiers: Sequence[Tuple[float, float]], floor: float) -> float:
    for threshold, factor in tiers:
        if rate > threshold:
            return factor
    return floor


def factors_from_rates(win_rate: float, fold_rate: float) -> AdaptiveFactors:
    """Winning often raises aggressiveness; folding often loosens play."""
    return AdaptiveFactors(
        aggressiveness=_step(win_rate, AGGRESSIVENESS_TIERS, AGGRESSIVENESS_FLOOR),
        looseness=_step(fold_rate, LOOSENESS_TIERS, LOOSENESS_FLOOR),
    )


class AdaptiveFactorsStore:
    """Thread-safe holder for the current factors."""

    def __init__(self, initial: AdaptiveFactors | None = None):
        self._factors = initial or AdaptiveFactors.neutral()
        self._lock = threading.Lock()

    def snapshot(self) -> AdaptiveFactors:
        with self._lock:
            return self._factors

    def update(self, factors: AdaptiveFactors) -> None:
        with self._lock:
            previous = self._factors
            self._factors = factors
        if previous != factors:
            logger.info(
                "Adaptive factors updated: aggressiveness %.2f -> %.2f, looseness %.2f -> %.2f",
                previous.aggressiveness,
                factors.aggressiveness,
                previous.looseness,
                factors.looseness,
            )
