"""Community-card count to betting phase."""

import logging
from typing import Sequence

from donkey.poker.betting.actions import BettingRound
from donkey.poker.core.cards import Card

logger = logging.getLogger(__name__)

_PHASE_BY_COUNT = {
    0: BettingRound.PRE_FLOP,
    3: BettingRound.FLOP,
    4: BettingRound.TURN,
    5: BettingRound.RIVER,
}


def classify_phase(community_cards: Sequence[Card]) -> BettingRound:
    """Map the number of community cards to a betting phase.

    Counts other than 0, 3, 4 or 5 cannot occur in a well-formed game; they
    are treated as pre-flop so a decision is still produced, and reported.
    """
    count = len(community_cards)
    phase = _PHASE_BY_COUNT.get(count)
    if phase is None:
        logger.warning(
            "Unexpected community card count %d, treating as pre-flop", count
        )
        return BettingRound.PRE_FLOP
    return phase
