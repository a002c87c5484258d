"""Historical game logs and the statistics derived from them.

Log bodies are expected to look like::

    {"rounds": [{"players": [{"name": ..., "action": "raise", "bet": 40,
                              "hole_cards": [...]}]}],
     "result": {"winner": "the donkey killers"}}

Anything that does not fit is skipped rather than failing the analysis.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from donkey.exceptions import GameLogError, GameStateError
from donkey.poker.core.cards import cards_from_list
from donkey.poker.core.game_state import GameKey
from donkey.poker.evaluation.hand_patterns import is_weak_hand

logger = logging.getLogger(__name__)

AGGRESSIVE_ACTIONS = ("raise", "all_in")
BETTING_ACTIONS = AGGRESSIVE_ACTIONS + ("call",)


@dataclass
class GameLog:
    """One fetched game transcript."""

    tournament_id: str
    game_id: str
    rounds: List[Dict[str, Any]] = field(default_factory=list)
    result: Optional[Dict[str, Any]] = None
    fetched_at: float = field(default_factory=time.time)

    @property
    def key(self) -> GameKey:
        return (self.tournament_id, self.game_id)

    @classmethod
    def from_dict(cls, key: GameKey, data: Any) -> GameLog:
        """Parse a log-service response body.

        Raises:
            GameLogError: if the body is not a JSON object or ``rounds`` is not a list.
        """
        if not isinstance(data, dict):
            raise GameLogError(f"Game log for {key} is not an object")

        rounds = data.get("rounds", [])
        if not isinstance(rounds, list):
            raise GameLogError(f"Game log for {key} has malformed rounds")

        result = data.get("result")
        return cls(
            tournament_id=key[0],
            game_id=key[1],
            rounds=[r for r in rounds if isinstance(r, dict)],
            result=result if isinstance(result, dict) else None,
        )


@dataclass(frozen=True)
class GameAnalysis:
    """Our own tendencies over a batch of games. Rates are in [0, 1]."""

    aggressiveness: float
    win_rate: float
    fold_rate: float
    bluff_frequency: float
    average_bet_size: float
    games: int
    actions: int


def _rate(count: float, total: int) -> float:
    return count / total if total > 0 else 0.0


def _name_matches(name: Any, identity: str) -> bool:
    return isinstance(name, str) and name.casefold() == identity.casefold()


def _raised_with_weak_hand(entry: Dict[str, Any]) -> bool:
    try:
        return is_weak_hand(cards_from_list(entry.get("hole_cards") or []))
    except (GameStateError, TypeError):
        return False


def analyze_game_logs(logs: Sequence[GameLog], identity: str) -> Optional[GameAnalysis]:
    """Summarize ``identity``'s play across ``logs``.

    Returns:
        The analysis, or ``None`` when there are no logs to analyse.
    """
    if not logs:
        return None

    wins = 0
    folds = 0
    bluffs = 0
    aggressive_actions = 0
    total_actions = 0
    total_bets = 0.0
    bet_count = 0

    for log in logs:
        for round_entry in log.rounds:
            players = round_entry.get("players")
            if not isinstance(players, list):
                continue

            for entry in players:
                if not isinstance(entry, dict) or not _name_matches(entry.get("name"), identity):
                    continue

                action = str(entry.get("action", "")).lower()
                try:
                    bet = float(entry.get("bet", 0) or 0)
                except (TypeError, ValueError):
                    bet = 0.0

                total_actions += 1
                if action == "fold":
                    folds += 1
                if action in AGGRESSIVE_ACTIONS:
                    aggressive_actions += 1
                if action in BETTING_ACTIONS and bet > 0:
                    total_bets += bet
                    bet_count += 1
                if action == "raise" and _raised_with_weak_hand(entry):
                    bluffs += 1

        if log.result and _name_matches(log.result.get("winner"), identity):
            wins += 1

    analysis = GameAnalysis(
        aggressiveness=_rate(aggressive_actions, total_actions),
        win_rate=_rate(wins, len(logs)),
        fold_rate=_rate(folds, total_actions),
        bluff_frequency=_rate(bluffs, total_actions),
        average_bet_size=total_bets / bet_count if bet_count > 0 else 0.0,
        games=len(logs),
        actions=total_actions,
    )
    logger.debug("Game log analysis: %s", analysis)
    return analysis
