"""Hand rankings from the external ranking service.

The decision policy talks to the service through ``HandRankingOracle`` so
tests can substitute a deterministic stub. An oracle answers ``None`` when no
ranking is available; it never raises.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

from donkey.exceptions import GameStateError, OracleUnavailableError
from donkey.poker.core.cards import Card, cards_from_list


@dataclass(frozen=True)
class HandRanking:
    """Ranking service answer. Only ``rank`` drives decisions."""

    rank: int
    value: int = 0
    second_value: int = 0
    kickers: Tuple[int, ...] = ()
    cards_used: Tuple[Card, ...] = field(default_factory=tuple)
    cards: Tuple[Card, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> HandRanking:
        """Parse a ranking response body.

        Raises:
            OracleUnavailableError: if a field is missing, has the wrong type or
                is not a finite number.
        """
        try:
            return cls(
                rank=int(data["rank"]),
                value=int(data["value"]),
                second_value=int(data["second_value"]),
                kickers=tuple(int(k) for k in data["kickers"]),
                cards_used=tuple(cards_from_list(data["cards_used"])),
                cards=tuple(cards_from_list(data["cards"])),
            )
        except (KeyError, TypeError, ValueError, ArithmeticError, GameStateError) as e:
            raise OracleUnavailableError(f"Malformed ranking response: {e}") from e


@runtime_checkable
class HandRankingOracle(Protocol):
    """Anything that can rank a set of known cards."""

    def rank(self, cards: Sequence[Card]) -> Optional[HandRanking]:
        """Rank ``cards`` (hole cards first), or ``None`` when unavailable."""
        ...


class NullOracle:
    """Oracle that is never available. Used when no ranking service is wired."""

    def rank(self, cards: Sequence[Card]) -> Optional[HandRanking]:
        return None


def encode_cards(cards: Sequence[Card]) -> List[Dict[str, str]]:
    """Wire form of ``cards`` for the ranking request."""
    return [card.to_dict() for card in cards]
