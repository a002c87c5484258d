"""
Card structures for LeanPoker game states.

Cards arrive from the host as ``{"rank": "10", "suit": "hearts"}`` objects.
They are kept in that wire form so they can be sent back to the ranking
service unchanged; numeric rank values are derived on demand.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterable, List

from donkey.exceptions import GameStateError


class Suit:
    """Suit names used by the LeanPoker host."""

    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"


class Rank(IntEnum):
    """Card ranks (2-14, where 14 is Ace)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


_RANK_VALUES: Dict[str, int] = {
    "2": 2,
    "3": 3,
    "4": 4,
    "5": 5,
    "6": 6,
    "7": 7,
    "8": 8,
    "9": 9,
    "10": 10,
    "J": 11,
    "Q": 12,
    "K": 13,
    "A": 14,
}


def rank_value(rank: str) -> int:
    """Numeric value of a rank string; unknown ranks are worth 0."""
    return _RANK_VALUES.get(rank, 0)


@dataclass(frozen=True)
class Card:
    """Represents a single playing card."""

    rank: str
    suit: str

    @property
    def value(self) -> int:
        return rank_value(self.rank)

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Card":
        """Build a card from a ``{"rank", "suit"}`` mapping."""
        try:
            return cls(rank=str(data["rank"]), suit=str(data["suit"]))
        except (KeyError, TypeError) as e:
            raise GameStateError(f"Malformed card: {data!r}") from e

    def to_dict(self) -> Dict[str, str]:
        return {"rank": self.rank, "suit": self.suit}


def cards_from_list(items: Iterable[Dict[str, Any]]) -> List[Card]:
    """Parse a list of card mappings."""
    return [Card.from_dict(item) for item in items]
