"""
Game state snapshot received from the LeanPoker host.

A fresh snapshot is built for every decision call and never mutated; the
decision policy only reads from it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from donkey.poker.core.cards import Card

ACTIVE_STATUS = "active"

GameKey = Tuple[str, str]  # (tournament_id, game_id)


@dataclass(frozen=True)
class PlayerState:
    """One seat at the table."""

    id: int
    name: str
    status: str
    stack: int
    bet: int
    version: str = ""
    hole_cards: Optional[Tuple[Card, ...]] = None

    @property
    def is_active(self) -> bool:
        return self.status.lower() == ACTIVE_STATUS

    def matches(self, identity: str) -> bool:
        """Exact, case-insensitive name match."""
        return self.name.casefold() == identity.casefold()


@dataclass(frozen=True)
class GameState:
    """Everything the host tells us when it is our turn to act."""

    tournament_id: str
    game_id: str
    round: int
    small_blind: int
    current_buy_in: int
    pot: int
    minimum_raise: int
    dealer: int
    in_action: int
    players: Tuple[PlayerState, ...]
    community_cards: Tuple[Card, ...] = field(default_factory=tuple)
    bet_index: int = 0
    orbits: int = 0

    @property
    def key(self) -> GameKey:
        return (self.tournament_id, self.game_id)

    def find_player(self, identity: str) -> Optional[PlayerState]:
        """Return the first seat whose name matches ``identity``, if any."""
        return next((p for p in self.players if p.matches(identity)), None)

    def every_active_bet_is_zero(self) -> bool:
        """True when no active player has put chips in this betting round."""
        return not any(p.bet != 0 and p.is_active for p in self.players)

    def dealer_player(self) -> Optional[PlayerState]:
        """The seat holding the dealer button; ``dealer`` is a seat id."""
        return next((p for p in self.players if p.id == self.dealer), None)

    def is_small_blind(self, player: PlayerState) -> bool:
        """True when ``player`` sits directly after the dealer."""
        if not self.players:
            return False
        return player.id == (self.dealer + 1) % len(self.players)

    def known_cards(self, player: PlayerState) -> List[Card]:
        """The player's hole cards followed by the community cards."""
        return list(player.hole_cards or ()) + list(self.community_cards)
