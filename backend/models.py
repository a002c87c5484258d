"""Request and response models for the LeanPoker player protocol."""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from donkey.poker.adaptive import AdaptiveFactors
from donkey.poker.core import Card, GameState, PlayerState


class CardModel(BaseModel):
    """A card as the host sends it."""

    rank: str
    suit: str

    def to_card(self) -> Card:
        return Card(rank=self.rank, suit=self.suit)


class PlayerModel(BaseModel):
    """One seat in the host's game state."""

    id: int
    name: str
    status: str
    version: str = ""
    stack: int = Field(ge=0)
    bet: int = Field(ge=0)
    hole_cards: Optional[List[CardModel]] = None

    def to_player_state(self) -> PlayerState:
        hole_cards = None
        if self.hole_cards is not None:
            hole_cards = tuple(card.to_card() for card in self.hole_cards)
        return PlayerState(
            id=self.id,
            name=self.name,
            status=self.status,
            version=self.version,
            stack=self.stack,
            bet=self.bet,
            hole_cards=hole_cards,
        )


class GameStatePayload(BaseModel):
    """The ``game_state`` form field of a host request."""

    tournament_id: str
    game_id: str
    round: int
    bet_index: int = 0
    small_blind: int = Field(ge=0)
    current_buy_in: int = Field(ge=0)
    pot: int = Field(ge=0)
    minimum_raise: int = Field(ge=0)
    dealer: int
    orbits: int = 0
    in_action: int
    players: List[PlayerModel]
    community_cards: List[CardModel] = []

    def to_game_state(self) -> GameState:
        players: Tuple[PlayerState, ...] = tuple(p.to_player_state() for p in self.players)
        return GameState(
            tournament_id=self.tournament_id,
            game_id=self.game_id,
            round=self.round,
            bet_index=self.bet_index,
            small_blind=self.small_blind,
            current_buy_in=self.current_buy_in,
            pot=self.pot,
            minimum_raise=self.minimum_raise,
            dealer=self.dealer,
            orbits=self.orbits,
            in_action=self.in_action,
            players=players,
            community_cards=tuple(card.to_card() for card in self.community_cards),
        )


class FactorsResponse(BaseModel):
    """Adaptive factors and the games they are computed from."""

    aggressiveness: float
    looseness: float
    window: List[List[str]]
    refresh_running: bool

    @classmethod
    def build(cls, factors: AdaptiveFactors, window: List[Tuple[str, str]], running: bool) -> "FactorsResponse":
        return cls(
            aggressiveness=factors.aggressiveness,
            looseness=factors.looseness,
            window=[list(key) for key in window],
            refresh_running=running,
        )
