"""Deterministic stand-ins for the host payload and the external services.

Cards are written in short form: ``"Kh As"`` is the king of hearts and the ace
of spades; ``"10d"`` is the ten of diamonds.
"""

from typing import Dict, List, Optional, Sequence

from donkey.config.server import PLAYER_NAME
from donkey.exceptions import GameLogError, OracleUnavailableError
from donkey.poker.adaptive import GameLog
from donkey.poker.core import Card, GameKey, GameState, PlayerState, Suit
from donkey.poker.evaluation import HandRanking

_SUITS = {"h": Suit.HEARTS, "d": Suit.DIAMONDS, "c": Suit.CLUBS, "s": Suit.SPADES}


def cards(text: str) -> List[Card]:
    """Parse ``"Kh As 10d"`` into cards."""
    return [Card(rank=token[:-1], suit=_SUITS[token[-1]]) for token in text.split()]


def make_player(
    id: int,
    name: str,
    bet: int = 0,
    status: str = "active",
    stack: int = 1000,
    hole_cards: Optional[str] = None,
) -> PlayerState:
    return PlayerState(
        id=id,
        name=name,
        status=status,
        version="1.0",
        stack=stack,
        bet=bet,
        hole_cards=tuple(cards(hole_cards)) if hole_cards is not None else None,
    )


def make_game_state(
    hole_cards: Optional[str] = None,
    community: str = "",
    small_blind: int = 10,
    current_buy_in: int = 0,
    minimum_raise: int = 10,
    bets: Sequence[int] = (0, 0, 0),
    round: int = 1,
    players: Optional[Sequence[PlayerState]] = None,
    game_id: str = "game_456",
) -> GameState:
    """Three-handed game with us in seat 1 unless ``players`` is given."""
    if players is None:
        names = ["Player 1", PLAYER_NAME, "Player 3"]
        players = [
            make_player(i, name, bet=bets[i], hole_cards=hole_cards if name == PLAYER_NAME else None)
            for i, name in enumerate(names)
        ]
    return GameState(
        tournament_id="tournament_123",
        game_id=game_id,
        round=round,
        small_blind=small_blind,
        current_buy_in=current_buy_in,
        pot=sum(p.bet for p in players),
        minimum_raise=minimum_raise,
        dealer=0,
        in_action=1,
        players=tuple(players),
        community_cards=tuple(cards(community)),
    )


def game_state_payload(**overrides) -> Dict[str, object]:
    """JSON-ready host payload for the web tests."""
    payload: Dict[str, object] = {
        "tournament_id": "tournament_123",
        "game_id": "game_456",
        "round": 1,
        "bet_index": 0,
        "small_blind": 10,
        "current_buy_in": 0,
        "pot": 0,
        "minimum_raise": 10,
        "dealer": 0,
        "orbits": 0,
        "in_action": 1,
        "players": [
            {"id": 0, "name": "Player 1", "status": "active", "version": "1.0", "stack": 1000, "bet": 0},
            {"id": 1, "name": PLAYER_NAME, "status": "active", "version": "1.0", "stack": 1000, "bet": 0},
            {"id": 2, "name": "Player 3", "status": "active", "version": "1.0", "stack": 1000, "bet": 0},
        ],
        "community_cards": [],
    }
    payload.update(overrides)
    return payload


class FakeOracle:
    """Answers a fixed rank (or ``None``) and records what it was asked."""

    def __init__(self, rank: Optional[int] = None):
        self.rank_value = rank
        self.calls: List[List[Card]] = []

    def rank(self, cards: Sequence[Card]) -> Optional[HandRanking]:
        self.calls.append(list(cards))
        if self.rank_value is None:
            return None
        return HandRanking(rank=self.rank_value)


class RaisingOracle:
    """Oracle that breaks its contract with a domain error."""

    def rank(self, cards: Sequence[Card]) -> Optional[HandRanking]:
        raise OracleUnavailableError("service down")


class FakeLogSource:
    """Serves canned log bodies keyed by ``(tournament_id, game_id)``."""

    def __init__(self, bodies: Optional[Dict[GameKey, dict]] = None, failing: Sequence[GameKey] = ()):
        self.bodies = dict(bodies or {})
        self.failing = set(failing)
        self.requested: List[GameKey] = []

    def fetch_log(self, key: GameKey) -> Optional[GameLog]:
        self.requested.append(key)
        if key in self.failing:
            raise GameLogError(f"cannot fetch {key}")
        body = self.bodies.get(key)
        if body is None:
            return None
        return GameLog.from_dict(key, body)


def log_body(actions: Sequence[str], winner: Optional[str] = None, name: str = PLAYER_NAME) -> dict:
    """One round per action, each with our player acting once."""
    rounds = [
        {"players": [{"name": name, "action": action, "bet": 20 if action != "fold" else 0}]}
        for action in actions
    ]
    body: dict = {"rounds": rounds}
    if winner is not None:
        body["result"] = {"winner": winner}
    return body
