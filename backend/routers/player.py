"""LeanPoker player protocol endpoints.

The host POSTs form-encoded requests to ``/`` with an ``action`` field and,
for game actions, a JSON ``game_state`` field. Answers are plain text.
"""

import json
import logging
from typing import Optional

from fastapi import APIRouter, Form, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from backend.models import FactorsResponse, GameStatePayload
from donkey.player import Player
from donkey.poker.core import GameState

logger = logging.getLogger(__name__)


def parse_game_state(raw: Optional[str]) -> GameState:
    """Validate the ``game_state`` form field.

    Raises:
        HTTPException: 400 when the field is missing, not JSON or off-contract.
    """
    if not raw:
        raise HTTPException(status_code=400, detail="game_state is required")
    try:
        payload = GameStatePayload.model_validate(json.loads(raw))
    except json.JSONDecodeError as e:
        raise HTTPException(status_code=400, detail=f"game_state is not valid JSON: {e}")
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"game_state does not match the contract: {e}")
    return payload.to_game_state()


def setup_router(player: Player) -> APIRouter:
    """Setup the player router with required dependencies.

    Args:
        player: The decision maker answering the host

    Returns:
        Configured APIRouter
    """
    router = APIRouter(tags=["player"])

    @router.get("/", response_class=PlainTextResponse)
    def root_status():
        """Liveness answer for the host's connectivity probe."""
        return "OK"

    @router.post("/", response_class=PlainTextResponse)
    def handle_action(action: str = Form(...), game_state: Optional[str] = Form(None)):
        """Dispatch one host request.

        Returns:
            The bet amount for ``bet_request``, the version string for
            ``version`` and ``OK`` otherwise
        """
        if action == "bet_request":
            return str(player.bet_request(parse_game_state(game_state)))
        if action == "showdown":
            player.showdown(parse_game_state(game_state))
            return "OK"
        if action == "version":
            return player.version()
        if action == "check":
            return "OK"

        logger.warning("Unknown action from host: %s", action)
        raise HTTPException(status_code=400, detail=f"Unknown action: {action}")

    @router.get("/api/health")
    def health():
        """Service health and version."""
        return JSONResponse({"status": "ok", "version": player.version()})

    @router.get("/api/factors")
    def get_factors():
        """Current adaptive factors and the games feeding them."""
        response = FactorsResponse.build(
            player.current_factors(),
            player.feedback.window,
            player.feedback.running,
        )
        return JSONResponse(response.model_dump())

    return router
