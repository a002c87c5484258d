"""Application factory and context for the donkey bot service.

This module provides a clean factory pattern for creating the FastAPI app,
avoiding import-time side effects. The player and its HTTP clients are
created within the AppContext.

Design Decision:
----------------
We use an AppContext dataclass to hold all runtime state instead of module-level
globals. This:
1. Makes testing easier (each test gets a fresh context with fake collaborators)
2. Avoids cross-test pollution of the adaptive factors
3. Makes dependencies explicit and injectable

Usage:
------
    # For production (uses default settings from environment)
    app = create_app()

    # For testing (custom player)
    app = create_app(context=AppContext(player=Player(oracle=FakeOracle())))
"""

import logging
import os
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backend.logging_config import configure_logging
from backend.server_client import GameLogClient, RankingServiceClient
from donkey.config.server import (
    DEFAULT_API_PORT,
    GAME_LOG_ENABLED,
    GAME_LOG_SERVICE_URL,
    PLAYER_NAME,
    RANKING_SERVICE_URL,
    RANKING_TIMEOUT_SECONDS,
)
from donkey.exceptions import (
    ConfigurationError,
    DonkeyError,
    GameStateError,
    OwnPlayerNotFoundError,
)
from donkey.player import Player


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


@dataclass
class AppContext:
    """Runtime context holding all application state.

    This replaces module-level globals, making dependencies explicit
    and enabling clean testing without cross-test pollution.
    """

    # Configuration
    player_name: str = field(default_factory=lambda: os.getenv("DONKEY_PLAYER_NAME", PLAYER_NAME))
    api_port: int = field(
        default_factory=lambda: _env_number(
            "DONKEY_API_PORT", _env_number("PORT", DEFAULT_API_PORT, int), int
        )
    )
    ranking_service_url: str = field(
        default_factory=lambda: os.getenv("RANKING_SERVICE_URL", RANKING_SERVICE_URL)
    )
    ranking_timeout: float = field(
        default_factory=lambda: _env_number("RANKING_TIMEOUT_SECONDS", RANKING_TIMEOUT_SECONDS, float)
    )
    game_log_service_url: str = field(
        default_factory=lambda: os.getenv("GAME_LOG_SERVICE_URL", GAME_LOG_SERVICE_URL)
    )
    game_log_enabled: bool = field(default_factory=lambda: _env_flag("GAME_LOG_ENABLED", GAME_LOG_ENABLED))
    production_mode: bool = field(
        default_factory=lambda: os.getenv("PRODUCTION", "false").lower() == "true"
    )

    # Runtime state (built on first use unless injected)
    ranking_client: Optional[RankingServiceClient] = None
    game_log_client: Optional[GameLogClient] = None
    player: Optional[Player] = None

    # Logging
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("donkey.backend"))

    def get_player(self) -> Player:
        """Build the player and its service clients on first use."""
        if self.player is None:
            if self.ranking_client is None:
                self.ranking_client = RankingServiceClient(
                    url=self.ranking_service_url,
                    timeout=self.ranking_timeout,
                )
            if self.game_log_client is None and self.game_log_enabled:
                self.game_log_client = GameLogClient(url_template=self.game_log_service_url)
            self.player = Player(
                identity=self.player_name,
                oracle=self.ranking_client,
                log_source=self.game_log_client,
            )
        return self.player

    def close(self) -> None:
        """Stop background work and release HTTP connections."""
        if self.player is not None:
            self.player.close()
        for client in (self.ranking_client, self.game_log_client):
            if client is not None:
                client.close()


def create_app(
    *,
    player_name: Optional[str] = None,
    production_mode: Optional[bool] = None,
    context: Optional[AppContext] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        player_name: Override registered identity (default: DONKEY_PLAYER_NAME env var)
        production_mode: Override production mode (default: from PRODUCTION env var)
        context: Pre-configured AppContext (for testing). If None, creates a new one.

    Returns:
        Configured FastAPI application with context attached as app.state.context
    """
    # Configure logging (idempotent)
    logger = configure_logging(extra_loggers=("backend",))

    if context is None:
        context = AppContext()

    if player_name is not None:
        context.player_name = player_name
    if production_mode is not None:
        context.production_mode = production_mode

    context.logger = logger
    player = context.get_player()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown."""
        ctx = app.state.context
        ctx.logger.info("Player %r ready (%s)", ctx.player_name, player.version())
        try:
            yield
        finally:
            ctx.logger.info("LIFESPAN: Received shutdown signal")
            ctx.close()

    app = FastAPI(
        title="Donkey Killers Poker Bot",
        lifespan=lifespan,
        docs_url=None if context.production_mode else "/docs",
        redoc_url=None if context.production_mode else "/redoc",
    )

    # Attach context to app state for access in routes
    app.state.context = context

    _setup_exception_handlers(app, context)
    _setup_routers(app, player)

    return app


def _setup_exception_handlers(app: FastAPI, ctx: AppContext) -> None:
    """Map domain failures to HTTP answers the host can see."""

    @app.exception_handler(OwnPlayerNotFoundError)
    async def own_player_not_found(request: Request, exc: OwnPlayerNotFoundError):
        ctx.logger.error("Host/contract mismatch: %s", exc)
        return JSONResponse({"error": str(exc)}, status_code=500)

    @app.exception_handler(GameStateError)
    async def malformed_game_state(request: Request, exc: GameStateError):
        ctx.logger.warning("Rejected game state: %s", exc)
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(DonkeyError)
    async def donkey_error(request: Request, exc: DonkeyError):
        ctx.logger.error("Unhandled bot error: %s", exc, exc_info=exc)
        return JSONResponse({"error": str(exc)}, status_code=500)


def _setup_routers(app: FastAPI, player: Player) -> None:
    """Setup and include all API routers."""
    from backend.routers import player as player_routes

    app.include_router(player_routes.setup_router(player))
