"""HTTP clients for the external services the bot consults.

This module provides the synchronous clients for the LeanPoker hand-ranking
service and the historical game-log service. Both turn every failure into a
``None`` answer so the decision path never sees a transport error.
"""

import json
import logging
from typing import Optional, Sequence

import httpx

from donkey.config.server import (
    GAME_LOG_SERVICE_URL,
    GAME_LOG_TIMEOUT_SECONDS,
    RANKING_SERVICE_URL,
    RANKING_TIMEOUT_SECONDS,
)
from donkey.exceptions import GameLogError, OracleUnavailableError
from donkey.poker.adaptive import GameLog
from donkey.poker.core import Card, GameKey
from donkey.poker.evaluation import HandRanking, encode_cards

logger = logging.getLogger(__name__)


class ServiceClient:
    """Base HTTP client for one external service.

    Features:
    - Connection pooling through a shared ``httpx.Client``
    - Bounded timeout per request
    - Error logging and recovery (no retries: a failed call is "unavailable")
    """

    DEFAULT_TIMEOUT = 5.0  # Default request timeout in seconds

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            timeout: Timeout for requests in seconds
            transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
        """
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def start(self) -> None:
        """Initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self._timeout),
                limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
                follow_redirects=True,
                transport=self._transport,
            )
            logger.debug("%s HTTP client started", type(self).__name__)

    def close(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if self._client:
            self._client.close()
            self._client = None
            logger.debug("%s HTTP client closed", type(self).__name__)

    def _request(self, method: str, url: str, **kwargs) -> Optional[httpx.Response]:
        """Make an HTTP request.

        Args:
            method: HTTP method (GET, POST, ...)
            url: Full URL to request
            **kwargs: Additional arguments to pass to httpx

        Returns:
            Response object if successful, None otherwise
        """
        if self._client is None:
            self.start()

        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            logger.warning(
                "HTTP %d error for %s %s",
                e.response.status_code,
                method,
                url,
            )
            return None

        except httpx.TimeoutException:
            logger.warning("Request timed out after %.1fs: %s %s", self._timeout, method, url)
            return None

        except httpx.HTTPError as e:
            logger.warning("Request failed: %s %s - %s", method, url, e)
            return None


class RankingServiceClient(ServiceClient):
    """Hand-ranking oracle backed by the LeanPoker ranking service."""

    def __init__(
        self,
        url: str = RANKING_SERVICE_URL,
        timeout: float = RANKING_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.url = url

    def rank(self, cards: Sequence[Card]) -> Optional[HandRanking]:
        """Rank ``cards``.

        Args:
            cards: Hole cards followed by the community cards

        Returns:
            HandRanking if the service answered with a well-formed body, None otherwise
        """
        payload = {"cards": json.dumps(encode_cards(cards))}
        response = self._request("POST", self.url, data=payload)

        if response:
            try:
                return HandRanking.from_dict(response.json())
            except ValueError as e:
                logger.warning("Ranking response is not JSON: %s", e)
            except OracleUnavailableError as e:
                logger.warning("%s", e)

        return None


class GameLogClient(ServiceClient):
    """Fetches finished (or running) game transcripts."""

    def __init__(
        self,
        url_template: str = GAME_LOG_SERVICE_URL,
        timeout: float = GAME_LOG_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.url_template = url_template

    def _build_url(self, key: GameKey) -> str:
        tournament_id, game_id = key
        return self.url_template.format(tournament_id=tournament_id, game_id=game_id)

    def fetch_log(self, key: GameKey) -> Optional[GameLog]:
        """Fetch the log for ``(tournament_id, game_id)``.

        Returns:
            GameLog if successful, None otherwise
        """
        url = self._build_url(key)
        response = self._request("GET", url)

        if response:
            try:
                return GameLog.from_dict(key, response.json())
            except ValueError as e:
                logger.warning("Game log for %s is not JSON: %s", key, e)
            except GameLogError as e:
                logger.warning("%s", e)

        return None
