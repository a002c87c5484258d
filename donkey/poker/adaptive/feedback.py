"""Background feedback loop tuning the adaptive factors from game logs.

The loop remembers the last few games the bot sat in. Every few rounds it
fetches their logs on a daemon thread, analyses them and pushes new factors
into the shared store. Nothing here can delay or fail a bet decision.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional, Protocol

from donkey.config.poker import GAME_LOG_REFRESH_EVERY_ROUNDS, GAME_LOG_WINDOW_SIZE
from donkey.exceptions import GameLogError
from donkey.poker.adaptive.factors import (
    AdaptiveFactors,
    AdaptiveFactorsStore,
    factors_from_rates,
)
from donkey.poker.adaptive.game_log import GameLog, analyze_game_logs
from donkey.poker.core.game_state import GameKey, GameState

logger = logging.getLogger(__name__)


class GameLogSource(Protocol):
    """Anything that can fetch a game transcript."""

    def fetch_log(self, key: GameKey) -> Optional[GameLog]:
        """Fetch the log for ``(tournament_id, game_id)``, or ``None`` if unavailable."""
        ...


class FeedbackLoop:
    """Rolling window of recent games plus the periodic refresh."""

    def __init__(
        self,
        log_source: Optional[GameLogSource],
        store: AdaptiveFactorsStore,
        identity: str,
        window_size: int = GAME_LOG_WINDOW_SIZE,
        refresh_every_rounds: int = GAME_LOG_REFRESH_EVERY_ROUNDS,
    ):
        """Initialize the loop.

        Args:
            log_source: Where logs come from; ``None`` disables refreshing.
            store: Factor store updated after each successful analysis.
            identity: Our registered player name, used to find our actions.
            window_size: Number of recent games kept.
            refresh_every_rounds: Refresh when ``round % refresh_every_rounds == 0``.
        """
        self.log_source = log_source
        self.store = store
        self.identity = identity
        self.refresh_every_rounds = refresh_every_rounds
        self._window: Deque[GameKey] = deque(maxlen=window_size)
        self._logs: Dict[GameKey, GameLog] = {}
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self.running = False

    @property
    def window(self) -> List[GameKey]:
        with self._lock:
            return list(self._window)

    def remember(self, key: GameKey) -> None:
        """Move ``key`` to the most-recent end of the window."""
        with self._lock:
            if key in self._window:
                self._window.remove(key)
            self._window.append(key)
            for stale in set(self._logs) - set(self._window):
                del self._logs[stale]

    def observe(self, game_state: GameState) -> bool:
        """Record the game and start a refresh when one is due.

        Returns:
            True if a background refresh was started.
        """
        self.remember(game_state.key)
        if self.log_source is None or game_state.round % self.refresh_every_rounds != 0:
            return False
        return self.request_refresh()

    def request_refresh(self) -> bool:
        """Start a background refresh unless one is already in flight."""
        with self._lock:
            if self.running or self.log_source is None:
                return False
            self.running = True
            self._thread = threading.Thread(
                target=self._run_refresh,
                name="game_log_refresh",
                daemon=True,
            )
        self._thread.start()
        return True

    def _run_refresh(self) -> None:
        try:
            self.refresh_now()
        except Exception as e:
            logger.error("Game log refresh failed: %s", e, exc_info=True)
        finally:
            with self._lock:
                self.running = False

    def refresh_now(self) -> Optional[AdaptiveFactors]:
        """Fetch, analyse and apply synchronously.

        Returns:
            The new factors, or ``None`` if no log could be analysed.
        """
        if self.log_source is None:
            return None

        for key in self.window:
            try:
                log = self.log_source.fetch_log(key)
            except GameLogError as e:
                logger.warning("Skipping game log %s: %s", key, e)
                continue
            if log is not None:
                with self._lock:
                    if key in self._window:
                        self._logs[key] = log

        with self._lock:
            logs = [self._logs[key] for key in self._window if key in self._logs]

        analysis = analyze_game_logs(logs, self.identity)
        if analysis is None:
            logger.debug("No game logs available, keeping current factors")
            return None

        factors = factors_from_rates(analysis.win_rate, analysis.fold_rate)
        self.store.update(factors)
        return factors

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until the in-flight refresh (if any) finishes."""
        thread = self._thread
        if thread is not None and thread.is_alive():
            thread.join(timeout)
