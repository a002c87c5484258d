"""Donkey bot exception hierarchy.

Centralised base classes so callers can catch narrowly and the web layer can
map failures to status codes.
"""


class DonkeyError(Exception):
    """Root of all bot domain exceptions."""


class GameStateError(DonkeyError):
    """The host sent a game state that does not match the data contract."""


class OwnPlayerNotFoundError(GameStateError, LookupError):
    """No seat in the game state carries the bot's registered name."""

    def __init__(self, identity: str):
        super().__init__(f"Our player {identity!r} not found in game state")
        self.identity = identity


class OracleUnavailableError(DonkeyError):
    """The hand-ranking service could not produce a ranking."""


class GameLogError(DonkeyError):
    """A historical game log could not be fetched or parsed."""


class ConfigurationError(DonkeyError):
    """Invalid or missing configuration."""
