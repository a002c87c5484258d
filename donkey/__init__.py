"""Decision engine for "the donkey killers" LeanPoker bot.

The ``donkey`` package is framework-free: it knows nothing about HTTP or
FastAPI. The web surface lives in ``backend``.
"""

from donkey.player import Player

__all__ = ["Player"]
