"""Backend package for the donkey bot.

This package provides the FastAPI web server speaking the LeanPoker player
protocol and the HTTP clients for the ranking and game-log services.
"""

__version__ = "1.4.0"
