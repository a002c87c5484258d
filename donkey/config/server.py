"""Server, identity and external-service configuration constants."""

# Identity
PLAYER_NAME = "the donkey killers"  # Registered name, matched case-insensitively
PLAYER_VERSION = "donkey-killers 1.4.0 (adaptive)"

# Server Configuration
DEFAULT_API_PORT = 8000  # Default port for FastAPI backend

# Hand-ranking service
RANKING_SERVICE_URL = "https://rainman.leanpoker.org/rank"
RANKING_TIMEOUT_SECONDS = 3.0

# Historical game-log service
GAME_LOG_SERVICE_URL = "https://live.leanpoker.org/api/tournament/{tournament_id}/game/{game_id}/log"
GAME_LOG_TIMEOUT_SECONDS = 5.0

# Feature Flags
GAME_LOG_ENABLED = True  # Fetch historical logs to tune the adaptive factors
