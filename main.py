"""Main entry point for the donkey bot.

This module provides command-line options to run the bot:
- Web mode (default): FastAPI server speaking the LeanPoker player protocol
- Decide mode: Replay one saved game state and print the decision
"""

import argparse
import json
import logging
import sys

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
)

logger = logging.getLogger(__name__)


def run_web_server(port: int):
    """Run the bot's web server."""
    try:
        import uvicorn

        from backend.main import app

        logger.info("Starting donkey bot on port %d", port)
        logger.info("API docs available at http://localhost:%d/docs", port)
        uvicorn.run(app, host="0.0.0.0", port=port)
    except ImportError as e:
        logger.error("Error: Required dependencies not installed: %s", e)
        logger.error("Install with: pip install -e .")
        sys.exit(1)


def run_decide(path: str, offline: bool, seed=None) -> int:
    """Decide on one saved game state.

    Args:
        path: JSON file holding a host ``game_state`` payload
        offline: Skip the ranking service and play on heuristics only
        seed: Optional random seed for the probe-bet fallback

    Returns:
        The bet amount
    """
    import random

    from backend.models import GameStatePayload
    from backend.server_client import RankingServiceClient
    from donkey.player import Player

    with open(path, "r", encoding="utf-8") as f:
        game_state = GameStatePayload.model_validate(json.load(f)).to_game_state()

    oracle = None if offline else RankingServiceClient()
    player = Player(oracle=oracle, rng=random.Random(seed))
    try:
        decision = player.decide(game_state)
    finally:
        if oracle is not None:
            oracle.close()

    logger.info(
        "%s: %s %d (%s)", decision.phase.name, decision.action.name, decision.amount, decision.reason
    )
    print(decision.amount)
    return decision.amount


def main():
    """Parse command-line arguments and run the appropriate mode."""
    from donkey.config.server import DEFAULT_API_PORT

    parser = argparse.ArgumentParser(
        description="Donkey Killers LeanPoker bot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run web server (default)
  python main.py

  # Decide on a saved game state without calling the ranking service
  python main.py --decide state.json --offline --seed 42
        """,
    )

    parser.add_argument(
        "--port", type=int, default=DEFAULT_API_PORT, help="Port for the web server"
    )

    parser.add_argument(
        "--decide",
        type=str,
        default=None,
        metavar="FILENAME",
        help="Print the decision for a saved game_state JSON file and exit",
    )

    parser.add_argument(
        "--offline", action="store_true", help="Do not call the ranking service in decide mode"
    )

    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )

    args = parser.parse_args()

    if args.decide:
        run_decide(args.decide, offline=args.offline, seed=args.seed)
    else:
        run_web_server(args.port)


if __name__ == "__main__":
    main()
