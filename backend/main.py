"""ASGI entry point: ``uvicorn backend.main:app``.

The port comes from ``DONKEY_API_PORT`` (or the platform's ``PORT``) through
``AppContext``, so ``python -m backend.main`` serves the same app instance
uvicorn would import.
"""

import uvicorn

from backend.app_factory import create_app

app = create_app()


def main() -> None:
    """Serve ``app`` on the configured port."""
    context = app.state.context
    context.logger.info("Serving %r on port %d", context.player_name, context.api_port)
    uvicorn.run(app, host="0.0.0.0", port=context.api_port, log_level="info")


if __name__ == "__main__":
    main()
