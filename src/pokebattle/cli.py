"""Command-line entrypoint for the Pokébattle HTTP API."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from pokebattle.api.runtime import ApiState
from pokebattle.config import get_settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Pokébattle API server")
    parser.add_argument("--host", default="127.0.0.1", help="Host interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="TCP port to listen on")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable autoreload (dev mode)",
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create tables and seed the type catalog, then exit",
    )
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.init_db:
        state = ApiState(settings=settings.model_copy(update={"seed_catalog": False}))
        state.prepare_database()
        state.engine.dispose()
        return

    uvicorn.run(
        "pokebattle.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
