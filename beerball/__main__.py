"""Entry point for beerball package."""

import argparse
import logging
import sys
from pathlib import Path

from beerball.config import LOG_LEVELS, get_config, set_config


def main() -> None:
    """Serve the game tracker API, or run the terminal tracker with --tui."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="Beerball - gridiron beerball game tracker",
        prog="beerball",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=config.host,
        help=f"Interface to bind (default: {config.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.port,
        help=f"Port to listen on (default: {config.port})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.log_level,
        help=f"Logging level (default: {config.log_level})",
    )
    parser.add_argument(
        "--storage-dir",
        type=Path,
        default=config.storage_dir,
        help=f"Directory for the save file (default: {config.storage_dir})",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Track a game in the terminal instead of serving the API",
    )
    parser.add_argument(
        "--team1",
        type=str,
        default="Home",
        help="Team 1 name for a new TUI game (default: Home)",
    )
    parser.add_argument(
        "--team2",
        type=str,
        default="Away",
        help="Team 2 name for a new TUI game (default: Away)",
    )
    parser.add_argument(
        "--new",
        action="store_true",
        help="Start a new TUI game even if a saved one exists",
    )

    args = parser.parse_args()

    config.host = args.host
    config.port = args.port
    config.log_level = args.log_level
    config.storage_dir = args.storage_dir.expanduser()

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"error: {error}", file=sys.stderr)
        sys.exit(2)
    set_config(config)

    log_kwargs = {}
    if args.tui:
        # Keep log lines off the terminal the TUI draws on
        config.storage_dir.mkdir(parents=True, exist_ok=True)
        log_kwargs["filename"] = str(config.storage_dir / "beerball.log")
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        **log_kwargs,
    )

    if args.tui:
        _run_tui(config, args)
        return

    from beerball.api.main import run_api

    run_api(host=config.host, port=config.port, log_level=config.log_level.lower())


def _run_tui(config, args: argparse.Namespace) -> None:
    from beerball.game.session import GameSession
    from beerball.storage import GameStore
    from beerball.ui.app import run_app

    store = GameStore(config.storage_dir) if config.autosave else None
    session = None
    if store is not None and not args.new:
        session = GameSession.resume(store)
    if session is None:
        session = GameSession.new(args.team1, args.team2, store=store)
    run_app(session)


if __name__ == "__main__":
    main()
