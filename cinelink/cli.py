"""
CineLink CLI - Command-line interface for the movie chain game.

Usage:
    cinelink play [--seed N] [--time-limit S] [--players A B] [--json]
    cinelink info

Data files default to data/tmdb_5000_movies.csv and
data/tmdb_5000_credits.csv (see CINELINK_* settings).
"""

import argparse
import sys
from pathlib import Path

from loguru import logger


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="CineLink - Two-player movie chain game",
        prog="cinelink",
    )
    parser.add_argument("--movies", help="Path to TMDB movies CSV")
    parser.add_argument("--credits", help="Path to TMDB credits CSV")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game on the terminal")
    play_parser.add_argument("--seed", type=int, help="Random seed for the starting movie")
    play_parser.add_argument("--time-limit", type=float, help="Seconds per turn")
    play_parser.add_argument(
        "--players", nargs=2, metavar=("P1", "P2"), default=["Player 1", "Player 2"],
        help="Player names",
    )
    play_parser.add_argument("--json", action="store_true", help="Print final snapshot as JSON")

    # Info command
    subparsers.add_parser("info", help="Show catalog statistics")

    args = parser.parse_args(argv)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "info":
        cmd_info(args)
    else:
        parser.print_help()
        sys.exit(1)


def _configure(args):
    from .config import get_settings

    settings = get_settings()
    updates = {}
    if args.movies:
        updates["movies_csv"] = Path(args.movies)
    if args.credits:
        updates["credits_csv"] = Path(args.credits)
    if getattr(args, "seed", None) is not None:
        updates["random_seed"] = args.seed
    if getattr(args, "time_limit", None) is not None:
        updates["turn_time_limit"] = args.time_limit
    if updates:
        settings = settings.model_copy(update=updates)

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)
    return settings


def _load_catalog(settings):
    from .catalog import load_tmdb_catalog

    try:
        return load_tmdb_catalog(settings.movies_path, settings.credits_path)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        sys.exit(1)


def cmd_play(args):
    """Play one game."""
    from .engine_core import GameEngine, Player
    from .schemas import build_snapshot
    from .session import GameLoop

    settings = _configure(args)
    catalog = _load_catalog(settings)

    engine = GameEngine.from_settings(
        catalog, Player(args.players[0]), Player(args.players[1]), settings
    )
    loop = GameLoop(engine, turn_time_limit=settings.turn_time_limit)
    summary = loop.run()

    if args.json:
        print(build_snapshot(engine).model_dump_json(indent=2))
    if summary.unplayable:
        sys.exit(1)


def cmd_info(args):
    """Show catalog statistics."""
    settings = _configure(args)
    catalog = _load_catalog(settings)

    years = catalog.years()
    print(f"Movies: {len(catalog)}")
    print(f"Genres: {len(catalog.genres())}")
    if years:
        print(f"Years: {min(years)}-{max(years)}")


if __name__ == "__main__":
    main()
