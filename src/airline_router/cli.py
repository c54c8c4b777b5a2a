"""
Airline Router - Command Line Entry Point.

Loads airports, flight directions and weather, then answers every mission
in the missions file with the cheapest route, writing one line per mission
to the output file.

Usage:
    airline-router airports.csv directions.csv weather.csv missions.in output.out

Any argument left out falls back to its AIRLINE_ROUTER_* environment variable.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.airline_router.application.plan_missions import PlanMissions
from src.airline_router.config import Settings
from src.airline_router.exceptions import AirlineRouterError
from src.airline_router.logging_config import setup_logging
from src.dijkstra.exceptions import DijkstraError

# Module-level logger
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="airline-router",
        description="Find the cheapest chain of direct flights for each mission.",
    )
    parser.add_argument("airports", nargs="?", type=Path, help="Airports CSV")
    parser.add_argument("directions", nargs="?", type=Path, help="Flight directions CSV")
    parser.add_argument("weather", nargs="?", type=Path, help="Weather observations CSV")
    parser.add_argument("missions", nargs="?", type=Path, help="Missions file")
    parser.add_argument("output", nargs="?", type=Path, help="Output file")
    parser.add_argument("--log-level", default=None, help="Logging level (default INFO)")
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to this file")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-search deadline in seconds",
    )
    return parser


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    """Overlay command line arguments on environment settings."""
    return Settings(
        airports_file=args.airports or base.airports_file,
        directions_file=args.directions or base.directions_file,
        weather_file=args.weather or base.weather_file,
        missions_file=args.missions or base.missions_file,
        output_file=args.output or base.output_file,
        log_level=(args.log_level or base.log_level).upper(),
        log_file=args.log_file or base.log_file,
        search_timeout=args.timeout if args.timeout is not None else base.search_timeout,
        flush_interval=base.flush_interval,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the mission batch.

    Returns:
        0 on success, 1 when inputs are missing or cannot be loaded.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(args, Settings.from_env())
    except ValueError as e:
        parser.error(str(e))

    setup_logging(settings.log_level, settings.log_file)

    if not settings.has_network_files or not settings.missions_file or not settings.output_file:
        logger.critical(
            "Airports, directions, weather, missions and output files are all required"
        )
        return 1

    planner = PlanMissions.from_settings(settings)

    try:
        results = planner.run_to_file(
            settings.output_file, flush_interval=settings.flush_interval
        )
    except (AirlineRouterError, DijkstraError, FileNotFoundError) as e:
        logger.critical("Mission run failed: %s", e)
        return 1

    logger.info("Answered %d missions into %s", len(results), settings.output_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
