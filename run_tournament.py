#!/usr/bin/env python3
"""
Knockout tournament runner CLI

Runs a single-elimination tournament against the tournament data service
and prints each match, each round and the champion.

Usage:
    python run_tournament.py --teams-per-match 2 --number-of-teams 8
    python run_tournament.py -t 4 -n 64 --url http://localhost:8765 --output result.json
"""

import argparse
import asyncio
import sys
from pathlib import Path

from knockout import (
    BracketValidationError,
    ConsoleRenderer,
    Tournament,
    TournamentService,
    summarize_tournament,
)
from knockout.config import get_request_timeout, get_service_url
from knockout.logging_config import setup_logging
from knockout.utils import save_json


async def run(args) -> int:
    renderer = ConsoleRenderer(verbose=not args.quiet)

    async with TournamentService(args.url or get_service_url(), timeout=get_request_timeout()) as service:
        tournament = Tournament(
            service,
            max_teams=args.max_teams,
            parallel_matches=True if args.parallel else None,
        )
        renderer.attach(tournament)

        try:
            champion = await tournament.start(args.teams_per_match, args.number_of_teams)
        except BracketValidationError as e:
            print(f'❌ {e.message}')
            return 1

    if args.output:
        output_path = Path(args.output)
        save_json(output_path, summarize_tournament(tournament))
        print(f'Result saved: {output_path}')

    return 0 if champion is not None else 2


def main():
    parser = argparse.ArgumentParser(description="Single-elimination tournament runner")
    parser.add_argument(
        "--teams-per-match", "-t",
        required=True,
        help="Number of teams competing in each match",
    )
    parser.add_argument(
        "--number-of-teams", "-n",
        required=True,
        help="Total number of teams (a power of teams per match)",
    )
    parser.add_argument(
        "--url", "-u",
        default=None,
        help="Tournament data service URL (defaults to the configured service_url)",
    )
    parser.add_argument(
        "--max-teams",
        type=int,
        default=None,
        help="Maximum number of teams allowed (defaults to the configured limit)",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Resolve the matches of a round concurrently",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write a JSON summary of the run to this path",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print the champion",
    )

    args = parser.parse_args()
    setup_logging(level=args.log_level)

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
