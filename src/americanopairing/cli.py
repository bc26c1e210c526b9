"""Command-line interface for Americano Pairing.

This module provides the ``americano`` command: generate a schedule from a
roster file, record results, print the leaderboard and check a schedule.
"""

# Americano Pairing
# Copyright (C) 2025  Americano Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from americanopairing.constants import DEFAULT_COURTS, DEFAULT_TOURNAMENT_NAME
from americanopairing.exceptions import (
    AmericanoPairingException,
    FileLoadException,
    FileSaveException,
)
from americanopairing.models.player import Player, create_player
from americanopairing.models.tournament import TournamentConfig
from americanopairing.tournament import Tournament
from americanopairing.utils import set_log_level, setup_logger
from americanopairing.utils.print import TournamentPrintUtils
from americanopairing.validation import create_schedule_checker

logger = setup_logger(__name__)


# ========== File helpers ==========


def load_json(path: Path) -> Any:
    """Read a JSON document.

    Raises:
        FileLoadException: If the file is missing or not valid JSON
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Could not load {path}: {e}") from e


def save_json(data: Any, path: Path) -> None:
    """Write a JSON document.

    Raises:
        FileSaveException: If the file cannot be written
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
    except OSError as e:
        raise FileSaveException(f"Could not save {path}: {e}") from e


def load_roster(path: Path) -> List[Player]:
    """Load players from a roster file.

    ``.json`` files hold a list of ``{"id", "name"}`` objects or of plain
    names. Any other file is read as one name per line; blank lines are
    skipped. Players without an id are numbered from 1 in file order.

    Raises:
        FileLoadException: If the file cannot be read
        InvalidPlayerDataException: If an entry has no usable name
    """
    if path.suffix.lower() == ".json":
        entries = load_json(path)
        if not isinstance(entries, list):
            raise FileLoadException(f"{path}: expected a JSON list of players")
    else:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise FileLoadException(f"Could not load {path}: {e}") from e
        entries = [line.strip() for line in text.splitlines() if line.strip()]

    players = []
    for index, entry in enumerate(entries, start=1):
        if isinstance(entry, dict):
            players.append(Player.from_dict(entry))
        else:
            players.append(create_player(str(entry), player_id=str(index)))
    logger.info(f"Loaded {len(players)} players from {path}")
    return players


def load_tournament(path: Path) -> Tournament:
    """Load a tournament document written by ``schedule --output``."""
    data = load_json(path)
    if not isinstance(data, dict):
        raise FileLoadException(f"{path}: expected a tournament object")
    return Tournament.from_dict(data)


def _emit(tournament: Tournament, output: Optional[str]) -> None:
    data = tournament.to_dict()
    if output:
        save_json(data, Path(output))
        print(f"Tournament written to {output}")
    else:
        print(json.dumps(data, indent=2))


# ========== Commands ==========


def run_schedule_command(args: argparse.Namespace) -> int:
    players = load_roster(Path(args.roster))
    tournament = Tournament(
        config=TournamentConfig(name=args.name, courts=args.courts),
        players=players,
    )
    tournament.generate_schedule()

    if args.format == "text":
        print(
            TournamentPrintUtils.format_schedule(tournament.players, tournament.schedule)
        )
        if args.output:
            save_json(tournament.to_dict(), Path(args.output))
        return 0

    _emit(tournament, args.output)
    return 0


def run_record_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(Path(args.file))
    match = tournament.record_result(args.match_id, args.team1, args.team2)
    save_json(tournament.to_dict(), Path(args.file))
    print(f"{match.id}: {match.score.team1}-{match.score.team2} ({match.status})")
    return 0


def run_leaderboard_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(Path(args.file))
    entries = tournament.leaderboard()
    if args.format == "json":
        print(json.dumps([e.to_dict() for e in entries], indent=2))
    else:
        print(TournamentPrintUtils.format_leaderboard(entries))
    return 0


def run_check_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(Path(args.file))
    report = create_schedule_checker().check_schedule(
        tournament.players, tournament.schedule
    )

    print(report.summary)
    print(f"Compliance: {report.compliance_percentage:.1f}%")
    for result in report.violations + report.quality_warnings:
        print(f"  [{result.violation_type.value}] {result.check}: {result.description}")
        if args.detailed and result.details:
            print(f"      {json.dumps(result.details, default=str)}")

    return 0 if report.is_valid else 2


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="americano",
        description="Americano doubles tournament scheduling and scoring",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sched_parser = subparsers.add_parser(
        "schedule", help="Generate a schedule from a roster file"
    )
    sched_parser.add_argument(
        "roster", help="Roster file: one name per line, or a JSON list of players"
    )
    sched_parser.add_argument("--name", default=DEFAULT_TOURNAMENT_NAME)
    sched_parser.add_argument(
        "--courts",
        type=int,
        default=DEFAULT_COURTS,
        help=f"Courts available (default: {DEFAULT_COURTS})",
    )
    sched_parser.add_argument("--output", help="Write the tournament JSON here")
    sched_parser.add_argument("--format", choices=["json", "text"], default="json")
    sched_parser.set_defaults(func=run_schedule_command)

    rec_parser = subparsers.add_parser(
        "record", help="Record a final score and complete the match"
    )
    rec_parser.add_argument("file", help="Tournament JSON file (updated in place)")
    rec_parser.add_argument("match_id")
    rec_parser.add_argument("team1", type=int)
    rec_parser.add_argument("team2", type=int)
    rec_parser.set_defaults(func=run_record_command)

    lb_parser = subparsers.add_parser("leaderboard", help="Show the leaderboard")
    lb_parser.add_argument("file", help="Tournament JSON file")
    lb_parser.add_argument("--format", choices=["json", "text"], default="text")
    lb_parser.set_defaults(func=run_leaderboard_command)

    check_parser = subparsers.add_parser("check", help="Validate a tournament schedule")
    check_parser.add_argument("file", help="Tournament JSON file")
    check_parser.add_argument("--detailed", action="store_true")
    check_parser.set_defaults(func=run_check_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except AmericanoPairingException as e:
        logger.error(f"Command failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
