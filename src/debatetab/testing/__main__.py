"""Unified Testing CLI for Debate Tab.

This module provides an interactive command-line interface for simulating
tournaments and printing tabs from saved tournament files.
"""

# Debate Tab
# Copyright (C) 2025  Debate Tab developers
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
import shlex
import sys
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from debatetab.constants import (
    DEFAULT_ALGORITHM,
    DRAW_ALGORITHMS,
    FORMAT_BP,
    FORMAT_NAMES,
    POSITION_NAMES,
    TOURNAMENT_FORMATS,
)
from debatetab.exceptions import DebateTabException
from debatetab.models import Round, Tournament
from debatetab.standings import compute_speaker_standings, compute_team_standings
from debatetab.utils import setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "generate": {
        "description": "Simulate a random tournament (RTG)",
        "options": {
            "--teams": "Number of teams (default: 16)",
            "--rounds": "Number of rounds (default: 5)",
            "--format": "Tournament format (BP/WSDC/AP)",
            "--algorithm": "Draw algorithm (random/power-paired-fold/power-paired-slide)",
            "--judges": "Number of judges (default: one per room)",
            "--pattern": "Result pattern (random/predictable)",
            "--seed": "Random seed for reproducibility",
            "--output": "Output file path (JSON)",
            "--speakers": "Also print the speaker tab",
            "--draw": "Also print the draw of the last round",
        },
    },
    "standings": {
        "description": "Print the tabs of a saved tournament",
        "options": {
            "--file": "Tournament file to load (JSON)",
            "--top": "Only print the first N rows",
            "--speakers": "Also print the speaker tab",
            "--strict": "Fail on ballots that reference unknown teams",
            "--draw": "Also print the draw of the last round",
        },
    },
    "help": {
        "description": "Show help for specific command",
        "options": {
            "<command>": "Command name to get help for",
        },
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                    DEBATE TAB TEST - CLI                      ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    # Support both "/command" and "command" formats
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/help"] = None
    completions["/list"] = None

    return NestedCompleter.from_nested_dict(completions)


def print_tabs(tournament: Tournament, top: Optional[int], speakers: bool) -> None:
    """Print the team tab and, if asked, the speaker tab."""
    team_tab = compute_team_standings(tournament)
    if top is not None:
        team_tab = team_tab[:top]

    print(f"\n{Colors.BOLD}Team Standings:{Colors.ENDC}")
    if tournament.format == FORMAT_BP:
        print(f"  {'#':>3}  {'Team':30} {'Pts':>4} {'Spk':>8} {'SD':>6}")
        for rank, row in enumerate(team_tab, start=1):
            print(
                f"  {rank:3d}  {row.name:30} {row.team_points:4d} "
                f"{row.total_speaker_points:8.1f} {row.std_dev:6.2f}"
            )
    else:
        print(f"  {'#':>3}  {'Team':30} {'Wins':>4} {'Spk':>8}")
        for rank, row in enumerate(team_tab, start=1):
            print(
                f"  {rank:3d}  {row.name:30} {row.wins:4d} "
                f"{row.total_speaker_points:8.1f}"
            )

    if not speakers:
        return

    speaker_tab = compute_speaker_standings(tournament)
    if top is not None:
        speaker_tab = speaker_tab[:top]

    print(f"\n{Colors.BOLD}Speaker Standings:{Colors.ENDC}")
    print(f"  {'#':>3}  {'Speaker':30} {'Team':20} {'Total':>8} {'Avg':>6}")
    for rank, row in enumerate(speaker_tab, start=1):
        print(
            f"  {rank:3d}  {row.name:30} {row.team_name:20} "
            f"{row.total:8.1f} {row.average:6.2f}"
        )


def print_draw(round_: Round) -> None:
    """Print every room of a round with its seats and judges."""
    print(f"\n{Colors.BOLD}Draw for round {round_.round_number}:{Colors.ENDC}")
    for pairing in round_.pairings:
        judges = ", ".join(judge.name for judge in pairing.judges) or "-"
        print(f"  {Colors.OKCYAN}{pairing.room}{Colors.ENDC} (judges: {judges})")
        for position, team in pairing.slots():
            print(f"    {POSITION_NAMES[position]:20} {team.name}")


def run_generate_command(args: argparse.Namespace) -> int:
    """Run the generate (RTG) command."""
    from debatetab.testing.rtg import (
        RandomTournamentGenerator,
        ResultPattern,
        RTGConfig,
    )

    print(f"\n{Colors.BOLD}Generating tournament...{Colors.ENDC}")

    pattern = (
        ResultPattern[args.pattern.upper()] if args.pattern else ResultPattern.RANDOM
    )

    config = RTGConfig(
        num_teams=args.teams,
        num_rounds=args.rounds,
        format=args.format,
        algorithm=args.algorithm,
        num_judges=args.judges,
        seed=args.seed,
        result_pattern=pattern,
    )

    rtg = RandomTournamentGenerator(config)
    tournament = rtg.generate_complete_tournament()

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(rtg.export_json_format(tournament), encoding="utf-8")
        print(f"{Colors.OKGREEN}Tournament saved to: {output_path}{Colors.ENDC}")

    print(f"\n{Colors.BOLD}Tournament Generated:{Colors.ENDC}")
    print(f"  Format: {FORMAT_NAMES[tournament.format]}")
    print(f"  Teams: {len(tournament.teams)}")
    print(f"  Judges: {len(tournament.judges)}")
    print(f"  Rounds: {len(tournament.rounds)}")

    print_tabs(tournament, top=None, speakers=args.speakers)
    if args.draw and tournament.rounds:
        print_draw(tournament.rounds[-1])
    return 0


def run_standings_command(args: argparse.Namespace) -> int:
    """Run the standings command."""
    file_path = Path(args.file)
    if not file_path.exists():
        print(f"{Colors.FAIL}Error: File not found: {file_path}{Colors.ENDC}")
        return 1

    tournament = Tournament.from_json(file_path.read_text(encoding="utf-8"))
    if args.strict:
        tournament.config.strict = True

    print(f"\n{Colors.BOLD}{tournament.name}{Colors.ENDC}")
    print(f"  Format: {FORMAT_NAMES[tournament.format]}")
    print(f"  Rounds: {len(tournament.rounds)}")

    print_tabs(tournament, top=args.top, speakers=args.speakers)
    if args.draw and tournament.rounds:
        print_draw(tournament.rounds[-1])
    return 0


def execute(argv: List[str]) -> int:
    """Parse ``argv`` and run the selected command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except DebateTabException as e:
        logger.error("Command failed: %s", e)
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = session.prompt("debatetab-test> ").strip()

            if not user_input:
                continue

            if user_input in ["exit", "quit", "q"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if user_input in ["/help", "help", "?", "/list"]:
                print_commands_list()
                continue

            if user_input.startswith("/help ") or user_input.startswith("help "):
                cmd = user_input.split()[1].lstrip("/")
                print_command_help(cmd)
                continue

            parts = shlex.split(user_input)
            parts[0] = parts[0].lstrip("/")
            if parts[0] not in COMMANDS:
                print(f"{Colors.FAIL}Unknown command: {parts[0]}{Colors.ENDC}")
                continue

            execute(parts)

        except KeyboardInterrupt:
            continue
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break
        except SystemExit:
            # argparse exits on bad arguments; stay in the session
            continue
        except ValueError as e:
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for standard mode."""
    parser = argparse.ArgumentParser(
        prog="debatetab-test",
        description="Debate Tab testing CLI",
    )
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="Start interactive mode"
    )
    subparsers = parser.add_subparsers(dest="command")

    # Generate subcommand
    gen_parser = subparsers.add_parser("generate", help="Simulate a tournament")
    gen_parser.add_argument("--teams", type=int, default=16)
    gen_parser.add_argument("--rounds", type=int, default=5)
    gen_parser.add_argument(
        "--format", choices=list(TOURNAMENT_FORMATS), default=FORMAT_BP
    )
    gen_parser.add_argument(
        "--algorithm", choices=list(DRAW_ALGORITHMS), default=DEFAULT_ALGORITHM
    )
    gen_parser.add_argument("--judges", type=int)
    gen_parser.add_argument(
        "--pattern", choices=["random", "predictable"], default="random"
    )
    gen_parser.add_argument("--seed", type=int)
    gen_parser.add_argument("--output")
    gen_parser.add_argument("--speakers", action="store_true")
    gen_parser.add_argument("--draw", action="store_true")
    gen_parser.set_defaults(func=run_generate_command)

    # Standings subcommand
    std_parser = subparsers.add_parser("standings", help="Print tabs from a file")
    std_parser.add_argument("--file", required=True)
    std_parser.add_argument("--top", type=int)
    std_parser.add_argument("--speakers", action="store_true")
    std_parser.add_argument("--strict", action="store_true")
    std_parser.add_argument("--draw", action="store_true")
    std_parser.set_defaults(func=run_standings_command)

    return parser


def main() -> int:
    """Main entry point for debatetab-test CLI."""
    # If no arguments, start interactive mode
    if len(sys.argv) == 1:
        return run_interactive_mode()

    if "--interactive" in sys.argv or "-i" in sys.argv:
        return run_interactive_mode()

    return execute(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
