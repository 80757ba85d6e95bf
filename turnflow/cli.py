"""
Turnflow CLI - Command-line interface for rule and catalog files.

Usage:
    turnflow validate <file> [--kind rules|board|pieces|game]
    turnflow phases <rules_file>
    turnflow phases --builtin teg

Environment:
    TURNFLOW_LOG_LEVEL   default log level (INFO)
    TURNFLOW_DATA_DIR    directory relative file paths are resolved against
"""

import argparse
import logging
import os
import sys
from pathlib import Path

# Environment configuration
TURNFLOW_LOG_LEVEL = os.getenv("TURNFLOW_LOG_LEVEL", "INFO")
TURNFLOW_DATA_DIR = os.getenv("TURNFLOW_DATA_DIR", None)

LOADERS = ("rules", "board", "pieces", "game")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Turnflow - phase-flow rules for territorial games",
        prog="turnflow",
    )
    parser.add_argument(
        "--log-level",
        default=TURNFLOW_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a data file")
    validate_parser.add_argument("file", help="Path to a JSON data file")
    validate_parser.add_argument(
        "--kind", choices=LOADERS, default=None,
        help="File kind (guessed from '<name>.<kind>.json' when omitted)",
    )

    # Phases command
    phases_parser = subparsers.add_parser("phases", help="Print the phase graph")
    phases_parser.add_argument("rules_file", nargs="?", help="Path to a rule file")
    phases_parser.add_argument("--builtin", choices=["teg"], help="Use a built-in rule set")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "validate":
        return cmd_validate(args)
    elif args.command == "phases":
        return cmd_phases(args)
    else:
        parser.print_help()
        return 1


def _resolve(path_str: str) -> Path:
    path = Path(path_str)
    if not path.is_absolute() and TURNFLOW_DATA_DIR:
        path = Path(TURNFLOW_DATA_DIR) / path
    return path


def _guess_kind(path: Path) -> str:
    suffixes = path.name.split(".")
    if len(suffixes) >= 3 and suffixes[-2] in ("rule", *LOADERS):
        return "rules" if suffixes[-2] == "rule" else suffixes[-2]
    return "rules"


def cmd_validate(args) -> int:
    """Validate a rule or catalog file."""
    from .errors import ConfigLoadError
    from .loader import load_board, load_game, load_pieces, load_rules
    from .rules import check_rules

    path = _resolve(args.file)
    kind = args.kind or _guess_kind(path)
    loaders = {
        "rules": load_rules,
        "board": load_board,
        "pieces": load_pieces,
        "game": load_game,
    }

    try:
        model = loaders[kind](path)
    except ConfigLoadError as e:
        print(f"Error: {e}")
        return 1

    print(f"Valid {kind} file: {path}")
    if kind == "rules":
        for warning in check_rules(model).warnings:
            print(f"  warning: {warning}")
    return 0


def cmd_phases(args) -> int:
    """Print each phase with its actions and transitions."""
    from .errors import ConfigLoadError
    from .games import create_teg_rules
    from .loader import load_rules

    if args.builtin == "teg":
        rules = create_teg_rules()
    elif args.rules_file:
        try:
            rules = load_rules(_resolve(args.rules_file))
        except ConfigLoadError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Error: give a rules file or --builtin")
        return 1

    print(f"Rules: {rules.id} (start: {rules.default_phase})")
    for phase in rules.phases:
        print(f"\n[{phase.id}]")
        for action in phase.actions:
            targets = ", ".join(f"{label} -> {to}" for label, to in action.result.items())
            print(f"  {action.kind}: {targets or '(no results)'}")
        if phase.next_phase:
            print(f"  next: {phase.next_phase}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
