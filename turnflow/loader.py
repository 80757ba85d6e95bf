"""
Loader - Reads JSON data files into validated models.

Every load goes through the same three stages, each with its own error:
1. Read the file                -> ConfigIOError
2. Decode UTF-8, JSON, shape    -> ConfigParseError
3. Validate semantics           -> ConfigValidationError

A variant is a directory holding files named by convention:
    <variant>.rule.json, <variant>.board.json,
    <variant>.pieces.json, <variant>.game.json
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar

from pydantic import ValidationError

from .catalogs import (
    Board,
    GameDefinition,
    PieceCatalog,
    validate_board,
    validate_game,
    validate_pieces,
)
from .errors import (
    ConfigIOError,
    ConfigParseError,
    ConfigValidationError,
    RuleValidationError,
)
from .rules import RuleSet, parse_rules, validate_rules

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class GameData:
    """Everything needed to play one variant."""
    rules: RuleSet
    board: Board
    pieces: PieceCatalog
    game: GameDefinition


def load_json(path: str | Path) -> Any:
    """Read and decode a JSON file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as exc:
        raise ConfigIOError(path, f"cannot read file: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigParseError(path, f"invalid UTF-8: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(path, f"invalid JSON: {exc}") from exc


def _load(
    path: str | Path,
    parse: Callable[[Any], T],
    validate: Callable[[T], None],
) -> T:
    path = Path(path)
    data = load_json(path)

    try:
        model = parse(data)
    except ValidationError as exc:
        raise ConfigParseError(path, f"unexpected structure: {exc}") from exc

    try:
        validate(model)
    except RuleValidationError as exc:
        raise ConfigValidationError(path, str(exc)) from exc

    logger.info("Loaded %s", path)
    return model


def load_rules(path: str | Path) -> RuleSet:
    """Load and validate a rule file."""
    return _load(path, parse_rules, validate_rules)


def load_board(path: str | Path) -> Board:
    """Load and validate a board file."""
    return _load(path, Board.model_validate, validate_board)


def load_pieces(path: str | Path) -> PieceCatalog:
    """Load and validate a piece catalog file."""
    return _load(path, PieceCatalog.model_validate, validate_pieces)


def load_game(path: str | Path, rules: RuleSet | None = None) -> GameDefinition:
    """Load and validate a game definition, checking goal references against `rules`."""
    return _load(
        path,
        GameDefinition.model_validate,
        lambda definition: validate_game(definition, rules),
    )


def load_variant(variant: str, directory: str | Path) -> GameData:
    """
    Load a whole variant (e.g. "classic") from one directory.

    Rules are loaded first so the game definition can be checked
    against their goals.
    """
    directory = Path(directory)
    rules = load_rules(directory / f"{variant}.rule.json")
    board = load_board(directory / f"{variant}.board.json")
    pieces = load_pieces(directory / f"{variant}.pieces.json")
    game = load_game(directory / f"{variant}.game.json", rules=rules)
    return GameData(rules=rules, board=board, pieces=pieces, game=game)
