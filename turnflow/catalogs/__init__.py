"""
Catalogs - static entity data around the rules (board, pieces, dice, game).

Every catalog is validated with the shared integrity routine in
turnflow.rules.integrity: unique ids plus resolvable references.
"""

from .board import Board, FieldElement, FieldSet, validate_board
from .pieces import (
    DiceCatalog,
    DiceFace,
    DiceVariant,
    Figure,
    FigureBox,
    FigureSet,
    Piece,
    PieceCatalog,
    PieceSet,
    validate_dice,
    validate_figures,
    validate_pieces,
)
from .game import GameDefinition, GameParameters, PlayerSlot, validate_game

__all__ = [
    "Board",
    "FieldElement",
    "FieldSet",
    "validate_board",
    "DiceCatalog",
    "DiceFace",
    "DiceVariant",
    "Figure",
    "FigureBox",
    "FigureSet",
    "Piece",
    "PieceCatalog",
    "PieceSet",
    "validate_dice",
    "validate_figures",
    "validate_pieces",
    "GameDefinition",
    "GameParameters",
    "PlayerSlot",
    "validate_game",
]
