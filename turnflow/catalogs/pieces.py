"""
Piece catalogs - piece sets, figure sets and dice.

All three share the same shape: named groups, each holding a
non-empty list of items keyed by value. Each group name (or id)
is unique in its catalog and each value is unique within its group.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..errors import EmptyCatalogError, EmptyIdError
from ..rules.integrity import check_unique


# =============================================================================
# Pieces
# =============================================================================

class Piece(BaseModel):
    value: int
    image: Optional[str] = None


class PieceSet(BaseModel):
    """A named collection of pieces (usually one per player colour)."""
    name: str
    pieces: list[Piece] = Field(default_factory=list)


class PieceCatalog(BaseModel):
    id: str = ""
    name: str = ""
    sets: list[PieceSet] = Field(default_factory=list)


def validate_pieces(catalog: PieceCatalog) -> None:
    check_unique(catalog.sets, lambda s: s.name, "piece set")
    for piece_set in catalog.sets:
        if not piece_set.pieces:
            raise EmptyCatalogError("pieces", piece_set.name)
        check_unique(piece_set.pieces, lambda p: p.value, f"piece value in '{piece_set.name}'")


# =============================================================================
# Figures
# =============================================================================

class Figure(BaseModel):
    value: int
    image: str = ""


class FigureBox(BaseModel):
    name: str
    figures: list[Figure] = Field(default_factory=list)


class FigureSet(BaseModel):
    name: str
    boxes: list[FigureBox] = Field(default_factory=list)

    def box(self, name: str) -> Optional[FigureBox]:
        for figure_box in self.boxes:
            if figure_box.name == name:
                return figure_box
        return None


def validate_figures(figure_set: FigureSet) -> None:
    if not figure_set.boxes:
        raise EmptyCatalogError("boxes", figure_set.name)
    check_unique(figure_set.boxes, lambda b: b.name, "figure box")
    for figure_box in figure_set.boxes:
        if not figure_box.figures:
            raise EmptyCatalogError("figures", figure_box.name)
        check_unique(
            figure_box.figures, lambda f: f.value, f"figure value in '{figure_box.name}'"
        )


# =============================================================================
# Dice
# =============================================================================

class DiceFace(BaseModel):
    value: int
    image: str = ""


class DiceVariant(BaseModel):
    id: int
    name: str
    faces: list[DiceFace] = Field(default_factory=list)


class DiceCatalog(BaseModel):
    id: str
    name: str = ""
    dice_sets: list[DiceVariant] = Field(default_factory=list)


def validate_dice(catalog: DiceCatalog) -> None:
    if not catalog.id.strip():
        raise EmptyIdError("DiceCatalog")
    check_unique(catalog.dice_sets, lambda d: d.id, "dice variant")
    for variant in catalog.dice_sets:
        if not variant.faces:
            raise EmptyCatalogError("faces", variant.name)
        check_unique(variant.faces, lambda f: f.value, f"face value in '{variant.name}'")
