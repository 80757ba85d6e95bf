"""
Board catalog - field sets (continents), fields (countries) and borders.

Integrity:
- board id is set and there is at least one field
- field set ids and field ids are unique
- every field belongs to a declared field set
- every relation connects two declared fields
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..errors import EmptyCatalogError, EmptyIdError
from ..rules.integrity import CatalogRule, check_catalogs, check_references


class FieldSet(BaseModel):
    """A group of fields sharing a bonus (e.g. a continent)."""
    id: int
    name: str
    bonus: int = 0


class FieldElement(BaseModel):
    """A single field on the board."""
    id: int
    name: str
    set_id: int
    position: tuple[int, int] = (0, 0)
    piece_pos: Optional[tuple[int, int]] = None
    filename: str = ""


class Board(BaseModel):
    """A complete board definition."""
    id: str
    name: str = ""
    author: str = ""
    version: str = ""
    description: str = ""
    sets: list[FieldSet] = Field(default_factory=list)
    fields: list[FieldElement] = Field(default_factory=list)
    relations: list[tuple[int, int]] = Field(
        default_factory=list, description="borders between field ids"
    )

    def get_field(self, field_id: int) -> Optional[FieldElement]:
        for element in self.fields:
            if element.id == field_id:
                return element
        return None

    def neighbours(self, field_id: int) -> list[int]:
        """Field ids sharing a border with field_id (relations are bidirectional)."""
        result = []
        for a, b in self.relations:
            if a == field_id and b not in result:
                result.append(b)
            elif b == field_id and a not in result:
                result.append(a)
        return result


def validate_board(board: Board) -> None:
    """Raise the first integrity error of a board, if any."""
    if not board.id.strip():
        raise EmptyIdError("Board")
    if not board.fields:
        raise EmptyCatalogError("fields", board.id)

    known = check_catalogs([
        CatalogRule(catalog="field set", entities=board.sets, id_of=lambda s: s.id),
        CatalogRule(
            catalog="field",
            entities=board.fields,
            id_of=lambda f: f.id,
            references=[(lambda f: [f.set_id], "field set")],
        ),
    ])

    check_references(board.relations, lambda r: r, known["field"], "relation")
