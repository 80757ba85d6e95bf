"""
Game definition - ties a variant together.

A GameDefinition names the rule, board and piece files of a variant,
holds game parameters and declares player slots. Player slots
reference goals by id; those references are checked against the
RuleSet's goals when one is supplied.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..errors import EmptyCatalogError, EmptyIdError, InvalidCatalogError
from ..rules.integrity import check_references, check_unique
from ..rules.ruleset import RuleSet


class GameParameters(BaseModel):
    min_players: int
    max_players: int
    card_bonus_sequence: list[int] = Field(default_factory=list)
    setup_round_figures: int = 0
    regular_round_figures: int = 0


class PlayerSlot(BaseModel):
    """A seat at the table and the goals it may be dealt."""
    id: str
    goal_ids: list[str] = Field(default_factory=list)


class GameDefinition(BaseModel):
    id: str
    name: str
    rule: str = Field(description="rule file name, relative to the variant directory")
    board: str
    pieces: str
    parameters: GameParameters
    players: list[PlayerSlot] = Field(default_factory=list)


def validate_game(definition: GameDefinition, rules: RuleSet | None = None) -> None:
    """
    Validate a game definition.

    With `rules`, every goal a player slot references must be declared there.
    """
    if not definition.id.strip():
        raise EmptyIdError("GameDefinition")
    if not definition.name.strip():
        raise InvalidCatalogError("GameDefinition name must not be empty")

    params = definition.parameters
    if params.min_players < 1 or params.max_players < params.min_players:
        raise InvalidCatalogError(
            f"invalid player count range: {params.min_players}-{params.max_players}"
        )
    if not params.card_bonus_sequence:
        raise EmptyCatalogError("card_bonus_sequence", definition.id)

    check_unique(definition.players, lambda p: p.id, "player")
    if len(definition.players) > params.max_players:
        raise InvalidCatalogError(
            f"{len(definition.players)} player slots exceed max_players={params.max_players}"
        )

    if rules is not None:
        goal_ids = {goal.id for goal in rules.goals}
        check_references(
            definition.players, lambda p: p.goal_ids, goal_ids, "player", id_of=lambda p: p.id
        )
