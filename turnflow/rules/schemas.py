"""
Pydantic Schemas for rule documents.

These models describe the shape of a decoded rule document (the
mapping a JSON file or any other loader produces) and convert it
into the RuleSet dataclasses.

Structural problems (missing keys, wrong types, unknown state change
tags, non-scalar constraint values) are reported here as pydantic
ValidationError. Semantic checks (unique ids, dangling references,
whitelisted kinds) stay in validation.validate_rules.

State changes use an adjacently tagged form:
    {"type": "MoveFigures", "data": {"from": "A", "to": "B", "count": 2}}
    {"type": "ChangeOwner", "data": {"field_id": "A", "new_owner": "red"}}
"""

from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from .ruleset import (
    ActionDefinition,
    ChangeOwner,
    ComparisonOp,
    Constraint,
    Goal,
    MoveFigures,
    PhaseDefinition,
    RuleSet,
)


# =============================================================================
# State changes
# =============================================================================

class MoveFiguresData(BaseModel):
    """Payload of a MoveFigures change."""
    from_field: str = Field(alias="from")
    to_field: str = Field(alias="to")
    count: StrictInt = Field(ge=0)

    model_config = {"populate_by_name": True}


class ChangeOwnerData(BaseModel):
    """Payload of a ChangeOwner change."""
    field_id: str
    new_owner: str


class MoveFiguresDocument(BaseModel):
    type: Literal["MoveFigures"]
    data: MoveFiguresData

    def to_model(self) -> MoveFigures:
        return MoveFigures(
            from_field=self.data.from_field,
            to_field=self.data.to_field,
            count=self.data.count,
        )


class ChangeOwnerDocument(BaseModel):
    type: Literal["ChangeOwner"]
    data: ChangeOwnerData

    def to_model(self) -> ChangeOwner:
        return ChangeOwner(field_id=self.data.field_id, new_owner=self.data.new_owner)


StateChangeDocument = Annotated[
    Union[MoveFiguresDocument, ChangeOwnerDocument],
    Field(discriminator="type"),
]


# =============================================================================
# Phases, actions, constraints
# =============================================================================

class ConstraintDocument(BaseModel):
    """A constraint; value must be a number, boolean or string."""
    field: str
    value: Union[StrictBool, StrictInt, StrictFloat, StrictStr]
    op: Optional[ComparisonOp] = None

    def to_model(self) -> Constraint:
        return Constraint(field=self.field, value=self.value, op=self.op)


class ActionDocument(BaseModel):
    kind: str
    constraints: list[ConstraintDocument] = Field(default_factory=list)
    result: dict[str, str] = Field(
        default_factory=dict, description="result label -> next phase id"
    )
    changes: list[StateChangeDocument] = Field(default_factory=list)

    def to_model(self) -> ActionDefinition:
        return ActionDefinition(
            kind=self.kind,
            constraints=[c.to_model() for c in self.constraints],
            result=dict(self.result),
            changes=[c.to_model() for c in self.changes],
        )


class PhaseDocument(BaseModel):
    id: str
    actions: list[ActionDocument] = Field(default_factory=list)
    next_phase: Optional[str] = None

    def to_model(self) -> PhaseDefinition:
        return PhaseDefinition(
            id=self.id,
            actions=[a.to_model() for a in self.actions],
            next_phase=self.next_phase,
        )


class GoalDocument(BaseModel):
    id: str
    description: str = ""
    params: dict[str, Any] = Field(default_factory=dict)

    def to_model(self) -> Goal:
        return Goal(id=self.id, description=self.description, params=dict(self.params))


class RuleSetDocument(BaseModel):
    """Top-level rule document."""
    id: str
    default_phase: str
    phases: list[PhaseDocument] = Field(default_factory=list)
    goals: list[GoalDocument] = Field(default_factory=list)
    description: str = ""

    def to_model(self) -> RuleSet:
        return RuleSet(
            id=self.id,
            default_phase=self.default_phase,
            phases=[p.to_model() for p in self.phases],
            goals=[g.to_model() for g in self.goals],
            description=self.description,
        )


def parse_rules(data: Mapping[str, Any]) -> RuleSet:
    """
    Build a RuleSet from a decoded document.

    Raises pydantic.ValidationError on structural problems.
    The result is NOT semantically validated; call validate_rules.
    """
    return RuleSetDocument.model_validate(data).to_model()
