"""
Rule Set - Declarative phase/action definitions for a game variant.

A RuleSet describes the game flow as a graph of phases:
- Each phase declares the actions legal while it is active
- Each action maps result labels to the phase that follows
- Actions carry constraints (checked against runtime context)
  and declared state changes (what the outcome does to the board)

Key design decisions:
- Action kinds are a fixed whitelist (ActionKind)
- Constraint values are a closed variant: number, boolean or string
- State changes are tagged (MoveFigures / ChangeOwner)
- Nothing here executes anything; the engine interprets it
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class ActionKind(Enum):
    """Recognized action kinds."""
    ASSIGN_FIELDS = "assign_fields"
    ASSIGN_GOALS = "assign_goals"
    PLACE_FIGURE = "place_figure"
    CALCULATE_GAIN = "calculate_gain"
    GAIN_FIGURES = "gain_figures"
    ENCOUNTER = "encounter"
    CHANGE_OWNERSHIP = "change_ownership"
    REDISTRIBUTE_FIGURES = "redistribute_figures"
    CHECK_CARD_REWARD = "check_card_reward"
    DRAW_FIELD_CARD = "draw_field_card"
    END_PHASE = "end_phase"


ACTION_KINDS: frozenset[str] = frozenset(kind.value for kind in ActionKind)


class ComparisonOp(Enum):
    """Operators a constraint may use against the context value."""
    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="


# Number | Boolean | String. bool is checked before int wherever it matters.
ConstraintValue = Union[bool, int, float, str]


def is_number(value: Any) -> bool:
    """True for int/float values that are not bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class Constraint:
    """
    A precondition on an action.

    Examples:
    - Constraint(field="figures", value=2)             figures >= 2
    - Constraint(field="has_card", value=True)         has_card == True
    - Constraint(field="figures", value=1, op=ComparisonOp.GT)
    """
    field: str
    value: ConstraintValue
    op: ComparisonOp | None = None

    @property
    def operator(self) -> ComparisonOp:
        """Effective operator: >= for numbers, == otherwise."""
        if self.op is not None:
            return self.op
        if is_number(self.value):
            return ComparisonOp.GE
        return ComparisonOp.EQ


@dataclass
class MoveFigures:
    """Move `count` figures from one field to another."""
    from_field: str
    to_field: str
    count: int

    def describe(self) -> str:
        return f"move {self.count} figure(s) {self.from_field} -> {self.to_field}"


@dataclass
class ChangeOwner:
    """Hand a field over to a new owner."""
    field_id: str
    new_owner: str

    def describe(self) -> str:
        return f"field {self.field_id} -> owner {self.new_owner}"


StateChange = Union[MoveFigures, ChangeOwner]


@dataclass
class ActionDefinition:
    """
    An action available within a phase.

    `result` maps an outcome label (e.g. "won", "done") to the id
    of the phase that follows that outcome.
    """
    kind: str
    constraints: list[Constraint] = field(default_factory=list)
    result: dict[str, str] = field(default_factory=dict)
    changes: list[StateChange] = field(default_factory=list)


@dataclass
class PhaseDefinition:
    """A named state of the game flow."""
    id: str
    actions: list[ActionDefinition] = field(default_factory=list)
    next_phase: str | None = None

    def get_action(self, kind: str) -> ActionDefinition | None:
        """First action declared with this kind."""
        for action in self.actions:
            if action.kind == kind:
                return action
        return None

    @property
    def action_kinds(self) -> list[str]:
        return [action.kind for action in self.actions]

    @property
    def is_dead_end(self) -> bool:
        return not self.actions and self.next_phase is None


@dataclass
class Goal:
    """A goal (mission) players can be assigned by id."""
    id: str
    description: str = ""
    params: dict[str, Any] = field(default_factory=dict)


@dataclass
class RuleSet:
    """
    Complete rules for one game variant.

    Constructed once (by a loader or by hand), validated once,
    then owned by a single engine for the length of a session.
    """
    id: str
    default_phase: str
    phases: list[PhaseDefinition] = field(default_factory=list)
    goals: list[Goal] = field(default_factory=list)
    description: str = ""

    def get_phase(self, phase_id: str) -> PhaseDefinition | None:
        """Get a phase by id."""
        for phase in self.phases:
            if phase.id == phase_id:
                return phase
        return None

    def get_goal(self, goal_id: str) -> Goal | None:
        """Get a goal by id."""
        for goal in self.goals:
            if goal.id == goal_id:
                return goal
        return None

    @property
    def phase_ids(self) -> list[str]:
        return [phase.id for phase in self.phases]

    def successors(self, phase_id: str) -> list[str]:
        """Phase ids directly reachable from a phase, in declaration order."""
        phase = self.get_phase(phase_id)
        if phase is None:
            return []
        targets: list[str] = []
        for action in phase.actions:
            for target in action.result.values():
                if target not in targets:
                    targets.append(target)
        if phase.next_phase and phase.next_phase not in targets:
            targets.append(phase.next_phase)
        return targets


# ============================================================================
# Factory functions for common definitions
# ============================================================================

def end_phase(next_phase: str, label: str = "done") -> ActionDefinition:
    """Create an end_phase action leading to `next_phase`."""
    return ActionDefinition(
        kind=ActionKind.END_PHASE.value,
        result={label: next_phase},
    )


def move_figures(from_field: str, to_field: str, count: int = 1) -> MoveFigures:
    """Create a MoveFigures state change."""
    return MoveFigures(from_field=from_field, to_field=to_field, count=count)


def change_owner(field_id: str, new_owner: str) -> ChangeOwner:
    """Create a ChangeOwner state change."""
    return ChangeOwner(field_id=field_id, new_owner=new_owner)
