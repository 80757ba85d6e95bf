"""
Rule Validation - Load-time checks for a RuleSet.

Validates, failing fast on the first violation, in this order:
1. RuleSet id is set
2. Phase ids are unique
3. Every next_phase points at a declared phase
4. Every action: kinds unique within the phase, known kind,
   non-empty constraint fields, well-formed state changes,
   result targets are declared phases
5. The default phase is declared
6. Goal ids are set and unique

Either the whole RuleSet validates or the first error is raised.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field

from ..errors import (
    DuplicateIdError,
    DuplicatePhaseIdError,
    EmptyConstraintFieldError,
    EmptyIdError,
    InvalidActionKindError,
    InvalidStateChangeError,
    RuleValidationError,
    UnknownDefaultPhaseError,
    UnknownPhaseReferenceError,
    UnknownReferenceError,
)
from .integrity import check_references, check_unique
from .ruleset import (
    ACTION_KINDS,
    ActionDefinition,
    ChangeOwner,
    MoveFigures,
    PhaseDefinition,
    RuleSet,
    StateChange,
)


@dataclass
class ValidationResult:
    """Result of validation, with at most one error and any warnings."""
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: RuleValidationError | None = None


def validate_rules(rules: RuleSet) -> None:
    """
    Validate a complete RuleSet.

    Deterministic and side-effect free. Raises the first
    RuleValidationError encountered.
    """
    if not rules.id.strip():
        raise EmptyIdError("RuleSet")

    try:
        phase_ids = check_unique(rules.phases, lambda p: p.id, "phase")
    except DuplicateIdError as exc:
        raise DuplicatePhaseIdError(exc.entity_id) from exc

    try:
        check_references(
            rules.phases,
            lambda p: [p.next_phase] if p.next_phase is not None else [],
            phase_ids,
            "phase",
            id_of=lambda p: p.id,
        )
    except UnknownReferenceError as exc:
        raise UnknownPhaseReferenceError(exc.from_id, exc.referenced_id) from exc

    for phase in rules.phases:
        check_unique(phase.actions, lambda a: a.kind, f"action in '{phase.id}'")
        for action in phase.actions:
            _validate_action(phase, action, phase_ids)

    if rules.default_phase not in phase_ids:
        raise UnknownDefaultPhaseError(rules.default_phase)

    for goal in rules.goals:
        if not goal.id.strip():
            raise EmptyIdError("Goal")
    check_unique(rules.goals, lambda g: g.id, "goal")


def check_rules(rules: RuleSet) -> ValidationResult:
    """
    Non-raising form of validate_rules.

    Adds advisory warnings (dead ends, unreachable phases, no goals)
    when the RuleSet is otherwise valid.
    """
    try:
        validate_rules(rules)
    except RuleValidationError as exc:
        return ValidationResult(valid=False, errors=[str(exc)], error=exc)

    warnings: list[str] = []

    for phase in rules.phases:
        if phase.is_dead_end:
            warnings.append(f"Phase '{phase.id}' has no actions and no next phase")

    reachable = reachable_phases(rules)
    for phase_id in rules.phase_ids:
        if phase_id not in reachable:
            warnings.append(
                f"Phase '{phase_id}' is unreachable from '{rules.default_phase}'"
            )

    if not rules.goals:
        warnings.append("No goals defined")

    return ValidationResult(valid=True, warnings=warnings)


def reachable_phases(rules: RuleSet) -> set[str]:
    """Phase ids reachable from the default phase (itself included)."""
    if rules.get_phase(rules.default_phase) is None:
        return set()

    seen = {rules.default_phase}
    queue = deque([rules.default_phase])
    while queue:
        for target in rules.successors(queue.popleft()):
            if target not in seen:
                seen.add(target)
                queue.append(target)
    return seen


def _validate_action(
    phase: PhaseDefinition, action: ActionDefinition, phase_ids: set
) -> None:
    """Validate a single action definition."""
    if action.kind not in ACTION_KINDS:
        raise InvalidActionKindError(phase.id, action.kind)

    for constraint in action.constraints:
        if not constraint.field.strip():
            raise EmptyConstraintFieldError(action.kind)

    for change in action.changes:
        _validate_change(change)

    for target in action.result.values():
        if target not in phase_ids:
            raise UnknownPhaseReferenceError(phase.id, target)


def _validate_change(change: StateChange) -> None:
    """Validate a single state change against its invariant."""
    if isinstance(change, MoveFigures):
        if change.from_field == change.to_field:
            raise InvalidStateChangeError("MoveFigures: from and to must differ")
        if change.count <= 0:
            raise InvalidStateChangeError("MoveFigures: count must be > 0")
    elif isinstance(change, ChangeOwner):
        if not change.field_id.strip() or not change.new_owner.strip():
            raise InvalidStateChangeError(
                "ChangeOwner: field_id and new_owner must be set"
            )
    else:
        raise InvalidStateChangeError(f"Unknown state change: {change!r}")
