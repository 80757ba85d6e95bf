"""Rule schema - declarative phase/action definitions and their validation."""

from .ruleset import (
    ACTION_KINDS,
    ActionDefinition,
    ActionKind,
    ChangeOwner,
    ComparisonOp,
    Constraint,
    ConstraintValue,
    Goal,
    MoveFigures,
    PhaseDefinition,
    RuleSet,
    StateChange,
)
from .integrity import CatalogRule, check_catalogs, check_references, check_unique
from .validation import ValidationResult, check_rules, reachable_phases, validate_rules
from .schemas import RuleSetDocument, parse_rules

__all__ = [
    "ACTION_KINDS",
    "ActionDefinition",
    "ActionKind",
    "ChangeOwner",
    "ComparisonOp",
    "Constraint",
    "ConstraintValue",
    "Goal",
    "MoveFigures",
    "PhaseDefinition",
    "RuleSet",
    "StateChange",
    "CatalogRule",
    "check_catalogs",
    "check_references",
    "check_unique",
    "ValidationResult",
    "check_rules",
    "reachable_phases",
    "validate_rules",
    "RuleSetDocument",
    "parse_rules",
]
