"""
Error types for rule loading, validation and runtime play.

Three tiers:
1. Load-time validation errors (RuleValidationError, CatalogError)
   - one-shot, abort the whole configuration load
2. Runtime engine errors (EngineError)
   - per call, the caller can recover and try another request
3. Loader errors (ConfigLoadError)
   - wrap I/O, parse and validation failures for a single file

None of these abort the process; callers decide what to do.
"""

from __future__ import annotations


class TurnflowError(Exception):
    """Base class for all turnflow errors."""


# =============================================================================
# Rule validation
# =============================================================================

class RuleValidationError(TurnflowError):
    """A RuleSet failed validation."""


class EmptyIdError(RuleValidationError):
    """An id that must be set is empty."""

    def __init__(self, what: str = "RuleSet"):
        self.what = what
        super().__init__(f"{what} id must not be empty")


class DuplicatePhaseIdError(RuleValidationError):
    def __init__(self, phase_id: str):
        self.phase_id = phase_id
        super().__init__(f"Duplicate phase id: {phase_id}")


class UnknownPhaseReferenceError(RuleValidationError):
    """A phase (or one of its action results) points at an undeclared phase."""

    def __init__(self, from_phase: str, to_phase: str):
        self.from_phase = from_phase
        self.to_phase = to_phase
        super().__init__(
            f"Phase '{from_phase}' references unknown phase: {to_phase}"
        )


class InvalidActionKindError(RuleValidationError):
    def __init__(self, phase_id: str, kind: str):
        self.phase_id = phase_id
        self.kind = kind
        super().__init__(f"Invalid action kind in phase '{phase_id}': '{kind}'")


class EmptyConstraintFieldError(RuleValidationError):
    def __init__(self, action_kind: str):
        self.action_kind = action_kind
        super().__init__(f"Empty constraint field in action '{action_kind}'")


class InvalidStateChangeError(RuleValidationError):
    def __init__(self, description: str):
        self.description = description
        super().__init__(description)


class UnknownDefaultPhaseError(RuleValidationError):
    def __init__(self, default_phase: str):
        self.default_phase = default_phase
        super().__init__(f"Default phase is not declared: {default_phase}")


# =============================================================================
# Catalog integrity (shared by every id-keyed catalog)
# =============================================================================

class CatalogError(RuleValidationError):
    """A catalog of id-keyed entities is inconsistent."""


class DuplicateIdError(CatalogError):
    def __init__(self, catalog: str, entity_id):
        self.catalog = catalog
        self.entity_id = entity_id
        super().__init__(f"Duplicate {catalog} id: {entity_id}")


class UnknownReferenceError(CatalogError):
    def __init__(self, catalog: str, from_id, referenced_id):
        self.catalog = catalog
        self.from_id = from_id
        self.referenced_id = referenced_id
        super().__init__(
            f"{catalog} '{from_id}' references unknown id: {referenced_id}"
        )


class EmptyCatalogError(CatalogError):
    def __init__(self, catalog: str, owner: str = ""):
        self.catalog = catalog
        self.owner = owner
        where = f" in '{owner}'" if owner else ""
        super().__init__(f"{catalog} must not be empty{where}")


class InvalidCatalogError(CatalogError):
    """Any other catalog rule (player counts, bonus sequences, ...)."""


# =============================================================================
# Runtime engine errors
# =============================================================================

class EngineError(TurnflowError):
    """A request to the phase-flow engine could not be honoured."""


class ActionNotFoundError(EngineError):
    def __init__(self, phase: str, action: str):
        self.phase = phase
        self.action = action
        super().__init__(f"Action '{action}' not found in phase '{phase}'")


class InvalidActionOrResultError(EngineError):
    def __init__(self, phase: str, action: str, result: str):
        self.phase = phase
        self.action = action
        self.result = result
        super().__init__(
            f"Invalid action or result in phase '{phase}': {action} -> {result}"
        )


class NoNextPhaseError(EngineError):
    def __init__(self, phase: str):
        self.phase = phase
        super().__init__(f"Phase '{phase}' declares no next phase")


# =============================================================================
# Loader errors
# =============================================================================

class ConfigLoadError(TurnflowError):
    """A data file could not be turned into a validated model."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class ConfigIOError(ConfigLoadError):
    """The file is missing or unreadable."""


class ConfigParseError(ConfigLoadError):
    """The file is not valid JSON or does not match the expected shape."""


class ConfigValidationError(ConfigLoadError):
    """The file decoded cleanly but broke a validation rule."""
