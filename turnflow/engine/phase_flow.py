"""
Phase-Flow Engine - Runtime interpreter for a RuleSet.

The engine is a finite-state machine:
- States are the phase ids declared in the RuleSet
- The initial state is RuleSet.default_phase
- A transition is an (action kind, result label) pair declared
  by the current phase

Design principles:
- The engine owns a private copy of its RuleSet
- Only current_phase and the ActionContext ever change
- Bad requests (unknown action, unknown result label) raise EngineError
  and leave the state untouched
- Every state-affecting call notifies observers synchronously

Not safe for concurrent mutation: one logical owner per engine.
"""

from __future__ import annotations
import logging
from copy import deepcopy
from typing import Any

from ..errors import ActionNotFoundError, InvalidActionOrResultError, NoNextPhaseError
from ..rules.ruleset import ActionDefinition, PhaseDefinition, RuleSet, StateChange
from ..rules.validation import validate_rules
from .constraints import ConstraintEvaluator
from .context import ActionContext, ContextLookup
from .events import (
    ActionExecuted,
    ConstraintChecked,
    ObserverBus,
    PhaseChanged,
    PhaseFlowObserver,
)

logger = logging.getLogger(__name__)


class PhaseFlowEngine:
    """
    Drives the phase flow of one game session.

    Usage:
        engine = create_engine(rules)
        engine.add_observer(recorder)

        if engine.is_action_allowed("end_phase"):
            engine.execute_action("end_phase", "done")

    The constructor trusts its input; use create_engine() for rules
    that have not been validated yet.
    """

    def __init__(
        self,
        rules: RuleSet,
        context: ContextLookup | None = None,
        evaluator: ConstraintEvaluator | None = None,
    ):
        self._rules = deepcopy(rules)
        self._current_phase = self._rules.default_phase
        self._context = context if context is not None else ActionContext()
        self._evaluator = evaluator or ConstraintEvaluator()
        self._observers = ObserverBus()

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def current_phase(self) -> str:
        return self._current_phase

    @property
    def rules_id(self) -> str:
        return self._rules.id

    @property
    def context(self) -> ContextLookup:
        return self._context

    def update_context(self, **values: Any):
        """Set values on the context (ActionContext only)."""
        if not isinstance(self._context, ActionContext):
            raise TypeError(
                f"Context of type {type(self._context).__name__} is read-only here"
            )
        self._context.update(**values)

    def current_phase_definition(self) -> PhaseDefinition | None:
        """The declared phase matching current_phase, if any."""
        return self._rules.get_phase(self._current_phase)

    def add_observer(self, observer: PhaseFlowObserver):
        """Attach an observer for the rest of the engine's lifetime."""
        self._observers.add(observer)

    # =========================================================================
    # Queries
    # =========================================================================

    def is_action_allowed(self, action_kind: str) -> bool:
        """True iff the current phase declares this action kind."""
        phase = self.current_phase_definition()
        return phase is not None and phase.get_action(action_kind) is not None

    def available_actions(self) -> list[str]:
        """Action kinds of the current phase, in declaration order."""
        phase = self.current_phase_definition()
        if phase is None:
            return []
        return phase.action_kinds

    def action_changes(self, action_kind: str) -> list[StateChange]:
        """Declared state changes of an action in the current phase."""
        return list(self._resolve_action(action_kind).changes)

    # =========================================================================
    # State-affecting operations
    # =========================================================================

    def check_constraints(self, action_kind: str) -> bool:
        """
        Evaluate the constraints of an action in the current phase.

        Raises ActionNotFoundError if the action is not declared.
        Otherwise emits ConstraintChecked and returns the outcome.
        """
        action = self._resolve_action(action_kind)
        success = self._evaluator.evaluate_all(action.constraints, self._context)

        logger.debug(
            "Constraints for '%s' in phase '%s': %s",
            action_kind,
            self._current_phase,
            "passed" if success else "failed",
        )
        self._observers.notify(
            ConstraintChecked(
                phase=self._current_phase,
                action=action_kind,
                success=success,
            )
        )
        return success

    def execute_action(self, action_kind: str, result_label: str) -> str:
        """
        Execute an action with a given outcome and transition.

        Raises ActionNotFoundError or InvalidActionOrResultError without
        touching state or emitting events. On success emits ActionExecuted,
        moves to the next phase, emits PhaseChanged, and returns the new
        phase id.
        """
        action = self._resolve_action(action_kind)
        next_phase = action.result.get(result_label)
        if next_phase is None:
            logger.debug(
                "Rejected result '%s' for '%s' in phase '%s'",
                result_label,
                action_kind,
                self._current_phase,
            )
            raise InvalidActionOrResultError(
                self._current_phase, action_kind, result_label
            )

        self._observers.notify(
            ActionExecuted(
                phase=self._current_phase,
                action=action_kind,
                result=result_label,
            )
        )
        self._transition(next_phase)
        return next_phase

    def advance(self) -> str:
        """
        Follow the current phase's next_phase.

        Raises NoNextPhaseError if the phase declares none.
        """
        phase = self.current_phase_definition()
        if phase is None or phase.next_phase is None:
            raise NoNextPhaseError(self._current_phase)

        self._transition(phase.next_phase)
        return phase.next_phase

    # =========================================================================
    # Internals
    # =========================================================================

    def _resolve_action(self, action_kind: str) -> ActionDefinition:
        phase = self.current_phase_definition()
        action = phase.get_action(action_kind) if phase else None
        if action is None:
            logger.debug(
                "Rejected action '%s' in phase '%s'", action_kind, self._current_phase
            )
            raise ActionNotFoundError(self._current_phase, action_kind)
        return action

    def _transition(self, next_phase: str):
        old_phase = self._current_phase
        self._current_phase = next_phase
        logger.info("Phase changed: %s -> %s", old_phase, next_phase)
        self._observers.notify(PhaseChanged(from_phase=old_phase, to_phase=next_phase))


def create_engine(
    rules: RuleSet,
    context: ContextLookup | None = None,
    evaluator: ConstraintEvaluator | None = None,
) -> PhaseFlowEngine:
    """
    Validate a RuleSet and build an engine for it.

    Raises RuleValidationError if the rules are invalid.
    """
    validate_rules(rules)
    return PhaseFlowEngine(rules, context=context, evaluator=evaluator)
