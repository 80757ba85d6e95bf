"""
Engine - Runtime interpretation of a RuleSet.

The engine:
1. Takes ownership of a validated RuleSet
2. Tracks the current phase and an action context
3. Answers which actions are legal right now
4. Evaluates action constraints
5. Executes action/result transitions
6. Notifies observers of every state-affecting call
"""

from .context import ActionContext, ContextLookup
from .constraints import ConstraintEvaluator
from .events import (
    ActionExecuted,
    ConstraintChecked,
    EventRecorder,
    ObserverBus,
    PhaseChanged,
    PhaseFlowEvent,
    PhaseFlowObserver,
)
from .phase_flow import PhaseFlowEngine, create_engine

__all__ = [
    "ActionContext",
    "ContextLookup",
    "ConstraintEvaluator",
    "ActionExecuted",
    "ConstraintChecked",
    "EventRecorder",
    "ObserverBus",
    "PhaseChanged",
    "PhaseFlowEvent",
    "PhaseFlowObserver",
    "PhaseFlowEngine",
    "create_engine",
]
