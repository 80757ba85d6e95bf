"""
Phase-Flow Events - What the engine tells its observers.

Events:
- PhaseChanged       the current phase moved (carries the applied new phase)
- ActionExecuted     an action/result pair was accepted (pre-transition phase)
- ConstraintChecked  constraints of an action were evaluated

Notification is synchronous, in registration order, on the caller's
stack. An observer that raises propagates into the engine call that
triggered it. Observers are never removed once attached.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class PhaseChanged:
    from_phase: str
    to_phase: str


@dataclass(frozen=True)
class ActionExecuted:
    phase: str
    action: str
    result: str


@dataclass(frozen=True)
class ConstraintChecked:
    phase: str
    action: str
    success: bool


PhaseFlowEvent = Union[PhaseChanged, ActionExecuted, ConstraintChecked]


class PhaseFlowObserver(ABC):
    """
    Abstract base class for engine observers.

    Implementations receive every event the engine emits and must not
    call back into the engine.
    """

    @abstractmethod
    def handle(self, event: PhaseFlowEvent) -> None:
        """Receive one event."""


class ObserverBus:
    """Ordered, synchronous fan-out to observers."""

    def __init__(self):
        self._observers: list[PhaseFlowObserver] = []

    def add(self, observer: PhaseFlowObserver):
        self._observers.append(observer)

    def notify(self, event: PhaseFlowEvent):
        for observer in self._observers:
            observer.handle(event)

    def __len__(self) -> int:
        return len(self._observers)


@dataclass
class EventRecorder(PhaseFlowObserver):
    """Observer that keeps every event it receives, in order."""
    events: list[PhaseFlowEvent] = field(default_factory=list)

    def handle(self, event: PhaseFlowEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: type) -> list[PhaseFlowEvent]:
        return [e for e in self.events if isinstance(e, event_type)]

    def clear(self):
        self.events.clear()
