"""
Tests for observer fan-out.
"""

import pytest

from ..engine import (
    ActionExecuted,
    ConstraintChecked,
    EventRecorder,
    ObserverBus,
    PhaseChanged,
    PhaseFlowObserver,
)


class TestObserverBus:
    def test_notifies_in_registration_order(self):
        calls = []

        class Named(PhaseFlowObserver):
            def __init__(self, name):
                self.name = name

            def handle(self, event):
                calls.append(self.name)

        bus = ObserverBus()
        for name in ["a", "b", "c"]:
            bus.add(Named(name))
        bus.notify(PhaseChanged(from_phase="x", to_phase="y"))
        assert calls == ["a", "b", "c"]
        assert len(bus) == 3

    def test_empty_bus(self):
        ObserverBus().notify(PhaseChanged(from_phase="x", to_phase="y"))

    def test_observer_is_abstract(self):
        with pytest.raises(TypeError):
            PhaseFlowObserver()

    def test_same_observer_twice(self):
        """Registering an observer twice delivers each event twice."""
        recorder = EventRecorder()
        bus = ObserverBus()
        bus.add(recorder)
        bus.add(recorder)
        bus.notify(ConstraintChecked(phase="attack", action="encounter", success=True))
        assert len(recorder.events) == 2


class TestEventRecorder:
    def test_of_type(self):
        recorder = EventRecorder()
        recorder.handle(ActionExecuted(phase="a", action="end_phase", result="done"))
        recorder.handle(PhaseChanged(from_phase="a", to_phase="b"))
        assert recorder.of_type(PhaseChanged) == [PhaseChanged(from_phase="a", to_phase="b")]
        recorder.clear()
        assert recorder.events == []

    def test_events_are_immutable(self):
        event = PhaseChanged(from_phase="a", to_phase="b")
        with pytest.raises(AttributeError):
            event.to_phase = "c"
