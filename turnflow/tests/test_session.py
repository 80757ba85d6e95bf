"""
Tests for session management.
"""

import pytest

from ..engine import EventRecorder, PhaseChanged
from ..errors import UnknownDefaultPhaseError
from ..session import SessionManager, SessionState


@pytest.fixture
def manager():
    return SessionManager()


class TestSessionManager:
    def test_create_session(self, manager, teg_rules):
        session = manager.create_session(teg_rules, metadata={"table": 4})
        assert session.is_active()
        assert session.current_phase == "setup"
        assert session.metadata == {"table": 4}
        assert manager.get_session(session.session_id) is session

    def test_invalid_rules_create_nothing(self, manager, simple_rules):
        simple_rules.default_phase = "lobby"
        with pytest.raises(UnknownDefaultPhaseError):
            manager.create_session(simple_rules)
        assert manager.list_active_sessions() == []

    def test_history_records_events(self, manager, simple_rules):
        session = manager.create_session(simple_rules)
        session.engine.execute_action("end_phase", "done")
        assert session.history.of_type(PhaseChanged) == [
            PhaseChanged(from_phase="setup", to_phase="place")
        ]

    def test_extra_observers(self, manager, simple_rules):
        extra = EventRecorder()
        session = manager.create_session(simple_rules, observers=[extra])
        session.engine.execute_action("end_phase", "done")
        assert extra.events == session.history.events

    def test_sessions_do_not_share_state(self, manager, simple_rules):
        first = manager.create_session(simple_rules)
        second = manager.create_session(simple_rules)
        first.engine.execute_action("end_phase", "done")
        assert first.current_phase == "place"
        assert second.current_phase == "setup"
        assert second.history.events == []

    def test_end_session(self, manager, simple_rules):
        session = manager.create_session(simple_rules)
        assert manager.end_session(session.session_id)
        assert session.state == SessionState.ENDED
        assert manager.get_session(session.session_id) is None
        assert not manager.end_session(session.session_id)

    def test_list_active_sessions(self, manager, simple_rules):
        ids = [manager.create_session(simple_rules).session_id for _ in range(3)]
        manager.end_session(ids[1])
        assert sorted(manager.list_active_sessions()) == sorted([ids[0], ids[2]])

    def test_cleanup_stale_sessions(self, manager, simple_rules):
        old = manager.create_session(simple_rules)
        fresh = manager.create_session(simple_rules)
        old.created_at -= 7200

        removed = manager.cleanup_stale_sessions(max_age_seconds=3600)
        assert removed == [old.session_id]
        assert old.state == SessionState.ENDED
        assert manager.list_active_sessions() == [fresh.session_id]
