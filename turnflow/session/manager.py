"""
Session Manager - Creates and tracks game sessions.

A session represents one play-through of a variant:
- Created from a RuleSet (validated on creation)
- Owns exactly one PhaseFlowEngine, which owns its own copy of the rules
- Records every engine event in its history
- Removed from the manager when it ends

Sessions are in-memory only. Each SessionManager is an ordinary
object; there is no process-wide registry.

An engine is single-writer. If several tasks drive the same session,
they must serialize access themselves.
"""

from __future__ import annotations
import logging
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..engine import EventRecorder, PhaseFlowEngine, PhaseFlowObserver, create_engine
from ..rules import RuleSet

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"
    ENDED = "ended"


@dataclass
class GameSession:
    """One game in progress."""
    session_id: str
    engine: PhaseFlowEngine
    created_at: float
    state: SessionState = SessionState.ACTIVE
    history: EventRecorder = field(default_factory=EventRecorder)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def current_phase(self) -> str:
        return self.engine.current_phase

    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE


class SessionManager:
    """
    Manages game sessions.

    Usage:
        manager = SessionManager()
        session = manager.create_session(create_teg_rules())
        session.engine.execute_action("assign_fields", "done")
        manager.end_session(session.session_id)
    """

    def __init__(self):
        self._sessions: dict[str, GameSession] = {}

    def create_session(
        self,
        rules: RuleSet,
        observers: list[PhaseFlowObserver] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> GameSession:
        """
        Create a new session.

        Raises RuleValidationError if the rules are invalid.
        The session's history recorder is attached before any other observer.
        """
        engine = create_engine(rules)
        session = GameSession(
            session_id=str(uuid.uuid4()),
            engine=engine,
            created_at=time.time(),
            metadata=dict(metadata or {}),
        )
        engine.add_observer(session.history)
        for observer in observers or []:
            engine.add_observer(observer)

        self._sessions[session.session_id] = session
        logger.info(
            "Created session %s for rules '%s'", session.session_id, rules.id
        )
        return session

    def get_session(self, session_id: str) -> GameSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """
        End a session and forget it.

        Returns False if no such session exists.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.state = SessionState.ENDED
        logger.info("Ended session %s in phase '%s'", session_id, session.current_phase)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: float = 3600) -> list[str]:
        """End sessions older than max_age_seconds. Returns their IDs."""
        current_time = time.time()
        stale = [
            sid for sid, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds
        ]
        for session_id in stale:
            self.end_session(session_id)
        return stale
