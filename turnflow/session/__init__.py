"""
Session Module - Manages in-memory game sessions.

A session represents one play-through of a variant:
- Created from a RuleSet
- Owns one engine for its whole lifetime
- Destroyed when the game ends

Game-session state is not persisted.
"""

from .manager import GameSession, SessionManager, SessionState

__all__ = [
    "GameSession",
    "SessionManager",
    "SessionState",
]
