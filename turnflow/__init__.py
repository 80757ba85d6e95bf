"""
Turnflow - Data-driven phase-flow engine for turn-based territorial games.

A game variant is described declaratively (phases, actions, constraints,
transitions, goals). Turnflow provides:
- A validated rule schema
- Referential-integrity checks for rules and entity catalogs
- A runtime state machine gating legal actions per phase
- Synchronous observer notification of every transition
"""

__version__ = "0.1.0"
