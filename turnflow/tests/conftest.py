"""
Pytest fixtures for Turnflow tests.
"""

import json

import pytest

from ..engine import EventRecorder, PhaseFlowEngine, create_engine
from ..games.teg import create_teg_rules
from ..rules import ActionDefinition, PhaseDefinition, RuleSet


@pytest.fixture
def simple_rules() -> RuleSet:
    """Two phases: setup --end_phase/done--> place."""
    return RuleSet(
        id="teg",
        default_phase="setup",
        phases=[
            PhaseDefinition(
                id="setup",
                actions=[ActionDefinition(kind="end_phase", result={"done": "place"})],
            ),
            PhaseDefinition(id="place", actions=[]),
        ],
    )


@pytest.fixture
def engine(simple_rules: RuleSet) -> PhaseFlowEngine:
    return create_engine(simple_rules)


@pytest.fixture
def recorder(engine: PhaseFlowEngine) -> EventRecorder:
    """Recorder attached to the `engine` fixture."""
    observer = EventRecorder()
    engine.add_observer(observer)
    return observer


@pytest.fixture
def teg_rules() -> RuleSet:
    return create_teg_rules()


@pytest.fixture
def rules_document() -> dict:
    """A decoded rule document, as a loader would produce it."""
    return {
        "id": "classic",
        "default_phase": "setup",
        "phases": [
            {
                "id": "setup",
                "actions": [
                    {"kind": "assign_fields", "result": {"done": "attack"}},
                ],
            },
            {
                "id": "attack",
                "actions": [
                    {
                        "kind": "encounter",
                        "constraints": [
                            {"field": "attacker_figures", "value": 2},
                            {"field": "adjacent", "value": True},
                        ],
                        "result": {"won": "conquer", "lost": "attack"},
                    },
                    {"kind": "end_phase", "result": {"done": "end"}},
                ],
            },
            {
                "id": "conquer",
                "actions": [
                    {
                        "kind": "change_ownership",
                        "result": {"done": "attack"},
                        "changes": [
                            {"type": "ChangeOwner", "data": {"field_id": "7", "new_owner": "red"}},
                            {"type": "MoveFigures", "data": {"from": "3", "to": "7", "count": 1}},
                        ],
                    },
                ],
            },
            {"id": "end", "next_phase": "attack"},
        ],
        "goals": [
            {"id": "world_domination", "description": "Occupy 30 fields"},
            {"id": "destroy_red"},
        ],
    }


@pytest.fixture
def board_document() -> dict:
    return {
        "id": "classic",
        "name": "Classic World",
        "sets": [{"id": 1, "name": "South America"}, {"id": 2, "name": "Africa"}],
        "fields": [
            {"id": 1, "name": "Argentina", "set_id": 1, "position": [10, 20]},
            {"id": 2, "name": "Brazil", "set_id": 1, "position": [15, 10]},
            {"id": 3, "name": "Sahara", "set_id": 2, "position": [40, 5]},
        ],
        "relations": [[1, 2], [2, 3]],
    }


@pytest.fixture
def pieces_document() -> dict:
    return {
        "id": "classic",
        "sets": [
            {"name": "red", "pieces": [{"value": 1}, {"value": 5}]},
            {"name": "blue", "pieces": [{"value": 1, "image": "blue_1.png"}]},
        ],
    }


@pytest.fixture
def game_document() -> dict:
    return {
        "id": "classic",
        "name": "TEG Classic",
        "rule": "classic.rule.json",
        "board": "classic.board.json",
        "pieces": "classic.pieces.json",
        "parameters": {
            "min_players": 2,
            "max_players": 6,
            "card_bonus_sequence": [4, 7, 10],
        },
        "players": [
            {"id": "red", "goal_ids": ["world_domination"]},
            {"id": "blue", "goal_ids": ["world_domination", "destroy_red"]},
        ],
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a document to tmp_path/<name> and return the path."""

    def _write(name: str, data) -> object:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
