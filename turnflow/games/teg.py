"""
TEG Rule Set

The classic territorial variant, hand-authored in Python.

Turn flow:
    setup -> goals -> initial_placement -> attack -> regroup -> end
    end -> reinforce -> attack -> ...        (via next_phase)

Attacks that win go through `conquer`, which hands the field over
and moves one figure in, then returns to `attack`.
"""

from ..rules.ruleset import (
    ActionDefinition,
    ActionKind,
    ComparisonOp,
    Constraint,
    Goal,
    PhaseDefinition,
    RuleSet,
    change_owner,
    end_phase,
    move_figures,
)


def create_teg_rules() -> RuleSet:
    """
    Create the TEG rule set.

    The result passes validate_rules.
    """
    return RuleSet(
        id="teg",
        default_phase="setup",
        phases=_define_phases(),
        goals=_define_goals(),
        description="TEG - classic territorial conquest",
    )


def _define_phases() -> list[PhaseDefinition]:
    """Define the game flow."""
    has_figures = Constraint(field="figures_in_hand", value=1)

    return [
        PhaseDefinition(
            id="setup",
            actions=[
                ActionDefinition(
                    kind=ActionKind.ASSIGN_FIELDS.value,
                    result={"done": "goals"},
                ),
            ],
        ),
        PhaseDefinition(
            id="goals",
            actions=[
                ActionDefinition(
                    kind=ActionKind.ASSIGN_GOALS.value,
                    result={"done": "initial_placement"},
                ),
            ],
        ),
        PhaseDefinition(
            id="initial_placement",
            actions=[
                ActionDefinition(
                    kind=ActionKind.PLACE_FIGURE.value,
                    constraints=[has_figures],
                    result={"placed": "initial_placement"},
                ),
                end_phase("attack"),
            ],
        ),
        PhaseDefinition(
            id="reinforce",
            actions=[
                ActionDefinition(
                    kind=ActionKind.CALCULATE_GAIN.value,
                    result={"done": "reinforce"},
                ),
                ActionDefinition(
                    kind=ActionKind.GAIN_FIGURES.value,
                    result={"done": "reinforce"},
                ),
                ActionDefinition(
                    kind=ActionKind.CHECK_CARD_REWARD.value,
                    constraints=[Constraint(field="cards_in_hand", value=3)],
                    result={"traded": "reinforce", "none": "reinforce"},
                ),
                ActionDefinition(
                    kind=ActionKind.PLACE_FIGURE.value,
                    constraints=[has_figures],
                    result={"placed": "reinforce"},
                ),
                end_phase("attack"),
            ],
        ),
        PhaseDefinition(
            id="attack",
            actions=[
                ActionDefinition(
                    kind=ActionKind.ENCOUNTER.value,
                    # An attacker must leave one figure behind
                    constraints=[
                        Constraint(field="attacker_figures", value=2),
                        Constraint(field="adjacent", value=True),
                    ],
                    result={"won": "conquer", "lost": "attack"},
                ),
                end_phase("regroup"),
            ],
        ),
        PhaseDefinition(
            id="conquer",
            actions=[
                ActionDefinition(
                    kind=ActionKind.CHANGE_OWNERSHIP.value,
                    result={"done": "attack"},
                    changes=[
                        change_owner("defender_field", "attacker"),
                        move_figures("attacker_field", "defender_field", 1),
                    ],
                ),
            ],
        ),
        PhaseDefinition(
            id="regroup",
            actions=[
                ActionDefinition(
                    kind=ActionKind.REDISTRIBUTE_FIGURES.value,
                    constraints=[
                        Constraint(field="source_figures", value=1, op=ComparisonOp.GT),
                    ],
                    result={"done": "regroup"},
                    changes=[move_figures("source_field", "target_field", 1)],
                ),
                ActionDefinition(
                    kind=ActionKind.DRAW_FIELD_CARD.value,
                    constraints=[Constraint(field="conquered_this_turn", value=True)],
                    result={"drawn": "end"},
                ),
                end_phase("end"),
            ],
        ),
        PhaseDefinition(
            id="end",
            next_phase="reinforce",
        ),
    ]


def _define_goals() -> list[Goal]:
    """Define the common goal and the secret missions."""
    return [
        Goal(
            id="world_domination",
            description="Occupy 30 fields",
            params={"fields": 30},
        ),
        Goal(
            id="occupy_africa_north_america",
            description="Occupy Africa, 5 fields of North America and 4 of Europe",
            params={"sets": {"africa": "all", "north_america": 5, "europe": 4}},
        ),
        Goal(
            id="occupy_south_america_europe",
            description="Occupy South America, 7 fields of Europe and 3 bordering ones",
            params={"sets": {"south_america": "all", "europe": 7}, "bordering": 3},
        ),
        Goal(
            id="destroy_blue",
            description="Destroy the blue army",
            params={"destroy": "blue"},
        ),
        Goal(
            id="destroy_red",
            description="Destroy the red army",
            params={"destroy": "red"},
        ),
    ]
