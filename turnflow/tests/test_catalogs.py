"""
Tests for entity catalogs (board, pieces, figures, dice, game definition).
"""

import pytest

from ..catalogs import (
    Board,
    DiceCatalog,
    FigureSet,
    GameDefinition,
    PieceCatalog,
    validate_board,
    validate_dice,
    validate_figures,
    validate_game,
    validate_pieces,
)
from ..errors import (
    DuplicateIdError,
    EmptyCatalogError,
    EmptyIdError,
    InvalidCatalogError,
    UnknownReferenceError,
)
from ..rules import Goal


class TestBoard:
    def test_valid_board(self, board_document):
        board = Board.model_validate(board_document)
        validate_board(board)
        assert board.get_field(2).name == "Brazil"
        assert board.neighbours(2) == [1, 3]

    def test_empty_id(self, board_document):
        board_document["id"] = ""
        with pytest.raises(EmptyIdError):
            validate_board(Board.model_validate(board_document))

    def test_no_fields(self, board_document):
        board_document["fields"] = []
        board_document["relations"] = []
        with pytest.raises(EmptyCatalogError):
            validate_board(Board.model_validate(board_document))

    def test_duplicate_field(self, board_document):
        board_document["fields"][2]["id"] = 1
        with pytest.raises(DuplicateIdError) as exc_info:
            validate_board(Board.model_validate(board_document))
        assert exc_info.value.catalog == "field"

    def test_duplicate_set(self, board_document):
        board_document["sets"][1]["id"] = 1
        with pytest.raises(DuplicateIdError) as exc_info:
            validate_board(Board.model_validate(board_document))
        assert exc_info.value.catalog == "field set"

    def test_missing_set(self, board_document):
        board_document["fields"][0]["set_id"] = 9
        with pytest.raises(UnknownReferenceError) as exc_info:
            validate_board(Board.model_validate(board_document))
        assert exc_info.value.from_id == 1
        assert exc_info.value.referenced_id == 9

    def test_bad_relation(self, board_document):
        board_document["relations"].append([3, 42])
        with pytest.raises(UnknownReferenceError) as exc_info:
            validate_board(Board.model_validate(board_document))
        assert exc_info.value.catalog == "relation"
        assert exc_info.value.referenced_id == 42


class TestPieces:
    def test_valid(self, pieces_document):
        validate_pieces(PieceCatalog.model_validate(pieces_document))

    def test_duplicate_set_name(self, pieces_document):
        pieces_document["sets"][1]["name"] = "red"
        with pytest.raises(DuplicateIdError):
            validate_pieces(PieceCatalog.model_validate(pieces_document))

    def test_empty_set(self, pieces_document):
        pieces_document["sets"][1]["pieces"] = []
        with pytest.raises(EmptyCatalogError) as exc_info:
            validate_pieces(PieceCatalog.model_validate(pieces_document))
        assert exc_info.value.owner == "blue"

    def test_duplicate_value_in_set(self, pieces_document):
        pieces_document["sets"][0]["pieces"].append({"value": 5})
        with pytest.raises(DuplicateIdError):
            validate_pieces(PieceCatalog.model_validate(pieces_document))


class TestFigures:
    def _figures(self):
        return {
            "name": "Classic",
            "boxes": [
                {"name": "red", "figures": [{"value": 1}, {"value": 10}]},
                {"name": "blue", "figures": [{"value": 1}]},
            ],
        }

    def test_valid(self):
        figure_set = FigureSet.model_validate(self._figures())
        validate_figures(figure_set)
        assert figure_set.box("red").figures[1].value == 10

    def test_no_boxes(self):
        with pytest.raises(EmptyCatalogError):
            validate_figures(FigureSet(name="Empty"))

    def test_empty_box(self):
        data = self._figures()
        data["boxes"][1]["figures"] = []
        with pytest.raises(EmptyCatalogError):
            validate_figures(FigureSet.model_validate(data))

    def test_duplicate_value(self):
        data = self._figures()
        data["boxes"][0]["figures"].append({"value": 1})
        with pytest.raises(DuplicateIdError):
            validate_figures(FigureSet.model_validate(data))


class TestDice:
    def _dice(self):
        return {
            "id": "d6",
            "dice_sets": [
                {"id": 1, "name": "attack", "faces": [{"value": v} for v in range(1, 7)]},
                {"id": 2, "name": "defence", "faces": [{"value": v} for v in range(1, 7)]},
            ],
        }

    def test_valid(self):
        validate_dice(DiceCatalog.model_validate(self._dice()))

    def test_duplicate_variant(self):
        data = self._dice()
        data["dice_sets"][1]["id"] = 1
        with pytest.raises(DuplicateIdError):
            validate_dice(DiceCatalog.model_validate(data))

    def test_no_faces(self):
        data = self._dice()
        data["dice_sets"][0]["faces"] = []
        with pytest.raises(EmptyCatalogError):
            validate_dice(DiceCatalog.model_validate(data))


class TestGameDefinition:
    def test_valid(self, game_document):
        definition = GameDefinition.model_validate(game_document)
        validate_game(definition)

    def test_goal_references(self, game_document, simple_rules):
        simple_rules.goals = [Goal(id="world_domination"), Goal(id="destroy_red")]
        definition = GameDefinition.model_validate(game_document)
        validate_game(definition, simple_rules)

    def test_dangling_goal(self, game_document, simple_rules):
        simple_rules.goals = [Goal(id="world_domination")]
        definition = GameDefinition.model_validate(game_document)
        with pytest.raises(UnknownReferenceError) as exc_info:
            validate_game(definition, simple_rules)
        assert exc_info.value.from_id == "blue"
        assert exc_info.value.referenced_id == "destroy_red"

    @pytest.mark.parametrize("min_players, max_players", [(0, 4), (5, 2)])
    def test_player_range(self, game_document, min_players, max_players):
        game_document["parameters"]["min_players"] = min_players
        game_document["parameters"]["max_players"] = max_players
        with pytest.raises(InvalidCatalogError):
            validate_game(GameDefinition.model_validate(game_document))

    def test_empty_bonus_sequence(self, game_document):
        game_document["parameters"]["card_bonus_sequence"] = []
        with pytest.raises(EmptyCatalogError):
            validate_game(GameDefinition.model_validate(game_document))

    def test_duplicate_player(self, game_document):
        game_document["players"][1]["id"] = "red"
        with pytest.raises(DuplicateIdError):
            validate_game(GameDefinition.model_validate(game_document))

    def test_too_many_players(self, game_document):
        game_document["parameters"]["max_players"] = 2
        game_document["parameters"]["min_players"] = 1
        game_document["players"].append({"id": "green"})
        with pytest.raises(InvalidCatalogError):
            validate_game(GameDefinition.model_validate(game_document))
