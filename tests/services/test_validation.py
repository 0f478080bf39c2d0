"""入力検証のテスト"""

import pytest

from golfpair.models.game import HoleStrokes, Player
from golfpair.services.validation import (
    REJECTION_MESSAGES,
    RejectionReason,
    is_whole_number,
    validate_handicap_holes,
    validate_handicap_value,
    validate_hole_numbers,
    validate_hole_strokes,
    validate_number_of_holes,
    validate_players,
)


def make_players(count: int) -> list[Player]:
    return [Player(id=f"p{i}", name=f"Player {i}") for i in range(count)]


class TestRejectionMessages:
    """拒否メッセージのテスト"""

    def test_every_reason_has_message(self):
        """全ての拒否理由にメッセージがある"""
        assert set(REJECTION_MESSAGES) == set(RejectionReason)


class TestIsWholeNumber:
    """is_whole_number のテスト"""

    @pytest.mark.parametrize("value", [0, 1, -5, 20])
    def test_integers(self, value):
        assert is_whole_number(value) is True

    @pytest.mark.parametrize("value", [1.5, 2.0, "3", None, True, False])
    def test_non_integers(self, value):
        """小数・文字列・boolは整数扱いしない"""
        assert is_whole_number(value) is False


class TestValidatePlayers:
    """validate_players のテスト"""

    @pytest.mark.parametrize("count", [2, 3, 6])
    def test_valid_count(self, count):
        assert validate_players(make_players(count)) is None

    @pytest.mark.parametrize("count", [0, 1, 7])
    def test_invalid_count(self, count):
        rejection = validate_players(make_players(count))

        assert rejection.reason == RejectionReason.INVALID_PLAYER_COUNT
        assert rejection.message == "Player count must be between 2 and 6"


class TestValidateNumberOfHoles:
    """validate_number_of_holes のテスト"""

    @pytest.mark.parametrize("holes", [1, 9, 18, 36])
    def test_valid(self, holes):
        assert validate_number_of_holes(holes) is None

    @pytest.mark.parametrize("holes", [0, 37, -1, 9.5, "18"])
    def test_invalid(self, holes):
        assert validate_number_of_holes(holes).reason == RejectionReason.INVALID_HOLE_COUNT


class TestValidateHandicapValue:
    """validate_handicap_value のテスト"""

    @pytest.mark.parametrize("value", [0, 18, -18, 5])
    def test_valid(self, value):
        assert validate_handicap_value(value, 18) is None

    def test_non_integer(self):
        rejection = validate_handicap_value(1.5, 18)

        assert rejection.reason == RejectionReason.INVALID_HANDICAP_VALUE
        assert rejection.message == "Handicap must be a whole number"

    @pytest.mark.parametrize("value", [19, -19])
    def test_exceeds_holes(self, value):
        rejection = validate_handicap_value(value, 18)

        assert rejection.reason == RejectionReason.HANDICAP_EXCEEDS_HOLES
        assert rejection.message == "Handicap cannot exceed the number of holes"


class TestValidateHoleNumbers:
    """validate_hole_numbers のテスト"""

    def test_valid(self):
        assert validate_hole_numbers([1, 9, 18], 18) is None

    def test_empty(self):
        assert validate_hole_numbers([], 18) is None

    @pytest.mark.parametrize("hole", [0, 19, 2.5])
    def test_out_of_range(self, hole):
        assert validate_hole_numbers([1, hole], 18).reason == RejectionReason.INVALID_HOLE_NUMBER


class TestValidateHandicapHoles:
    """validate_handicap_holes のテスト"""

    def test_valid(self):
        assert validate_handicap_holes([1, 5, 10], 3, 18) is None
        assert validate_handicap_holes([1, 5], -3, 18) is None

    def test_more_holes_than_strokes(self):
        """ハンデ値の絶対値より多いホールは拒否"""
        rejection = validate_handicap_holes([1, 2, 3], -2, 18)
        assert rejection.reason == RejectionReason.TOO_MANY_HANDICAP_HOLES

    def test_duplicates_count_once(self):
        assert validate_handicap_holes([4, 4], 1, 18) is None

    def test_hole_out_of_range(self):
        rejection = validate_handicap_holes([20], 3, 18)
        assert rejection.reason == RejectionReason.INVALID_HOLE_NUMBER


class TestValidateHoleStrokes:
    """validate_hole_strokes のテスト"""

    def test_valid(self):
        assert validate_hole_strokes(HoleStrokes(1, {"a": 0, "b": 20}), 18) is None

    @pytest.mark.parametrize("value", [-1, 21, 4.5, "4", True])
    def test_invalid_stroke(self, value):
        """1人でも不正ならホール全体を拒否"""
        rejection = validate_hole_strokes(HoleStrokes(1, {"a": 4, "b": value}), 18)

        assert rejection.reason == RejectionReason.INVALID_STROKES
        assert rejection.message == "Stroke values must be whole numbers between 0 and 20"

    def test_hole_out_of_range(self):
        rejection = validate_hole_strokes(HoleStrokes(10, {"a": 4}), 9)
        assert rejection.reason == RejectionReason.INVALID_HOLE_NUMBER
