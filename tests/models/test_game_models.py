"""ゲームDTOのテスト"""

import dataclasses
from datetime import datetime

import pytest

from golfpair.models.game import (
    GameConfig,
    GameState,
    HoleStrokes,
    PairHandicap,
    Player,
    RankingEntry,
)
from golfpair.models.record import HistoryRecord, ranking_from_dict


class TestImmutability:
    """DTOは不変"""

    def test_player_is_frozen(self):
        player = Player(id="p1", name="Alice")

        with pytest.raises(dataclasses.FrozenInstanceError):
            player.name = "Bob"

    def test_state_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            GameState().current_hole = 3


class TestPairHandicap:
    """PairHandicap のテスト"""

    def test_from_dict_derives_players_from_key(self):
        """player_a_id / player_b_id がなければキーから導出"""
        handicap = PairHandicap.from_dict({"pair_key": "a::b", "value": -2})

        assert handicap.player_a_id == "a"
        assert handicap.player_b_id == "b"
        assert handicap.handicap_holes == ()

    def test_to_dict_lists_holes(self):
        handicap = PairHandicap("a::b", "a", "b", value=2, handicap_holes=(3, 9))
        assert handicap.to_dict()["handicap_holes"] == [3, 9]


class TestGameConfig:
    """GameConfig のテスト"""

    def test_from_dict_accepts_handicap_list(self):
        """ハンデはリスト形式でも辞書形式でも読める"""
        data = {
            "players": [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}],
            "number_of_holes": 9,
            "handicaps": [{"pair_key": "a::b", "value": 1, "handicap_holes": [4]}],
            "turbo_holes": [9, 3],
        }

        config = GameConfig.from_dict(data)

        assert config.handicaps["a::b"].handicap_holes == (4,)
        assert config.turbo_holes == (3, 9)
        assert GameConfig.from_dict(config.to_dict()) == config

    def test_defaults(self):
        config = GameConfig.from_dict({})

        assert config.number_of_holes == 18
        assert config.players == ()


class TestGameState:
    """GameState のテスト"""

    def test_dict_round_trip(self):
        config = GameConfig(
            players=(Player("a", "A"), Player("b", "B")),
            number_of_holes=9,
            handicaps={"a::b": PairHandicap("a::b", "a", "b", 1, (2,))},
            turbo_holes=(9,),
        )
        state = GameState(
            config=config,
            current_hole=2,
            hole_strokes=(HoleStrokes(1, {"a": 4, "b": 5}),),
            history_id=7,
        )

        assert GameState.from_dict(state.to_dict()) == state

    def test_empty_state(self):
        assert GameState.from_dict(GameState().to_dict()) == GameState()


class TestHistoryRecord:
    """HistoryRecord のテスト"""

    def test_to_state(self):
        """保存済みラウンドは完了済みの状態として復元される"""
        players = (Player("a", "A"), Player("b", "B"))
        record = HistoryRecord(
            id=5,
            completed_at=datetime(2024, 6, 1),
            players=players,
            number_of_holes=9,
            rankings=(),
            winner_id="a",
            winner_name="A",
            config=GameConfig(players=players, number_of_holes=9),
        )

        state = record.to_state()

        assert state.is_complete is True
        assert state.history_id == 5
        assert state.current_hole == 9
        assert state.config.players == players

    def test_ranking_from_dict(self):
        entry = RankingEntry(player=Player("a", "A"), total_score=-3, rank=2)
        assert ranking_from_dict(entry.to_dict()) == entry
