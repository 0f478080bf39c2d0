"""ペア生成とハンデホール配分のテスト"""

import pytest

from golfpair.models.game import Player
from golfpair.scoring.pairs import (
    distribute_handicap_holes,
    generate_pairs,
    get_player_name,
    make_pair_key,
    parse_pair_key,
)


def make_players(count: int) -> list[Player]:
    """テスト用プレーヤーを生成"""
    return [Player(id=f"player-{i}", name=f"Player {i + 1}") for i in range(count)]


class TestMakePairKey:
    """make_pair_key のテスト"""

    def test_sorted_and_joined(self):
        """IDを辞書順に並べて '::' で連結する"""
        assert make_pair_key("b", "a") == "a::b"
        assert make_pair_key("a", "b") == "a::b"

    def test_commutative(self):
        """引数の順序に依存しない"""
        assert make_pair_key("zeta", "alpha") == make_pair_key("alpha", "zeta")

    def test_same_id_does_not_crash(self):
        """同じIDでも例外にならない"""
        assert make_pair_key("a", "a") == "a::a"


class TestParsePairKey:
    """parse_pair_key のテスト"""

    def test_round_trip(self):
        """生成したキーから正規順序の2つのIDを復元できる"""
        key = make_pair_key("player-9", "player-1")
        assert parse_pair_key(key) == ("player-1", "player-9")

    def test_key_without_separator(self):
        """区切り文字がない場合は2つ目が空文字"""
        assert parse_pair_key("solo") == ("solo", "")


class TestGeneratePairs:
    """generate_pairs のテスト"""

    @pytest.mark.parametrize("count", [2, 3, 4, 5, 6])
    def test_pair_count(self, count):
        """n人ならn(n-1)/2ペア、キーは全て異なる"""
        pairs = generate_pairs(make_players(count))

        assert len(pairs) == count * (count - 1) // 2
        assert len({pair.pair_key for pair in pairs}) == len(pairs)

    @pytest.mark.parametrize("count", [0, 1])
    def test_fewer_than_two_players(self, count):
        """2人未満は空リスト（エラーではない）"""
        assert generate_pairs(make_players(count)) == []

    def test_index_order(self):
        """入力順の i<j の順で列挙する"""
        pairs = generate_pairs(make_players(3))

        assert [pair.pair_key for pair in pairs] == [
            "player-0::player-1",
            "player-0::player-2",
            "player-1::player-2",
        ]

    def test_canonical_player_order(self):
        """player_a_id / player_b_id は入力順ではなく辞書順"""
        players = [Player(id="zed", name="Z"), Player(id="amy", name="A")]

        pair = generate_pairs(players)[0]

        assert pair.pair_key == "amy::zed"
        assert pair.player_a_id == "amy"
        assert pair.player_b_id == "zed"

    def test_deterministic(self):
        """同じ入力なら同じ結果"""
        players = make_players(4)
        assert generate_pairs(players) == generate_pairs(players)


class TestGetPlayerName:
    """get_player_name のテスト"""

    def test_known_player(self):
        assert get_player_name(make_players(2), "player-1") == "Player 2"

    def test_unknown_player_returns_id(self):
        """見つからなければIDをそのまま返す"""
        assert get_player_name(make_players(2), "ghost") == "ghost"


class TestDistributeHandicapHoles:
    """distribute_handicap_holes のテスト"""

    def test_nine_strokes_over_eighteen_holes(self):
        """9打/18ホールは奇数ホールに配分"""
        assert distribute_handicap_holes(9, 18) == [1, 3, 5, 7, 9, 11, 13, 15, 17]

    def test_even_spacing(self):
        """区間の先頭ホールを選ぶ"""
        assert distribute_handicap_holes(3, 18) == [1, 7, 13]
        assert distribute_handicap_holes(4, 9) == [1, 3, 5, 7]

    @pytest.mark.parametrize("holes", [0, 1, 9, 18, 36])
    def test_zero_value(self, holes):
        """ハンデ0なら空"""
        assert distribute_handicap_holes(0, holes) == []

    def test_zero_holes(self):
        """ホール数0なら空"""
        assert distribute_handicap_holes(5, 0) == []

    def test_value_larger_than_holes(self):
        """ハンデがホール数以上なら全ホール"""
        assert distribute_handicap_holes(25, 18) == list(range(1, 19))
        assert distribute_handicap_holes(18, 18) == list(range(1, 19))

    @pytest.mark.parametrize("value", [1, 3, 7, 12, 20])
    def test_sign_does_not_matter(self, value):
        """符号が違っても同じホールに配分する"""
        assert distribute_handicap_holes(-value, 18) == distribute_handicap_holes(value, 18)

    def test_length_is_min_of_value_and_holes(self):
        assert len(distribute_handicap_holes(5, 18)) == 5
        assert len(distribute_handicap_holes(-30, 9)) == 9
