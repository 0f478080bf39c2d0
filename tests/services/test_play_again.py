"""もう一度プレー（ハンデ移し替え）のテスト"""

from datetime import datetime

from golfpair.models.game import GameConfig, PairHandicap, Player
from golfpair.models.record import HistoryRecord
from golfpair.services.play_again import build_play_again_state, remap_handicaps

OLD_PLAYERS = (Player(id="old-a", name="Alice"), Player(id="old-b", name="Bob"))
OLD_KEY = "old-a::old-b"


def make_handicap(value: int = 3, holes: tuple[int, ...] = (1, 5, 10)) -> PairHandicap:
    return PairHandicap(
        pair_key=OLD_KEY, player_a_id="old-a", player_b_id="old-b",
        value=value, handicap_holes=holes,
    )


def make_record(players=OLD_PLAYERS, handicaps=None, turbo_holes=(9, 18)) -> HistoryRecord:
    """テスト用の保存済みラウンドを生成"""
    if handicaps is None:
        handicaps = {OLD_KEY: make_handicap()}
    return HistoryRecord(
        id=1,
        completed_at=datetime(2024, 5, 1, 12, 0),
        players=tuple(players),
        number_of_holes=18,
        rankings=(),
        winner_id="",
        winner_name="",
        config=GameConfig(
            players=tuple(players),
            number_of_holes=18,
            handicaps=handicaps,
            turbo_holes=turbo_holes,
        ),
    )


def id_sequence(*ids: str):
    return iter(ids).__next__


class TestRemapHandicaps:
    """remap_handicaps のテスト"""

    def test_same_order_keeps_sign(self):
        """新IDの辞書順が変わらなければ値はそのまま"""
        new_players = [Player(id="new-a", name="Alice"), Player(id="new-b", name="Bob")]

        remapped = remap_handicaps(OLD_PLAYERS, new_players, {OLD_KEY: make_handicap()})

        handicap = remapped["new-a::new-b"]
        assert handicap.value == 3
        assert handicap.player_a_id == "new-a"
        assert handicap.handicap_holes == (1, 5, 10)

    def test_reversed_order_flips_sign(self):
        """新IDの辞書順が逆転したら符号を反転し、ハンデホールは保持"""
        new_players = [Player(id="z-new", name="Alice"), Player(id="a-new", name="Bob")]

        remapped = remap_handicaps(OLD_PLAYERS, new_players, {OLD_KEY: make_handicap()})

        assert list(remapped) == ["a-new::z-new"]
        handicap = remapped["a-new::z-new"]
        assert handicap.value == -3
        assert handicap.player_a_id == "a-new"
        assert handicap.player_b_id == "z-new"
        assert handicap.handicap_holes == (1, 5, 10)

    def test_missing_player_is_dropped(self):
        """名前が見つからないペアは除外（エラーにしない）"""
        new_players = [Player(id="new-a", name="Alice"), Player(id="new-c", name="Carol")]

        remapped = remap_handicaps(OLD_PLAYERS, new_players, {OLD_KEY: make_handicap()})

        assert remapped == {}


class TestBuildPlayAgainState:
    """build_play_again_state のテスト"""

    def test_fresh_ids_and_same_names(self):
        state = build_play_again_state(make_record())

        new_ids = {player.id for player in state.config.players}
        assert [player.name for player in state.config.players] == ["Alice", "Bob"]
        assert new_ids.isdisjoint({"old-a", "old-b"})
        assert len(new_ids) == 2

    def test_settings_carried_over(self):
        """ホール数・ターボホール・ハンデを引き継ぎ、スコアは空"""
        state = build_play_again_state(
            make_record(), id_factory=id_sequence("z-new", "a-new")
        )

        assert state.config.number_of_holes == 18
        assert state.config.turbo_holes == (9, 18)
        assert state.hole_strokes == ()
        assert state.player_scores == ()
        assert state.is_complete is False

        handicap = state.config.handicaps["a-new::z-new"]
        assert handicap.value == -3
        assert handicap.handicap_holes == (1, 5, 10)

    def test_stroke_direction_is_preserved(self):
        """誰が誰にストロークを与えるかは変わらない"""
        state = build_play_again_state(
            make_record(), id_factory=id_sequence("z-new", "a-new")
        )
        handicap = state.config.handicaps["a-new::z-new"]

        # 旧: Alice(A) が Bob(B) に与える → 新: Bob が B側ではなくA側になったので負の値
        receiver = handicap.player_b_id if handicap.value > 0 else handicap.player_a_id
        assert receiver == "a-new"

    def test_every_pair_has_handicap(self):
        players = (
            Player(id="old-a", name="Alice"),
            Player(id="old-b", name="Bob"),
            Player(id="old-c", name="Carol"),
        )

        state = build_play_again_state(make_record(players=players, handicaps={}))

        assert len(state.config.handicaps) == 3
        assert all(h.value == 0 for h in state.config.handicaps.values())
