"""もう一度プレー（Play again）

前回のラウンドと同じ顔ぶれで新しいラウンドを準備する。
プレーヤーIDは必ず新しく発行し、ハンデはプレーヤー名で対応付けて新しいペアキーに移し替える。
"""

import logging
import uuid
from collections.abc import Callable, Mapping, Sequence
from dataclasses import replace

from golfpair.models.game import GameState, PairHandicap, Player
from golfpair.models.record import HistoryRecord
from golfpair.scoring import make_pair_key, parse_pair_key
from golfpair.services import game_service

logger = logging.getLogger(__name__)


def _new_player_id() -> str:
    return str(uuid.uuid4())


def remap_handicaps(
    old_players: Sequence[Player],
    new_players: Sequence[Player],
    handicaps: Mapping[str, PairHandicap],
) -> dict[str, PairHandicap]:
    """旧IDのハンデを新IDのペアキーに移し替える

    プレーヤー名が一致するものを対応付ける。どちらかのプレーヤーが
    見つからないペアは黙って除外する。
    新IDの辞書順が旧IDと逆になった場合は、誰が誰にストロークを与えるかを
    保つためにハンデ値の符号を反転する。ハンデホールはそのまま引き継ぐ。

    Args:
        old_players: 前回のプレーヤー
        new_players: 新しいIDを振ったプレーヤー
        handicaps: 前回のハンデ（ペアキー -> PairHandicap）

    Returns:
        新しいペアキー -> PairHandicap
    """
    new_id_by_name = {}
    for player in new_players:
        new_id_by_name.setdefault(player.name, player.id)

    old_to_new = {
        player.id: new_id_by_name[player.name]
        for player in old_players
        if player.name in new_id_by_name
    }

    remapped: dict[str, PairHandicap] = {}
    for handicap in handicaps.values():
        new_a = old_to_new.get(handicap.player_a_id)
        new_b = old_to_new.get(handicap.player_b_id)
        if new_a is None or new_b is None:
            logger.debug("Dropping handicap %s: player not found", handicap.pair_key)
            continue

        new_key = make_pair_key(new_a, new_b)
        sorted_a, sorted_b = parse_pair_key(new_key)
        value = handicap.value if sorted_a == new_a else -handicap.value

        remapped[new_key] = replace(
            handicap,
            pair_key=new_key,
            player_a_id=sorted_a,
            player_b_id=sorted_b,
            value=value,
        )
    return remapped


def build_play_again_state(
    record: HistoryRecord, id_factory: Callable[[], str] = _new_player_id
) -> GameState:
    """前回のラウンドから新しいゲーム状態を作る

    同じ名前で新しいIDのプレーヤー、同じホール数・ターボホール、
    移し替えたハンデを設定した状態を返す。スコアは空。

    Args:
        record: 前回のラウンド
        id_factory: プレーヤーIDの発行関数

    Returns:
        セットアップ済みのGameState
    """
    new_players = [Player(id=id_factory(), name=player.name) for player in record.players]
    remapped = remap_handicaps(record.players, new_players, record.config.handicaps)

    state = game_service.reset_game()
    state = game_service.set_players(state, new_players).state
    state = game_service.set_number_of_holes(state, record.number_of_holes).state
    state = game_service.initialize_handicaps(state).state

    # set_handicap がハンデホールを空に戻すので、その後でホールを設定する
    for handicap in remapped.values():
        state = game_service.set_handicap(state, handicap.pair_key, handicap.value).state
        state = game_service.set_handicap_holes(
            state, handicap.pair_key, handicap.handicap_holes
        ).state

    return game_service.set_turbo_holes(state, record.config.turbo_holes).state
