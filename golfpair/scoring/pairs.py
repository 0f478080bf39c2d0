"""ペア生成とハンデホール配分

プレーヤー一覧から全ての組み合わせ（C(n,2)）を生成し、
各ペアに順序に依存しないキーを割り当てる。
"""

from collections.abc import Sequence

from golfpair.constants import PAIR_KEY_SEPARATOR
from golfpair.models.game import Pair, Player


def make_pair_key(player_a_id: str, player_b_id: str) -> str:
    """ペアキーを生成する

    2つのIDを辞書順にソートして区切り文字で連結する。
    引数の順序に関わらず同じキーになる。

    Args:
        player_a_id: プレーヤーID
        player_b_id: プレーヤーID

    Returns:
        "小さいID::大きいID" 形式のペアキー
    """
    return PAIR_KEY_SEPARATOR.join(sorted((player_a_id, player_b_id)))


def parse_pair_key(pair_key: str) -> tuple[str, str]:
    """ペアキーを2つのプレーヤーIDに分解する

    Args:
        pair_key: make_pair_keyで生成したキー

    Returns:
        (player_a_id, player_b_id) のタプル（区切り文字がなければ後者は空文字）
    """
    player_a_id, _, player_b_id = pair_key.partition(PAIR_KEY_SEPARATOR)
    return player_a_id, player_b_id


def generate_pairs(players: Sequence[Player]) -> list[Pair]:
    """全ての対戦ペアを生成する

    入力順のインデックス i<j の順で列挙する。
    player_a_id / player_b_id はキーから再導出した正規順序。

    Args:
        players: プレーヤー一覧

    Returns:
        Pairのリスト（2人未満なら空）
    """
    pairs = []
    for i, player in enumerate(players):
        for other in players[i + 1 :]:
            pair_key = make_pair_key(player.id, other.id)
            sorted_a, sorted_b = parse_pair_key(pair_key)
            pairs.append(Pair(pair_key=pair_key, player_a_id=sorted_a, player_b_id=sorted_b))
    return pairs


def get_player_name(players: Sequence[Player], player_id: str) -> str:
    """IDからプレーヤー名を取得する（見つからなければIDを返す）"""
    for player in players:
        if player.id == player_id:
            return player.name
    return player_id


def distribute_handicap_holes(handicap_value: int, number_of_holes: int) -> list[int]:
    """ハンデストロークを付与するホールを均等に配分する

    ホール範囲を |handicap_value| 個の区間に等分し、各区間の先頭ホールを選ぶ。
    符号は無視する（誰が誰に与えるかは別で決まる）。

    例: distribute_handicap_holes(9, 18) -> [1, 3, 5, ..., 17]

    Args:
        handicap_value: ハンデ値（符号付き）
        number_of_holes: ホール数

    Returns:
        1始まりのホール番号リスト（昇順）
    """
    strokes = abs(handicap_value)
    if strokes == 0 or number_of_holes <= 0:
        return []

    if strokes >= number_of_holes:
        return list(range(1, number_of_holes + 1))

    return [i * number_of_holes // strokes + 1 for i in range(strokes)]
