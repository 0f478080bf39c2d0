"""1ペア・1ホールの勝敗計算

ハンデ調整後の打数を比較し、符号付きの結果（ターボ時は2倍）を返す純粋関数。
"""

from golfpair.config.rules import TURBO_MULTIPLIER
from golfpair.models.game import HoleStrokes, Pair, PairHandicap, PairHoleResult


def default_handicap(pair: Pair) -> PairHandicap:
    """ハンデ未設定のペア用のゼロハンデを返す"""
    return PairHandicap(
        pair_key=pair.pair_key,
        player_a_id=pair.player_a_id,
        player_b_id=pair.player_b_id,
    )


def get_handicap_adjustment(handicap: PairHandicap, hole_number: int) -> tuple[int, int]:
    """指定ホールのハンデ調整値を取得する

    ストロークを受ける側の調整後打数が -1 される。
    value > 0: プレーヤーAが与える → Bが -1
    value < 0: プレーヤーBが与える → Aが -1

    Args:
        handicap: ペアのハンデ設定
        hole_number: ホール番号

    Returns:
        (playerAの調整値, playerBの調整値)
    """
    if hole_number not in handicap.handicap_holes:
        return 0, 0

    if handicap.value > 0:
        return 0, -1
    if handicap.value < 0:
        return -1, 0
    # value == 0 でホールが登録されている場合も調整しない
    return 0, 0


def calculate_pair_hole_result(
    pair_key: str,
    player_a_id: str,
    player_b_id: str,
    hole_number: int,
    strokes: HoleStrokes,
    handicap: PairHandicap,
    is_turbo: bool,
) -> PairHoleResult:
    """1ペアの1ホールの結果を計算する

    打数が少ない方が勝ち（+1）、多い方が負け（-1）、同数は0。
    ターボホールでは2倍。打数の記録がないプレーヤーは0打として扱う。

    Args:
        pair_key: ペアキー
        player_a_id: 正規順序のプレーヤーA
        player_b_id: 正規順序のプレーヤーB
        hole_number: ホール番号
        strokes: そのホールの打数
        handicap: ペアのハンデ設定
        is_turbo: ターボホールかどうか

    Returns:
        PairHoleResult（player_b_score は常に player_a_score の符号反転）
    """
    player_a_strokes = strokes.strokes.get(player_a_id, 0)
    player_b_strokes = strokes.strokes.get(player_b_id, 0)

    player_a_adj, player_b_adj = get_handicap_adjustment(handicap, hole_number)
    player_a_adjusted = player_a_strokes + player_a_adj
    player_b_adjusted = player_b_strokes + player_b_adj

    if player_a_adjusted < player_b_adjusted:
        outcome = 1
    elif player_a_adjusted > player_b_adjusted:
        outcome = -1
    else:
        outcome = 0

    multiplier = TURBO_MULTIPLIER if is_turbo else 1
    player_a_score = outcome * multiplier

    return PairHoleResult(
        pair_key=pair_key,
        hole_number=hole_number,
        player_a_id=player_a_id,
        player_b_id=player_b_id,
        player_a_strokes=player_a_strokes,
        player_b_strokes=player_b_strokes,
        player_a_adjusted=player_a_adjusted,
        player_b_adjusted=player_b_adjusted,
        player_a_score=player_a_score,
        player_b_score=-player_a_score,
        is_turbo=is_turbo,
    )
