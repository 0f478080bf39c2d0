"""プレーヤー別ホールスコアの集計と累計

各プレーヤーが属する全ペアの結果を合計し、ホールスコアと累計を算出する。
"""

import math
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace

from golfpair.models.game import PairHoleResult, Player, PlayerHoleScore


def calculate_player_hole_scores(
    players: Sequence[Player],
    pair_results: Iterable[PairHoleResult],
    hole_number: int,
    previous_totals: Mapping[str, int],
) -> list[PlayerHoleScore]:
    """1ホール分のプレーヤースコアを計算する

    n人のゲームでは各プレーヤーが n-1 個のペア結果を合計する。

    Args:
        players: プレーヤー一覧
        pair_results: ペア結果（hole_number以外のホールは無視）
        hole_number: 対象ホール
        previous_totals: 前ホールまでの累計（ないプレーヤーは0）

    Returns:
        プレーヤー順のPlayerHoleScoreリスト
    """
    hole_results = [r for r in pair_results if r.hole_number == hole_number]

    scores = []
    for player in players:
        hole_score = 0
        for result in hole_results:
            if result.player_a_id == player.id:
                hole_score += result.player_a_score
            elif result.player_b_id == player.id:
                hole_score += result.player_b_score

        scores.append(
            PlayerHoleScore(
                player_id=player.id,
                hole_number=hole_number,
                hole_score=hole_score,
                running_total=previous_totals.get(player.id, 0) + hole_score,
            )
        )
    return scores


def get_running_totals(
    player_scores: Iterable[PlayerHoleScore], up_to_hole: float = math.inf
) -> dict[str, int]:
    """指定ホールまでの累計をプレーヤーごとに合計する

    Args:
        player_scores: プレーヤースコア
        up_to_hole: このホール番号以下を集計（デフォルトは全ホール）

    Returns:
        player_id -> 累計（スコアのないプレーヤーはキー自体が存在しない）
    """
    totals: dict[str, int] = {}
    for score in player_scores:
        if score.hole_number <= up_to_hole:
            totals[score.player_id] = totals.get(score.player_id, 0) + score.hole_score
    return totals


def rebuild_running_totals(player_scores: Iterable[PlayerHoleScore]) -> list[PlayerHoleScore]:
    """全プレーヤースコアの累計をホール順に再計算する

    途中ホールを修正した後、それ以降のホールの累計を正しい値に戻すために使う。
    リストの並び順は入力のまま保持する。

    Args:
        player_scores: プレーヤースコア

    Returns:
        running_totalを再計算したPlayerHoleScoreのリスト
    """
    scores = list(player_scores)
    running: defaultdict[str, int] = defaultdict(int)
    rebuilt: dict[tuple[str, int], int] = {}

    for score in sorted(scores, key=lambda s: s.hole_number):
        running[score.player_id] += score.hole_score
        rebuilt[(score.player_id, score.hole_number)] = running[score.player_id]

    return [
        replace(score, running_total=rebuilt[(score.player_id, score.hole_number)])
        for score in scores
    ]
