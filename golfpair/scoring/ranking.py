"""最終順位とゼロサム検証"""

from collections import defaultdict
from collections.abc import Iterable, Sequence

from golfpair.models.game import Player, PlayerHoleScore, RankingEntry
from golfpair.scoring.aggregator import get_running_totals


def get_final_rankings(
    players: Sequence[Player], player_scores: Iterable[PlayerHoleScore]
) -> list[RankingEntry]:
    """最終順位を計算する

    合計スコアの降順に並べ、同点は同順位とする（競技順位方式）。
    同点の次の順位は並び位置になる（例: 5, 5, 3 → 1, 1, 3）。
    同点内の並びはプレーヤーの入力順。

    Args:
        players: プレーヤー一覧
        player_scores: 全プレーヤースコア

    Returns:
        順位順のRankingEntryリスト
    """
    totals = get_running_totals(player_scores)
    ordered = sorted(players, key=lambda p: totals.get(p.id, 0), reverse=True)

    rankings: list[RankingEntry] = []
    for position, player in enumerate(ordered, 1):
        total_score = totals.get(player.id, 0)
        if rankings and rankings[-1].total_score == total_score:
            rank = rankings[-1].rank
        else:
            rank = position
        rankings.append(RankingEntry(player=player, total_score=total_score, rank=rank))
    return rankings


def verify_zero_sum(player_scores: Iterable[PlayerHoleScore]) -> bool:
    """ホールスコアの合計が0かどうかを検証する

    running_total ではなく hole_score を合計する。

    Args:
        player_scores: 検証対象のスコア（通常は1ホール分）

    Returns:
        合計がちょうど0ならTrue
    """
    return sum(score.hole_score for score in player_scores) == 0


def find_non_zero_sum_holes(player_scores: Iterable[PlayerHoleScore]) -> list[int]:
    """ゼロサムが成立していないホール番号を返す（昇順）"""
    by_hole: defaultdict[int, list[PlayerHoleScore]] = defaultdict(list)
    for score in player_scores:
        by_hole[score.hole_number].append(score)

    return sorted(
        hole_number for hole_number, scores in by_hole.items() if not verify_zero_sum(scores)
    )
