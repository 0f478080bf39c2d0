"""全ホール再計算と1ホール単位の追加計算

過去ホールの打数修正やハンデ変更の後は recalculate_all_results で
打数記録から全結果を作り直す。プレー中のホール登録は apply_hole_strokes で
該当ホールだけを計算する。両者は同じ最終状態に収束する。
"""

from collections.abc import Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass

from golfpair.models.game import (
    HoleStrokes,
    Pair,
    PairHandicap,
    PairHoleResult,
    Player,
    PlayerHoleScore,
)
from golfpair.scoring.aggregator import (
    calculate_player_hole_scores,
    get_running_totals,
    rebuild_running_totals,
)
from golfpair.scoring.hole_result import calculate_pair_hole_result, default_handicap


@dataclass(frozen=True)
class ReplayResult:
    """全ホール再計算の結果"""

    pair_results: tuple[PairHoleResult, ...]
    player_scores: tuple[PlayerHoleScore, ...]


@dataclass(frozen=True)
class HoleSubmission:
    """1ホール登録後の打数・結果一式

    Attributes:
        hole_strokes: 置き換え後の打数記録
        pair_results: 置き換え後の全ペア結果
        player_scores: 置き換え後の全プレーヤースコア（累計再計算済み）
        hole_scores: 登録したホールのプレーヤースコア
    """

    hole_strokes: tuple[HoleStrokes, ...]
    pair_results: tuple[PairHoleResult, ...]
    player_scores: tuple[PlayerHoleScore, ...]
    hole_scores: tuple[PlayerHoleScore, ...]


def score_hole(
    pairs: Iterable[Pair],
    handicaps: Mapping[str, PairHandicap],
    turbo_holes: Collection[int],
    strokes: HoleStrokes,
) -> list[PairHoleResult]:
    """1ホール分の全ペア結果を計算する

    Args:
        pairs: 対戦ペア
        handicaps: ペアキーごとのハンデ（未設定ならゼロハンデ）
        turbo_holes: ターボホール番号
        strokes: そのホールの打数

    Returns:
        ペア順のPairHoleResultリスト
    """
    hole_number = strokes.hole_number
    is_turbo = hole_number in turbo_holes

    return [
        calculate_pair_hole_result(
            pair.pair_key,
            pair.player_a_id,
            pair.player_b_id,
            hole_number,
            strokes,
            handicaps.get(pair.pair_key) or default_handicap(pair),
            is_turbo,
        )
        for pair in pairs
    ]


def recalculate_all_results(
    players: Sequence[Player],
    hole_strokes: Iterable[HoleStrokes],
    handicaps: Mapping[str, PairHandicap],
    turbo_holes: Collection[int],
    pairs: Sequence[Pair],
) -> ReplayResult:
    """打数記録から全ペア結果と全プレーヤースコアを再計算する

    ホール番号の昇順に処理し、各ホールの前ホールまでの累計は
    それまでに計算したスコアから求める。入力順序には依存しない。

    Args:
        players: プレーヤー一覧
        hole_strokes: 全ホールの打数（順不同）
        handicaps: ペアキーごとのハンデ
        turbo_holes: ターボホール番号
        pairs: 対戦ペア

    Returns:
        ReplayResult
    """
    all_pair_results: list[PairHoleResult] = []
    all_player_scores: list[PlayerHoleScore] = []

    for strokes in sorted(hole_strokes, key=lambda s: s.hole_number):
        hole_number = strokes.hole_number
        all_pair_results.extend(score_hole(pairs, handicaps, turbo_holes, strokes))

        previous_totals = get_running_totals(all_player_scores, hole_number - 1)
        all_player_scores.extend(
            calculate_player_hole_scores(
                players, all_pair_results, hole_number, previous_totals
            )
        )

    return ReplayResult(
        pair_results=tuple(all_pair_results),
        player_scores=tuple(all_player_scores),
    )


def apply_hole_strokes(
    players: Sequence[Player],
    pairs: Sequence[Pair],
    handicaps: Mapping[str, PairHandicap],
    turbo_holes: Collection[int],
    hole_strokes: Iterable[HoleStrokes],
    pair_results: Iterable[PairHoleResult],
    player_scores: Iterable[PlayerHoleScore],
    strokes: HoleStrokes,
) -> HoleSubmission:
    """1ホール分の打数を登録し、そのホールだけを計算する

    同じホールの既存データは丸ごと置き換える（追記ではない）。
    他のホールは再計算せず、累計だけを付け直す。

    Args:
        players: プレーヤー一覧
        pairs: 対戦ペア
        handicaps: ペアキーごとのハンデ
        turbo_holes: ターボホール番号
        hole_strokes: 既存の打数記録
        pair_results: 既存のペア結果
        player_scores: 既存のプレーヤースコア
        strokes: 登録する打数

    Returns:
        HoleSubmission
    """
    hole_number = strokes.hole_number

    kept_strokes = [s for s in hole_strokes if s.hole_number != hole_number]
    kept_pair_results = [r for r in pair_results if r.hole_number != hole_number]
    kept_player_scores = [s for s in player_scores if s.hole_number != hole_number]

    new_pair_results = score_hole(pairs, handicaps, turbo_holes, strokes)
    all_pair_results = kept_pair_results + new_pair_results

    previous_totals = get_running_totals(kept_player_scores, hole_number - 1)
    hole_scores = calculate_player_hole_scores(
        players, new_pair_results, hole_number, previous_totals
    )

    all_player_scores = rebuild_running_totals(kept_player_scores + hole_scores)
    rebuilt_hole_scores = [s for s in all_player_scores if s.hole_number == hole_number]

    return HoleSubmission(
        hole_strokes=tuple(kept_strokes + [strokes]),
        pair_results=tuple(all_pair_results),
        player_scores=tuple(all_player_scores),
        hole_scores=tuple(rebuilt_hole_scores),
    )
