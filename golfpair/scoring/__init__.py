"""スコア計算コア

打数・ハンデ・ターボ設定からペア結果、プレーヤースコア、順位を求める純粋関数群。
I/Oを持たず、型が正しい入力に対して例外を送出しない。
"""

from golfpair.scoring.aggregator import (
    calculate_player_hole_scores,
    get_running_totals,
    rebuild_running_totals,
)
from golfpair.scoring.hole_result import (
    calculate_pair_hole_result,
    default_handicap,
    get_handicap_adjustment,
)
from golfpair.scoring.pairs import (
    distribute_handicap_holes,
    generate_pairs,
    get_player_name,
    make_pair_key,
    parse_pair_key,
)
from golfpair.scoring.ranking import (
    find_non_zero_sum_holes,
    get_final_rankings,
    verify_zero_sum,
)
from golfpair.scoring.replay import (
    HoleSubmission,
    ReplayResult,
    apply_hole_strokes,
    recalculate_all_results,
    score_hole,
)

__all__ = [
    "HoleSubmission",
    "ReplayResult",
    "apply_hole_strokes",
    "calculate_pair_hole_result",
    "calculate_player_hole_scores",
    "default_handicap",
    "distribute_handicap_holes",
    "find_non_zero_sum_holes",
    "generate_pairs",
    "get_final_rankings",
    "get_handicap_adjustment",
    "get_player_name",
    "get_running_totals",
    "make_pair_key",
    "parse_pair_key",
    "rebuild_running_totals",
    "recalculate_all_results",
    "score_hole",
    "verify_zero_sum",
]
