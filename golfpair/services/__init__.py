"""Services module"""

from golfpair.services.game_service import ActionResult
from golfpair.services.play_again import build_play_again_state, remap_handicaps
from golfpair.services.stats import (
    compute_all_player_stats,
    compute_h2h_records,
    compute_pair_breakdown,
    compute_player_stats,
    get_h2h_for_pair,
)
from golfpair.services.validation import Rejection, RejectionReason

__all__ = [
    "ActionResult",
    "Rejection",
    "RejectionReason",
    "build_play_again_state",
    "compute_all_player_stats",
    "compute_h2h_records",
    "compute_pair_breakdown",
    "compute_player_stats",
    "get_h2h_for_pair",
    "remap_handicaps",
]
