"""データモデルパッケージ"""

from golfpair.models.base import Base
from golfpair.models.game import (
    GameConfig,
    GameState,
    HoleStrokes,
    Pair,
    PairHandicap,
    PairHoleResult,
    Player,
    PlayerHoleScore,
    RankingEntry,
)
from golfpair.models.history import GameHistory
from golfpair.models.record import HistoryRecord

__all__ = [
    "Base",
    "GameConfig",
    "GameHistory",
    "GameState",
    "HistoryRecord",
    "HoleStrokes",
    "Pair",
    "PairHandicap",
    "PairHoleResult",
    "Player",
    "PlayerHoleScore",
    "RankingEntry",
]
