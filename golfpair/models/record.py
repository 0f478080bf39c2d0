"""History record DTO.

Immutable view of one completed round as stored in the history database.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime

from golfpair.models.game import (
    GameConfig,
    GameState,
    HoleStrokes,
    PairHoleResult,
    Player,
    PlayerHoleScore,
    RankingEntry,
)


@dataclass(frozen=True)
class HistoryRecord:
    """A completed round.

    Attributes:
        id: History id (None before it is stored).
        completed_at: When the round was completed.
        players: Roster of the round.
        number_of_holes: Holes in the round.
        rankings: Final standings.
        winner_id: Id of the first-ranked player ("" when there is none).
        winner_name: Name of the first-ranked player.
        config: Full configuration including handicaps and turbo holes.
        hole_strokes: Raw strokes of every scored hole.
        pair_results: Every pairwise result.
        player_scores: Every per-player hole score.
    """

    id: int | None
    completed_at: datetime
    players: tuple[Player, ...]
    number_of_holes: int
    rankings: tuple[RankingEntry, ...]
    winner_id: str
    winner_name: str
    config: GameConfig
    hole_strokes: tuple[HoleStrokes, ...] = ()
    pair_results: tuple[PairHoleResult, ...] = ()
    player_scores: tuple[PlayerHoleScore, ...] = ()

    def to_state(self) -> GameState:
        """Rebuild a completed GameState pointing at this record."""
        return GameState(
            config=replace(self.config, players=self.players),
            current_hole=self.number_of_holes,
            hole_strokes=self.hole_strokes,
            pair_results=self.pair_results,
            player_scores=self.player_scores,
            is_complete=True,
            history_id=self.id,
        )


def ranking_from_dict(data: Mapping) -> RankingEntry:
    """Rebuild a RankingEntry from RankingEntry.to_dict() output."""
    return RankingEntry(
        player=Player(id=str(data["player_id"]), name=str(data["player_name"])),
        total_score=data["total_score"],
        rank=data["rank"],
    )
