"""Game DTOs for pairwise match-play scoring.

This module provides immutable data transfer objects for players, pairs,
handicaps, per-hole strokes and every value derived from them. All of them
serialize to plain dicts (``to_dict``) and can be rebuilt from the same
shape (``from_dict``), so results can be persisted or rendered verbatim.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field

from golfpair.constants import DEFAULT_NUMBER_OF_HOLES, FIRST_HOLE, PAIR_KEY_SEPARATOR


@dataclass(frozen=True)
class Player:
    """A player in one round.

    Attributes:
        id: Opaque unique identifier. Never reused across rounds.
        name: Display name.
    """

    id: str
    name: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping) -> "Player":
        return cls(id=str(data["id"]), name=str(data["name"]))


@dataclass(frozen=True)
class Pair:
    """A canonical unordered match-up between two players.

    Attributes:
        pair_key: Order-independent identity of the pair.
        player_a_id: The lexicographically smaller identifier.
        player_b_id: The lexicographically larger identifier.
    """

    pair_key: str
    player_a_id: str
    player_b_id: str


@dataclass(frozen=True)
class PairHandicap:
    """Stroke handicap configured for one pair.

    A positive value means player A gives ``value`` strokes to player B,
    a negative value means player B gives ``-value`` strokes to player A.

    Attributes:
        pair_key: The pair's key.
        player_a_id: Canonical player A (consistent with pair_key).
        player_b_id: Canonical player B (consistent with pair_key).
        value: Signed stroke count.
        handicap_holes: Hole numbers on which a stroke is applied.
    """

    pair_key: str
    player_a_id: str
    player_b_id: str
    value: int = 0
    handicap_holes: tuple[int, ...] = ()

    def to_dict(self) -> dict:
        data = asdict(self)
        data["handicap_holes"] = list(self.handicap_holes)
        return data

    @classmethod
    def from_dict(cls, data: Mapping) -> "PairHandicap":
        pair_key = str(data["pair_key"])
        default_a, _, default_b = pair_key.partition(PAIR_KEY_SEPARATOR)
        return cls(
            pair_key=pair_key,
            player_a_id=str(data.get("player_a_id", default_a)),
            player_b_id=str(data.get("player_b_id", default_b)),
            value=data.get("value", 0),
            handicap_holes=tuple(data.get("handicap_holes", ())),
        )


@dataclass(frozen=True)
class HoleStrokes:
    """Raw stroke counts of one hole.

    Attributes:
        hole_number: 1-based hole number.
        strokes: Mapping of player id to raw stroke count.
    """

    hole_number: int
    strokes: Mapping[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"hole_number": self.hole_number, "strokes": dict(self.strokes)}

    @classmethod
    def from_dict(cls, data: Mapping) -> "HoleStrokes":
        return cls(hole_number=data["hole_number"], strokes=dict(data.get("strokes", {})))


@dataclass(frozen=True)
class PairHoleResult:
    """Result of one pair on one hole.

    ``player_b_score`` is always the exact negation of ``player_a_score``.
    """

    pair_key: str
    hole_number: int
    player_a_id: str
    player_b_id: str
    player_a_strokes: int
    player_b_strokes: int
    player_a_adjusted: int
    player_b_adjusted: int
    player_a_score: int
    player_b_score: int
    is_turbo: bool

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping) -> "PairHoleResult":
        return cls(**{name: data[name] for name in cls.__dataclass_fields__})


@dataclass(frozen=True)
class PlayerHoleScore:
    """A player's net score on one hole.

    Attributes:
        player_id: The player's identifier.
        hole_number: 1-based hole number.
        hole_score: Sum of the player's pairwise scores on this hole.
        running_total: Cumulative hole_score through this hole.
    """

    player_id: str
    hole_number: int
    hole_score: int
    running_total: int

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping) -> "PlayerHoleScore":
        return cls(**{name: data[name] for name in cls.__dataclass_fields__})


@dataclass(frozen=True)
class RankingEntry:
    """Final standing of one player."""

    player: Player
    total_score: int
    rank: int

    def to_dict(self) -> dict:
        return {
            "player_id": self.player.id,
            "player_name": self.player.name,
            "total_score": self.total_score,
            "rank": self.rank,
        }


@dataclass(frozen=True)
class GameConfig:
    """Configuration of one round.

    Attributes:
        players: Roster in entry order.
        number_of_holes: Holes in the round.
        handicaps: PairHandicap keyed by pair key.
        turbo_holes: Hole numbers whose results are doubled (sorted).
    """

    players: tuple[Player, ...] = ()
    number_of_holes: int = DEFAULT_NUMBER_OF_HOLES
    handicaps: Mapping[str, PairHandicap] = field(default_factory=dict)
    turbo_holes: tuple[int, ...] = ()

    def to_dict(self) -> dict:
        return {
            "players": [player.to_dict() for player in self.players],
            "number_of_holes": self.number_of_holes,
            "handicaps": {
                key: handicap.to_dict() for key, handicap in self.handicaps.items()
            },
            "turbo_holes": list(self.turbo_holes),
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "GameConfig":
        raw_handicaps = data.get("handicaps", {})
        # リスト形式も受け付ける
        if isinstance(raw_handicaps, Mapping):
            raw_handicaps = raw_handicaps.values()
        handicaps = {}
        for raw in raw_handicaps:
            handicap = PairHandicap.from_dict(raw)
            handicaps[handicap.pair_key] = handicap

        return cls(
            players=tuple(Player.from_dict(p) for p in data.get("players", ())),
            number_of_holes=data.get("number_of_holes", DEFAULT_NUMBER_OF_HOLES),
            handicaps=handicaps,
            turbo_holes=tuple(sorted(data.get("turbo_holes", ()))),
        )


@dataclass(frozen=True)
class GameState:
    """The whole state of the current round.

    Replaced wholesale by every accepted action; never mutated in place.

    Attributes:
        config: Round configuration (None before setup).
        current_hole: Hole currently shown for entry.
        hole_strokes: One entry per scored hole.
        pair_results: Every pairwise result of every scored hole.
        player_scores: Every player's score of every scored hole.
        is_complete: Whether the round has been finished.
        history_id: Id of the history record when editing a saved game.
    """

    config: GameConfig | None = None
    current_hole: int = FIRST_HOLE
    hole_strokes: tuple[HoleStrokes, ...] = ()
    pair_results: tuple[PairHoleResult, ...] = ()
    player_scores: tuple[PlayerHoleScore, ...] = ()
    is_complete: bool = False
    history_id: int | None = None

    def to_dict(self) -> dict:
        return {
            "config": self.config.to_dict() if self.config is not None else None,
            "current_hole": self.current_hole,
            "hole_strokes": [s.to_dict() for s in self.hole_strokes],
            "pair_results": [r.to_dict() for r in self.pair_results],
            "player_scores": [s.to_dict() for s in self.player_scores],
            "is_complete": self.is_complete,
            "history_id": self.history_id,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "GameState":
        raw_config = data.get("config")
        return cls(
            config=GameConfig.from_dict(raw_config) if raw_config is not None else None,
            current_hole=data.get("current_hole", FIRST_HOLE),
            hole_strokes=tuple(HoleStrokes.from_dict(s) for s in data.get("hole_strokes", ())),
            pair_results=tuple(
                PairHoleResult.from_dict(r) for r in data.get("pair_results", ())
            ),
            player_scores=tuple(
                PlayerHoleScore.from_dict(s) for s in data.get("player_scores", ())
            ),
            is_complete=data.get("is_complete", False),
            history_id=data.get("history_id"),
        )
