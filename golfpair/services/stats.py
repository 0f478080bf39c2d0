"""対戦成績の統計計算

保存済みラウンドからプレーヤー別の通算成績と対戦（H2H）成績を、
1ラウンドのペア結果からペア別の内訳を計算する純粋関数群。
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from datetime import datetime
from itertools import combinations

from golfpair.models.game import PairHoleResult, Player
from golfpair.models.record import HistoryRecord
from golfpair.scoring import generate_pairs, get_player_name


@dataclass(frozen=True)
class RoundScore:
    """1ラウンドの合計スコア"""

    score: int
    completed_at: datetime


@dataclass(frozen=True)
class PlayerStats:
    """プレーヤーの通算成績

    Attributes:
        display_name: 表示名（最初に登場した表記）
        games_played: ラウンド数
        wins: 1位の回数（同率1位も含む）
        win_rate: 勝率 (0.0 - 1.0)
        avg_score: 平均スコア
        best_round: 最高スコアのラウンド
        worst_round: 最低スコアのラウンド
        score_trend: 日付昇順のスコア推移
    """

    display_name: str
    games_played: int
    wins: int
    win_rate: float
    avg_score: float
    best_round: RoundScore | None
    worst_round: RoundScore | None
    score_trend: tuple[RoundScore, ...]


@dataclass(frozen=True)
class H2HRecord:
    """2人の通算対戦成績（ラウンドの順位で比較）"""

    player_a_name: str
    player_b_name: str
    player_a_wins: int
    player_b_wins: int
    ties: int
    games_played: int


@dataclass(frozen=True)
class PairBreakdown:
    """1ラウンドのペア別内訳"""

    pair_key: str
    player_a_name: str
    player_b_name: str
    player_a_wins: int
    player_b_wins: int
    ties: int
    player_a_total: int
    player_b_total: int
    hole_results: tuple[PairHoleResult, ...]


def normalize_player_name(name: str) -> str:
    """前後の空白を除いて小文字化する（ラウンド間の名前照合用）"""
    return name.strip().lower()


def get_unique_player_names(games: Iterable[HistoryRecord]) -> list[str]:
    """全ラウンドのプレーヤー名を重複なしで返す（最初の表記を採用）"""
    names: dict[str, str] = {}
    for game in games:
        for ranking in game.rankings:
            names.setdefault(normalize_player_name(ranking.player.name), ranking.player.name)
    return list(names.values())


def compute_player_stats(player_name: str, games: Iterable[HistoryRecord]) -> PlayerStats:
    """1人のプレーヤーの通算成績を計算する

    Args:
        player_name: プレーヤー名（大文字小文字・前後空白は無視）
        games: 保存済みラウンド

    Returns:
        PlayerStats（参加ラウンドがなければ全て0）
    """
    normalized = normalize_player_name(player_name)

    rounds: list[tuple[HistoryRecord, int, int]] = []
    for game in games:
        for ranking in game.rankings:
            if normalize_player_name(ranking.player.name) == normalized:
                rounds.append((game, ranking.total_score, ranking.rank))
                break

    if not rounds:
        return PlayerStats(
            display_name=player_name,
            games_played=0,
            wins=0,
            win_rate=0.0,
            avg_score=0.0,
            best_round=None,
            worst_round=None,
            score_trend=(),
        )

    trend = [RoundScore(score=score, completed_at=game.completed_at) for game, score, _ in rounds]
    wins = sum(1 for _, _, rank in rounds if rank == 1)
    games_played = len(rounds)

    return PlayerStats(
        display_name=player_name,
        games_played=games_played,
        wins=wins,
        win_rate=wins / games_played,
        avg_score=sum(r.score for r in trend) / games_played,
        best_round=max(trend, key=lambda r: r.score),
        worst_round=min(trend, key=lambda r: r.score),
        score_trend=tuple(sorted(trend, key=lambda r: r.completed_at)),
    )


def compute_all_player_stats(games: Sequence[HistoryRecord]) -> list[PlayerStats]:
    """全プレーヤーの通算成績を計算する（勝率降順、同率ならラウンド数降順）"""
    all_stats = [compute_player_stats(name, games) for name in get_unique_player_names(games)]
    return sorted(all_stats, key=lambda s: (s.win_rate, s.games_played), reverse=True)


def compute_h2h_records(games: Iterable[HistoryRecord]) -> list[H2HRecord]:
    """全ペアの通算対戦成績を計算する

    同じラウンドに参加した2人ごとに、順位が上の方を勝ちとする。
    名前は大文字小文字を区別せず照合する。ラウンド数の降順で返す。
    """
    records: dict[tuple[str, str], H2HRecord] = {}

    for game in games:
        for first, second in combinations(game.rankings, 2):
            # 正規化した名前の辞書順で向きを揃える
            if normalize_player_name(first.player.name) > normalize_player_name(
                second.player.name
            ):
                first, second = second, first
            key = (
                normalize_player_name(first.player.name),
                normalize_player_name(second.player.name),
            )
            if key[0] == key[1]:
                continue

            record = records.get(key) or H2HRecord(
                player_a_name=first.player.name,
                player_b_name=second.player.name,
                player_a_wins=0,
                player_b_wins=0,
                ties=0,
                games_played=0,
            )
            records[key] = replace(
                record,
                player_a_wins=record.player_a_wins + int(first.rank < second.rank),
                player_b_wins=record.player_b_wins + int(second.rank < first.rank),
                ties=record.ties + int(first.rank == second.rank),
                games_played=record.games_played + 1,
            )

    return sorted(records.values(), key=lambda r: r.games_played, reverse=True)


def get_h2h_for_pair(
    records: Iterable[H2HRecord], player_name: str, opponent_name: str
) -> H2HRecord | None:
    """2人の対戦成績を player_name 側から見た向きで返す（なければNone）"""
    player = normalize_player_name(player_name)
    opponent = normalize_player_name(opponent_name)

    for record in records:
        record_a = normalize_player_name(record.player_a_name)
        record_b = normalize_player_name(record.player_b_name)
        if (record_a, record_b) == (player, opponent):
            return record
        if (record_a, record_b) == (opponent, player):
            return H2HRecord(
                player_a_name=record.player_b_name,
                player_b_name=record.player_a_name,
                player_a_wins=record.player_b_wins,
                player_b_wins=record.player_a_wins,
                ties=record.ties,
                games_played=record.games_played,
            )
    return None


def compute_pair_breakdown(
    players: Sequence[Player], pair_results: Iterable[PairHoleResult]
) -> list[PairBreakdown]:
    """1ラウンドのペア別の勝敗と合計を計算する

    Args:
        players: プレーヤー一覧
        pair_results: そのラウンドの全ペア結果

    Returns:
        ペア順のPairBreakdownリスト（ホール結果はホール番号順）
    """
    results = list(pair_results)
    breakdowns = []
    for pair in generate_pairs(players):
        pair_holes = sorted(
            (r for r in results if r.pair_key == pair.pair_key),
            key=lambda r: r.hole_number,
        )
        breakdowns.append(
            PairBreakdown(
                pair_key=pair.pair_key,
                player_a_name=get_player_name(players, pair.player_a_id),
                player_b_name=get_player_name(players, pair.player_b_id),
                player_a_wins=sum(1 for r in pair_holes if r.player_a_score > 0),
                player_b_wins=sum(1 for r in pair_holes if r.player_b_score > 0),
                ties=sum(1 for r in pair_holes if r.player_a_score == 0),
                player_a_total=sum(r.player_a_score for r in pair_holes),
                player_b_total=sum(r.player_b_score for r in pair_holes),
                hole_results=tuple(pair_holes),
            )
        )
    return breakdowns
