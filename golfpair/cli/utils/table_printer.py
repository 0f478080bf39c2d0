"""テーブル表示ユーティリティ"""

from collections.abc import Sequence

import click

from golfpair.cli.utils.table_formatter import format_signed, format_table
from golfpair.models.game import Player, PlayerHoleScore, RankingEntry
from golfpair.models.record import HistoryRecord
from golfpair.services.stats import H2HRecord, PairBreakdown, PlayerStats


def print_rankings(rankings: Sequence[RankingEntry]) -> None:
    """最終順位を表示する"""
    rows = [
        (str(entry.rank), entry.player.name, format_signed(entry.total_score))
        for entry in rankings
    ]
    click.echo(format_table(("Rank", "Player", "Total"), rows, right_aligned=(0, 2)))


def print_scorecard(players: Sequence[Player], player_scores: Sequence[PlayerHoleScore]) -> None:
    """ホールごとのスコアと累計を表示する"""
    holes = sorted({score.hole_number for score in player_scores})
    by_key = {(s.player_id, s.hole_number): s for s in player_scores}

    rows = []
    for player in players:
        cells = [player.name]
        for hole in holes:
            score = by_key.get((player.id, hole))
            cells.append(format_signed(score.hole_score) if score else "-")
        last = by_key.get((player.id, holes[-1])) if holes else None
        cells.append(format_signed(last.running_total) if last else "0")
        rows.append(cells)

    headers = ["Player", *(str(h) for h in holes), "Total"]
    click.echo(format_table(headers, rows, right_aligned=range(1, len(headers))))


def print_pair_breakdown(breakdowns: Sequence[PairBreakdown]) -> None:
    """ペア別の内訳を表示する"""
    rows = [
        (
            f"{b.player_a_name} vs {b.player_b_name}",
            f"{b.player_a_wins}-{b.player_b_wins}-{b.ties}",
            f"{format_signed(b.player_a_total)} / {format_signed(b.player_b_total)}",
        )
        for b in breakdowns
    ]
    click.echo(format_table(("Pair", "W-L-T", "Points"), rows))


def print_history(records: Sequence[HistoryRecord]) -> None:
    """履歴一覧を表示する"""
    rows = [
        (
            str(record.id),
            record.completed_at.strftime("%Y-%m-%d %H:%M"),
            str(record.number_of_holes),
            record.winner_name or "-",
            ", ".join(player.name for player in record.players),
        )
        for record in records
    ]
    click.echo(
        format_table(("ID", "Completed", "Holes", "Winner", "Players"), rows, right_aligned=(0, 2))
    )


def print_player_stats(stats: Sequence[PlayerStats]) -> None:
    """プレーヤー別通算成績を表示する"""
    rows = [
        (
            s.display_name,
            str(s.games_played),
            str(s.wins),
            f"{s.win_rate:.1%}",
            f"{s.avg_score:+.1f}",
            format_signed(s.best_round.score) if s.best_round else "-",
            format_signed(s.worst_round.score) if s.worst_round else "-",
        )
        for s in stats
    ]
    click.echo(
        format_table(
            ("Player", "Games", "Wins", "Win%", "Avg", "Best", "Worst"),
            rows,
            right_aligned=range(1, 7),
        )
    )


def print_h2h(records: Sequence[H2HRecord]) -> None:
    """対戦成績を表示する"""
    rows = [
        (
            f"{r.player_a_name} vs {r.player_b_name}",
            str(r.games_played),
            f"{r.player_a_wins}-{r.player_b_wins}-{r.ties}",
        )
        for r in records
    ]
    click.echo(format_table(("Matchup", "Games", "W-L-T"), rows, right_aligned=(1,)))
