"""history / stats コマンド - 保存済みラウンドの一覧と通算成績"""

import click

from golfpair.cli.utils.table_printer import (
    print_h2h,
    print_history,
    print_player_stats,
    print_rankings,
)
from golfpair.db import get_engine, get_session, init_db
from golfpair.repositories.history_repository import SQLAlchemyGameHistoryRepository
from golfpair.services.stats import (
    compute_all_player_stats,
    compute_h2h_records,
    compute_player_stats,
    get_h2h_for_pair,
)


@click.command()
@click.option("--db", required=True, type=click.Path(), help="履歴データベースファイルパス")
@click.option("--id", "history_id", default=None, type=int, help="指定したラウンドの順位を表示")
@click.option("--reverse", is_flag=True, help="古い順に表示する")
def history(db: str, history_id: int | None, reverse: bool):
    """保存済みラウンドの一覧を表示する（新しい順）"""
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        repository = SQLAlchemyGameHistoryRepository(session)

        if history_id is not None:
            record = repository.get(history_id)
            if record is None:
                click.echo(f"ラウンドが見つかりません: ID {history_id}")
                raise SystemExit(1)
            click.echo(f"ラウンド {record.id} ({record.completed_at:%Y-%m-%d %H:%M})")
            click.echo("")
            print_rankings(record.rankings)
            return

        records = repository.list_games()

    if not records:
        click.echo("保存済みのラウンドはありません。")
        return

    print_history(records if reverse else records[::-1])


@click.command()
@click.option("--db", required=True, type=click.Path(), help="履歴データベースファイルパス")
@click.option("--player", default=None, help="指定したプレーヤーのみ表示")
@click.option("--vs", "opponent", default=None, help="--player との対戦成績を表示")
def stats(db: str, player: str | None, opponent: str | None):
    """通算成績と対戦成績を表示する"""
    if opponent is not None and player is None:
        click.echo("--vs には --player の指定が必要です")
        raise SystemExit(1)

    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        games = SQLAlchemyGameHistoryRepository(session).list_games()

    if not games:
        click.echo("保存済みのラウンドはありません。")
        return

    h2h_records = compute_h2h_records(games)

    if player is None:
        print_player_stats(compute_all_player_stats(games))
        click.echo("")
        print_h2h(h2h_records)
        return

    player_stats = compute_player_stats(player, games)
    if player_stats.games_played == 0:
        click.echo(f"プレーヤーが見つかりません: {player}")
        raise SystemExit(1)
    print_player_stats([player_stats])

    if opponent is not None:
        record = get_h2h_for_pair(h2h_records, player, opponent)
        click.echo("")
        if record is None:
            click.echo(f"{player} と {opponent} の対戦記録はありません。")
        else:
            print_h2h([record])
