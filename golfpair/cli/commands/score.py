"""score コマンド - ラウンドファイルを採点して順位を表示する"""

import click

from golfpair.cli.utils.round_file import RoundFileError, build_round_state, load_round_file
from golfpair.cli.utils.table_printer import (
    print_pair_breakdown,
    print_rankings,
    print_scorecard,
)
from golfpair.db import get_engine, get_session, init_db
from golfpair.repositories.history_repository import SQLAlchemyGameHistoryRepository
from golfpair.scoring import find_non_zero_sum_holes, get_final_rankings
from golfpair.services import game_service
from golfpair.services.stats import compute_pair_breakdown


@click.command()
@click.argument("round_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--pairs", is_flag=True, help="ペア別の内訳も表示する")
@click.option("--save", is_flag=True, help="完了したラウンドとして履歴に保存する")
@click.option("--db", default=None, type=click.Path(), help="履歴データベースファイルパス")
def score(round_file: str, pairs: bool, save: bool, db: str | None):
    """ラウンドファイルを採点して順位を表示する"""
    if save and db is None:
        click.echo("--save には --db の指定が必要です")
        raise SystemExit(1)

    try:
        state = build_round_state(load_round_file(round_file))
    except RoundFileError as e:
        click.echo(f"ラウンドファイルを読み込めません: {e}")
        raise SystemExit(1)

    config = state.config
    click.echo(
        f"プレーヤー: {len(config.players)}人 / "
        f"ホール: {len(state.hole_strokes)}/{config.number_of_holes}"
    )
    click.echo("")

    print_scorecard(config.players, state.player_scores)
    click.echo("")
    print_rankings(get_final_rankings(config.players, state.player_scores))

    if pairs:
        click.echo("")
        print_pair_breakdown(compute_pair_breakdown(config.players, state.pair_results))

    broken_holes = find_non_zero_sum_holes(state.player_scores)
    if broken_holes:
        click.echo("")
        click.echo(f"警告: ゼロサムが成立していないホール: {broken_holes}")

    if save:
        state = game_service.complete_game(state).state
        engine = get_engine(db)
        init_db(engine)
        with get_session(engine) as session:
            history_id = SQLAlchemyGameHistoryRepository(session).add(state)
        click.echo("")
        click.echo(f"履歴に保存しました: ID {history_id}")
