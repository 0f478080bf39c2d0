"""play-again コマンド - 最新ラウンドと同じ設定で新しいラウンドファイルを作る"""

import json

import click

from golfpair.cli.utils.round_file import dump_round
from golfpair.db import get_engine, get_session, init_db
from golfpair.repositories.history_repository import SQLAlchemyGameHistoryRepository
from golfpair.services.play_again import build_play_again_state


@click.command("play-again")
@click.option("--db", required=True, type=click.Path(), help="履歴データベースファイルパス")
@click.option("--output", required=True, type=click.Path(dir_okay=False), help="出力ラウンドファイルパス")
@click.option("--id", "history_id", default=None, type=int, help="元にするラウンド（省略時は最新）")
def play_again(db: str, output: str, history_id: int | None):
    """保存済みラウンドと同じ顔ぶれ・ハンデで新しいラウンドを準備する

    プレーヤーIDは新しく発行され、ハンデは名前で引き継がれる。
    """
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        repository = SQLAlchemyGameHistoryRepository(session)
        record = repository.latest() if history_id is None else repository.get(history_id)

    if record is None:
        click.echo("元にするラウンドがありません。")
        raise SystemExit(1)

    state = build_play_again_state(record)
    if state.config is None:
        click.echo("ラウンドの設定を引き継げませんでした。")
        raise SystemExit(1)

    with open(output, "w", encoding="utf-8") as f:
        json.dump(dump_round(state), f, ensure_ascii=False, indent=2)

    names = ", ".join(player.name for player in state.config.players)
    click.echo(f"新しいラウンドファイルを作成しました: {output}")
    click.echo(f"プレーヤー: {names}")
