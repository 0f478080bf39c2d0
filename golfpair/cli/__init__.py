"""Click CLIメインモジュール"""

import logging

import click


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="詳細ログを表示する")
def main(verbose: bool):
    """ペア対抗マッチプレー採点CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# コマンドの登録
from golfpair.cli.commands.history import history, stats
from golfpair.cli.commands.play_again import play_again
from golfpair.cli.commands.score import score

main.add_command(score)
main.add_command(history)
main.add_command(stats)
main.add_command(play_again)


__all__ = ["main"]
