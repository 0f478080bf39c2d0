"""対戦履歴データベースへの接続

完了したラウンドを保存するSQLiteファイルのエンジンとセッションを提供する。
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import URL, Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from golfpair.models.base import Base

MEMORY_DB = ":memory:"


def get_engine(db_path: str | Path) -> Engine:
    """履歴データベースのエンジンを作成する

    ファイルの親ディレクトリがなければ作成する。

    Args:
        db_path: SQLiteファイルのパス（":memory:" ならインメモリ）

    Returns:
        Engine
    """
    if str(db_path) != MEMORY_DB:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(URL.create("sqlite", database=str(db_path)))


@contextmanager
def get_session(engine: Engine) -> Generator[Session, None, None]:
    """1回の読み書き単位のセッションを提供する

    ブロックを抜けるとコミットし、例外時はロールバックして再送出する。
    """
    session = sessionmaker(bind=engine)()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine) -> None:
    """履歴テーブルを作成する（作成済みなら何もしない）"""
    Base.metadata.create_all(engine)
