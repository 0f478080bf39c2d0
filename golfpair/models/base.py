"""SQLAlchemyベースクラス定義"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """すべてのモデルの基底クラス

    SQLAlchemy 2.0スタイルのDeclarativeBaseを使用。
    対戦履歴（GameHistory）はこのクラスを継承する。
    """

    pass
