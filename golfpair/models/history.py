"""GameHistoryモデル定義"""

from datetime import datetime

from sqlalchemy import JSON, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from golfpair.models.base import Base


class GameHistory(Base):
    """完了したラウンドの履歴モデル

    1ラウンドにつき1レコードを追記する（更新はしない）。
    設定と全ての計算結果をそのままJSONで保持する。

    Attributes:
        id: 自動採番ID（主キー）
        completed_at: ラウンド完了日時
        number_of_holes: ホール数
        winner_id: 1位プレーヤーのID
        winner_name: 1位プレーヤーの名前
        players: プレーヤー一覧
        rankings: 最終順位
        config: ゲーム設定（ハンデ・ターボホール含む）
        hole_strokes: ホールごとの打数
        pair_results: ペアごとのホール結果
        player_scores: プレーヤーごとのホールスコア
    """

    __tablename__ = "game_history"

    __table_args__ = (Index("ix_game_history_completed_at", "completed_at"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    completed_at: Mapped[datetime] = mapped_column(nullable=False)
    number_of_holes: Mapped[int] = mapped_column(nullable=False)
    winner_id: Mapped[str] = mapped_column(String, nullable=False, default="")
    winner_name: Mapped[str] = mapped_column(String, nullable=False, default="")
    players: Mapped[list] = mapped_column(JSON, nullable=False)
    rankings: Mapped[list] = mapped_column(JSON, nullable=False)
    config: Mapped[dict] = mapped_column(JSON, nullable=False)
    hole_strokes: Mapped[list] = mapped_column(JSON, nullable=False)
    pair_results: Mapped[list] = mapped_column(JSON, nullable=False)
    player_scores: Mapped[list] = mapped_column(JSON, nullable=False)

    def __repr__(self) -> str:
        return f"<GameHistory(id={self.id!r}, winner_name={self.winner_name!r})>"
