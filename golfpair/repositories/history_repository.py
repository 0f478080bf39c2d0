"""対戦履歴リポジトリ"""

from datetime import datetime

from sqlalchemy import select

from golfpair.models import GameHistory, GameState
from golfpair.models.game import (
    GameConfig,
    HoleStrokes,
    PairHoleResult,
    Player,
    PlayerHoleScore,
)
from golfpair.models.record import HistoryRecord, ranking_from_dict
from golfpair.scoring import get_final_rankings


class SQLAlchemyGameHistoryRepository:
    """SQLAlchemyを使用した対戦履歴リポジトリ

    完了したラウンドを1件ずつ追記する。既存レコードの更新・削除は行わない。
    """

    def __init__(self, session):
        """初期化

        Args:
            session: SQLAlchemyセッション
        """
        self.session = session

    def add(self, state: GameState, completed_at: datetime | None = None) -> int:
        """ラウンドを履歴に追加する

        最終順位はここで計算し、設定と全結果と一緒に保存する。

        Args:
            state: 保存するゲーム状態
            completed_at: 完了日時（Noneなら現在時刻）

        Returns:
            採番された履歴ID

        Raises:
            ValueError: ゲームが未設定の場合
        """
        if state.config is None:
            raise ValueError("Cannot save a game without configuration")

        config = state.config
        rankings = get_final_rankings(config.players, state.player_scores)
        winner = rankings[0].player if rankings else None

        row = GameHistory(
            completed_at=completed_at or datetime.now(),
            number_of_holes=config.number_of_holes,
            winner_id=winner.id if winner else "",
            winner_name=winner.name if winner else "",
            players=[player.to_dict() for player in config.players],
            rankings=[ranking.to_dict() for ranking in rankings],
            config=config.to_dict(),
            hole_strokes=[s.to_dict() for s in state.hole_strokes],
            pair_results=[r.to_dict() for r in state.pair_results],
            player_scores=[s.to_dict() for s in state.player_scores],
        )
        self.session.add(row)
        self.session.flush()
        return row.id

    def get(self, history_id: int) -> HistoryRecord | None:
        """IDで履歴を取得する（存在しない場合はNone）"""
        row = self.session.get(GameHistory, history_id)
        if row is None:
            return None
        return self._to_record(row)

    def list_games(self) -> list[HistoryRecord]:
        """全履歴を完了日時の昇順で取得する"""
        stmt = select(GameHistory).order_by(GameHistory.completed_at, GameHistory.id)
        return [self._to_record(row) for row in self.session.execute(stmt).scalars()]

    def latest(self) -> HistoryRecord | None:
        """最新の履歴を取得する（履歴がなければNone）"""
        stmt = (
            select(GameHistory)
            .order_by(GameHistory.completed_at.desc(), GameHistory.id.desc())
            .limit(1)
        )
        row = self.session.execute(stmt).scalars().first()
        if row is None:
            return None
        return self._to_record(row)

    def _to_record(self, row: GameHistory) -> HistoryRecord:
        """ORMの行をHistoryRecordに変換する"""
        return HistoryRecord(
            id=row.id,
            completed_at=row.completed_at,
            players=tuple(Player.from_dict(p) for p in row.players),
            number_of_holes=row.number_of_holes,
            rankings=tuple(ranking_from_dict(r) for r in row.rankings),
            winner_id=row.winner_id,
            winner_name=row.winner_name,
            config=GameConfig.from_dict(row.config),
            hole_strokes=tuple(HoleStrokes.from_dict(s) for s in row.hole_strokes),
            pair_results=tuple(PairHoleResult.from_dict(r) for r in row.pair_results),
            player_scores=tuple(PlayerHoleScore.from_dict(s) for s in row.player_scores),
        )
