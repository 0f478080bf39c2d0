"""SQLAlchemyGameHistoryRepositoryのテスト"""

from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from golfpair.models import Base, GameState, HoleStrokes, Player
from golfpair.repositories.history_repository import SQLAlchemyGameHistoryRepository
from golfpair.services import game_service


def play_round(names: list[str], strokes: list[list[int]], handicap: int = 0) -> GameState:
    """テスト用に1ラウンドを進めた状態を作る"""
    players = [Player(id=f"{name.lower()}-id", name=name) for name in names]
    state = game_service.set_players(game_service.reset_game(), players).state
    state = game_service.set_number_of_holes(state, len(strokes)).state
    state = game_service.initialize_handicaps(state).state
    state = game_service.set_turbo_holes(state, [len(strokes)]).state
    if handicap:
        pair_key = next(iter(state.config.handicaps))
        state = game_service.set_handicap(state, pair_key, handicap).state
        state = game_service.auto_distribute_handicap_holes(state, pair_key).state

    for hole, values in enumerate(strokes, 1):
        hole_strokes = HoleStrokes(hole, {p.id: v for p, v in zip(players, values)})
        state = game_service.submit_hole_strokes(state, hole_strokes).state
    return game_service.complete_game(state).state


class TestSQLAlchemyGameHistoryRepository:
    """SQLAlchemyGameHistoryRepositoryのテスト"""

    @pytest.fixture
    def db_session(self, tmp_path):
        """テスト用DBセッション"""
        engine = create_engine(f"sqlite:///{tmp_path / 'history.db'}")
        Base.metadata.create_all(engine)
        session = Session(engine)
        yield session
        session.close()
        engine.dispose()

    @pytest.fixture
    def repository(self, db_session):
        return SQLAlchemyGameHistoryRepository(db_session)

    def test_add_and_get(self, repository):
        """保存したラウンドを同じ内容で取得できる"""
        state = play_round(["Alice", "Bob", "Carol"], [[4, 5, 6], [5, 4, 4], [3, 4, 5]], handicap=1)

        history_id = repository.add(state, completed_at=datetime(2024, 4, 1, 10, 30))
        record = repository.get(history_id)

        assert record.id == history_id
        assert record.completed_at == datetime(2024, 4, 1, 10, 30)
        assert record.number_of_holes == 3
        assert record.config == state.config
        assert record.hole_strokes == state.hole_strokes
        assert record.pair_results == state.pair_results
        assert record.player_scores == state.player_scores

    def test_rankings_and_winner(self, repository):
        state = play_round(["Alice", "Bob"], [[4, 5], [4, 5]])

        record = repository.get(repository.add(state))

        assert [(r.player.name, r.total_score, r.rank) for r in record.rankings] == [
            ("Alice", 3, 1),
            ("Bob", -3, 2),
        ]
        assert record.winner_id == "alice-id"
        assert record.winner_name == "Alice"

    def test_to_state_restores_round(self, repository):
        """保存済みラウンドを状態として読み込んで再計算できる"""
        state = play_round(["Alice", "Bob"], [[4, 5], [6, 5]])
        record = repository.get(repository.add(state))

        restored = game_service.load_game(record)
        recalculated = game_service.recalculate(restored).state

        assert restored.is_complete is True
        assert restored.history_id == record.id
        assert recalculated.player_scores == state.player_scores

    def test_add_without_config(self, repository):
        with pytest.raises(ValueError):
            repository.add(GameState())

    def test_get_missing(self, repository):
        assert repository.get(999) is None

    def test_list_games_ordered_by_completed_at(self, repository):
        state = play_round(["Alice", "Bob"], [[4, 5]])
        late = repository.add(state, completed_at=datetime(2024, 5, 2))
        early = repository.add(state, completed_at=datetime(2024, 5, 1))

        assert [record.id for record in repository.list_games()] == [early, late]

    def test_latest(self, repository):
        assert repository.latest() is None

        state = play_round(["Alice", "Bob"], [[4, 5]])
        repository.add(state, completed_at=datetime(2024, 5, 2))
        repository.add(state, completed_at=datetime(2024, 5, 1))

        assert repository.latest().completed_at == datetime(2024, 5, 2)
