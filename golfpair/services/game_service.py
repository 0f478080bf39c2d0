"""ゲーム操作サービス

現在のゲーム状態（GameState）に対する操作を提供する。
各操作は入力を検証してからスコア計算コアを呼び出し、新しい状態を丸ごと返す。
検証に失敗した場合は元の状態をそのまま返し、拒否理由を添える。
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from golfpair.constants import FIRST_HOLE
from golfpair.models.game import GameConfig, GameState, HoleStrokes, PairHandicap, Player
from golfpair.models.record import HistoryRecord
from golfpair.scoring import (
    apply_hole_strokes,
    distribute_handicap_holes,
    generate_pairs,
    parse_pair_key,
    recalculate_all_results,
    verify_zero_sum,
)
from golfpair.services.validation import (
    Rejection,
    RejectionReason,
    reject,
    validate_handicap_holes,
    validate_handicap_value,
    validate_hole_numbers,
    validate_hole_strokes,
    validate_number_of_holes,
    validate_players,
    validate_round_fits_holes,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    """操作結果

    Attributes:
        state: 操作後の状態（拒否時は操作前の状態）
        rejection: 拒否理由（受理時はNone）
    """

    state: GameState
    rejection: Rejection | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


def _accept(state: GameState) -> ActionResult:
    return ActionResult(state=state)


def _reject(state: GameState, rejection: Rejection) -> ActionResult:
    logger.info("Action rejected: %s", rejection.message)
    return ActionResult(state=state, rejection=rejection)


def _rescore(state: GameState) -> GameState:
    """記録済みの打数から全結果を作り直す（打数がなければそのまま）"""
    if state.config is None or not state.hole_strokes:
        return state

    config = state.config
    replayed = recalculate_all_results(
        config.players,
        state.hole_strokes,
        config.handicaps,
        config.turbo_holes,
        generate_pairs(config.players),
    )
    return replace(
        state,
        pair_results=replayed.pair_results,
        player_scores=replayed.player_scores,
    )


def _with_config(state: GameState, **changes) -> GameState:
    return replace(state, config=replace(state.config, **changes))


def reset_game() -> GameState:
    """ゲーム状態を初期状態に戻す"""
    return GameState()


def has_active_game(state: GameState) -> bool:
    """設定済みで1ホール以上スコアが登録されているか"""
    return state.config is not None and len(state.hole_strokes) > 0


def load_game(record: HistoryRecord) -> GameState:
    """保存済みのラウンドを閲覧・修正用の状態として読み込む"""
    return record.to_state()


# === セットアップ ===


def set_players(state: GameState, players: Sequence[Player]) -> ActionResult:
    """プレーヤーを設定する（2-6人）

    スコア登録後は変更できない。新しい顔ぶれにないペアのハンデは削除する。
    """
    rejection = validate_players(players)
    if rejection is not None:
        return _reject(state, rejection)
    if state.hole_strokes:
        return _reject(state, reject(RejectionReason.GAME_IN_PROGRESS))

    config = state.config or GameConfig()
    pair_keys = {pair.pair_key for pair in generate_pairs(players)}
    handicaps = {key: h for key, h in config.handicaps.items() if key in pair_keys}
    return _accept(
        replace(state, config=replace(config, players=tuple(players), handicaps=handicaps))
    )


def set_number_of_holes(state: GameState, number_of_holes: int) -> ActionResult:
    """ホール数を設定する（1-36ホール）

    既存のハンデ・ターボホール・登録済みホールが収まらない場合は拒否する。
    """
    rejection = validate_number_of_holes(number_of_holes)
    if rejection is not None:
        return _reject(state, rejection)

    if state.config is None:
        return _accept(replace(state, config=GameConfig(number_of_holes=number_of_holes)))

    rejection = validate_round_fits_holes(state.config, state.hole_strokes, number_of_holes)
    if rejection is not None:
        return _reject(state, rejection)

    return _accept(
        replace(
            _with_config(state, number_of_holes=number_of_holes),
            current_hole=min(state.current_hole, number_of_holes),
        )
    )


def initialize_handicaps(state: GameState) -> ActionResult:
    """全ペアのハンデを初期化する

    既存のハンデは保持し、未設定のペアだけゼロハンデを作成する。
    プレーヤーにいないペアのハンデは削除される。
    """
    if state.config is None:
        return _reject(state, reject(RejectionReason.NO_ACTIVE_GAME))

    existing = state.config.handicaps
    handicaps = {}
    for pair in generate_pairs(state.config.players):
        handicaps[pair.pair_key] = existing.get(pair.pair_key) or PairHandicap(
            pair_key=pair.pair_key,
            player_a_id=pair.player_a_id,
            player_b_id=pair.player_b_id,
        )
    return _accept(_with_config(state, handicaps=handicaps))


def set_handicap(state: GameState, pair_key: str, value: int) -> ActionResult:
    """ペアのハンデ値を設定する

    値が変わった場合はハンデホールを空に戻す（選び直しが必要）。
    スコア登録済みなら全ホールを再計算する。
    """
    if state.config is None:
        return _reject(state, reject(RejectionReason.NO_ACTIVE_GAME))

    config = state.config
    if pair_key not in {pair.pair_key for pair in generate_pairs(config.players)}:
        return _reject(state, reject(RejectionReason.UNKNOWN_PAIR))

    rejection = validate_handicap_value(value, config.number_of_holes)
    if rejection is not None:
        return _reject(state, rejection)

    existing = config.handicaps.get(pair_key)
    if existing is not None and existing.value == value:
        holes = existing.handicap_holes
    else:
        holes = ()

    # player_a_id / player_b_id は常にキーから再導出する
    player_a_id, player_b_id = parse_pair_key(pair_key)
    handicap = PairHandicap(
        pair_key=pair_key,
        player_a_id=player_a_id,
        player_b_id=player_b_id,
        value=value,
        handicap_holes=holes,
    )
    handicaps = {**config.handicaps, pair_key: handicap}
    return _accept(_rescore(_with_config(state, handicaps=handicaps)))


def set_handicap_holes(state: GameState, pair_key: str, holes: Iterable[int]) -> ActionResult:
    """ペアのハンデホールを設定する"""
    if state.config is None:
        return _reject(state, reject(RejectionReason.NO_ACTIVE_GAME))

    config = state.config
    existing = config.handicaps.get(pair_key)
    if existing is None:
        return _reject(state, reject(RejectionReason.UNKNOWN_PAIR))

    holes = list(holes)
    rejection = validate_handicap_holes(holes, existing.value, config.number_of_holes)
    if rejection is not None:
        return _reject(state, rejection)

    handicap = replace(existing, handicap_holes=tuple(sorted(set(holes))))
    handicaps = {**config.handicaps, pair_key: handicap}
    return _accept(_rescore(_with_config(state, handicaps=handicaps)))


def auto_distribute_handicap_holes(state: GameState, pair_key: str) -> ActionResult:
    """ハンデ値に応じてハンデホールを均等配分する"""
    if state.config is None:
        return _reject(state, reject(RejectionReason.NO_ACTIVE_GAME))

    existing = state.config.handicaps.get(pair_key)
    if existing is None:
        return _reject(state, reject(RejectionReason.UNKNOWN_PAIR))

    holes = distribute_handicap_holes(existing.value, state.config.number_of_holes)
    return set_handicap_holes(state, pair_key, holes)


def set_turbo_holes(state: GameState, holes: Iterable[int]) -> ActionResult:
    """ターボホールを設定する"""
    if state.config is None:
        return _reject(state, reject(RejectionReason.NO_ACTIVE_GAME))

    holes = list(holes)
    rejection = validate_hole_numbers(holes, state.config.number_of_holes)
    if rejection is not None:
        return _reject(state, rejection)

    return _accept(_rescore(_with_config(state, turbo_holes=tuple(sorted(set(holes))))))


def toggle_turbo_hole(state: GameState, hole: int) -> ActionResult:
    """ターボホールのオン・オフを切り替える"""
    if state.config is None:
        return _reject(state, reject(RejectionReason.NO_ACTIVE_GAME))

    current = state.config.turbo_holes
    if hole in current:
        holes = [h for h in current if h != hole]
    else:
        holes = [*current, hole]
    return set_turbo_holes(state, holes)


# === プレー ===


def submit_hole_strokes(state: GameState, strokes: HoleStrokes) -> ActionResult:
    """1ホール分の打数を登録する

    検証を全て終えてから計算する。同じホールを再登録すると置き換える。
    ゼロサム検証に失敗しても警告ログを出すだけで結果は反映する。
    """
    if state.config is None:
        return _reject(state, reject(RejectionReason.NO_ACTIVE_GAME))

    config = state.config
    rejection = validate_hole_strokes(strokes, config.number_of_holes)
    if rejection is not None:
        return _reject(state, rejection)

    submission = apply_hole_strokes(
        config.players,
        generate_pairs(config.players),
        config.handicaps,
        config.turbo_holes,
        state.hole_strokes,
        state.pair_results,
        state.player_scores,
        strokes,
    )

    if not verify_zero_sum(submission.hole_scores):
        logger.warning(
            "Zero-sum check failed on hole %d: %s",
            strokes.hole_number,
            {s.player_id: s.hole_score for s in submission.hole_scores},
        )

    return _accept(
        replace(
            state,
            hole_strokes=submission.hole_strokes,
            pair_results=submission.pair_results,
            player_scores=submission.player_scores,
        )
    )


def recalculate(state: GameState) -> ActionResult:
    """全ホールを打数記録から再計算する"""
    if state.config is None:
        return _reject(state, reject(RejectionReason.NO_ACTIVE_GAME))
    return _accept(_rescore(state))


def go_to_hole(state: GameState, hole_number: int) -> ActionResult:
    """指定ホールに移動する"""
    if state.config is None:
        return _reject(state, reject(RejectionReason.NO_ACTIVE_GAME))

    rejection = validate_hole_numbers([hole_number], state.config.number_of_holes)
    if rejection is not None:
        return _reject(state, rejection)
    return _accept(replace(state, current_hole=hole_number))


def go_to_next_hole(state: GameState) -> ActionResult:
    """次のホールに移動する（最終ホールで止まる）"""
    if state.config is None:
        return _reject(state, reject(RejectionReason.NO_ACTIVE_GAME))

    next_hole = min(state.current_hole + 1, state.config.number_of_holes)
    return _accept(replace(state, current_hole=next_hole))


def go_to_previous_hole(state: GameState) -> ActionResult:
    """前のホールに移動する（1番ホールで止まる）"""
    return _accept(replace(state, current_hole=max(state.current_hole - 1, FIRST_HOLE)))


def complete_game(state: GameState) -> ActionResult:
    """ラウンドを完了にする"""
    if state.config is None:
        return _reject(state, reject(RejectionReason.NO_ACTIVE_GAME))
    return _accept(replace(state, is_complete=True))
