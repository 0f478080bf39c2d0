"""入力検証

ゲーム操作の入力をスコア計算コアに渡す前に検証する。
各関数は問題があれば Rejection を、なければ None を返す（例外は送出しない）。
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from golfpair.config.rules import (
    MAX_HOLES,
    MAX_PLAYERS,
    MAX_STROKES,
    MIN_HOLES,
    MIN_PLAYERS,
    MIN_STROKES,
)
from golfpair.models.game import GameConfig, HoleStrokes, Player


class RejectionReason(str, Enum):
    """操作を拒否する理由（閉じた集合）"""

    NO_ACTIVE_GAME = "no_active_game"
    INVALID_PLAYER_COUNT = "invalid_player_count"
    INVALID_HOLE_COUNT = "invalid_hole_count"
    INVALID_HANDICAP_VALUE = "invalid_handicap_value"
    HANDICAP_EXCEEDS_HOLES = "handicap_exceeds_holes"
    TOO_MANY_HANDICAP_HOLES = "too_many_handicap_holes"
    UNKNOWN_PAIR = "unknown_pair"
    INVALID_STROKES = "invalid_strokes"
    INVALID_HOLE_NUMBER = "invalid_hole_number"
    GAME_IN_PROGRESS = "game_in_progress"


REJECTION_MESSAGES: dict[RejectionReason, str] = {
    RejectionReason.NO_ACTIVE_GAME: "No game has been set up",
    RejectionReason.INVALID_PLAYER_COUNT: (
        f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}"
    ),
    RejectionReason.INVALID_HOLE_COUNT: (
        f"Number of holes must be a whole number between {MIN_HOLES} and {MAX_HOLES}"
    ),
    RejectionReason.INVALID_HANDICAP_VALUE: "Handicap must be a whole number",
    RejectionReason.HANDICAP_EXCEEDS_HOLES: "Handicap cannot exceed the number of holes",
    RejectionReason.TOO_MANY_HANDICAP_HOLES: (
        "Handicap holes cannot outnumber the handicap strokes"
    ),
    RejectionReason.UNKNOWN_PAIR: "Pair is not part of this game",
    RejectionReason.INVALID_STROKES: (
        f"Stroke values must be whole numbers between {MIN_STROKES} and {MAX_STROKES}"
    ),
    RejectionReason.INVALID_HOLE_NUMBER: "Hole number must be within the round",
    RejectionReason.GAME_IN_PROGRESS: "Players cannot be changed once scoring has started",
}


@dataclass(frozen=True)
class Rejection:
    """拒否結果

    Attributes:
        reason: 拒否理由
        message: ユーザー向けメッセージ
    """

    reason: RejectionReason
    message: str


def reject(reason: RejectionReason) -> Rejection:
    """理由に対応するメッセージ付きの Rejection を作る"""
    return Rejection(reason=reason, message=REJECTION_MESSAGES[reason])


def is_whole_number(value) -> bool:
    """整数かどうか（boolは除外）"""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_players(players: Sequence[Player]) -> Rejection | None:
    """プレーヤー数を検証する"""
    if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
        return reject(RejectionReason.INVALID_PLAYER_COUNT)
    return None


def validate_number_of_holes(number_of_holes) -> Rejection | None:
    """ホール数を検証する"""
    if not is_whole_number(number_of_holes) or not MIN_HOLES <= number_of_holes <= MAX_HOLES:
        return reject(RejectionReason.INVALID_HOLE_COUNT)
    return None


def validate_handicap_value(value, number_of_holes: int) -> Rejection | None:
    """ハンデ値を検証する

    整数であり、絶対値がホール数以下であること。
    """
    if not is_whole_number(value):
        return reject(RejectionReason.INVALID_HANDICAP_VALUE)
    if abs(value) > number_of_holes:
        return reject(RejectionReason.HANDICAP_EXCEEDS_HOLES)
    return None


def validate_hole_numbers(holes: Iterable, number_of_holes: int) -> Rejection | None:
    """ホール番号の集合を検証する（全て 1..number_of_holes）"""
    for hole in holes:
        if not is_whole_number(hole) or not 1 <= hole <= number_of_holes:
            return reject(RejectionReason.INVALID_HOLE_NUMBER)
    return None


def validate_handicap_holes(
    holes: Sequence, handicap_value: int, number_of_holes: int
) -> Rejection | None:
    """ハンデホールを検証する

    ホール番号が範囲内であり、数がハンデの絶対値を超えないこと。
    """
    rejection = validate_hole_numbers(holes, number_of_holes)
    if rejection is not None:
        return rejection
    if len(set(holes)) > abs(handicap_value):
        return reject(RejectionReason.TOO_MANY_HANDICAP_HOLES)
    return None


def validate_hole_strokes(strokes: HoleStrokes, number_of_holes: int) -> Rejection | None:
    """1ホール分の打数を検証する

    ホール番号と全プレーヤーの打数を先に検証し、1つでも不正なら
    ホール全体を拒否する（一部だけ反映することはない）。
    """
    rejection = validate_hole_numbers([strokes.hole_number], number_of_holes)
    if rejection is not None:
        return rejection

    for value in strokes.strokes.values():
        if not is_whole_number(value) or not MIN_STROKES <= value <= MAX_STROKES:
            return reject(RejectionReason.INVALID_STROKES)
    return None


def validate_round_fits_holes(
    config: GameConfig, hole_strokes: Iterable[HoleStrokes], number_of_holes: int
) -> Rejection | None:
    """既存の設定と打数記録が新しいホール数に収まるかを検証する

    ハンデ値・ハンデホール・ターボホール・登録済みホールの全てが
    1..number_of_holes の範囲内であること。
    """
    for handicap in config.handicaps.values():
        rejection = validate_handicap_value(handicap.value, number_of_holes)
        if rejection is not None:
            return rejection
        rejection = validate_hole_numbers(handicap.handicap_holes, number_of_holes)
        if rejection is not None:
            return rejection

    rejection = validate_hole_numbers(config.turbo_holes, number_of_holes)
    if rejection is not None:
        return rejection
    return validate_hole_numbers((s.hole_number for s in hole_strokes), number_of_holes)
