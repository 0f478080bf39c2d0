"""ラウンドファイル（JSON）の読み込み

ラウンドファイルの例:

    {
      "players": [{"id": "p1", "name": "Alice"}, {"id": "p2", "name": "Bob"}],
      "number_of_holes": 9,
      "handicaps": [{"player_a_id": "p1", "player_b_id": "p2", "value": 2}],
      "turbo_holes": [9],
      "hole_strokes": [{"hole_number": 1, "strokes": {"p1": 4, "p2": 5}}]
    }

handicaps の各要素は pair_key か player_a_id/player_b_id のどちらかで指定する。
player_a_id/player_b_id で指定した場合、value は「player_a_id が player_b_id に
与えるストローク数」と解釈する。handicap_holes を省略すると均等配分する。
"""

import json
from pathlib import Path

from golfpair.models.game import GameState, HoleStrokes, Player
from golfpair.scoring import make_pair_key, parse_pair_key
from golfpair.services import game_service
from golfpair.services.game_service import ActionResult


class RoundFileError(Exception):
    """ラウンドファイルが読み込めない、または内容が不正"""


def _require(result: ActionResult) -> GameState:
    if not result.accepted:
        raise RoundFileError(result.rejection.message)
    return result.state


def _resolve_handicap(raw: dict) -> tuple[str, int]:
    """ハンデ指定からペアキーと正規順序での符号付き値を求める"""
    value = raw.get("value", 0)
    if "pair_key" in raw:
        return raw["pair_key"], value

    player_a_id = str(raw["player_a_id"])
    pair_key = make_pair_key(player_a_id, str(raw["player_b_id"]))
    canonical_a, _ = parse_pair_key(pair_key)
    if canonical_a != player_a_id:
        value = -value
    return pair_key, value


def load_round_file(path: str | Path) -> dict:
    """ラウンドファイルを読み込む

    Raises:
        RoundFileError: JSONとして読めない場合
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise RoundFileError(f"Cannot read round file {path}: {e}") from e

    if not isinstance(data, dict):
        raise RoundFileError("Round file must contain a JSON object")
    return data


def build_round_state(data: dict, include_strokes: bool = True) -> GameState:
    """ラウンドファイルの内容からゲーム状態を組み立てる

    セットアップからホール登録まで全てゲーム操作サービスを通すので、
    検証も同じ規則で行われる。

    Args:
        data: load_round_file の戻り値
        include_strokes: hole_strokes も登録するか

    Returns:
        GameState

    Raises:
        RoundFileError: 必須項目の欠落や、操作が拒否された場合
    """
    try:
        players = [Player.from_dict(p) for p in data.get("players", [])]
        state = _require(game_service.set_players(game_service.reset_game(), players))
        if "number_of_holes" in data:
            state = _require(game_service.set_number_of_holes(state, data["number_of_holes"]))
        state = _require(game_service.initialize_handicaps(state))

        raw_handicaps = data.get("handicaps", [])
        if isinstance(raw_handicaps, dict):
            raw_handicaps = list(raw_handicaps.values())
        for raw in raw_handicaps:
            pair_key, value = _resolve_handicap(raw)
            state = _require(game_service.set_handicap(state, pair_key, value))
            if "handicap_holes" in raw:
                state = _require(
                    game_service.set_handicap_holes(state, pair_key, raw["handicap_holes"])
                )
            else:
                state = _require(game_service.auto_distribute_handicap_holes(state, pair_key))

        state = _require(game_service.set_turbo_holes(state, data.get("turbo_holes", [])))

        if include_strokes:
            for raw in data.get("hole_strokes", []):
                state = _require(
                    game_service.submit_hole_strokes(state, HoleStrokes.from_dict(raw))
                )
    except (KeyError, TypeError, ValueError) as e:
        raise RoundFileError(f"Malformed round file: {e!r}") from e

    return state


def dump_round(state: GameState) -> dict:
    """ゲーム状態をラウンドファイル形式に変換する"""
    data = state.config.to_dict()
    data["handicaps"] = list(data["handicaps"].values())
    data["hole_strokes"] = [s.to_dict() for s in state.hole_strokes]
    return data
