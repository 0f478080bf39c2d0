"""Constants for golfpair scoring system."""

# ペアキーの区切り文字（"playerA_id::playerB_id" 形式）
PAIR_KEY_SEPARATOR = "::"

# 新規ゲームのデフォルトホール数
DEFAULT_NUMBER_OF_HOLES = 18

# ゲーム開始時のカレントホール
FIRST_HOLE = 1
