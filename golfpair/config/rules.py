"""ゲームルール設定

プレーヤー数・ホール数・打数の許容範囲とターボ倍率を定義する。
境界層（services.validation）がこの値を使って入力を検証する。
スコア計算コア自体は範囲に依存しない。
"""

# プレーヤー数（2-6人）
MIN_PLAYERS = 2
MAX_PLAYERS = 6

# ホール数（1-36ホール）
MIN_HOLES = 1
MAX_HOLES = 36

# 1ホールの打数（0-20打）
MIN_STROKES = 0
MAX_STROKES = 20

# ターボホールの得点倍率
TURBO_MULTIPLIER = 2
