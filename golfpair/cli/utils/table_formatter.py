"""テーブルフォーマッタユーティリティ

順位表や対戦成績を整形されたテーブル形式で出力するための関数群。
全角文字の表示幅を考慮した動的幅計算に対応。
"""

import unicodedata
from collections.abc import Sequence


def get_display_width(text: str) -> int:
    """文字列の表示幅を計算（全角文字は2、半角は1）

    Args:
        text: 計算対象の文字列

    Returns:
        int: 表示幅
    """
    width = 0
    for char in text:
        if unicodedata.east_asian_width(char) in ("F", "W", "A"):  # Full, Wide, Ambiguous
            width += 2
        else:
            width += 1
    return width


def pad_to_width(text: str, target_width: int, align_right: bool = False) -> str:
    """文字列を指定の表示幅にパディング

    Args:
        text: パディング対象の文字列
        target_width: 目標の表示幅
        align_right: True なら右揃え、False なら左揃え

    Returns:
        str: パディングされた文字列
    """
    padding_needed = target_width - get_display_width(text)
    if padding_needed <= 0:
        return text
    padding = " " * padding_needed
    if align_right:
        return padding + text
    return text + padding


def format_signed(value: int) -> str:
    """スコアを符号付きで表示（0は符号なし）"""
    return f"{value:+d}" if value else "0"


def format_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    right_aligned: Sequence[int] = (),
) -> str:
    """テーブルを動的幅で生成

    Args:
        headers: 見出し
        rows: 各行のセル（文字列）
        right_aligned: 右揃えにする列のインデックス

    Returns:
        str: フォーマット済みテーブル文字列
    """
    widths = [get_display_width(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], get_display_width(cell))

    def render(cells: Sequence[str]) -> str:
        return " | ".join(
            pad_to_width(cell, widths[i], align_right=i in right_aligned)
            for i, cell in enumerate(cells)
        ).rstrip()

    separator = "-+-".join("-" * w for w in widths)
    lines = [render(headers), separator]
    lines.extend(render(row) for row in rows)
    return "\n".join(lines)
