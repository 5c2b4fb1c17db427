"""投票ブロックのグリッド表示コンポーネント

確定済みの配置を色付きのマスとして描画する。予約セルは透明にする。
"""

import html

import streamlit as st

from src.domain.services.grid_packer import RESERVED, CellMatrix


CANDIDATE_COLORS: list[str] = [
    "#f44336",
    "#2196f3",
    "#4caf50",
    "#ff9800",
    "#9c27b0",
    "#00bcd4",
    "#795548",
    "#607d8b",
    "#e91e63",
    "#8bc34a",
]
EMPTY_COLOR = "#eee"
RESERVED_COLOR = "transparent"

_CELL_STYLE = (
    "display:inline-block;width:20px;height:20px;margin:1px;border-radius:4px;"
)


def get_candidate_color(index: int) -> str:
    """候補インデックスに対応する色を返す（10色で循環）"""
    return CANDIDATE_COLORS[index % len(CANDIDATE_COLORS)]


def _cell_color(cell: int | str | None) -> str:
    if cell is None:
        return EMPTY_COLOR
    if cell == RESERVED:
        return RESERVED_COLOR
    return get_candidate_color(int(cell))


def build_grid_html(matrix: CellMatrix) -> str:
    """セル行列をHTMLに変換する"""
    rows = []
    for row in matrix:
        cells = "".join(
            f'<span style="{_CELL_STYLE}background-color:{_cell_color(cell)};"></span>'
            for cell in row
        )
        rows.append(f'<div style="line-height:0;">{cells}</div>')
    return (
        '<div style="display:inline-block;border:1px solid #ddd;padding:5px;'
        f'border-radius:8px;">{"".join(rows)}</div>'
    )


def color_badge(index: int, label: str) -> str:
    """凡例用の色付きラベルHTML"""
    return (
        f'<span style="{_CELL_STYLE}background-color:{get_candidate_color(index)};'
        'vertical-align:middle;margin-right:8px;"></span>'
        f"{html.escape(label)}"
    )


def vote_grid(matrix: CellMatrix) -> None:
    """グリッドを描画する"""
    if not matrix:
        return
    st.markdown(build_grid_html(matrix), unsafe_allow_html=True)
