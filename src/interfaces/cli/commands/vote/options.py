"""vote コマンド共通のオプションとグリッド表示."""

from collections.abc import Callable, Sequence
from typing import Any

import click

from src.domain.services.grid_packer import RESERVED, CellMatrix
from src.domain.value_objects.grid_config import GridConfig
from src.infrastructure.config import get_settings


_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
EMPTY_SYMBOL = "."
RESERVED_SYMBOL = " "


def grid_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """--width / --height オプションを付与する."""
    func = click.option("--height", type=click.IntRange(min=1), help="グリッドの行数")(
        func
    )
    func = click.option("--width", type=click.IntRange(min=1), help="グリッドの列数")(
        func
    )
    return func


def resolve_grid_config(width: int | None, height: int | None) -> GridConfig:
    """コマンドライン指定を優先して GridConfig を決める."""
    return get_settings().to_grid_config(width, height)


def candidate_symbol(index: int) -> str:
    return _SYMBOLS[index % len(_SYMBOLS)]


def render_grid(matrix: CellMatrix) -> list[str]:
    """セル行列を1行1文字列のテキストに変換する."""
    lines = []
    for row in matrix:
        cells = []
        for cell in row:
            if cell is None:
                cells.append(EMPTY_SYMBOL)
            elif cell == RESERVED:
                cells.append(RESERVED_SYMBOL)
            else:
                cells.append(candidate_symbol(int(cell)))
        lines.append(" ".join(cells))
    return lines


def echo_grid(matrix: CellMatrix) -> None:
    for line in render_grid(matrix):
        click.echo(f"  {line}")


def echo_legend(names: Sequence[str], weights: Sequence[int]) -> None:
    for i, (name, weight) in enumerate(zip(names, weights, strict=True)):
        click.echo(
            f"  {candidate_symbol(i)}: {name}  {weight}票 ({weight * weight}ポイント)"
        )
