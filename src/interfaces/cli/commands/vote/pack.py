"""票数ベクトルの配置コマンド."""

import click

from src.domain.services.grid_packer import GridPacker
from src.interfaces.cli.base import with_error_handling
from src.interfaces.cli.commands.vote.options import (
    candidate_symbol,
    echo_grid,
    grid_options,
    resolve_grid_config,
)


@click.command()
@click.argument("weights", nargs=-1, type=click.IntRange(min=0), required=True)
@grid_options
@with_error_handling
def pack(weights: tuple[int, ...], width: int | None, height: int | None):
    """票数ベクトルをブロックとしてグリッドに配置する.

    WEIGHTS は候補インデックス順の票数（例: 1 9 4）。
    """
    config = resolve_grid_config(width, height)
    packer = GridPacker(config)

    total = sum(w * w for w in weights)
    click.echo(f"消費ポイント: {total} / {config.budget}")
    if total > config.budget:
        click.echo(click.style("ポイントが持ち点を超えています", fg="yellow"))

    result = packer.pack(list(weights))
    if not result.success:
        click.echo(click.style("配置できないブロックがあります", fg="red"))
        raise SystemExit(1)

    click.echo(click.style("配置成功", fg="green"))
    for p in result.placements:
        click.echo(
            f"  {candidate_symbol(p.candidate_index)}: "
            f"x={p.x} y={p.y} size={p.size}"
        )
    echo_grid(packer.build_cell_matrix(result.placements))
