"""グリッド設定の表示コマンド."""

import click

from src.interfaces.cli.base import with_error_handling
from src.interfaces.cli.commands.vote.options import grid_options, resolve_grid_config


@click.command()
@grid_options
@with_error_handling
def info(width: int | None, height: int | None):
    """グリッドの大きさ・予約セル・持ち点を表示する."""
    config = resolve_grid_config(width, height)
    reserved = ", ".join(f"({c.x}, {c.y})" for c in sorted(config.reserved))

    click.echo("=== グリッド設定 ===")
    click.echo(f"  サイズ:     {config.width} x {config.height}")
    click.echo(f"  予約セル:   {reserved}")
    click.echo(f"  持ち点:     {config.budget}ポイント")
