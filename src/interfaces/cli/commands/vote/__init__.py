"""クアドラティック投票 CLI コマンドグループ."""

import click

from src.interfaces.cli.commands.vote.info import info
from src.interfaces.cli.commands.vote.pack import pack
from src.interfaces.cli.commands.vote.simulate import simulate


@click.group()
def vote():
    """票数割り当て・ブロック配置関連コマンド."""
    pass


vote.add_command(info)
vote.add_command(pack)
vote.add_command(simulate)
