"""qvgrid CLI エントリーポイント."""

import click

from src.common.logging import setup_logging
from src.infrastructure.config import get_settings
from src.interfaces.cli.commands.vote import vote


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="DEBUGログを出力する")
def cli(verbose: bool):
    """クアドラティック投票のブロック配置ツール."""
    settings = get_settings()
    setup_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        json_format=settings.log_format == "json",
    )


cli.add_command(vote)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
