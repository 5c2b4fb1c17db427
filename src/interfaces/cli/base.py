"""CLI共通のユーティリティ."""

import functools
import sys

from collections.abc import Callable
from typing import Any

import click

from src.common.logging import get_logger
from src.domain.exceptions import DomainException


logger = get_logger(__name__)


def with_error_handling(func: Callable[..., Any]) -> Callable[..., Any]:
    """ドメイン例外をエラーメッセージと終了コード1に変換するデコレーター."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except DomainException as e:
            logger.error(f"Command failed: {e}")
            click.echo(click.style(f"エラー: {e.message}", fg="red"), err=True)
            sys.exit(1)

    return wrapper
