"""structlogベースのロギング設定.

各モジュールは ``logger = get_logger(__name__)`` でロガーを取得する。
"""

import logging
import sys

from typing import Any

import structlog


_configured = False


def setup_logging(log_level: str = "INFO", json_format: bool = False) -> None:
    """structlogと標準loggingを初期化する.

    Args:
        log_level: ログレベル名（DEBUG, INFO, WARNING, ERROR）
        json_format: TrueならJSON形式、Falseなら開発向けのコンソール形式で出力
    """
    global _configured

    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger().setLevel(level)

    renderer: Any
    if json_format:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def is_configured() -> bool:
    """setup_logging が呼ばれたかどうかを返す."""
    return _configured


def get_logger(name: str | None = None) -> Any:
    """名前付きのstructlogロガーを返す."""
    return structlog.get_logger(name)
