"""structlog ベースのロガー設定"""

from __future__ import annotations

import logging
import sys

import structlog

from .config import LogSettings


def build_processors(format: str = "json") -> list[structlog.types.Processor]:
    """出力形式に応じた structlog プロセッサーチェーンを返す。

    "json" 以外はコンソール向けのテキスト出力（色なし）になる。
    """
    chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if format != "json":
        return [*chain, structlog.dev.ConsoleRenderer(colors=False)]
    return [*chain, structlog.processors.StackInfoRenderer(), structlog.processors.JSONRenderer()]


def new_logger(level: str = "INFO", format: str = "json") -> structlog.stdlib.BoundLogger:
    """標準 logging に出力する structlog ロガーを設定して返す。

    Args:
        level: ログレベル名。未知の名前は INFO として扱う
        format: 出力形式 ("json" or "text")
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=build_processors(format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return structlog.stdlib.get_logger()


def configure_logging(settings: LogSettings) -> structlog.stdlib.BoundLogger:
    """LogSettings からロガーを設定する。"""
    return new_logger(level=settings.level, format=settings.format)
