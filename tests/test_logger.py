"""ロガー設定のユニットテスト"""

import json
import logging

import pytest
import structlog
from event_formatting.config import LogSettings
from event_formatting.logger import build_processors, configure_logging, new_logger


def _render(format: str, **event: object) -> str:
    event_dict: dict = {"event": "event formatted", **event}
    for processor in build_processors(format):
        event_dict = processor(None, "debug", event_dict)
    assert isinstance(event_dict, str)
    return event_dict


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    structlog.reset_defaults()


def test_json_processors_render_json_with_level_and_timestamp() -> None:
    """JSON 形式でレベル・タイムスタンプ・任意キーが出力されること。"""
    record = json.loads(_render("json", key="12345", payload_size=42))
    assert record["event"] == "event formatted"
    assert record["level"] == "debug"
    assert record["key"] == "12345"
    assert record["payload_size"] == 42
    assert "timestamp" in record


def test_text_processors_render_console_line() -> None:
    """テキスト形式でイベント名とキーが 1 行に出力されること。"""
    line = _render("text", key="12345")
    assert "event formatted" in line
    assert "key=12345" in line
    with pytest.raises(json.JSONDecodeError):
        json.loads(line)


def test_new_logger_sets_root_level() -> None:
    """指定したレベルがルートロガーに設定されること。"""
    new_logger(level="warning", format="json")
    assert logging.getLogger().level == logging.WARNING


def test_new_logger_unknown_level_falls_back_to_info() -> None:
    """未知のレベル名は INFO になること。"""
    new_logger(level="verbose")
    assert logging.getLogger().level == logging.INFO


def test_configure_logging_writes_json_record(caplog: pytest.LogCaptureFixture) -> None:
    """LogSettings で設定したロガーが JSON レコードを出力すること。"""
    logger = configure_logging(LogSettings(level="DEBUG", format="json"))
    with caplog.at_level(logging.DEBUG):
        logger.info("bank account event formatted", key="acc-1")
    record = json.loads(caplog.records[-1].getMessage())
    assert record["event"] == "bank account event formatted"
    assert record["key"] == "acc-1"
    assert record["level"] == "info"
