"""設定型定義（pydantic BaseModel）"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class JsonSettings(BaseModel):
    """JSON エンコード設定。

    inf_nan_mode: NaN / ±Infinity の扱い。"strings" は "NaN" / "Infinity" /
    "-Infinity" の文字列で出力し、読み込み時に float へ戻す。"error" は
    EncodingFailure にする。
    """

    by_alias: bool = True
    exclude_none: bool = False
    inf_nan_mode: Literal["strings", "error"] = "strings"


class LogSettings(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class FormattingConfig(BaseModel):
    """event_formatting 設定全体。"""

    encoding: JsonSettings = Field(default_factory=JsonSettings)
    log: LogSettings = Field(default_factory=LogSettings)
