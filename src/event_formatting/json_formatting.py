"""JSON フォーマッター実装"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

import structlog

from .config import FormattingConfig, JsonSettings
from .exceptions import EncodingFailure, FormattingError
from .formatting import (
    AggregateReadFormatting,
    AggregateWriteFormatting,
    EventReadFormatting,
    EventWriteFormatting,
)
from .mapper import JsonObjectMapper
from .models import SerializedAggregate, SerializedMessage

E = TypeVar("E")
S = TypeVar("S")

logger = structlog.stdlib.get_logger(__name__)


def _key_extractor(key: str | Callable[[Any], object]) -> Callable[[Any], object]:
    if callable(key):
        return key
    if not key:
        raise ValueError("key field name cannot be empty")

    def extract(event: Any) -> object:
        # dict / TypedDict のイベントは要素として参照する
        if isinstance(event, Mapping):
            return event[key]
        return getattr(event, key)

    return extract


class JsonEventFormatting(EventWriteFormatting[E], EventReadFormatting[E], Generic[E]):
    """イベントを JSON でエンコード・デコードするフォーマッター。

    key にはルーティングキーとなるフィールド名、またはイベントからキーを
    取り出す関数を指定する。キーは str() で文字列化される。
    """

    def __init__(
        self,
        event_type: type[E],
        key: str | Callable[[E], object],
        settings: JsonSettings | None = None,
    ) -> None:
        self._mapper: JsonObjectMapper[E] = JsonObjectMapper(event_type, settings)
        self._extract_key = _key_extractor(key)

    @classmethod
    def from_config(
        cls,
        event_type: type[E],
        key: str | Callable[[E], object],
        config: FormattingConfig,
    ) -> JsonEventFormatting[E]:
        """FormattingConfig の encoding 設定でフォーマッターを生成する。"""
        return cls(event_type, key, config.encoding)

    def write_event(self, event: E) -> SerializedMessage:
        """イベントを SerializedMessage に変換する。ヘッダーは空。"""
        try:
            key = str(self._extract_key(event))
            payload = self._mapper.write_value_as_bytes(event)
            message = SerializedMessage(key=key, payload=payload, headers={})
        except FormattingError:
            raise
        except Exception as e:
            raise EncodingFailure(
                message=f"Failed to write event {type(event).__name__}: {e}",
                cause=e,
            ) from e
        logger.debug("event formatted", key=key, payload_size=len(payload))
        return message

    def read_event(self, payload: bytes) -> E:
        event = self._mapper.read_value(payload)
        logger.debug("event parsed", event_type=type(event).__name__)
        return event


class JsonAggregateFormatting(AggregateWriteFormatting[S], AggregateReadFormatting[S], Generic[S]):
    """集約状態を JSON でエンコード・デコードするフォーマッター。"""

    def __init__(self, state_type: type[S], settings: JsonSettings | None = None) -> None:
        self._mapper: JsonObjectMapper[S] = JsonObjectMapper(state_type, settings)

    @classmethod
    def from_config(cls, state_type: type[S], config: FormattingConfig) -> JsonAggregateFormatting[S]:
        return cls(state_type, config.encoding)

    def write_state(self, state: S) -> SerializedAggregate:
        payload = self._mapper.write_value_as_bytes(state)
        logger.debug("aggregate formatted", payload_size=len(payload))
        return SerializedAggregate(payload=payload, headers={})

    def read_state(self, payload: bytes) -> S | None:
        """ペイロードを集約状態に変換する。空のペイロードは None を返す。"""
        if not payload:
            return None
        return self._mapper.read_value(payload)
