"""フォーマッター抽象基底クラス"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .models import SerializedAggregate, SerializedMessage

E = TypeVar("E")
S = TypeVar("S")


class EventWriteFormatting(ABC, Generic[E]):
    """イベントを発行用メッセージに変換するフォーマッター。"""

    @abstractmethod
    def write_event(self, event: E) -> SerializedMessage:
        """イベントを SerializedMessage に変換する。

        Raises:
            EncodingFailure: エンコードに失敗した場合
        """
        ...


class EventReadFormatting(ABC, Generic[E]):
    """ペイロードからイベントを復元するフォーマッター。"""

    @abstractmethod
    def read_event(self, payload: bytes) -> E:
        """ペイロードをイベントに変換する。

        Raises:
            DecodingFailure: デコードに失敗した場合
        """
        ...


class AggregateWriteFormatting(ABC, Generic[S]):
    """集約状態をスナップショットに変換するフォーマッター。"""

    @abstractmethod
    def write_state(self, state: S) -> SerializedAggregate:
        """集約状態を SerializedAggregate に変換する。"""
        ...


class AggregateReadFormatting(ABC, Generic[S]):
    """スナップショットから集約状態を復元するフォーマッター。"""

    @abstractmethod
    def read_state(self, payload: bytes) -> S | None:
        """ペイロードを集約状態に変換する。空のペイロードは None を返す。"""
        ...
