"""シリアライズ済みメッセージのデータモデル"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _freeze_headers(headers: Mapping[str, str]) -> Mapping[str, str]:
    for k, v in headers.items():
        if not isinstance(k, str) or not isinstance(v, str):
            raise ValueError(f"header keys and values must be str: {k!r}={v!r}")
    return MappingProxyType(dict(headers))


@dataclass(frozen=True)
class SerializedMessage:
    """イベントログへ発行するメッセージ（キー + ペイロード + ヘッダー）。"""

    key: str
    payload: bytes
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.key, str):
            raise ValueError("key must be str")
        if not isinstance(self.payload, bytes):
            raise ValueError("payload must be bytes")
        object.__setattr__(self, "headers", _freeze_headers(self.headers))


@dataclass(frozen=True)
class SerializedAggregate:
    """集約状態のスナップショット（ペイロード + ヘッダー）。"""

    payload: bytes
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.payload, bytes):
            raise ValueError("payload must be bytes")
        object.__setattr__(self, "headers", _freeze_headers(self.headers))
