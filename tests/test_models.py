"""SerializedMessage / SerializedAggregate のユニットテスト"""

import dataclasses

import pytest
from event_formatting.models import SerializedAggregate, SerializedMessage


def test_serialized_message_defaults_to_empty_headers() -> None:
    """ヘッダー省略時は空であること。"""
    msg = SerializedMessage(key="12345", payload=b"{}")
    assert msg.key == "12345"
    assert msg.payload == b"{}"
    assert msg.headers == {}


def test_serialized_message_is_immutable() -> None:
    """SerializedMessage の属性を変更できないこと。"""
    msg = SerializedMessage(key="k", payload=b"data")
    with pytest.raises(dataclasses.FrozenInstanceError):
        msg.key = "other"  # type: ignore[misc]


def test_serialized_message_headers_are_read_only() -> None:
    """ヘッダーが元の辞書から切り離され、変更できないこと。"""
    headers = {"trace-id": "abc123"}
    msg = SerializedMessage(key="k", payload=b"data", headers=headers)
    headers["trace-id"] = "changed"
    assert msg.headers["trace-id"] == "abc123"
    with pytest.raises(TypeError):
        msg.headers["new"] = "value"  # type: ignore[index]


def test_serialized_message_rejects_non_str_key() -> None:
    """文字列以外のキーで ValueError が発生すること。"""
    with pytest.raises(ValueError, match="key must be str"):
        SerializedMessage(key=12345, payload=b"data")  # type: ignore[arg-type]


def test_serialized_message_rejects_non_bytes_payload() -> None:
    """bytes 以外のペイロードで ValueError が発生すること。"""
    with pytest.raises(ValueError, match="payload must be bytes"):
        SerializedMessage(key="k", payload="data")  # type: ignore[arg-type]


def test_serialized_message_rejects_non_str_header_value() -> None:
    """文字列以外のヘッダー値で ValueError が発生すること。"""
    with pytest.raises(ValueError, match="header"):
        SerializedMessage(key="k", payload=b"data", headers={"retry": 1})  # type: ignore[dict-item]


def test_serialized_message_equality() -> None:
    """同じ内容のメッセージが等しいこと。"""
    a = SerializedMessage(key="k", payload=b"data", headers={"h": "v"})
    b = SerializedMessage(key="k", payload=b"data", headers={"h": "v"})
    assert a == b


def test_serialized_aggregate_defaults() -> None:
    """SerializedAggregate がデフォルトで空ヘッダーを持つこと。"""
    agg = SerializedAggregate(payload=b"{}")
    assert agg.payload == b"{}"
    assert agg.headers == {}


def test_serialized_message_is_hashable() -> None:
    """SerializedMessage がハッシュ可能で、等しいメッセージは同じハッシュを持つこと。"""
    a = SerializedMessage(key="k", payload=b"data", headers={"h": "v"})
    b = SerializedMessage(key="k", payload=b"data", headers={"h": "v"})
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_serialized_aggregate_is_hashable() -> None:
    """SerializedAggregate がハッシュ可能であること。"""
    snapshot = SerializedAggregate(payload=b"{}", headers={"schema": "1"})
    assert hash(snapshot) == hash(SerializedAggregate(payload=b"{}"))
