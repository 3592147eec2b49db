"""pydantic TypeAdapter ベースの JSON オブジェクトマッパー"""

from __future__ import annotations

import math
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from .config import JsonSettings
from .exceptions import DecodingFailure, EncodingFailure

T = TypeVar("T")


def _find_non_finite(data: Any, path: str = "$") -> str | None:
    """非有限の float を含む最初のパスを返す。"""
    if isinstance(data, float):
        return None if math.isfinite(data) else path
    if isinstance(data, dict):
        items = ((f"{path}.{k}", v) for k, v in data.items())
    elif isinstance(data, (list, tuple, set, frozenset)):
        items = ((f"{path}[{i}]", v) for i, v in enumerate(data))
    else:
        return None
    for item_path, value in items:
        found = _find_non_finite(value, item_path)
        if found is not None:
            return found
    return None


class JsonObjectMapper(Generic[T]):
    """型 T の値を JSON バイト列と相互変換するマッパー。

    フィールドは宣言順に出力されるため、等しい値は常に同一のバイト列になる。
    TypeAdapter は生成後に変更しないので、複数スレッドから共有できる。
    """

    def __init__(self, value_type: type[T], settings: JsonSettings | None = None) -> None:
        self._value_type = value_type
        self._settings = settings or JsonSettings()
        self._adapter: TypeAdapter[T] = TypeAdapter(value_type)

    @property
    def value_type(self) -> type[T]:
        return self._value_type

    @property
    def settings(self) -> JsonSettings:
        return self._settings

    def write_value_as_bytes(self, value: T) -> bytes:
        """値を JSON バイト列にエンコードする。

        Raises:
            EncodingFailure: 表現できない値を含む場合、または inf_nan_mode="error"
                で NaN / ±Infinity を含む場合
        """
        try:
            data = self._adapter.dump_python(
                value,
                mode="python",
                by_alias=self._settings.by_alias,
                exclude_none=self._settings.exclude_none,
                warnings="error",
            )
            if self._settings.inf_nan_mode == "error":
                path = _find_non_finite(data)
                if path is not None:
                    raise ValueError(f"non-finite float at {path}")
            return to_json(data, inf_nan_mode="strings")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodingFailure(
                message=f"Failed to encode {self._type_name()}: {e}",
                cause=e,
            ) from e

    def read_value(self, data: bytes) -> T:
        """JSON バイト列を型 T の値にデコードする。"""
        try:
            return self._adapter.validate_json(data)
        except ValidationError as e:
            raise DecodingFailure(
                message=f"Failed to decode {self._type_name()}: {e}",
                cause=e,
            ) from e

    def _type_name(self) -> str:
        return getattr(self._value_type, "__name__", repr(self._value_type))
