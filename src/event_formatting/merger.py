"""環境別設定のマージ"""

from __future__ import annotations

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """override を base に重ねた新しい辞書を返す。入力は変更しない。

    両方が辞書の値だけ再帰的にマージし、それ以外（リスト含む）は override で置き換える。
    """
    merged = {**base, **override}
    for key in base.keys() & override.keys():
        if isinstance(base[key], dict) and isinstance(override[key], dict):
            merged[key] = deep_merge(base[key], override[key])
    return merged
