"""YAML 設定ファイルから FormattingConfig を組み立てる"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .config import FormattingConfig
from .exceptions import ConfigError, FormattingErrorCodes
from .merger import deep_merge


def _parse(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(
            code=FormattingErrorCodes.READ_FILE,
            message=f"Cannot open {path}: {e}",
            cause=e,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigError(
            code=FormattingErrorCodes.PARSE_YAML,
            message=f"Invalid YAML in {path}: {e}",
            cause=e,
        ) from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigError(
            code=FormattingErrorCodes.PARSE_YAML,
            message=f"Top level of {path} must be a mapping, got {type(document).__name__}",
        )
    return document


def load(base_path: str | Path, env_path: str | Path | None = None) -> FormattingConfig:
    """ベース設定と（存在すれば）環境別設定を重ねて FormattingConfig を返す。

    得られた設定は JsonEventFormatting.from_config などに渡してフォーマッターを
    生成する。
    """
    layers = [_parse(Path(base_path))]
    if env_path is not None and Path(env_path).exists():
        layers.append(_parse(Path(env_path)))

    merged: dict[str, Any] = {}
    for layer in layers:
        merged = deep_merge(merged, layer)
    try:
        return FormattingConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(
            code=FormattingErrorCodes.VALIDATION,
            message=f"Invalid formatting config: {e}",
            cause=e,
        ) from e
