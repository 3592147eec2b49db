"""銀行口座ドメインのフォーマッター実装例

アプリケーションが自分のイベント型に対してフォーマッターを実装する例。
"""

from __future__ import annotations

import uuid

import structlog
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .config import FormattingConfig, JsonSettings
from .exceptions import EncodingFailure, FormattingError
from .formatting import EventReadFormatting, EventWriteFormatting
from .json_formatting import JsonAggregateFormatting
from .mapper import JsonObjectMapper
from .models import SerializedMessage

logger = structlog.stdlib.get_logger(__name__)


class BankAccountEvent(BaseModel):
    """銀行口座イベント。"""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    account_number: uuid.UUID
    balance: float


class BankAccount(BaseModel):
    """銀行口座集約。"""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    account_number: uuid.UUID
    account_owner: str
    security_code: str
    balance: float = 0.0


class BankEventWriteFormatting(EventWriteFormatting[BankAccountEvent]):
    """BankAccountEvent を口座番号キーのメッセージに変換する。"""

    def __init__(self, settings: JsonSettings | None = None) -> None:
        self._mapper: JsonObjectMapper[BankAccountEvent] = JsonObjectMapper(
            BankAccountEvent, settings
        )

    @classmethod
    def from_config(cls, config: FormattingConfig) -> BankEventWriteFormatting:
        return cls(config.encoding)

    def write_event(self, event: BankAccountEvent) -> SerializedMessage:
        try:
            key = str(event.account_number)
            payload = self._mapper.write_value_as_bytes(event)
            headers: dict[str, str] = {}
            message = SerializedMessage(key=key, payload=payload, headers=headers)
        except FormattingError:
            raise
        except Exception as e:
            raise EncodingFailure(
                message=f"Failed to write bank account event: {e}",
                cause=e,
            ) from e
        logger.debug("bank account event formatted", key=key)
        return message


class BankEventReadFormatting(EventReadFormatting[BankAccountEvent]):
    """メッセージのペイロードから BankAccountEvent を復元する。"""

    def __init__(self, settings: JsonSettings | None = None) -> None:
        self._mapper: JsonObjectMapper[BankAccountEvent] = JsonObjectMapper(
            BankAccountEvent, settings
        )

    @classmethod
    def from_config(cls, config: FormattingConfig) -> BankEventReadFormatting:
        return cls(config.encoding)

    def read_event(self, payload: bytes) -> BankAccountEvent:
        return self._mapper.read_value(payload)


class BankAccountFormatting(JsonAggregateFormatting[BankAccount]):
    """BankAccount 集約のスナップショットフォーマッター。"""

    def __init__(self, settings: JsonSettings | None = None) -> None:
        super().__init__(BankAccount, settings)

    @classmethod
    def from_config(cls, config: FormattingConfig) -> BankAccountFormatting:  # type: ignore[override]
        return cls(config.encoding)
