"""event_formatting library."""

from .bank import (
    BankAccount,
    BankAccountEvent,
    BankAccountFormatting,
    BankEventReadFormatting,
    BankEventWriteFormatting,
)
from .config import FormattingConfig, JsonSettings, LogSettings
from .exceptions import (
    ConfigError,
    DecodingFailure,
    EncodingFailure,
    FormattingError,
    FormattingErrorCodes,
)
from .formatting import (
    AggregateReadFormatting,
    AggregateWriteFormatting,
    EventReadFormatting,
    EventWriteFormatting,
)
from .json_formatting import JsonAggregateFormatting, JsonEventFormatting
from .loader import load
from .logger import build_processors, configure_logging, new_logger
from .mapper import JsonObjectMapper
from .merger import deep_merge
from .models import SerializedAggregate, SerializedMessage

__all__ = [
    "EventWriteFormatting",
    "EventReadFormatting",
    "AggregateWriteFormatting",
    "AggregateReadFormatting",
    "JsonEventFormatting",
    "JsonAggregateFormatting",
    "JsonObjectMapper",
    "SerializedMessage",
    "SerializedAggregate",
    "BankAccountEvent",
    "BankAccount",
    "BankEventWriteFormatting",
    "BankEventReadFormatting",
    "BankAccountFormatting",
    "FormattingConfig",
    "JsonSettings",
    "LogSettings",
    "load",
    "deep_merge",
    "new_logger",
    "build_processors",
    "configure_logging",
    "FormattingError",
    "FormattingErrorCodes",
    "EncodingFailure",
    "DecodingFailure",
    "ConfigError",
]
