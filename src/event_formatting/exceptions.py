"""event_formatting ライブラリの例外型定義"""

from __future__ import annotations


class FormattingError(Exception):
    """event_formatting ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class FormattingErrorCodes:
    """FormattingError のエラーコード定数。"""

    ENCODING_FAILURE: str = "ENCODING_FAILURE"
    DECODING_FAILURE: str = "DECODING_FAILURE"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class EncodingFailure(FormattingError):
    """イベント・集約のエンコードに失敗した場合のエラー。リトライはしない。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(
            code=FormattingErrorCodes.ENCODING_FAILURE,
            message=message,
            cause=cause,
        )


class DecodingFailure(FormattingError):
    """ペイロードのデコードに失敗した場合のエラー。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(
            code=FormattingErrorCodes.DECODING_FAILURE,
            message=message,
            cause=cause,
        )


class ConfigError(FormattingError):
    """設定ファイルの読み込み・検証エラー。"""
