"""
Storage Error Taxonomy

스토리지 오류 분류 및 예외 계층
"""

from enum import Enum
from typing import Any, Dict, Optional, Type


class ErrorType(str, Enum):
    """오류 유형 분류"""
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    NETWORK_TRANSIENT = "network_transient"
    QUOTA_LIMIT = "quota_limit"
    CONFIGURATION = "configuration"
    INVALID_ARGUMENT = "invalid_argument"
    UNKNOWN = "unknown"


class StorageError(Exception):
    """
    스토리지 예외 기본 클래스

    Args:
        message: 오류 메시지
        operation: 실패한 연산 이름 (generate_upload_url, delete, ...)
        key: 대상 오브젝트 키
        cause: 원인 예외 (__cause__로 연결됨)
        error_type: 오류 유형 (None이면 cause에서 분류)
    """

    default_error_type = ErrorType.UNKNOWN

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        key: Optional[str] = None,
        cause: Optional[BaseException] = None,
        error_type: Optional[ErrorType] = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.key = key
        if cause is not None:
            self.__cause__ = cause
        if error_type is None:
            error_type = classify_error(cause) if cause is not None else self.default_error_type
        self.error_type = error_type

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "error_type": self.error_type.value,
            "message": self.message,
            "operation": self.operation,
            "key": self.key,
            "cause": repr(self.__cause__) if self.__cause__ is not None else None,
        }


class ConfigurationError(StorageError):
    """필수 설정 누락, 자격 증명 파일 오류, 알 수 없는 provider 값"""
    default_error_type = ErrorType.CONFIGURATION


class InvalidArgumentError(StorageError, ValueError):
    """빈 파일 이름 등 잘못된 인자 (네트워크 호출 전에 발생)"""
    default_error_type = ErrorType.INVALID_ARGUMENT


class SigningError(StorageError):
    """
    서명 URL 생성 실패

    stage는 "upload"(업로드 URL 서명 실패) 또는
    "read"(업로드 URL은 성공, 읽기 URL 서명 실패)이다.
    """

    def __init__(self, message: str, stage: str = "upload", **kwargs):
        super().__init__(message, **kwargs)
        self.stage = stage

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["stage"] = self.stage
        return data


PreSignedUrlGenerationError = SigningError


class DeleteError(StorageError):
    """오브젝트 삭제 실패"""


class UploadError(StorageError):
    """서버 측 직접 업로드 실패"""


class StorageOperationError(StorageError):
    """존재 확인 등 기타 provider 호출 실패"""


class NotConfiguredError(StorageError):
    """스토리지 제공자가 구성되지 않은 상태에서 연산 호출"""
    default_error_type = ErrorType.CONFIGURATION


# 예외 유형별 분류 매핑
EXCEPTION_MAPPING: Dict[Type[BaseException], ErrorType] = {
    PermissionError: ErrorType.AUTHORIZATION,
    FileNotFoundError: ErrorType.NOT_FOUND,
    TimeoutError: ErrorType.NETWORK_TRANSIENT,
    ConnectionError: ErrorType.NETWORK_TRANSIENT,
    ValueError: ErrorType.INVALID_ARGUMENT,
}


def _classify_status_code(status_code: int) -> ErrorType:
    """HTTP 상태 코드 기반 분류"""
    if status_code in (401, 403):
        return ErrorType.AUTHORIZATION
    elif status_code == 404:
        return ErrorType.NOT_FOUND
    elif status_code == 429:
        return ErrorType.QUOTA_LIMIT
    elif 500 <= status_code < 600:
        return ErrorType.NETWORK_TRANSIENT
    return ErrorType.UNKNOWN


def classify_error(exception: Optional[BaseException]) -> ErrorType:
    """
    provider SDK 예외를 ErrorType으로 분류

    SDK마다 예외 계층이 달라 상태 코드 속성과 메시지를 함께 본다.
    (botocore: response["Error"]["Code"], azure: status_code, google: code)
    """
    if exception is None:
        return ErrorType.UNKNOWN
    if isinstance(exception, StorageError):
        return exception.error_type

    status_code = getattr(exception, "status_code", None)
    if status_code is None:
        status_code = getattr(exception, "code", None)
    if status_code is None:
        response = getattr(exception, "response", None)
        if isinstance(response, dict):
            code = response.get("Error", {}).get("Code")
            status_code = response.get("ResponseMetadata", {}).get("HTTPStatusCode")
            if code in ("NoSuchKey", "NoSuchBucket", "404"):
                return ErrorType.NOT_FOUND
            if code in ("AccessDenied", "InvalidAccessKeyId", "SignatureDoesNotMatch"):
                return ErrorType.AUTHORIZATION
    if isinstance(status_code, int):
        error_type = _classify_status_code(status_code)
        if error_type is not ErrorType.UNKNOWN:
            return error_type

    for exc_type, error_type in EXCEPTION_MAPPING.items():
        if isinstance(exception, exc_type):
            return error_type

    message = str(exception).lower()
    if "credentials" in message or "access denied" in message:
        return ErrorType.AUTHORIZATION
    elif "not found" in message or "does not exist" in message or "nosuchkey" in message:
        return ErrorType.NOT_FOUND
    elif "timeout" in message or "connection" in message:
        return ErrorType.NETWORK_TRANSIENT
    elif "quota" in message or "rate limit" in message:
        return ErrorType.QUOTA_LIMIT
    return ErrorType.UNKNOWN
