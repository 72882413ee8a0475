"""
Errors Module

스토리지 오류 분류 및 예외 계층
"""

from errors.errors import (
    ErrorType,
    StorageError,
    ConfigurationError,
    InvalidArgumentError,
    SigningError,
    PreSignedUrlGenerationError,
    DeleteError,
    UploadError,
    StorageOperationError,
    NotConfiguredError,
    classify_error,
    EXCEPTION_MAPPING,
)

__all__ = [
    "ErrorType",
    "StorageError",
    "ConfigurationError",
    "InvalidArgumentError",
    "SigningError",
    "PreSignedUrlGenerationError",
    "DeleteError",
    "UploadError",
    "StorageOperationError",
    "NotConfiguredError",
    "classify_error",
    "EXCEPTION_MAPPING",
]
