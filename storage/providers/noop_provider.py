"""
No-op Storage Provider

스토리지가 구성되지 않았을 때 사용하는 대체 구현.
애플리케이션 기동은 허용하고, 실제 연산 시점에 NotConfiguredError로 실패한다.
"""

from datetime import timedelta
from typing import Dict, Optional

from core.logging_config import setup_logger
from errors import NotConfiguredError
from storage.expiry import ExpiryLike
from storage.providers.base import ObjectStorage, PreSignedUpload

logger = setup_logger(__name__)

NOT_CONFIGURED_MESSAGE = (
    "Storage is not configured. Please configure STORAGE_PROVIDER "
    "and provider-specific properties."
)


class NoOpStorage(ObjectStorage):
    """모든 연산이 NotConfiguredError를 발생시키는 스토리지"""

    def __init__(self, reason: Optional[str] = None):
        super().__init__()
        self.reason = reason

    @property
    def provider(self) -> None:
        return None

    def _fail(self, operation: str, key: Optional[str] = None):
        logger.error(f"Storage operation '{operation}' attempted but no storage provider is configured")
        message = NOT_CONFIGURED_MESSAGE
        if self.reason:
            message = f"{message} ({self.reason})"
        raise NotConfiguredError(message, operation=operation, key=key)

    def generate_upload_url(
        self,
        directory: Optional[str],
        content_type: Optional[str],
        expiry: ExpiryLike = None,
    ) -> PreSignedUpload:
        self._fail("generate_upload_url")

    def get_file_url(
        self,
        directory: Optional[str],
        file_name: Optional[str],
        expiry: ExpiryLike = None,
    ) -> str:
        self._fail("get_file_url")

    def delete(self, directory: Optional[str], file_name: Optional[str]) -> None:
        self._fail("delete")

    def exists(self, directory: Optional[str], file_name: Optional[str]) -> bool:
        self._fail("exists")

    def upload(
        self,
        directory: Optional[str],
        file_name: Optional[str],
        content: bytes,
        content_type: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
    ) -> str:
        self._fail("upload")

    def _location_name(self) -> str:
        return "-"

    def _sign_upload_url(self, key: str, content_type: str, expiry: timedelta) -> str:
        self._fail("sign_upload_url", key)

    def _sign_read_url(self, key: str, expiry: timedelta) -> str:
        self._fail("sign_read_url", key)

    def _delete_object(self, key: str) -> None:
        self._fail("delete", key)

    def _object_exists(self, key: str) -> bool:
        self._fail("exists", key)

    def _put_object(
        self,
        key: str,
        content: bytes,
        content_type: str,
        metadata: Dict[str, str],
    ) -> None:
        self._fail("upload", key)
