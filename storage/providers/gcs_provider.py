"""
GCS Storage Provider

google-cloud-storage 기반 GCS 통합
- 서비스 계정 키 파일로 클라이언트 생성
- V4 서명 URL (PUT/GET)
"""

from datetime import timedelta
from typing import Any, Dict

from google.api_core.exceptions import NotFound
from google.cloud import storage

from core.logging_config import setup_logger
from errors import ConfigurationError
from storage.expiry import ExpiryLike, GCS_FALLBACK_EXPIRY
from storage.providers.base import ObjectStorage, StorageProvider

logger = setup_logger(__name__)


class GCSProvider(ObjectStorage):
    """
    Google Cloud Storage Provider

    존재하지 않는 오브젝트 삭제는 NotFound -> DeleteError.
    """

    fallback_expiry = GCS_FALLBACK_EXPIRY

    def __init__(
        self,
        bucket: str,
        credentials_path: str,
        default_expiry: ExpiryLike = None,
        client: Any = None,
    ):
        """
        GCS Provider 초기화

        Args:
            bucket: 버킷 이름
            credentials_path: 서비스 계정 키 파일 경로
            default_expiry: 읽기 URL 기본 만료 시간 (None이면 1일)
            client: 미리 생성된 google.cloud.storage 클라이언트
        """
        super().__init__(default_expiry)
        if not bucket or not bucket.strip():
            raise ConfigurationError("GCS bucket must not be null or empty")

        self.bucket_name = bucket.strip()
        self.credentials_path = credentials_path

        if client is None:
            if not credentials_path or not credentials_path.strip():
                raise ConfigurationError("GCS credentialsPath must not be null or empty")
            try:
                client = storage.Client.from_service_account_json(credentials_path.strip())
            except Exception as e:
                raise ConfigurationError(
                    f"Failed to load GCS credentials from: {credentials_path}",
                    operation="configure",
                    cause=e,
                ) from e
        self._client = client
        self._bucket = client.bucket(self.bucket_name)

        logger.info(f"GCS storage ready: bucket={self.bucket_name}")

    @property
    def client(self):
        """google.cloud.storage 클라이언트"""
        return self._client

    @property
    def provider(self) -> StorageProvider:
        return StorageProvider.GCS

    def _location_name(self) -> str:
        return self.bucket_name

    def _sign_upload_url(self, key: str, content_type: str, expiry: timedelta) -> str:
        blob = self._bucket.blob(key)
        return blob.generate_signed_url(
            version="v4",
            expiration=expiry,
            method="PUT",
            content_type=content_type,
        )

    def _sign_read_url(self, key: str, expiry: timedelta) -> str:
        blob = self._bucket.blob(key)
        return blob.generate_signed_url(
            version="v4",
            expiration=expiry,
            method="GET",
        )

    def _delete_object(self, key: str) -> None:
        self._bucket.blob(key).delete()

    def _object_exists(self, key: str) -> bool:
        try:
            return bool(self._bucket.blob(key).exists())
        except NotFound:
            return False

    def _put_object(
        self,
        key: str,
        content: bytes,
        content_type: str,
        metadata: Dict[str, str],
    ) -> None:
        blob = self._bucket.blob(key)
        if metadata:
            blob.metadata = metadata
        blob.upload_from_string(content, content_type=content_type)
