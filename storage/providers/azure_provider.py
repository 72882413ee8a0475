"""
Azure Blob Storage Provider

azure-storage-blob 기반 Azure 통합
- 비공개 컨테이너 전제, 항상 SAS 서명 URL 반환
- 업로드: create+write SAS, 읽기: read SAS
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from azure.core.exceptions import ResourceNotFoundError
from azure.storage.blob import (
    BlobServiceClient,
    BlobSasPermissions,
    ContentSettings,
    generate_blob_sas,
)

from core.logging_config import setup_logger
from errors import ConfigurationError
from storage.expiry import ExpiryLike, AZURE_FALLBACK_EXPIRY
from storage.providers.base import ObjectStorage, StorageProvider

logger = setup_logger(__name__)


class AzureBlobProvider(ObjectStorage):
    """
    Azure Blob Storage Provider

    존재하지 않는 blob 삭제는 ResourceNotFoundError -> DeleteError.
    """

    fallback_expiry = AZURE_FALLBACK_EXPIRY

    def __init__(
        self,
        connection_string: str,
        container: str,
        default_expiry: ExpiryLike = None,
        service_client: Any = None,
    ):
        """
        Azure Provider 초기화

        Args:
            connection_string: Azure 스토리지 연결 문자열
            container: 컨테이너 이름
            default_expiry: 읽기 URL 기본 만료 시간
            service_client: 미리 생성된 BlobServiceClient
        """
        super().__init__(default_expiry)
        if not connection_string or not connection_string.strip():
            raise ConfigurationError(
                "Azure Blob Storage connectionString must not be null or empty"
            )
        if not container or not container.strip():
            raise ConfigurationError(
                "Azure Blob Storage container name must not be null or empty"
            )

        self.container = container.strip()

        if service_client is None:
            try:
                service_client = BlobServiceClient.from_connection_string(connection_string.strip())
            except Exception as e:
                raise ConfigurationError(
                    "Failed to create Azure Blob client from connection string",
                    operation="configure",
                    cause=e,
                ) from e
        self._service_client = service_client
        self._container_client = service_client.get_container_client(self.container)

        # SAS 서명에 필요한 계정 키
        self.account_name = service_client.account_name
        self._account_key = getattr(service_client.credential, "account_key", None)
        if not self._account_key:
            raise ConfigurationError(
                "Azure connection string must include an AccountKey to sign SAS URLs"
            )

        logger.info(f"Azure Blob storage ready: account={self.account_name}, container={self.container}")

    @property
    def container_client(self):
        return self._container_client

    @property
    def provider(self) -> StorageProvider:
        return StorageProvider.AZURE

    def _location_name(self) -> str:
        return self.container

    def _upload_headers(self, content_type: str) -> Dict[str, str]:
        return {
            "Content-Type": content_type,
            "x-ms-blob-type": "BlockBlob",
        }

    def _signed_url(
        self,
        key: str,
        permission: BlobSasPermissions,
        expiry: timedelta,
    ) -> str:
        blob_client = self.container_client.get_blob_client(key)
        sas_token = generate_blob_sas(
            account_name=self.account_name,
            container_name=self.container,
            blob_name=key,
            account_key=self._account_key,
            permission=permission,
            expiry=datetime.now(timezone.utc) + expiry,
        )
        return f"{blob_client.url}?{sas_token}"

    def _sign_upload_url(self, key: str, content_type: str, expiry: timedelta) -> str:
        return self._signed_url(key, BlobSasPermissions(create=True, write=True), expiry)

    def _sign_read_url(self, key: str, expiry: timedelta) -> str:
        return self._signed_url(key, BlobSasPermissions(read=True), expiry)

    def _delete_object(self, key: str) -> None:
        self.container_client.get_blob_client(key).delete_blob()

    def _object_exists(self, key: str) -> bool:
        try:
            return bool(self.container_client.get_blob_client(key).exists())
        except ResourceNotFoundError:
            return False

    def _put_object(
        self,
        key: str,
        content: bytes,
        content_type: str,
        metadata: Dict[str, str],
    ) -> None:
        self.container_client.get_blob_client(key).upload_blob(
            content,
            overwrite=True,
            content_settings=ContentSettings(content_type=content_type),
            metadata=metadata or None,
        )
