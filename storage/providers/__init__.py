"""
Storage Providers

클라우드 스토리지 제공자 통합 모듈
- S3 Provider (AWS)
- Azure Blob Provider
- GCS Provider (GCP)
- No-op Provider (미구성 시 대체)
"""

from storage.providers.base import (
    ObjectStorage,
    PreSignedUpload,
    StorageProvider,
    DEFAULT_CONTENT_TYPE,
)
from storage.providers.s3_provider import S3Provider
from storage.providers.azure_provider import AzureBlobProvider
from storage.providers.gcs_provider import GCSProvider
from storage.providers.noop_provider import NoOpStorage

__all__ = [
    "ObjectStorage",
    "PreSignedUpload",
    "StorageProvider",
    "DEFAULT_CONTENT_TYPE",
    "S3Provider",
    "AzureBlobProvider",
    "GCSProvider",
    "NoOpStorage",
]
