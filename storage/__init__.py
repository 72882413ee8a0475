"""
Object Storage Connector

벤더 중립 오브젝트 스토리지 추상화 (S3, Azure Blob, GCS)

Usage:
    from storage import get_storage

    storage = get_storage()
    upload = storage.generate_upload_url("docs", "application/pdf", timedelta(hours=2))
    url = storage.get_file_url("docs", upload.file_name)
    storage.delete("docs", upload.file_name)
"""

from storage.expiry import normalize_expiry, parse_duration
from storage.naming import derive_file_name, to_extension, build_object_key
from storage.providers import (
    ObjectStorage,
    PreSignedUpload,
    StorageProvider,
    S3Provider,
    AzureBlobProvider,
    GCSProvider,
    NoOpStorage,
)
from storage.resolver import (
    ResolverState,
    StorageResolver,
    parse_provider,
    get_storage,
    reset_storage,
)

__all__ = [
    "normalize_expiry",
    "parse_duration",
    "derive_file_name",
    "to_extension",
    "build_object_key",
    "ObjectStorage",
    "PreSignedUpload",
    "StorageProvider",
    "S3Provider",
    "AzureBlobProvider",
    "GCSProvider",
    "NoOpStorage",
    "ResolverState",
    "StorageResolver",
    "parse_provider",
    "get_storage",
    "reset_storage",
]
