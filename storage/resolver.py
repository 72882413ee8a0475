"""
Storage Provider Resolver

설정에 따라 사용할 스토리지 어댑터를 한 번 선택한다.

UNCONFIGURED -> RESOLVING -> ACTIVE(provider) | DISABLED

- provider 미지정 또는 필수 값 누락: 경고 로그 후 NoOpStorage (DISABLED)
- 알 수 없는 provider 값: 항상 ConfigurationError
- 어댑터 생성 실패(자격 증명 파일, 연결 문자열 오류): ConfigurationError
"""

import threading
from enum import Enum
from typing import Callable, Dict, List, Optional

from config.settings import StorageSettings, load_storage_settings
from core.logging_config import setup_logger
from errors import ConfigurationError
from storage.expiry import parse_duration
from storage.providers.base import ObjectStorage, StorageProvider
from storage.providers.azure_provider import AzureBlobProvider
from storage.providers.gcs_provider import GCSProvider
from storage.providers.noop_provider import NoOpStorage
from storage.providers.s3_provider import S3Provider

logger = setup_logger(__name__)


class ResolverState(Enum):
    """Resolver 상태"""
    UNCONFIGURED = "unconfigured"
    RESOLVING = "resolving"
    ACTIVE = "active"
    DISABLED = "disabled"


def parse_provider(value: Optional[str]) -> Optional[StorageProvider]:
    """
    provider 문자열 해석 (대소문자 무시)

    빈 값은 None (경고), 알 수 없는 값은 ConfigurationError.
    """
    if value is None or not value.strip():
        logger.warning(
            "STORAGE_PROVIDER is not configured or is blank. "
            "No storage provider will be activated."
        )
        return None

    try:
        return StorageProvider(value.strip().upper())
    except ValueError as e:
        supported = ", ".join(p.value for p in StorageProvider)
        raise ConfigurationError(
            f"Invalid value for STORAGE_PROVIDER: '{value}'. Supported values are: {supported}",
            operation="resolve",
            cause=e,
        ) from e


def missing_fields(provider: StorageProvider, settings: StorageSettings) -> List[str]:
    """provider별 필수 설정 중 비어 있는 항목"""
    required = {
        StorageProvider.S3: {
            "STORAGE_S3_BUCKET": settings.s3.bucket,
            "STORAGE_S3_REGION": settings.s3.region,
        },
        StorageProvider.AZURE: {
            "STORAGE_AZURE_CONNECTION_STRING": settings.azure.connection_string,
            "STORAGE_AZURE_CONTAINER": settings.azure.container,
        },
        StorageProvider.GCS: {
            "STORAGE_GCS_BUCKET": settings.gcs.bucket,
            "STORAGE_GCS_CREDENTIALS_PATH": settings.gcs.credentials_path,
        },
    }[provider]
    return [name for name, value in required.items() if not value or not value.strip()]


def _build_s3(settings: StorageSettings, default_expiry) -> ObjectStorage:
    return S3Provider(
        bucket=settings.s3.bucket,
        region=settings.s3.region,
        access_key_id=settings.s3.access_key_id,
        secret_access_key=settings.s3.secret_access_key,
        endpoint_url=settings.s3.endpoint_url,
        default_expiry=default_expiry,
    )


def _build_azure(settings: StorageSettings, default_expiry) -> ObjectStorage:
    return AzureBlobProvider(
        connection_string=settings.azure.connection_string,
        container=settings.azure.container,
        default_expiry=default_expiry,
    )


def _build_gcs(settings: StorageSettings, default_expiry) -> ObjectStorage:
    return GCSProvider(
        bucket=settings.gcs.bucket,
        credentials_path=settings.gcs.credentials_path,
        default_expiry=default_expiry,
    )


ADAPTER_BUILDERS: Dict[StorageProvider, Callable[[StorageSettings, object], ObjectStorage]] = {
    StorageProvider.S3: _build_s3,
    StorageProvider.AZURE: _build_azure,
    StorageProvider.GCS: _build_gcs,
}


class StorageResolver:
    """
    스토리지 어댑터 선택기

    resolve()는 한 번만 평가되며 이후 호출은 같은 어댑터를 반환한다.
    설정 변경은 재시작이 필요하다.
    """

    def __init__(
        self,
        settings: StorageSettings,
        builders: Optional[Dict[StorageProvider, Callable]] = None,
    ):
        self.settings = settings
        self.builders = dict(builders or ADAPTER_BUILDERS)
        self.state = ResolverState.UNCONFIGURED
        self.provider: Optional[StorageProvider] = None
        self._storage: Optional[ObjectStorage] = None

    @property
    def storage(self) -> Optional[ObjectStorage]:
        return self._storage

    def resolve(self) -> ObjectStorage:
        """어댑터 선택 (최초 1회)"""
        if self._storage is not None:
            return self._storage

        self.state = ResolverState.RESOLVING
        try:
            provider = parse_provider(self.settings.provider)
            if provider is None:
                return self._disable("provider not set")

            missing = missing_fields(provider, self.settings)
            if missing:
                logger.warning(
                    f"Storage provider {provider.value} selected but required settings are blank: "
                    f"{', '.join(missing)}. Falling back to no-op storage."
                )
                return self._disable(f"{provider.value} missing {', '.join(missing)}")

            default_expiry = parse_duration(self.settings.default_read_expiry)
            storage = self.builders[provider](self.settings, default_expiry)
        except ConfigurationError:
            self.state = ResolverState.UNCONFIGURED
            raise
        except Exception as e:
            self.state = ResolverState.UNCONFIGURED
            raise ConfigurationError(
                f"Failed to activate storage provider '{self.settings.provider}'",
                operation="resolve",
                cause=e,
            ) from e

        self.provider = provider
        self.state = ResolverState.ACTIVE
        self._storage = storage
        logger.info(f"Storage provider {provider.value} activated ({storage.get_uri('')})")
        return storage

    def _disable(self, reason: str) -> ObjectStorage:
        self.state = ResolverState.DISABLED
        self.provider = None
        self._storage = NoOpStorage(reason=reason)
        logger.warning(f"Object storage disabled: {reason}")
        return self._storage


# 프로세스 전역 스토리지
_storage: Optional[ObjectStorage] = None
_storage_lock = threading.Lock()


def get_storage() -> ObjectStorage:
    """
    환경 설정으로 선택된 스토리지 싱글톤 반환

    최초 호출만 어댑터를 생성하며, 동시 최초 호출도 같은 어댑터를 받는다.
    설정 오류를 시작 시점에 드러내려면 애플리케이션 시작 시 한 번 호출한다.
    """
    global _storage
    if _storage is None:
        with _storage_lock:
            if _storage is None:
                _storage = StorageResolver(load_storage_settings()).resolve()
    return _storage


def reset_storage():
    """전역 스토리지 초기화 (재시작 시뮬레이션용)"""
    global _storage
    with _storage_lock:
        _storage = None
