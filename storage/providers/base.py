"""
Storage Provider Base Interface

클라우드 스토리지 제공자 공통 인터페이스
- 업로드용 사전 서명 URL 발급
- 읽기용 서명 URL 발급
- 삭제 / 존재 확인 / 서버 측 업로드
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from types import MappingProxyType
from typing import Optional, Dict, Mapping

from core.logging_config import setup_logger
from errors import (
    StorageError,
    SigningError,
    DeleteError,
    UploadError,
    StorageOperationError,
)
from storage.expiry import ExpiryLike, normalize_expiry
from storage.naming import (
    build_object_key,
    derive_file_name,
    normalize_directory,
    require_file_name,
)

logger = setup_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class StorageProvider(str, Enum):
    """스토리지 제공자"""
    S3 = "S3"
    AZURE = "AZURE"
    GCS = "GCS"


@dataclass(frozen=True)
class PreSignedUpload:
    """
    사전 서명 업로드 정보

    upload_url: 업로드(PUT)용 서명 URL
    file_name: 생성된 고유 파일 이름
    file_url: 같은 오브젝트에 대한 읽기(GET)용 서명 URL
    headers: 업로드 시 클라이언트가 보내야 하는 헤더
    """
    upload_url: str
    file_name: str
    file_url: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


class ObjectStorage(ABC):
    """
    오브젝트 스토리지 추상 인터페이스

    정규화/이름 생성/키 조합/오류 래핑은 이 클래스가 담당하고,
    하위 클래스는 SDK 호출 훅(_sign_upload_url 등)만 구현한다.
    SDK 클라이언트는 생성 시 한 번 만들어 재사용하며,
    동시 호출 안전성은 각 SDK 클라이언트의 보장에 의존한다.
    """

    #: provider 기본 만료 시간 (하위 클래스에서 지정)
    fallback_expiry: timedelta = timedelta(hours=1)

    def __init__(self, default_expiry: ExpiryLike = None):
        self.default_expiry = normalize_expiry(default_expiry, self.fallback_expiry)

    @property
    @abstractmethod
    def provider(self) -> Optional[StorageProvider]:
        """제공자 종류"""
        pass

    @property
    def provider_name(self) -> str:
        """제공자 이름 (s3, azure, gcs)"""
        return self.provider.value.lower() if self.provider else "none"

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def generate_upload_url(
        self,
        directory: Optional[str],
        content_type: Optional[str],
        expiry: ExpiryLike = None,
    ) -> PreSignedUpload:
        """
        업로드용 사전 서명 URL 생성

        Args:
            directory: 논리 디렉토리 (prefix). None/공백이면 루트
            content_type: 업로드할 파일의 MIME 타입
            expiry: URL 유효 기간 (None/0/음수면 기본값)

        Returns:
            PreSignedUpload: 업로드 URL, 파일 이름, 읽기 URL, 필수 헤더

        Raises:
            SigningError: stage="upload"이면 업로드 URL 서명 실패,
                stage="read"이면 업로드 URL은 발급됐으나 읽기 URL 서명 실패
        """
        effective_expiry = normalize_expiry(expiry, self.default_expiry)
        directory = normalize_directory(directory)
        file_name = derive_file_name(content_type)
        key = build_object_key(directory, file_name)
        signed_content_type = content_type or DEFAULT_CONTENT_TYPE

        try:
            upload_url = self._sign_upload_url(key, signed_content_type, effective_expiry)
        except StorageError:
            raise
        except Exception as e:
            logger.error(f"Upload URL generation failed for {self.get_uri(key)}: {e}")
            raise SigningError(
                f"Failed to generate {self.provider_name} pre-signed upload URL for '{key}'",
                stage="upload",
                operation="generate_upload_url",
                key=key,
                cause=e,
            ) from e

        try:
            file_url = self._sign_read_url(key, self.default_expiry)
        except Exception as e:
            logger.error(f"Read URL generation failed after upload URL for {self.get_uri(key)}: {e}")
            raise SigningError(
                f"Upload URL generated successfully, but failed to generate read URL for '{key}'",
                stage="read",
                operation="generate_upload_url",
                key=key,
                cause=e,
            ) from e

        logger.debug(f"Issued upload URL for {self.get_uri(key)} (expires in {effective_expiry})")

        return PreSignedUpload(
            upload_url=upload_url,
            file_name=file_name,
            file_url=file_url,
            headers=self._upload_headers(signed_content_type),
        )

    def get_file_url(
        self,
        directory: Optional[str],
        file_name: Optional[str],
        expiry: ExpiryLike = None,
    ) -> str:
        """
        읽기 전용 서명 URL 생성

        공개 버킷을 가정하지 않으며 항상 서명된 URL을 반환한다.
        expiry를 생략하면 설정된 기본 만료 시간을 사용한다.
        """
        effective_expiry = normalize_expiry(expiry, self.default_expiry)
        key = build_object_key(directory, require_file_name(file_name))

        try:
            url = self._sign_read_url(key, effective_expiry)
        except StorageError:
            raise
        except Exception as e:
            logger.error(f"Read URL generation failed for {self.get_uri(key)}: {e}")
            raise SigningError(
                f"Failed to generate {self.provider_name} read URL for '{key}'",
                stage="read",
                operation="get_file_url",
                key=key,
                cause=e,
            ) from e

        logger.debug(f"Issued read URL for {self.get_uri(key)} (expires in {effective_expiry})")
        return url

    def generate_read_url(
        self,
        directory: Optional[str],
        file_name: Optional[str],
        expiry: ExpiryLike = None,
    ) -> str:
        """get_file_url 별칭"""
        return self.get_file_url(directory, file_name, expiry)

    def delete(self, directory: Optional[str], file_name: Optional[str]) -> None:
        """
        오브젝트 삭제

        존재하지 않는 오브젝트 삭제 시 동작은 provider 고유 의미를 따른다
        (S3는 성공, Azure/GCS는 DeleteError).
        """
        key = build_object_key(directory, require_file_name(file_name))

        try:
            self._delete_object(key)
        except StorageError:
            raise
        except Exception as e:
            logger.error(f"Delete failed for {self.get_uri(key)}: {e}")
            raise DeleteError(
                f"Failed to delete {self.provider_name} object: {key}",
                operation="delete",
                key=key,
                cause=e,
            ) from e

        logger.info(f"Deleted {self.get_uri(key)}")

    def exists(self, directory: Optional[str], file_name: Optional[str]) -> bool:
        """오브젝트 존재 여부 확인"""
        key = build_object_key(directory, require_file_name(file_name))

        try:
            return self._object_exists(key)
        except StorageError:
            raise
        except Exception as e:
            logger.error(f"Exists check failed for {self.get_uri(key)}: {e}")
            raise StorageOperationError(
                f"Failed to check existence of {self.provider_name} object: {key}",
                operation="exists",
                key=key,
                cause=e,
            ) from e

    def upload(
        self,
        directory: Optional[str],
        file_name: Optional[str],
        content: bytes,
        content_type: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
    ) -> str:
        """
        서버 측 직접 업로드

        Returns:
            업로드된 오브젝트의 읽기용 서명 URL
        """
        key = build_object_key(directory, require_file_name(file_name))
        content_type = content_type or DEFAULT_CONTENT_TYPE

        try:
            self._put_object(key, content, content_type, dict(metadata or {}))
        except StorageError:
            raise
        except Exception as e:
            logger.error(f"Upload failed for {self.get_uri(key)}: {e}")
            raise UploadError(
                f"Failed to upload {self.provider_name} object: {key}",
                operation="upload",
                key=key,
                cause=e,
            ) from e

        logger.info(f"Uploaded {len(content)} bytes to {self.get_uri(key)}")
        return self.get_file_url(directory, file_name)

    def get_uri(self, key: str) -> str:
        """URI 생성"""
        return f"{self.provider_name}://{self._location_name()}/{key}"

    # ------------------------------------------------------------------
    # SDK hooks
    # ------------------------------------------------------------------

    def _upload_headers(self, content_type: str) -> Dict[str, str]:
        """업로드 시 필요한 헤더"""
        return {"Content-Type": content_type}

    @abstractmethod
    def _location_name(self) -> str:
        """버킷/컨테이너 이름"""
        pass

    @abstractmethod
    def _sign_upload_url(
        self,
        key: str,
        content_type: str,
        expiry: timedelta,
    ) -> str:
        """쓰기 전용(PUT) 서명 URL"""
        pass

    @abstractmethod
    def _sign_read_url(self, key: str, expiry: timedelta) -> str:
        """읽기 전용(GET) 서명 URL"""
        pass

    @abstractmethod
    def _delete_object(self, key: str) -> None:
        pass

    @abstractmethod
    def _object_exists(self, key: str) -> bool:
        pass

    @abstractmethod
    def _put_object(
        self,
        key: str,
        content: bytes,
        content_type: str,
        metadata: Dict[str, str],
    ) -> None:
        pass
