"""
AWS S3 Storage Provider

boto3 기반 S3 통합
- PUT/GET 사전 서명 URL
- 정적 키 또는 기본 자격 증명 체인
- S3 호환 엔드포인트 (MinIO, LocalStack 등)
"""

from datetime import timedelta
from typing import Optional, Dict, Any

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from core.logging_config import setup_logger
from errors import ConfigurationError
from storage.expiry import ExpiryLike, S3_FALLBACK_EXPIRY
from storage.providers.base import ObjectStorage, StorageProvider

logger = setup_logger(__name__)


class S3Provider(ObjectStorage):
    """
    AWS S3 Storage Provider

    존재하지 않는 키 삭제는 S3 의미 그대로 성공한다.
    """

    fallback_expiry = S3_FALLBACK_EXPIRY

    def __init__(
        self,
        bucket: str,
        region: str,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        default_expiry: ExpiryLike = None,
        connect_timeout: int = 10,
        read_timeout: int = 60,
        client: Any = None,
    ):
        """
        S3 Provider 초기화

        Args:
            bucket: 버킷 이름
            region: AWS 리전
            access_key_id: AWS Access Key (None이면 기본 자격 증명 체인)
            secret_access_key: AWS Secret Key
            endpoint_url: 커스텀 엔드포인트 (LocalStack 등)
            default_expiry: 읽기 URL 기본 만료 시간
            connect_timeout: 연결 타임아웃 (초)
            read_timeout: 읽기 타임아웃 (초)
            client: 미리 생성된 boto3 S3 클라이언트
        """
        super().__init__(default_expiry)
        if not bucket or not bucket.strip():
            raise ConfigurationError("S3 bucket must not be null or empty")
        if not region or not region.strip():
            raise ConfigurationError("S3 region must not be null or empty")

        self.bucket = bucket.strip()
        self.region = region.strip()
        self.endpoint_url = endpoint_url

        # boto3 설정 (SDK 자동 재시도 없음)
        self._config_kwargs = {
            "region_name": self.region,
            "config": Config(
                retries={"total_max_attempts": 1},
                connect_timeout=connect_timeout,
                read_timeout=read_timeout,
                signature_version="s3v4",
            ),
        }

        if access_key_id and secret_access_key:
            self._config_kwargs["aws_access_key_id"] = access_key_id
            self._config_kwargs["aws_secret_access_key"] = secret_access_key

        if endpoint_url:
            self._config_kwargs["endpoint_url"] = endpoint_url

        if client is None:
            try:
                client = boto3.client("s3", **self._config_kwargs)
            except Exception as e:
                raise ConfigurationError(
                    f"Failed to create S3 client for bucket '{self.bucket}'",
                    operation="configure",
                    cause=e,
                ) from e
        self._client = client

        logger.info(f"S3 storage ready: bucket={self.bucket}, region={self.region}")

    @property
    def client(self):
        """boto3 S3 클라이언트"""
        return self._client

    @property
    def provider(self) -> StorageProvider:
        return StorageProvider.S3

    def _location_name(self) -> str:
        return self.bucket

    def _sign_upload_url(self, key: str, content_type: str, expiry: timedelta) -> str:
        return self.client.generate_presigned_url(
            "put_object",
            Params={"Bucket": self.bucket, "Key": key, "ContentType": content_type},
            ExpiresIn=int(expiry.total_seconds()),
            HttpMethod="PUT",
        )

    def _sign_read_url(self, key: str, expiry: timedelta) -> str:
        return self.client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket, "Key": key},
            ExpiresIn=int(expiry.total_seconds()),
        )

    def _delete_object(self, key: str) -> None:
        self.client.delete_object(Bucket=self.bucket, Key=key)

    def _object_exists(self, key: str) -> bool:
        try:
            self.client.head_object(Bucket=self.bucket, Key=key)
            return True
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey", "NotFound"):
                return False
            raise

    def _put_object(
        self,
        key: str,
        content: bytes,
        content_type: str,
        metadata: Dict[str, str],
    ) -> None:
        self.client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=content,
            ContentType=content_type,
            Metadata=metadata,
        )
