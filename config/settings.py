"""
스토리지 커넥터 설정 관리

환경 변수 및 애플리케이션 설정을 관리합니다.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()


class Config:
    """애플리케이션 설정"""

    # 프로젝트 경로
    BASE_DIR = Path(__file__).parent.parent
    LOGS_DIR = Path(os.getenv("LOGS_DIR", str(BASE_DIR / "logs")))

    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def ensure_directories(cls):
        """필수 디렉토리 생성"""
        cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)


class DevelopmentConfig(Config):
    """개발 환경 설정"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """프로덕션 환경 설정"""
    DEBUG = False
    TESTING = False


class TestConfig(Config):
    """테스트 환경 설정"""
    DEBUG = True
    TESTING = True


# =============================================================================
# 스토리지 제공자 설정
# =============================================================================

@dataclass(frozen=True)
class S3Settings:
    """S3 설정"""
    bucket: str = ""
    region: str = ""
    endpoint_url: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None


@dataclass(frozen=True)
class AzureSettings:
    """Azure Blob 설정"""
    connection_string: str = ""
    container: str = ""


@dataclass(frozen=True)
class GCSSettings:
    """GCS 설정"""
    bucket: str = ""
    credentials_path: str = ""


@dataclass(frozen=True)
class StorageSettings:
    """
    스토리지 설정 묶음

    provider는 원문 문자열 그대로 보관하며, 해석은 resolver가 담당한다.
    """
    provider: Optional[str] = None
    default_read_expiry: Optional[str] = None
    s3: S3Settings = field(default_factory=S3Settings)
    azure: AzureSettings = field(default_factory=AzureSettings)
    gcs: GCSSettings = field(default_factory=GCSSettings)


def _env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def load_storage_settings() -> StorageSettings:
    """환경 변수에서 스토리지 설정 로드 (호출 시점 기준)"""
    return StorageSettings(
        provider=os.getenv("STORAGE_PROVIDER"),
        default_read_expiry=_env("STORAGE_DEFAULT_READ_EXPIRY"),
        s3=S3Settings(
            bucket=os.getenv("STORAGE_S3_BUCKET", ""),
            region=os.getenv("STORAGE_S3_REGION", ""),
            endpoint_url=_env("STORAGE_S3_ENDPOINT_URL"),
            access_key_id=_env("AWS_ACCESS_KEY_ID"),
            secret_access_key=_env("AWS_SECRET_ACCESS_KEY"),
        ),
        azure=AzureSettings(
            connection_string=os.getenv("STORAGE_AZURE_CONNECTION_STRING", ""),
            container=os.getenv("STORAGE_AZURE_CONTAINER", ""),
        ),
        gcs=GCSSettings(
            bucket=os.getenv("STORAGE_GCS_BUCKET", ""),
            credentials_path=os.getenv("STORAGE_GCS_CREDENTIALS_PATH", ""),
        ),
    )


# 환경별 설정 선택
_env_name = os.getenv("ENVIRONMENT", "development").lower()
if _env_name == "production":
    config = ProductionConfig()
elif _env_name == "test":
    config = TestConfig()
else:
    config = DevelopmentConfig()

# 디렉토리 생성
config.ensure_directories()
