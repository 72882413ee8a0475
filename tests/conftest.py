"""
테스트 설정 및 픽스처
"""

import os
import pytest

# 테스트 환경 설정 - 모든 import 이전에 설정
os.environ["ENVIRONMENT"] = "test"

from loguru import logger

from config.settings import StorageSettings, S3Settings, AzureSettings, GCSSettings


STORAGE_ENV_VARS = [
    "STORAGE_PROVIDER",
    "STORAGE_DEFAULT_READ_EXPIRY",
    "STORAGE_S3_BUCKET",
    "STORAGE_S3_REGION",
    "STORAGE_S3_ENDPOINT_URL",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "STORAGE_AZURE_CONNECTION_STRING",
    "STORAGE_AZURE_CONTAINER",
    "STORAGE_GCS_BUCKET",
    "STORAGE_GCS_CREDENTIALS_PATH",
]


@pytest.fixture
def clean_storage_env(monkeypatch):
    """스토리지 관련 환경 변수 제거"""
    for name in STORAGE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def log_messages():
    """loguru 메시지 캡처 (WARNING 이상)"""
    import core.logging_config  # noqa: F401  (싱크 구성 이후에 캡처 싱크 추가)

    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def s3_settings():
    """S3 설정"""
    return StorageSettings(
        provider="s3",
        default_read_expiry="8h",
        s3=S3Settings(bucket="test-bucket", region="ap-northeast-2"),
    )


@pytest.fixture
def azure_settings():
    """Azure 설정"""
    return StorageSettings(
        provider="AZURE",
        azure=AzureSettings(
            connection_string="DefaultEndpointsProtocol=https;AccountName=acct;AccountKey=a2V5;EndpointSuffix=core.windows.net",
            container="uploads",
        ),
    )


@pytest.fixture
def gcs_settings(tmp_path):
    """GCS 설정"""
    credentials = tmp_path / "service-account.json"
    credentials.write_text("{}")
    return StorageSettings(
        provider="Gcs",
        gcs=GCSSettings(bucket="test-bucket", credentials_path=str(credentials)),
    )
