"""
설정 파일 테스트

config 모듈의 설정 관리 기능을 테스트합니다.
"""

import pytest
from pathlib import Path


def test_config_module_import():
    """config 모듈 import 가능 확인"""
    from config import config, Config
    assert config is not None
    assert Config is not None


def test_test_environment_selected():
    """ENVIRONMENT=test 이면 TestConfig 사용"""
    from config import config
    from config.settings import TestConfig

    assert isinstance(config, TestConfig)
    assert config.TESTING is True


def test_logs_dir_exists():
    """로그 디렉토리 생성 확인"""
    from config import config

    assert isinstance(config.LOGS_DIR, Path)
    assert config.LOGS_DIR.exists()


def test_load_storage_settings_defaults(clean_storage_env):
    """환경 변수가 없으면 빈 설정"""
    from config import load_storage_settings

    settings = load_storage_settings()

    assert settings.provider is None
    assert settings.default_read_expiry is None
    assert settings.s3.bucket == ""
    assert settings.s3.access_key_id is None
    assert settings.azure.connection_string == ""
    assert settings.gcs.credentials_path == ""


def test_load_storage_settings_from_env(clean_storage_env):
    """환경 변수에서 스토리지 설정 로드"""
    from config import load_storage_settings

    clean_storage_env.setenv("STORAGE_PROVIDER", "s3")
    clean_storage_env.setenv("STORAGE_DEFAULT_READ_EXPIRY", " 8h ")
    clean_storage_env.setenv("STORAGE_S3_BUCKET", "bucket")
    clean_storage_env.setenv("STORAGE_S3_REGION", "eu-west-1")
    clean_storage_env.setenv("STORAGE_S3_ENDPOINT_URL", "http://localhost:9000")
    clean_storage_env.setenv("AWS_ACCESS_KEY_ID", "AKIA")
    clean_storage_env.setenv("AWS_SECRET_ACCESS_KEY", "  ")
    clean_storage_env.setenv("STORAGE_GCS_CREDENTIALS_PATH", "/secrets/sa.json")

    settings = load_storage_settings()

    assert settings.provider == "s3"
    assert settings.default_read_expiry == "8h"
    assert settings.s3.bucket == "bucket"
    assert settings.s3.region == "eu-west-1"
    assert settings.s3.endpoint_url == "http://localhost:9000"
    assert settings.s3.access_key_id == "AKIA"
    assert settings.s3.secret_access_key is None
    assert settings.gcs.credentials_path == "/secrets/sa.json"


def test_storage_settings_are_frozen():
    """설정 객체는 불변"""
    from dataclasses import FrozenInstanceError
    from config import StorageSettings

    settings = StorageSettings(provider="S3")
    with pytest.raises(FrozenInstanceError):
        settings.provider = "GCS"


def test_storage_values_only_from_loader():
    """스토리지 값은 load_storage_settings()에서만 읽음"""
    from config import Config

    for name in ("STORAGE_PROVIDER", "STORAGE_DEFAULT_READ_EXPIRY", "AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY"):
        assert not hasattr(Config, name)
