from config.settings import (
    Config,
    config,
    S3Settings,
    AzureSettings,
    GCSSettings,
    StorageSettings,
    load_storage_settings,
)

__all__ = [
    "Config",
    "config",
    "S3Settings",
    "AzureSettings",
    "GCSSettings",
    "StorageSettings",
    "load_storage_settings",
]
