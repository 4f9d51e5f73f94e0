"""pytest共通フィクスチャ"""
import dataclasses

import pytest

from z3_uploader.models.config import EffectiveConfig, LoggingConfig
from z3_uploader.utils.logger import LoggerManager


@pytest.fixture(autouse=True)
def reset_logger():
    """テストごとにロガーを初期化"""
    LoggerManager.reset()
    LoggerManager.setup(LoggingConfig())
    yield
    LoggerManager.reset()


@pytest.fixture
def effective_config() -> EffectiveConfig:
    return EffectiveConfig(
        access_key_id="test-key-id",
        secret_access_key="test-secret",
        bucket="test-bucket",
        object_key="backups/db.tar",
        host="s3.example.com",
        region="ap-southeast-2",
        concurrency=8,
        part_size=10 * 1024 * 1024,
        max_retries=3,
        storage_class="STANDARD_IA",
    )


@pytest.fixture
def make_config(effective_config):
    """一部のフィールドだけ差し替えた設定を作る"""
    def _make(**overrides) -> EffectiveConfig:
        return dataclasses.replace(effective_config, **overrides)
    return _make
