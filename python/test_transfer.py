#!/usr/bin/env python3
"""転送設定のテスト"""
from boto3.s3.transfer import TransferConfig

from z3_uploader.core.transfer import TransferConfigManager

MIB = 1024 * 1024


def test_part_size_and_concurrency(make_config):
    config = TransferConfigManager.create_config(make_config(part_size=32 * MIB, concurrency=12))

    assert config.multipart_chunksize == 32 * MIB
    assert config.multipart_threshold == 32 * MIB
    assert config.max_concurrency == 12
    assert config.use_threads is True


def test_zero_part_size_uses_library_defaults(make_config):
    config = TransferConfigManager.create_config(make_config(part_size=0, estimated=0))

    assert config.multipart_chunksize == TransferConfig().multipart_chunksize


def test_estimated_size_adjusts_chunksize(make_config):
    """推定サイズがパート数上限を超える場合はライブラリがサイズを広げる"""
    estimated = 200 * 1024 ** 3
    config = TransferConfigManager.create_config(make_config(part_size=0, estimated=estimated))

    assert config.multipart_chunksize > TransferConfig().multipart_chunksize
    assert config.multipart_chunksize * 10000 >= estimated


def test_small_estimate_keeps_default_chunksize(make_config):
    config = TransferConfigManager.create_config(make_config(part_size=0, estimated=MIB))

    assert config.multipart_chunksize == TransferConfig().multipart_chunksize
