#!/usr/bin/env python3
"""S3クライアントのテスト"""
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import NoRegionError

from z3_uploader.core.s3_client import S3ClientManager, endpoint_url


def test_endpoint_url_adds_scheme():
    assert endpoint_url("s3.amazonaws.com") == "https://s3.amazonaws.com"
    assert endpoint_url("http://localhost:9000") == "http://localhost:9000"


@patch("z3_uploader.core.s3_client.boto3.client")
def test_client_uses_static_credentials(mock_boto_client: MagicMock, effective_config):
    S3ClientManager(effective_config).get_client()

    mock_boto_client.assert_called_once()
    assert mock_boto_client.call_args.args[0] == "s3"
    kwargs = mock_boto_client.call_args.kwargs
    assert kwargs["region_name"] == "ap-southeast-2"
    assert kwargs["endpoint_url"] == "https://s3.example.com"
    assert kwargs["aws_access_key_id"] == "test-key-id"
    assert kwargs["aws_secret_access_key"] == "test-secret"


@patch("z3_uploader.core.s3_client.boto3.client")
def test_client_is_created_once(mock_boto_client: MagicMock, effective_config):
    manager = S3ClientManager(effective_config)

    first = manager.get_client()
    second = manager.get_client()

    assert first is second is mock_boto_client.return_value
    mock_boto_client.assert_called_once()


@patch("z3_uploader.core.s3_client.boto3.client")
def test_client_creation_error_is_logged_and_raised(mock_boto_client: MagicMock, effective_config, caplog):
    mock_boto_client.side_effect = NoRegionError()

    with pytest.raises(NoRegionError):
        S3ClientManager(effective_config).get_client()

    assert "Error creating S3 client" in caplog.text
