"""S3クライアント管理"""
import boto3
from typing import Optional
from botocore.exceptions import BotoCoreError
from ..models.config import EffectiveConfig
from ..utils.logger import LoggerManager


def endpoint_url(host: str) -> str:
    """ホスト名からエンドポイントURLを作成（スキームがなければhttps）"""
    if "://" in host:
        return host
    return f"https://{host}"


class S3ClientManager:
    """S3クライアントの作成と管理"""

    def __init__(self, config: EffectiveConfig):
        self.config = config
        self.logger = LoggerManager.get_logger()
        self._client: Optional[boto3.client] = None

    def get_client(self) -> boto3.client:
        """S3クライアントを取得（必要に応じて作成）"""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self) -> boto3.client:
        """静的な認証情報でS3クライアントを作成"""
        url = endpoint_url(self.config.host)
        try:
            s3_client = boto3.client(
                's3',
                region_name=self.config.region,
                endpoint_url=url,
                aws_access_key_id=self.config.access_key_id,
                aws_secret_access_key=self.config.secret_access_key,
            )
        except BotoCoreError as e:
            self.logger.error(f"Error creating S3 client: {e}")
            raise

        self.logger.info(f"S3 client created for {url} ({self.config.region}).")
        return s3_client
