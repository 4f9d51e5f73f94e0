"""S3転送設定管理"""
from boto3.s3.transfer import TransferConfig as BotoTransferConfig
from s3transfer.utils import ChunksizeAdjuster
from ..models.config import EffectiveConfig


class TransferConfigManager:
    """S3転送設定の管理"""

    @staticmethod
    def create_config(config: EffectiveConfig) -> BotoTransferConfig:
        """EffectiveConfigからTransferConfigを作成

        part_size が0の場合はパートサイズをライブラリに任せる。
        推定サイズがあれば ChunksizeAdjuster でパート数の上限に収める。
        """
        options = {
            "max_concurrency": config.concurrency,
            "use_threads": True,
        }

        if config.part_size > 0:
            options["multipart_chunksize"] = config.part_size
            options["multipart_threshold"] = config.part_size
        elif config.estimated > 0:
            default_chunksize = BotoTransferConfig().multipart_chunksize
            options["multipart_chunksize"] = ChunksizeAdjuster().adjust_chunksize(
                default_chunksize, config.estimated
            )

        return BotoTransferConfig(**options)
