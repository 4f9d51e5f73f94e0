"""z3 uploader パッケージ"""
from typing import BinaryIO
from .models.config import EffectiveConfig
from .utils.logger import LoggerManager
from .utils.progress import ProgressTracker
from .core import (
    BotoObjectUploader,
    S3ClientManager,
    TransferConfigManager,
    UploadExecutor,
    UploadResult,
)

__version__ = "0.1.0"


class Z3Uploader:
    """標準入力をS3へストリーミングするメインクラス"""

    def __init__(self, config: EffectiveConfig):
        self.config = config

        self.logger = LoggerManager.setup(self.config.logging)
        self.logger.info("z3 uploader initialized")
        if config.filesystem:
            self.logger.info(f"Filesystem: {config.filesystem} (prefix: {config.snapshot_prefix})")

        s3_client = S3ClientManager(config).get_client()

        progress_tracker = None
        if config.progress:
            progress_tracker = ProgressTracker(config.estimated, config.object_key)

        uploader = BotoObjectUploader(
            s3_client,
            TransferConfigManager.create_config(config),
            storage_class=config.storage_class,
            callback=progress_tracker,
        )
        self.executor = UploadExecutor(uploader, config, progress_tracker)

    def run(self, stream: BinaryIO) -> UploadResult:
        """ストリームをアップロード"""
        return self.executor.run(stream)


__all__ = ['Z3Uploader', 'EffectiveConfig', '__version__']
