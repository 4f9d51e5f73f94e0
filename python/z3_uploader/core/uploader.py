"""S3アップロード実行クラス"""
from dataclasses import dataclass
from typing import BinaryIO, Callable, Optional, Protocol

from boto3.s3.transfer import TransferConfig
from ..models.config import EffectiveConfig
from ..utils.logger import LoggerManager
from ..utils.progress import ProgressTracker


@dataclass
class UploadResult:
    """アップロード結果"""
    bucket: str
    key: str
    success: bool = True


class ObjectUploader(Protocol):
    """アップロード処理のインターフェース"""

    def upload(self, bucket: str, key: str, stream: BinaryIO) -> None:
        ...


class BotoObjectUploader:
    """boto3の upload_fileobj を使ったアップローダー

    シングルPUTかマルチパートかの判断、リトライ、並列アップロードは
    すべてboto3側で行われる。
    """

    def __init__(
        self,
        s3_client,
        transfer_config: TransferConfig,
        storage_class: Optional[str] = None,
        callback: Optional[Callable[[int], None]] = None,
    ):
        self.s3_client = s3_client
        self.transfer_config = transfer_config
        self.storage_class = storage_class
        self.callback = callback

    def upload(self, bucket: str, key: str, stream: BinaryIO) -> None:
        extra_args = {}
        if self.storage_class:
            extra_args["StorageClass"] = self.storage_class

        self.s3_client.upload_fileobj(
            stream,
            bucket,
            key,
            ExtraArgs=extra_args or None,
            Callback=self.callback,
            Config=self.transfer_config,
        )


class UploadExecutor:
    """ストリームのアップロードの実行"""

    def __init__(
        self,
        uploader: ObjectUploader,
        config: EffectiveConfig,
        progress_tracker: Optional[ProgressTracker] = None,
    ):
        self.uploader = uploader
        self.config = config
        self.progress_tracker = progress_tracker
        self.logger = LoggerManager.get_logger()

    def run(self, stream: BinaryIO) -> UploadResult:
        """ストリームを1回だけアップロード

        エラーはそのまま呼び出し元に伝播する。
        """
        bucket, key = self.config.bucket, self.config.object_key
        if self.config.part_size > 0:
            part_info = f"part size {self.config.part_size} bytes"
        else:
            part_info = "automatic part size"
        self.logger.info(
            f"Uploading stream to {bucket}/{key} "
            f"({part_info}, concurrency {self.config.concurrency})"
        )

        self.uploader.upload(bucket, key, stream)

        if self.progress_tracker:
            self.progress_tracker.complete()

        self.logger.info(f"Successfully uploaded stream to {bucket}/{key}")
        return UploadResult(bucket, key)
