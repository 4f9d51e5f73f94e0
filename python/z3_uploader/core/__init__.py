"""z3 uploader コアモジュール"""
from .s3_client import S3ClientManager
from .transfer import TransferConfigManager
from .uploader import BotoObjectUploader, ObjectUploader, UploadExecutor, UploadResult

__all__ = [
    'S3ClientManager',
    'TransferConfigManager',
    'BotoObjectUploader',
    'ObjectUploader',
    'UploadExecutor',
    'UploadResult',
]
