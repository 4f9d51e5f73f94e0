"""アップロード進捗管理"""
import sys
import threading
import time
from typing import Optional, TextIO


class ProgressTracker:
    """ストリームのアップロード進捗を追跡

    total_size が0の場合（サイズ不明）は転送量と速度のみ表示する。
    """

    def __init__(self, total_size: int, label: str, stream: Optional[TextIO] = None):
        self.total_size = total_size
        self.label = label
        self.uploaded_size = 0
        self.stream = stream if stream is not None else sys.stderr
        self.lock = threading.Lock()
        self.start_time = time.time()

    def __call__(self, bytes_transferred: int):
        """boto3のコールバック関数として使用"""
        with self.lock:
            self.uploaded_size += bytes_transferred
            self._display_progress()

    def _display_progress(self):
        """進捗を表示"""
        elapsed_time = time.time() - self.start_time
        if elapsed_time <= 0:
            return

        speed = self.uploaded_size / elapsed_time / 1024 / 1024  # MB/s

        if self.total_size > 0:
            # 推定サイズを超えることもある
            progress = min(self.uploaded_size / self.total_size, 1.0) * 100
            remaining = max(self.total_size - self.uploaded_size, 0)
            eta = remaining / (self.uploaded_size / elapsed_time) if self.uploaded_size > 0 else 0
            line = (f"\r{self.label}: {progress:.1f}% ({self.uploaded_size}/{self.total_size}) "
                    f"- {speed:.2f} MB/s - ETA: {eta:.0f}s")
        else:
            line = f"\r{self.label}: {self.uploaded_size} bytes - {speed:.2f} MB/s"

        print(line, end="", file=self.stream, flush=True)

    def complete(self):
        """アップロード完了"""
        elapsed_time = time.time() - self.start_time
        speed = self.uploaded_size / elapsed_time / 1024 / 1024 if elapsed_time > 0 else 0
        print(f"\r{self.label}: Complete! {self.uploaded_size} bytes "
              f"- {speed:.2f} MB/s - {elapsed_time:.1f}s", file=self.stream, flush=True)
