"""チャンクサイズの解析"""
import re

from pydantic import ByteSize, TypeAdapter, ValidationError

DEFAULT_CHUNK_SIZE_MB = 256
MINIMUM_CHUNK_SIZE_MB = 5

DEFAULT_CHUNK_SIZE_BYTES = DEFAULT_CHUNK_SIZE_MB * 1024 * 1024
MINIMUM_CHUNK_SIZE_BYTES = MINIMUM_CHUNK_SIZE_MB * 1024 * 1024

_byte_size_adapter = TypeAdapter(ByteSize)

# 符号付き整数（ASCII数字のみ、"_" 区切りは不可）
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_chunk_size(size: str) -> int:
    """チャンクサイズ文字列をバイト数に変換

    単位がなければMBとみなす。解析できない値はデフォルト値になり、
    最小値を下回る場合は最小値に切り上げる。

    Args:
        size: "256", "10M", "1GiB" などのサイズ文字列

    Returns:
        バイト数
    """
    size = size.strip()
    if _INTEGER_RE.fullmatch(size):
        # 単位なしはMB
        megabytes = int(size)
        if megabytes < 0:
            return MINIMUM_CHUNK_SIZE_BYTES
        size = f"{megabytes}MB"

    try:
        chunk_bytes = int(_byte_size_adapter.validate_python(size))
    except ValidationError:
        chunk_bytes = DEFAULT_CHUNK_SIZE_BYTES

    if chunk_bytes < MINIMUM_CHUNK_SIZE_BYTES:
        chunk_bytes = MINIMUM_CHUNK_SIZE_BYTES
    return chunk_bytes
