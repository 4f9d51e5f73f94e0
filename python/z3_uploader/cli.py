"""コマンドラインインターフェース

使い方:
    some-command | z3 [options] KEY
"""
import argparse
import sys
from typing import BinaryIO, List, Optional

from . import Z3Uploader
from .models.config import (
    DEFAULT_CONFIG_PATH,
    DEFAULTS,
    ConfigError,
    Defaults,
    EffectiveConfig,
    UsageError,
    load_config_file,
    map_section,
    merge_config,
)
from .utils.logger import LoggerManager


def build_parser(defaults: Defaults = DEFAULTS) -> argparse.ArgumentParser:
    """引数パーサーを作成

    フラグのデフォルトはNoneにしておき、指定されたものだけを
    設定ファイルの値に上書きする。
    """
    parser = argparse.ArgumentParser(
        prog="z3",
        description="Stream standard input to an S3 object using a multipart upload.",
    )
    parser.add_argument(
        "-c", "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "-s", "--chunk-size",
        default=None,
        help=f"multipart chunk size, eg: 10M, 1G (default: {defaults.chunk_size})",
    )
    parser.add_argument(
        "--estimated",
        type=int,
        default=None,
        help="Estimated upload size in bytes",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=None,
        help=f"number of worker threads to use (default: {defaults.concurrency})",
    )
    parser.add_argument(
        "--storage-class",
        default=None,
        help=f"The S3 storage class (default: {defaults.storage_class})",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        default=None,
        help="show progress report",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        default=None,
        help="don't emit any output at all",
    )
    parser.add_argument(
        "keys",
        nargs="*",
        metavar="KEY",
        help="S3 key to upload to",
    )
    return parser


def resolve_object_key(keys: List[str]) -> str:
    """残りの位置引数からS3キーを決める"""
    if len(keys) == 1:
        return keys[0]
    if not keys:
        raise UsageError("S3 Key to use not provided")
    raise UsageError(f"unknown options: {' '.join(keys)}")


def resolve_config(args: argparse.Namespace, defaults: Defaults = DEFAULTS) -> EffectiveConfig:
    """デフォルト -> 設定ファイル -> フラグ の順で設定を解決"""
    object_key = resolve_object_key(args.keys)

    file_values = map_section(load_config_file(args.config))
    flag_values = {
        "chunk_size": args.chunk_size,
        "estimated": args.estimated,
        "concurrency": args.concurrency,
        "storage_class": args.storage_class,
        "progress": args.progress,
        "quiet": args.quiet,
    }
    return merge_config(defaults, file_values, flag_values, object_key)


def main(argv: Optional[List[str]] = None, stdin: Optional[BinaryIO] = None) -> int:
    """メイン関数

    Returns:
        終了コード: 成功なら0、それ以外は1
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except UsageError as e:
        print(e, file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logger = LoggerManager.setup(config.logging)

    if stdin is None:
        stdin = sys.stdin.buffer

    try:
        Z3Uploader(config).run(stdin)
    except Exception as e:
        logger.error(f"Failed to upload: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
