"""設定管理用のデータクラス"""
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional
import configparser
import os

from ..utils.size import DEFAULT_CHUNK_SIZE_MB, parse_chunk_size

MAIN_SECTION = "main"
DEFAULT_CONFIG_PATH = "z3.conf"


class ConfigError(Exception):
    """設定の読み込みやマッピングに失敗した場合のエラー"""


class UsageError(Exception):
    """コマンドライン引数の指定ミス"""


@dataclass(frozen=True)
class LoggingConfig:
    """ロギング設定"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass(frozen=True)
class Defaults:
    """組み込みのデフォルト値"""
    host: str = "s3.amazonaws.com"
    region: str = "ap-southeast-2"
    concurrency: int = 64
    storage_class: str = "STANDARD_IA"
    max_retries: int = 3
    chunk_size: str = f"{DEFAULT_CHUNK_SIZE_MB}MB"
    quiet: bool = True
    progress: bool = False
    estimated: int = 0


DEFAULTS = Defaults()


@dataclass(frozen=True)
class EffectiveConfig:
    """デフォルト・設定ファイル・フラグをマージした最終設定"""
    access_key_id: str
    secret_access_key: str
    bucket: str
    object_key: str
    host: str
    region: str
    concurrency: int
    part_size: int  # 0ならライブラリに任せる
    max_retries: int
    storage_class: str
    snapshot_prefix: str = ""
    filesystem: str = ""
    quiet: bool = True
    progress: bool = False
    estimated: int = 0
    log_file: Optional[str] = None

    @property
    def logging(self) -> LoggingConfig:
        return LoggingConfig(
            level="WARNING" if self.quiet else "INFO",
            file=self.log_file,
        )


# [main] セクションのキー -> (フィールド名, 型)
SECTION_KEYS = {
    "s3_key_id": ("access_key_id", str),
    "s3_secret": ("secret_access_key", str),
    "bucket": ("bucket", str),
    "host": ("host", str),
    "concurrency": ("concurrency", int),
    "chunk_size": ("chunk_size", str),
    "max_retries": ("max_retries", int),
    "s3_storage_class": ("storage_class", str),
    "snapshot_prefix": ("snapshot_prefix", str),
    "filesystem": ("filesystem", str),
    "quiet": ("quiet", bool),
    "progress": ("progress", bool),
    "estimated": ("estimated", int),
    "log_file": ("log_file", str),
}


def load_config_file(config_path: str = DEFAULT_CONFIG_PATH) -> configparser.SectionProxy:
    """設定ファイルを読み込み、[main] セクションを返す"""
    if not os.path.exists(config_path):
        raise ConfigError(f"Unable to load config file: {config_path} not found.")

    parser = configparser.ConfigParser(interpolation=None)
    try:
        with open(config_path, "r", encoding="utf-8") as file:
            parser.read_file(file)
    except configparser.Error as e:
        raise ConfigError(f"Unable to parse config file {config_path}: {e}") from e

    # configparserはセクション名を区別するので両方見る
    for name in (MAIN_SECTION, MAIN_SECTION.upper()):
        if parser.has_section(name):
            return parser[name]
    raise ConfigError(f"Config file {config_path} has no [{MAIN_SECTION}] section.")


def map_section(section: Mapping[str, str]) -> Dict[str, Any]:
    """セクションの値をフィールド名にマッピング

    型変換は SectionProxy の getint / getboolean に任せる。
    未知のキーは無視する。型が合わない場合は ConfigError。
    """
    if not isinstance(section, configparser.SectionProxy):
        parser = configparser.ConfigParser(interpolation=None)
        parser.read_dict({MAIN_SECTION: dict(section)})
        section = parser[MAIN_SECTION]

    getters = {
        str: section.get,
        int: section.getint,
        bool: section.getboolean,
    }

    values: Dict[str, Any] = {}
    for key in section:
        mapping = SECTION_KEYS.get(key)
        if mapping is None:
            continue
        field_name, field_type = mapping
        try:
            values[field_name] = getters[field_type](key)
        except ValueError as e:
            raise ConfigError(f"Can't map config: {key.upper()}={section[key]!r}: {e}") from e
    return values


def merge_config(
    defaults: Defaults,
    file_values: Mapping[str, Any],
    flag_values: Mapping[str, Any],
    object_key: str,
) -> EffectiveConfig:
    """デフォルト -> 設定ファイル -> フラグ の順にマージ

    flag_values のうち None の値は「指定なし」として扱う。
    """
    merged: Dict[str, Any] = asdict(defaults)
    merged.update(file_values)
    merged.update({k: v for k, v in flag_values.items() if v is not None})

    if not object_key:
        raise UsageError("S3 key to use not provided")
    if not merged.get("bucket"):
        raise ConfigError("BUCKET is not configured.")

    # progressが優先
    if merged["progress"] and merged["quiet"]:
        merged["quiet"] = False

    if merged["estimated"] > 0:
        part_size = 0
    else:
        part_size = parse_chunk_size(str(merged["chunk_size"]))

    known = {f.name for f in fields(EffectiveConfig)}
    kwargs = {k: v for k, v in merged.items() if k in known}
    kwargs.setdefault("access_key_id", "")
    kwargs.setdefault("secret_access_key", "")
    return EffectiveConfig(object_key=object_key, part_size=part_size, **kwargs)
