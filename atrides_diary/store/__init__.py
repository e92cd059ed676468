from .config import ensure_default_config_file, get_config_path, load_config, log_level_value
from .errors import DecodeError, DocumentError, StoreError
from .journal import (
    aload_all,
    asave_all,
    decode_entry,
    encode_entry,
    format_timestamp,
    load_all,
    parse_timestamp,
    save_all,
)
from .paths import STORAGE_FILENAME, get_data_dir, storage_path

__all__ = [
    "ensure_default_config_file",
    "get_config_path",
    "load_config",
    "log_level_value",
    "DecodeError",
    "DocumentError",
    "StoreError",
    "aload_all",
    "asave_all",
    "decode_entry",
    "encode_entry",
    "format_timestamp",
    "load_all",
    "parse_timestamp",
    "save_all",
    "STORAGE_FILENAME",
    "get_data_dir",
    "storage_path",
]
