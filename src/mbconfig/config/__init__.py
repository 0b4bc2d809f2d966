"""設定管理モジュール。"""

from mbconfig.config._defaults import default_config, default_layer
from mbconfig.config._env import ENV_PREFIX, ENV_SEPARATOR, load_env_overlay
from mbconfig.config._extractor import check_structure, extract_config
from mbconfig.config._loader import load_file_overlay, load_toml_config
from mbconfig.config._merger import ConfigLayer, MergedConfig, merge_config_layers
from mbconfig.config._resolver import filter_cli_overrides, merge_sources, resolve_config
from mbconfig.errors import (
    CodecError,
    ConfigError,
    ConfigSyntaxError,
    SourceUnavailableError,
    StructuralError,
)

__all__ = [
    "CodecError",
    "ConfigError",
    "ConfigLayer",
    "ConfigSyntaxError",
    "ENV_PREFIX",
    "ENV_SEPARATOR",
    "MergedConfig",
    "SourceUnavailableError",
    "StructuralError",
    "check_structure",
    "default_config",
    "default_layer",
    "extract_config",
    "filter_cli_overrides",
    "load_env_overlay",
    "load_file_overlay",
    "load_toml_config",
    "merge_config_layers",
    "merge_sources",
    "resolve_config",
]
