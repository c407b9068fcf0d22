"""Config package facade."""

from logln.config.loader import ConfigError, config_from_dict, load_config, merge_sections
from logln.config.models import Config, ConsoleConfig, FileConfig, SuccessConfig

__all__ = [
    "Config",
    "ConfigError",
    "ConsoleConfig",
    "FileConfig",
    "SuccessConfig",
    "config_from_dict",
    "load_config",
    "merge_sections",
]
