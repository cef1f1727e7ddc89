"""
配置持久化模块

提供 YAML 配置文件的通用 CRUD，以及 Configurable 的 store/populate 实现
"""

from .config_manager import ConfigManager, get_config_manager
from .configuration_manager import (
    ConfigurationManager,
    InMemoryConfigurationManager,
    YamlConfigurationManager,
)

__all__ = [
    "ConfigManager",
    "get_config_manager",
    "ConfigurationManager",
    "InMemoryConfigurationManager",
    "YamlConfigurationManager",
]
