"""
全局常量定义

存储项目级别的常量（路径、配置节名称），供所有模块使用
"""

import os
from pathlib import Path


def get_path_from_env(env_var: str, default: Path) -> Path:
    """
    从环境变量获取路径，如果未设置则使用默认值

    Args:
        env_var: 环境变量名称
        default: 默认路径

    Returns:
        Path: 配置的路径
    """
    env_value = os.getenv(env_var)
    if env_value:
        return Path(env_value)
    return default


# 配置文件路径（YAML，保存所有 Configurable 的属性快照）
CONFIG_FILE = get_path_from_env(
    "CONFIGSTORE_CONFIG_FILE", Path.cwd() / "configstore.yaml"
)

# config 文件中保存 Configurable 快照的配置节
CONFIGURABLES_SECTION = "configurables"
