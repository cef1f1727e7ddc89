"""
配置文件管理器模块

负责 YAML 配置文件的整体读写与按节（section）CRUD，
YamlConfigurationManager 基于它保存各个 Configurable 的属性快照
"""

import logging
import os
import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from configstore.domain.exceptions import ConfigurationError
from configstore.shared.constants import CONFIG_FILE

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    配置文件管理器

    配置文件结构示例：
    ```yaml
    configurables:
      5f0c...-uuid:
        name: john
        colour: blue
        list: a\\,b\\,c,d
    ```

    与只做“尽力而为”读取的场景不同，这里的读写错误都会以 ConfigurationError 抛出，
    由调用方决定如何处理。
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        初始化配置管理器

        Args:
            config_path: 配置文件路径，默认为 CONFIG_FILE（可由 CONFIGSTORE_CONFIG_FILE 覆盖）
        """
        self.config_path = Path(config_path) if config_path is not None else CONFIG_FILE

    # ==================== 整体读写 ====================

    def _load_all_config(self) -> Dict[str, Any]:
        """
        加载完整的配置文件

        Returns:
            完整的配置字典，如果文件不存在或为空返回空字典

        Raises:
            ConfigurationError: 文件无法读取、YAML 格式错误或根节点不是 mapping
        """
        if not self.config_path.exists():
            logger.debug(f"配置文件不存在: {self.config_path}")
            return {}

        try:
            raw_text = self.config_path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"读取配置文件失败: {self.config_path}（{e}）")
            raise ConfigurationError(f"读取配置文件失败：{self.config_path}（{e}）") from e

        try:
            config_data = yaml.safe_load(raw_text)
        except yaml.YAMLError as e:
            logger.error(f"YAML 文件格式错误: {str(e)}")
            raise ConfigurationError(f"配置文件 YAML 格式错误：{e}") from e

        # 允许空配置（首次使用时文件可能为空）
        if config_data is None:
            return {}

        if not isinstance(config_data, dict):
            raise ConfigurationError("配置文件根节点必须是 YAML mapping（dict）")

        return config_data

    def _save_all_config(self, config_data: Dict[str, Any]) -> None:
        """
        保存完整的配置文件

        先序列化为字符串，再写入同目录临时文件并原子替换，
        序列化或写入失败时原文件保持不变。

        Raises:
            ConfigurationError: 序列化或写入失败
        """
        try:
            text = yaml.safe_dump(
                config_data, default_flow_style=False, allow_unicode=True
            )
        except yaml.YAMLError as e:
            logger.error(f"序列化配置失败: {str(e)}")
            raise ConfigurationError(f"序列化配置失败：{e}") from e

        try:
            self._write_atomic(text)
        except OSError as e:
            logger.error(f"保存配置失败: {str(e)}")
            raise ConfigurationError(f"保存配置失败：{self.config_path}（{e}）") from e

        # Best-effort: restrict config file permissions (may not work on all platforms/filesystems).
        try:
            os.chmod(self.config_path, 0o600)
        except OSError as e:
            logger.debug(f"无法设置配置文件权限为 600: {str(e)}")
        logger.info(f"配置已保存到 {self.config_path}")

    def _write_atomic(self, text: str) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            suffix=".yaml", prefix=".tmp_", dir=self.config_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, self.config_path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    # ==================== 按节读写 ====================

    def get_section(self, section: str) -> Optional[Dict[str, Any]]:
        """
        获取配置的某个节（section）

        Returns:
            配置节的字典，如果不存在返回 None

        Raises:
            ConfigurationError: 配置文件损坏，或该节不是 mapping
        """
        data = self._load_all_config().get(section)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ConfigurationError(f"配置节 {section} 类型错误（应为 dict）")
        return data

    def get_value(self, section: str, key: str, default: Any = None) -> Any:
        section_data = self.get_section(section)
        if section_data is None:
            return default
        return section_data.get(key, default)

    def set_value(self, section: str, key: str, value: Any) -> None:
        """
        设置配置的某个值（整体覆盖该 key，不做合并）

        Raises:
            ConfigurationError: 读取或保存失败
        """
        config = self._load_all_config()

        section_data = config.get(section)
        if section_data is None:
            section_data = config[section] = {}
        elif not isinstance(section_data, dict):
            raise ConfigurationError(f"配置节 {section} 类型错误（应为 dict）")

        section_data[key] = value
        self._save_all_config(config)
        logger.info(f"配置 {section}.{key} 已更新")

    def delete_value(self, section: str, key: str) -> bool:
        """
        删除配置中的某个键值（支持把空 section 一并清理掉）

        Returns:
            是否确实删除了内容（键不存在时返回 False）
        """
        config = self._load_all_config()

        section_data = config.get(section)
        if not isinstance(section_data, dict) or key not in section_data:
            logger.debug(f"配置 {section}.{key} 不存在")
            return False

        del section_data[key]
        if not section_data:
            del config[section]

        self._save_all_config(config)
        logger.info(f"配置 {section}.{key} 已删除")
        return True


@lru_cache(maxsize=1)
def get_config_manager() -> ConfigManager:
    """
    获取进程内共享的 ConfigManager

    Note:
        - 修改 CONFIG_FILE 后需调用 `get_config_manager.cache_clear()` 才会生效。
    """
    return ConfigManager(config_path=CONFIG_FILE)
