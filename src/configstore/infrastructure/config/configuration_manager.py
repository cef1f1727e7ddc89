"""
ConfigurationManager：Configurable 的持久化协作者

约定：
- store(configurable)：以 configurable.uuid 为 key 保存其属性表的副本，整体覆盖旧快照
- populate(configurable)：按 uuid 查找快照；不存在时不做任何修改，
  存在时先 clear() 再逐个 set_property()
- store 在写入前校验属性名与属性值均为字符串，不合法时抛出 ConfigurationError 且不写入
- 传入 None 时两者都是空操作
- 后端读写错误原样向上抛出（不重试）
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from configstore.domain.configurable import Configurable
from configstore.domain.exceptions import ConfigurationError
from configstore.infrastructure.config.config_manager import (
    ConfigManager,
    get_config_manager,
)
from configstore.shared.constants import CONFIGURABLES_SECTION

logger = logging.getLogger(__name__)


class ConfigurationManager(ABC):
    """Configurable 持久化接口，由具体后端实现 _save_snapshot / _load_snapshot。"""

    def store(self, configurable: Optional[Configurable]) -> None:
        if configurable is None:
            return

        snapshot = _validate_snapshot(
            configurable.get_internal_property_map(), label=configurable.uuid
        )
        self._save_snapshot(configurable.uuid, snapshot)
        logger.debug(f"已保存 {configurable.uuid} 的 {len(snapshot)} 个属性")

    def populate(self, configurable: Optional[Configurable]) -> None:
        if configurable is None:
            return

        snapshot = self._load_snapshot(configurable.uuid)
        if snapshot is None:
            logger.debug(f"未找到 {configurable.uuid} 的快照，保持当前属性不变")
            return

        configurable.clear()
        for key, value in snapshot.items():
            configurable.set_property(key, value)
        logger.debug(f"已从快照恢复 {configurable.uuid} 的 {len(snapshot)} 个属性")

    @abstractmethod
    def delete(self, configurable: Optional[Configurable]) -> bool:
        """删除 configurable 的快照，返回是否确实删除了内容。"""

    @abstractmethod
    def _save_snapshot(self, uuid: str, snapshot: Dict[str, str]) -> None: ...

    @abstractmethod
    def _load_snapshot(self, uuid: str) -> Optional[Mapping[str, str]]: ...


class InMemoryConfigurationManager(ConfigurationManager):
    """把快照保存在进程内存中的实现（测试与临时会话使用）。"""

    def __init__(self) -> None:
        self._snapshots: Dict[str, Dict[str, str]] = {}

    def delete(self, configurable: Optional[Configurable]) -> bool:
        if configurable is None:
            return False
        return self._snapshots.pop(configurable.uuid, None) is not None

    def has_snapshot(self, uuid: str) -> bool:
        return uuid in self._snapshots

    def _save_snapshot(self, uuid: str, snapshot: Dict[str, str]) -> None:
        self._snapshots[uuid] = snapshot

    def _load_snapshot(self, uuid: str) -> Optional[Mapping[str, str]]:
        snapshot = self._snapshots.get(uuid)
        return dict(snapshot) if snapshot is not None else None


class YamlConfigurationManager(ConfigurationManager):
    """
    基于 YAML 配置文件的实现

    配置存储结构：
    configurables:
      <uuid>:
        <key>: <value>
    """

    SECTION = CONFIGURABLES_SECTION

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        self._config_manager = config_manager or get_config_manager()

    def delete(self, configurable: Optional[Configurable]) -> bool:
        if configurable is None:
            return False
        return self._config_manager.delete_value(self.SECTION, configurable.uuid)

    def _save_snapshot(self, uuid: str, snapshot: Dict[str, str]) -> None:
        self._config_manager.set_value(self.SECTION, uuid, snapshot)

    def _load_snapshot(self, uuid: str) -> Optional[Mapping[str, str]]:
        raw = self._config_manager.get_value(self.SECTION, uuid)
        if raw is None:
            return None
        return _validate_snapshot(raw, label=f"{self.SECTION}.{uuid}")


def _validate_snapshot(value: Any, *, label: str) -> Dict[str, str]:
    if not isinstance(value, dict):
        raise ConfigurationError(f"{label} 必须是 dict")

    normalized: Dict[str, str] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise ConfigurationError(f"{label} 包含非法属性名：{key!r}")
        if not isinstance(item, str):
            raise ConfigurationError(f"{label}.{key} 必须是字符串，收到：{item!r}")
        # Plain str copies, so str subclasses such as str-Enum members serialize by value.
        normalized[str.__str__(key)] = str.__str__(item)
    return normalized
