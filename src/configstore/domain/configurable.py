"""
Configurable 实体

一个 Configurable 由三部分组成：
- 稳定身份：uuid（持久化 key）、display_name、category（仅描述用途）
- PropertyStore：当前生效的字符串属性
- DefaultsProvider：提供默认值，仅在 restore_defaults() 时使用

属性表在构造后为空，需要显式调用 restore_defaults() 或由 ConfigurationManager populate。
"""

from __future__ import annotations

from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Dict,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    runtime_checkable,
)

from configstore.domain.exceptions import ConfigurationError
from configstore.domain.list_codec import decode_string_list, encode_string_list
from configstore.domain.property_store import PropertyStore, UnmodifiableList

if TYPE_CHECKING:
    from configstore.infrastructure.config.configuration_manager import (
        ConfigurationManager,
    )


@runtime_checkable
class DefaultsProvider(Protocol):
    """每种配置类型实现的默认值能力。"""

    def defaults(self) -> Mapping[str, str]: ...


class MappingDefaultsProvider:
    """以固定映射作为默认值的 DefaultsProvider。"""

    def __init__(self, defaults: Mapping[str, str]):
        self._defaults: Dict[str, str] = dict(defaults)

    def defaults(self) -> Mapping[str, str]:
        return MappingProxyType(self._defaults)


class Configurable:
    """
    持有一组命名字符串属性的可配置实体

    Args:
        uuid: 稳定的不透明标识，作为持久化 key，构造后不可修改
        display_name: 展示名称（不参与查找与持久化）
        category: 分类（不参与查找与持久化）
        defaults_provider: 默认值提供者
        configuration_manager: 可选，绑定后可直接调用 store()/populate()
    """

    def __init__(
        self,
        uuid: str,
        display_name: str,
        category: str,
        defaults_provider: DefaultsProvider,
        configuration_manager: Optional["ConfigurationManager"] = None,
    ):
        if not uuid or not uuid.strip():
            raise ValueError("uuid 不能为空")

        self._uuid = uuid
        self._display_name = display_name
        self._category = category
        self._defaults_provider = defaults_provider
        self._configuration_manager = configuration_manager
        self._store = PropertyStore()

    # ==================== 身份 ====================

    @property
    def uuid(self) -> str:
        return self._uuid

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def category(self) -> str:
        return self._category

    # ==================== 标量属性 ====================

    def get_property(self, key: str) -> Optional[str]:
        """获取属性值，未设置时返回 None。"""
        return self._store.get(key)

    def set_property(self, key: str, value: Optional[str]) -> None:
        """设置属性值；value 为 None 时等价于 delete_property(key)。"""
        self._store.set(key, value)

    def delete_property(self, key: str) -> None:
        self._store.delete(key)

    def clear(self) -> None:
        self._store.clear()

    def keys(self) -> List[str]:
        return self._store.keys()

    # ==================== 列表属性 ====================

    def get_property_string_list(self, key: str) -> Optional[List[str]]:
        """
        以列表形式读取属性

        Returns:
            只读列表（修改会抛出 UnsupportedOperationError）；属性未设置时返回 None
        """
        value = self._store.get(key)
        if value is None:
            return None
        return UnmodifiableList(decode_string_list(value))

    def set_property_string_list(self, key: str, value: Sequence[str]) -> None:
        """将列表编码为单个字符串后写入属性（空列表会读回空列表而不是 None）。"""
        self._store.set(key, encode_string_list(value))

    # ==================== 默认值 ====================

    def get_default_property_map(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self._defaults_provider.defaults()))

    def get_default_property(self, key: str) -> Optional[str]:
        return self._defaults_provider.defaults().get(key)

    def restore_defaults(self) -> None:
        """丢弃所有当前属性（包括不在默认值中的 key），恢复为默认值的副本。"""
        self._store.replace_all(dict(self._defaults_provider.defaults()).items())

    # ==================== 持久化 ====================

    def get_internal_property_map(self) -> Dict[str, str]:
        """
        返回底层属性 dict 本身（不是副本）

        仅供 ConfigurationManager 使用：通过该引用的修改会立即反映到本对象上。
        """
        return self._store.as_mutable_mapping()

    def store(self) -> None:
        self._require_manager().store(self)

    def populate(self) -> None:
        self._require_manager().populate(self)

    def _require_manager(self) -> "ConfigurationManager":
        if self._configuration_manager is None:
            raise ConfigurationError(f"Configurable {self._uuid} 未绑定 ConfigurationManager")
        return self._configuration_manager

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(uuid={self._uuid!r}, "
            f"display_name={self._display_name!r}, category={self._category!r})"
        )
