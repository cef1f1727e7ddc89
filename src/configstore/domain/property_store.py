"""
属性存储

PropertyStore 是 Configurable 背后的可变 key -> value（均为字符串）映射：
- 不存在的 key 读取时返回 None，不抛异常
- 写入 None 等价于删除该 key（幂等）
- as_mutable_mapping() 返回底层 dict 本身，专供 ConfigurationManager 读写
"""

from __future__ import annotations

from typing import Dict, Iterable, List, MutableMapping, NoReturn, Optional

from configstore.domain.exceptions import UnsupportedOperationError


class UnmodifiableList(list):
    """只读列表视图：读取行为与 list 相同，任何修改操作都会抛出 UnsupportedOperationError。"""

    def _unsupported(self, *args: object, **kwargs: object) -> NoReturn:
        raise UnsupportedOperationError(
            "列表属性是只读视图，请通过 set_property_string_list 写入新列表"
        )

    append = _unsupported
    extend = _unsupported
    insert = _unsupported
    remove = _unsupported
    pop = _unsupported
    clear = _unsupported
    sort = _unsupported
    reverse = _unsupported
    __setitem__ = _unsupported
    __delitem__ = _unsupported
    __iadd__ = _unsupported
    __imul__ = _unsupported


class PropertyStore:
    """字符串属性的可变映射（非线程安全，需要时由调用方加锁）。"""

    def __init__(self, initial: Optional[MutableMapping[str, str]] = None):
        self._properties: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._properties.get(key)

    def set(self, key: str, value: Optional[str]) -> None:
        if value is None:
            self.delete(key)
            return
        self._properties[key] = value

    def delete(self, key: str) -> None:
        self._properties.pop(key, None)

    def clear(self) -> None:
        self._properties.clear()

    def replace_all(self, values: Iterable[tuple[str, str]]) -> None:
        """清空后写入给定键值对（原地修改，保持底层 dict 的引用不变）。"""
        self._properties.clear()
        for key, value in values:
            self.set(key, value)

    def keys(self) -> List[str]:
        return list(self._properties)

    def as_mutable_mapping(self) -> Dict[str, str]:
        # Live reference, not a copy.
        return self._properties

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"PropertyStore({self._properties!r})"
