"""
列表属性编解码

将有序字符串列表编码为单个标量字符串（以逗号分隔），以便作为普通属性持久化。

编码规则：
- 元素内部的转义符 `\\` 写成 `\\\\`，分隔符 `,` 写成 `\\,`
- 解码时只在未被转义的逗号处切分，再去掉每个元素的转义
- 不含转义符的原始文本（例如用户直接写入的 "a,b,c"）按逗号直接切分
- 空列表编码为空字符串，空字符串解码为空列表
"""

from __future__ import annotations

from typing import Iterable, List

LIST_DELIMITER = ","
LIST_ESCAPE = "\\"


def escape_item(item: str) -> str:
    """转义单个元素中的转义符与分隔符（先处理转义符本身）。"""
    return item.replace(LIST_ESCAPE, LIST_ESCAPE * 2).replace(
        LIST_DELIMITER, LIST_ESCAPE + LIST_DELIMITER
    )


def encode_string_list(items: Iterable[str]) -> str:
    """
    将字符串列表编码为单个标量值

    Args:
        items: 有序字符串序列

    Returns:
        编码后的字符串；空序列返回 ""

    Raises:
        TypeError: 序列中包含非字符串元素
    """
    escaped: List[str] = []
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"列表属性只能包含字符串，收到: {item!r}")
        escaped.append(escape_item(item))
    return LIST_DELIMITER.join(escaped)


def decode_string_list(value: str) -> List[str]:
    """
    将标量值解码为字符串列表

    Args:
        value: encode_string_list 的输出，或用户直接写入的逗号分隔文本

    Returns:
        解码后的新列表（调用方可自由修改）

    Note:
        - "" 总是解码为 []，因此只含一个空字符串的列表 [""] 读回时同样是 []。
    """
    if value == "":
        return []

    items: List[str] = []
    current: List[str] = []
    chars = iter(value)
    for ch in chars:
        if ch == LIST_ESCAPE:
            # A lone trailing escape is kept as-is.
            current.append(next(chars, LIST_ESCAPE))
        elif ch == LIST_DELIMITER:
            items.append("".join(current))
            current = []
        else:
            current.append(ch)
    items.append("".join(current))
    return items
