"""
elasticbody 工具函数模块

提供请求体组装相关的结构化工具函数
"""

from __future__ import annotations

import copy
import re
from collections.abc import Mapping, Sequence
from typing import Any

# 驼峰边界，如 "hasChild" -> "has Child"
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
# 连续大写后接小写，如 "HTTPServer" -> "HTTP Server"
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
# 非字母数字分隔符
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def snake_case(value: str) -> str:
    """
    将字符串转换为 snake_case。

    示例:
        >>> snake_case("hasChild")
        'has_child'
        >>> snake_case("has-parent")
        'has_parent'
        >>> snake_case("Nested")
        'nested'

    Args:
        value: 原始字符串

    Returns:
        snake_case 形式的字符串
    """
    value = _ACRONYM_BOUNDARY.sub(r"\1 \2", str(value))
    value = _CAMEL_BOUNDARY.sub(r"\1 \2", value)
    words = [word for word in _SEPARATORS.split(value) if word]
    return "_".join(word.lower() for word in words)


def is_empty(value: Any) -> bool:
    """判断值是否为空（None、空字典、空列表、空字符串）."""
    if value is None:
        return True
    if isinstance(value, (Mapping, Sequence)):
        return len(value) == 0
    return False


def merge_deep_right(left: Mapping, right: Mapping) -> dict[str, Any]:
    """
    深度合并两个字典，冲突时以右侧为准。

    只对字典递归合并；列表和标量直接被右侧替换，不做逐元素合并。
    两个输入都不会被修改。

    示例:
        >>> merge_deep_right({"a": {"x": 1}}, {"a": {"y": 2}})
        {'a': {'x': 1, 'y': 2}}
        >>> merge_deep_right({"a": [1, 2]}, {"a": [3]})
        {'a': [3]}

    Args:
        left: 左侧字典
        right: 右侧字典

    Returns:
        合并后的新字典
    """
    result = copy.deepcopy(dict(left))
    for key, value in right.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = merge_deep_right(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def assoc_path(path: Sequence[str], value: Any, target: Mapping) -> dict[str, Any]:
    """
    在指定路径上设置值，返回新字典。

    路径上缺失或不是字典的节点会被替换为新字典，同级的其他键保持不变。

    示例:
        >>> assoc_path(["query", "bool", "filter"], 1, {"size": 10})
        {'size': 10, 'query': {'bool': {'filter': 1}}}

    Args:
        path: 键路径
        value: 要设置的值
        target: 原字典（不会被修改）

    Returns:
        设置后的新字典
    """
    result = dict(target)
    if not path:
        return result

    head, *rest = path
    if rest:
        child = result.get(head)
        result[head] = assoc_path(rest, value, child if isinstance(child, Mapping) else {})
    else:
        result[head] = value
    return result
