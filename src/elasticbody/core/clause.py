"""子句构建模块."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from elasticsearch.dsl.query import Query

from elasticbody.typing import Clause

logger = logging.getLogger(__name__)


def build_clause(field: Any = None, value: Any = None, opts: Mapping | None = None) -> Clause:
    """
    构建单个查询、过滤或聚合子句。

    规则:
        - value 不为 None: {field: value}
        - field 本身是完整子句（字典或 elasticsearch.dsl 的 Query 对象）: 直接使用
        - 只有 field: {"field": field}
        - 都没有: 只返回 opts

    opts 做浅合并，键冲突时 opts 优先。None 表示缺省，0、False、"" 都是有效值。

    示例:
        >>> build_clause("status", "error")
        {'status': 'error'}
        >>> build_clause({"term": {"x": 1}}, None, {"boost": 2})
        {'term': {'x': 1}, 'boost': 2}
        >>> build_clause("price", None, {"missing": 0})
        {'field': 'price', 'missing': 0}

    Args:
        field: 字段名或完整子句
        value: 字段值或内部子句
        opts: 额外的键值对

    Returns:
        子句字典
    """
    main_clause: dict[str, Any] = {}

    if value is not None:
        main_clause = {field: value}
    elif isinstance(field, Query):
        main_clause = field.to_dict()
    elif isinstance(field, Mapping):
        main_clause = dict(field)
    elif field is not None:
        main_clause = {"field": field}

    if opts is None:
        return main_clause
    if not isinstance(opts, Mapping):
        logger.warning(f"子句选项不是字典: {opts!r}")
    return {**main_clause, **opts}


def sort_merge(current: list[Clause], field: str, value: Any) -> list[Clause]:
    """
    将排序条件追加到排序列表中.

    Args:
        current: 现有的排序列表（不会被修改）
        field: 排序字段
        value: 排序方向（"asc"/"desc"）或排序选项字典

    Returns:
        追加后的新排序列表

    示例:
        >>> sort_merge([], "timestamp", "desc")
        [{'timestamp': {'order': 'desc'}}]
        >>> sort_merge([], "price", {"order": "asc", "mode": "avg"})
        [{'price': {'order': 'asc', 'mode': 'avg'}}]
    """
    if isinstance(value, Mapping):
        payload = {field: copy.deepcopy(dict(value))}
    else:
        payload = {field: {"order": value}}

    return [*current, payload]
