"""请求体组装模块."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from elasticbody.core.utils import assoc_path, is_empty, merge_deep_right
from elasticbody.typing import Clause, RequestBody

logger = logging.getLogger(__name__)


def build(
    body: Mapping[str, Any],
    queries: Clause | None,
    filters: Clause | list[Clause] | None,
    aggregations: Mapping[str, Any] | None = None,
) -> RequestBody:
    """
    组装当前格式的请求体（query.bool.filter）.

    有 filter 时，filter 放入 query.bool.filter，查询部分深度合并到同一个
    query.bool 中；只有查询时直接作为 query。聚合放在 aggs 下。
    参数不会被修改，每次返回新的请求体。

    示例:
        >>> build({}, {"bool": {"must": [{"term": {"a": 1}}]}}, [{"term": {"b": 2}}])
        {'query': {'bool': {'filter': [{'term': {'b': 2}}], 'must': [{'term': {'a': 1}}]}}}

    Args:
        body: 基础请求体
        queries: 查询子句
        filters: 过滤子句
        aggregations: 聚合定义

    Returns:
        新的请求体
    """
    cloned_body = copy.deepcopy(dict(body))

    if not is_empty(filters):
        filter_body = assoc_path(["query", "bool", "filter"], filters, {})
        query_body: dict[str, Any] = {}
        query_bool = queries.get("bool") if isinstance(queries, Mapping) else None
        if not is_empty(query_bool):
            query_body = assoc_path(["query", "bool"], query_bool, query_body)
        elif not is_empty(queries):
            # 查询被归约成单个子句（没有 bool 包装），放到 must 下
            query_body = assoc_path(["query", "bool", "must"], queries, query_body)

        for fragment in (filter_body, query_body):
            cloned_body = merge_deep_right(cloned_body, fragment)
    elif not is_empty(queries):
        cloned_body["query"] = copy.deepcopy(queries)

    if not is_empty(aggregations):
        cloned_body["aggs"] = copy.deepcopy(aggregations)

    return cloned_body


def build_v1(
    body: Mapping[str, Any],
    queries: Clause | None,
    filters: Clause | list[Clause] | None,
    aggregations: Mapping[str, Any] | None = None,
) -> RequestBody:
    """
    组装旧版格式的请求体（query.filtered）.

    用于兼容不支持 bool.filter 的旧版本 ES。filtered 独占自己的子树，
    因此不需要深度合并。聚合放在 aggregations 下（注意与 build 的 aggs 不同）。

    Args:
        body: 基础请求体
        queries: 查询子句
        filters: 过滤子句
        aggregations: 聚合定义

    Returns:
        新的请求体
    """
    cloned_body = copy.deepcopy(dict(body))

    if not is_empty(filters):
        cloned_body = assoc_path(
            ["query", "filtered", "filter"], copy.deepcopy(filters), cloned_body
        )
        if not is_empty(queries):
            cloned_body = assoc_path(
                ["query", "filtered", "query"], copy.deepcopy(queries), cloned_body
            )
    elif not is_empty(queries):
        cloned_body["query"] = copy.deepcopy(queries)

    if not is_empty(aggregations):
        cloned_body["aggregations"] = copy.deepcopy(aggregations)

    return cloned_body
