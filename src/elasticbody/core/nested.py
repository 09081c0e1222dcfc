"""嵌套子句追加模块."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from elasticbody.core.body import build
from elasticbody.core.boolean import FilterSet
from elasticbody.core.clause import build_clause
from elasticbody.core.constants import FILTER_UNWRAP_TYPES, NESTED_TYPES
from elasticbody.core.utils import snake_case
from elasticbody.typing import Clause

logger = logging.getLogger(__name__)


@runtime_checkable
class NestedResult(Protocol):
    """嵌套回调的返回结果."""

    def has_query(self) -> bool: ...

    def get_query(self) -> Clause: ...

    def has_filter(self) -> bool: ...

    def get_filter(self) -> Clause: ...


def _make_nested_builder(in_filter_context: bool, with_query: bool) -> Any:
    """创建传给嵌套回调的新构建器."""
    # 构建器依赖本模块，延迟导入
    from elasticbody.builders import CompoundBuilder, FilterBuilder

    if with_query:
        return CompoundBuilder(in_filter_context=in_filter_context)
    # filter 子句始终处于 filter 上下文，不需要传递上下文
    return FilterBuilder()


def push_query(
    existing: FilterSet,
    bool_key: str,
    clause_type: str,
    *args: Any,
    in_filter_context: bool = False,
) -> None:
    """
    向累加器的布尔槽位追加一个 {clause_type: {...}} 子句.

    args 依次为 build_clause 的 field、value、opts，最后一个参数可以是
    嵌套回调。回调会立即同步执行，收到一个新的构建器：
        - 始终提供 filter 相关方法
        - 查询方法只在非 filter 上下文，或子句类型为 nested / has_parent /
          has_child 时提供（在 filter 中嵌套查询没有评分意义，关联查询除外）

    嵌套结果的处理:
        - 关联查询类型: 用 build 把回调的 query / filter 组合成一个完整的
          query，放在子句的 query 下
        - 其他类型（bool、constant_score 等）: query 放在 must 下
          （仅非 filter 上下文），filter 放在 filter 下
        - bool / constant_score 在 filter 上下文中，去掉多余的 filter.bool 包装

    回调抛出的异常原样向上传播。

    示例:
        >>> filters = FilterSet()
        >>> push_query(filters, "and", "term", "status", "error")
        >>> filters.and_
        [{'term': {'status': 'error'}}]

    Args:
        existing: 累加器
        bool_key: 布尔槽位，and / or / not
        clause_type: 子句类型，如 term、bool、nested
        *args: build_clause 参数，可选的嵌套回调放在最后
        in_filter_context: 当前是否处于 filter 上下文
    """
    args_list = list(args)
    nested: dict[str, Any] = {}

    if args_list and callable(args_list[-1]):
        nested_callback = args_list.pop()
        is_nested_type = snake_case(clause_type) in NESTED_TYPES
        nested_builder = _make_nested_builder(
            in_filter_context,
            with_query=not in_filter_context or is_nested_type,
        )
        nested_result: NestedResult = nested_callback(nested_builder)

        if is_nested_type:
            nested_query = build(
                {}, nested_result.get_query(), nested_result.get_filter()
            ).get("query")
            if nested_query is not None:
                nested["query"] = nested_query
        else:
            if not in_filter_context and nested_result.has_query():
                nested["must"] = nested_result.get_query()
            if nested_result.has_filter():
                nested["filter"] = nested_result.get_filter()

    nested_filter = nested.get("filter")
    if (
        clause_type in FILTER_UNWRAP_TYPES
        and in_filter_context
        and isinstance(nested_filter, Mapping)
        and nested_filter.get("bool") is not None
    ):
        logger.debug(f"{clause_type} 位于 filter 上下文，去掉多余的 filter.bool 包装")
        clause = {**build_clause(*args_list), **nested_filter["bool"]}
    else:
        clause = {**build_clause(*args_list), **nested}

    existing.append(bool_key, {clause_type: clause})
