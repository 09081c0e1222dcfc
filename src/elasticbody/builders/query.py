"""查询构建器模块."""

from __future__ import annotations

from typing import Any

from elasticbody.core.boolean import FilterSet, to_bool
from elasticbody.core.nested import push_query
from elasticbody.typing import Clause


class QueryBuilder:
    """
    查询子句构建器（query 上下文，参与评分）.

    使用示例:
        builder = QueryBuilder()
        builder.query("match", "message", "timeout").not_query("term", "level", "debug")
        builder.get_query()
        # {"bool": {"must": {"match": {...}}, "must_not": [{"term": {...}}]}}
    """

    def __init__(self, in_filter_context: bool = False, **kwargs: Any):
        """
        初始化构建器.

        Args:
            in_filter_context: 是否处于 filter 上下文（嵌套在 filter 中的关联查询）
        """
        super().__init__(**kwargs)
        self._in_filter_context = in_filter_context
        self._queries = FilterSet()

    def _push_query(self, bool_key: str, clause_type: str, *args: Any) -> None:
        push_query(
            self._queries,
            bool_key,
            clause_type,
            *args,
            in_filter_context=self._in_filter_context,
        )

    def query(self, clause_type: str, *args: Any) -> QueryBuilder:
        """
        添加 must 查询子句.

        Args:
            clause_type: 子句类型，如 match、term、bool、nested
            *args: 字段、值、选项，最后一个参数可以是嵌套回调

        Returns:
            self，支持链式调用
        """
        self._push_query("and", clause_type, *args)
        return self

    and_query = query
    add_query = query

    def or_query(self, clause_type: str, *args: Any) -> QueryBuilder:
        """添加 should 查询子句."""
        self._push_query("or", clause_type, *args)
        return self

    def not_query(self, clause_type: str, *args: Any) -> QueryBuilder:
        """添加 must_not 查询子句."""
        self._push_query("not", clause_type, *args)
        return self

    def query_minimum_should_match(self, value: int | str) -> QueryBuilder:
        """
        设置 should 查询子句至少匹配的数量.

        只有 should 子句多于一个时才会输出。

        Args:
            value: 数量（如 2）或百分比（如 "75%"）

        Returns:
            self，支持链式调用
        """
        self._queries.minimum_should_match = value
        return self

    def has_query(self) -> bool:
        """是否添加过查询子句."""
        return not self._queries.is_empty()

    def get_query(self) -> Clause:
        """获取归约后的查询子句，没有查询时返回空字典."""
        if not self.has_query():
            return {}
        return to_bool(self._queries)
