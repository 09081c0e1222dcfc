"""过滤构建器模块."""

from __future__ import annotations

from typing import Any

from elasticbody.core.boolean import FilterSet, to_bool
from elasticbody.core.nested import push_query
from elasticbody.typing import Clause


class FilterBuilder:
    """
    过滤子句构建器（filter 上下文，不参与评分，可缓存）.

    单独使用时也是嵌套回调在 filter 上下文中收到的构建器，只提供 filter 方法。

    使用示例:
        builder = FilterBuilder()
        builder.filter("term", "status", "active").or_filter("term", "tag", "a")
        builder.get_filter()
    """

    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)
        self._filters = FilterSet()

    def _push_filter(self, bool_key: str, clause_type: str, *args: Any) -> None:
        # filter 子句始终处于 filter 上下文
        push_query(self._filters, bool_key, clause_type, *args, in_filter_context=True)

    def filter(self, clause_type: str, *args: Any) -> FilterBuilder:  # noqa: A003
        """
        添加 must 过滤子句.

        Args:
            clause_type: 子句类型，如 term、range、bool、has_child
            *args: 字段、值、选项，最后一个参数可以是嵌套回调

        Returns:
            self，支持链式调用
        """
        self._push_filter("and", clause_type, *args)
        return self

    and_filter = filter
    add_filter = filter

    def or_filter(self, clause_type: str, *args: Any) -> FilterBuilder:
        """添加 should 过滤子句."""
        self._push_filter("or", clause_type, *args)
        return self

    def not_filter(self, clause_type: str, *args: Any) -> FilterBuilder:
        """添加 must_not 过滤子句."""
        self._push_filter("not", clause_type, *args)
        return self

    def filter_minimum_should_match(self, value: int | str) -> FilterBuilder:
        """设置 should 过滤子句至少匹配的数量."""
        self._filters.minimum_should_match = value
        return self

    def has_filter(self) -> bool:
        """是否添加过过滤子句."""
        return not self._filters.is_empty()

    def get_filter(self) -> Clause:
        """获取归约后的过滤子句，没有过滤时返回空字典."""
        if not self.has_filter():
            return {}
        return to_bool(self._filters)

    def has_query(self) -> bool:
        """只有 filter 能力时始终没有查询."""
        return False

    def get_query(self) -> Clause:
        """只有 filter 能力时始终返回空查询."""
        return {}
