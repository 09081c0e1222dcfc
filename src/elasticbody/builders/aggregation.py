"""聚合构建器模块."""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from typing import Any

from elasticbody.core.clause import build_clause
from elasticbody.exceptions import InvalidAggregationError
from elasticbody.typing import AggregationDict


class AggregationBuilder:
    """
    聚合构建器.

    使用示例:
        builder = AggregationBuilder()
        builder.aggregation("terms", "status", {"size": 10}, lambda a: a.agg("avg", "latency"))
        builder.get_aggregations()
        # {"agg_terms_status": {"terms": {"field": "status", "size": 10},
        #                       "aggs": {"agg_avg_latency": {"avg": {"field": "latency"}}}}}
    """

    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)
        self._aggregations: AggregationDict = {}

    def _validate_aggregation_name(self, name: str) -> None:
        """
        验证聚合名称是否有效.

        Raises:
            InvalidAggregationError: 聚合名称为空或包含双引号、点号、空格时抛出
        """
        if not name or not isinstance(name, str):
            raise InvalidAggregationError("聚合名称必须是非空字符串")
        invalid_chars = {'"': "双引号", ".": "点号", " ": "空格"}
        for char, char_name in invalid_chars.items():
            if char in name:
                raise InvalidAggregationError(f"聚合名称不能包含{char_name}: '{char}'")

    def aggregation(
        self,
        agg_type: str,
        field: Any = None,
        opts: Mapping | Callable | None = None,
        name: str | Callable | None = None,
        nested: Callable | None = None,
    ) -> AggregationBuilder:
        """
        添加聚合.

        Args:
            agg_type: 聚合类型，如 terms、avg、date_histogram
            field: 字段名或完整的聚合内容
            opts: 其他聚合参数
            name: 聚合名称，默认为 agg_<类型>_<字段>
            nested: 子聚合回调，接收新的 AggregationBuilder 并返回它；
                也可以放在 opts 或 name 的位置

        Returns:
            self，支持链式调用

        Raises:
            InvalidAggregationError: 聚合名称无效时抛出
        """
        if callable(opts):
            nested, opts = opts, None
        if callable(name):
            nested, name = name, None

        if name is None:
            name = f"agg_{agg_type}_{field}" if isinstance(field, str) else f"agg_{agg_type}"
        self._validate_aggregation_name(name)

        definition: dict[str, Any] = {agg_type: build_clause(field, None, opts)}
        if nested is not None:
            sub_builder = nested(AggregationBuilder())
            if sub_builder.has_aggregations():
                definition["aggs"] = sub_builder.get_aggregations()

        self._aggregations[name] = definition
        return self

    agg = aggregation

    def has_aggregations(self) -> bool:
        """是否添加过聚合."""
        return bool(self._aggregations)

    def get_aggregations(self) -> AggregationDict:
        """获取聚合定义的副本."""
        return copy.deepcopy(self._aggregations)
