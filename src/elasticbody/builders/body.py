"""请求体构建器模块."""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Mapping
from typing import Any

from elasticsearch.dsl import Search

from elasticbody.builders.aggregation import AggregationBuilder
from elasticbody.builders.filter import FilterBuilder
from elasticbody.builders.query import QueryBuilder
from elasticbody.core.body import build, build_v1
from elasticbody.core.clause import sort_merge
from elasticbody.core.constants import BodyVersions
from elasticbody.typing import RequestBody

logger = logging.getLogger(__name__)


class CompoundBuilder(QueryBuilder, FilterBuilder):
    """同时提供 query 和 filter 方法的构建器，用于嵌套回调."""

    pass


class BodyBuilder(QueryBuilder, FilterBuilder, AggregationBuilder):
    """
    ES 请求体构建器.

    累加查询、过滤、聚合、排序和分页参数，最后组装为完整的请求体。
    每个请求体的构建过程独占一个 BodyBuilder 实例。

    使用示例:
        body = (
            BodyBuilder()
            .query("match", "message", "timeout")
            .filter("term", "status", "error")
            .filter("nested", "path", "comments", lambda q: q.query("match", "comments.text", "slow"))
            .aggregation("terms", "host")
            .sort("@timestamp", "desc")
            .size(20)
            .build()
        )

        # 旧版 filtered 格式
        body_v1 = builder.build(BodyVersions.V1)

        # 转换为 elasticsearch.dsl 的 Search 对象
        search = builder.to_search(lambda: Search(index="alerts"))
    """

    def __init__(self, body: Mapping[str, Any] | None = None):
        """
        初始化构建器.

        Args:
            body: 基础请求体，会被深拷贝
        """
        super().__init__()
        self._body: RequestBody = copy.deepcopy(dict(body or {}))

    def sort(self, field: str | list, direction: Any = "asc") -> BodyBuilder:
        """
        添加排序.

        Args:
            field: 排序字段；也可以是字段列表，元素为字段名或 {字段: 方向/选项}
            direction: 排序方向（"asc"/"desc"）或排序选项字典

        Returns:
            self，支持链式调用

        示例:
            builder.sort("timestamp", "desc")
            builder.sort("price", {"order": "asc", "mode": "avg"})
            builder.sort(["name", {"timestamp": "desc"}])
        """
        sorts = self._body.get("sort", [])
        if not isinstance(sorts, list):
            # 基础请求体中的单个排序项
            sorts = [sorts]
        if isinstance(field, list):
            for item in field:
                if isinstance(item, Mapping):
                    for key, value in item.items():
                        sorts = sort_merge(sorts, key, value)
                else:
                    sorts = sort_merge(sorts, item, direction)
        else:
            sorts = sort_merge(sorts, field, direction)

        self._body["sort"] = sorts
        return self

    def size(self, value: int) -> BodyBuilder:
        """设置返回文档数量."""
        self._body["size"] = value
        return self

    def from_(self, value: int) -> BodyBuilder:
        """设置起始偏移量."""
        self._body["from"] = value
        return self

    def raw_option(self, key: str, value: Any) -> BodyBuilder:
        """
        设置任意顶层请求参数，如 _source、track_total_hits.

        Returns:
            self，支持链式调用
        """
        self._body[key] = value
        return self

    def build(self, version: str | None = None) -> RequestBody:
        """
        组装请求体.

        Args:
            version: 请求体格式，"v1" 为旧版 filtered 格式，其他为当前格式

        Returns:
            新的请求体字典
        """
        queries = self.get_query()
        filters = self.get_filter()
        aggregations = self.get_aggregations()

        if version == BodyVersions.V1:
            logger.debug("使用旧版 filtered 格式组装请求体")
            return build_v1(self._body, queries, filters, aggregations)
        return build(self._body, queries, filters, aggregations)

    def to_search(self, search_factory: Callable[[], Search]) -> Search:
        """
        构建 Search 对象.

        Args:
            search_factory: Search 对象工厂函数

        Returns:
            elasticsearch.dsl.Search 对象
        """
        search = search_factory()
        return search.update_from_dict(self.build())

    def clone(self) -> BodyBuilder:
        """复制当前构建器，两个实例之间不共享状态."""
        return copy.deepcopy(self)
