"""Elastic Body - Elasticsearch 请求体组装工具.

把逐步累加的查询子句、过滤子句和聚合定义组装为一个完整的 ES 请求体，
正确处理 query 上下文（参与评分）与 filter 上下文（只做匹配、可缓存）
的区别，包括 nested / has_parent / has_child 等自带子查询的关联查询。

主要功能:
    - BodyBuilder: 链式构建完整的请求体
    - build / build_v1: 组装当前 bool.filter 格式或旧版 filtered 格式
    - to_bool: 把 and / or / not 子句归约为 bool 子句
    - push_query: 向累加器追加子句，支持嵌套回调

使用示例:
    from elasticbody import BodyBuilder

    body = (
        BodyBuilder()
        .query("match", "message", "timeout")
        .filter("term", "status", "error")
        .build()
    )
    # {"query": {"bool": {"filter": {"term": {"status": "error"}},
    #                     "must": {"match": {"message": "timeout"}}}}}
"""

__version__ = "0.1.0"

# 导出构建器
from elasticbody.builders import (
    AggregationBuilder,
    BodyBuilder,
    CompoundBuilder,
    FilterBuilder,
    QueryBuilder,
)

# 导出核心组件
from elasticbody.core import (
    BodyVersions,
    FilterSet,
    NestedResult,
    build,
    build_clause,
    build_v1,
    push_query,
    sort_merge,
    to_bool,
)

# 导出异常
from elasticbody.exceptions import (
    ElasticBodyError,
    InvalidAggregationError,
    UnknownBoolKeyError,
)

__all__ = [
    # 版本
    "__version__",
    # 构建器
    "BodyBuilder",
    "QueryBuilder",
    "FilterBuilder",
    "AggregationBuilder",
    "CompoundBuilder",
    # 核心组件
    "FilterSet",
    "NestedResult",
    "BodyVersions",
    "build_clause",
    "sort_merge",
    "to_bool",
    "push_query",
    "build",
    "build_v1",
    # 异常
    "ElasticBodyError",
    "UnknownBoolKeyError",
    "InvalidAggregationError",
]
