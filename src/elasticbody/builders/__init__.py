"""构建器模块导出."""

from elasticbody.builders.aggregation import AggregationBuilder
from elasticbody.builders.body import BodyBuilder, CompoundBuilder
from elasticbody.builders.filter import FilterBuilder
from elasticbody.builders.query import QueryBuilder

__all__ = [
    "QueryBuilder",
    "FilterBuilder",
    "AggregationBuilder",
    "CompoundBuilder",
    "BodyBuilder",
]
