"""核心模块导出."""

from elasticbody.core.body import build, build_v1
from elasticbody.core.boolean import FilterSet, to_bool
from elasticbody.core.clause import build_clause, sort_merge
from elasticbody.core.constants import (
    BOOL_KEYS,
    FILTER_UNWRAP_TYPES,
    NESTED_TYPES,
    BodyVersions,
    BoolClauseKeys,
)
from elasticbody.core.nested import NestedResult, push_query
from elasticbody.core.utils import assoc_path, is_empty, merge_deep_right, snake_case

__all__ = [
    "NESTED_TYPES",
    "FILTER_UNWRAP_TYPES",
    "BOOL_KEYS",
    "BoolClauseKeys",
    "BodyVersions",
    "FilterSet",
    "NestedResult",
    "build_clause",
    "sort_merge",
    "to_bool",
    "push_query",
    "build",
    "build_v1",
    "snake_case",
    "is_empty",
    "merge_deep_right",
    "assoc_path",
]
