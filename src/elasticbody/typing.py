"""Elastic Body 类型定义模块."""

from typing import Any, Dict, List

# 子句类型: {子句类型名: 子句内容}
Clause = Dict[str, Any]

# 同一布尔角色下的有序子句列表
ClauseBucket = List[Clause]

# 请求体类型
RequestBody = Dict[str, Any]

# 聚合定义字典类型
# 格式: {聚合名称: {聚合类型: {...}}}
AggregationDict = Dict[str, Any]
