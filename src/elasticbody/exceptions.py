"""Elastic Body 异常定义模块."""


class ElasticBodyError(Exception):
    """Elastic Body 基础异常类."""

    pass


class UnknownBoolKeyError(ElasticBodyError, KeyError):
    """未知的布尔槽位异常（只支持 and / or / not）."""

    pass


class InvalidAggregationError(ElasticBodyError, ValueError):
    """无效的聚合定义异常（如聚合名称为空或包含非法字符）."""

    pass
