"""Elastic Body 常量定义模块."""

# 会携带独立评分子查询的关联查询类型
NESTED_TYPES = ("nested", "has_parent", "has_child")

# 在 filter 上下文中需要去掉多余 filter.bool 包装的子句类型
FILTER_UNWRAP_TYPES = ("bool", "constant_score")

# 布尔槽位
BOOL_KEYS = ("and", "or", "not")


class BoolClauseKeys:
    """bool 子句的键名."""

    MUST = "must"
    SHOULD = "should"
    MUST_NOT = "must_not"
    MINIMUM_SHOULD_MATCH = "minimum_should_match"


class BodyVersions:
    """请求体格式版本."""

    # 旧版 filtered 查询格式
    V1 = "v1"