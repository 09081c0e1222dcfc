"""嵌套查询使用示例.

本示例展示如何使用 BodyBuilder 的嵌套查询功能:
1. 逻辑嵌套 (bool): query 上下文与 filter 上下文中的 bool 子句
2. 关联查询 (nested / has_child): 自带评分子查询的嵌套文档查询
3. 旧版 filtered 格式
"""

import json

from elasticsearch.dsl import Search

from elasticbody import BodyBuilder, BodyVersions


def _print(title, body):
    print(f"\n{title}:")
    print(json.dumps(body, indent=2, ensure_ascii=False))


# ==================== 示例 1: 逻辑嵌套 ====================
def example_logical_nesting():
    """示例: 使用 bool 子句构建复杂查询.

    场景: 标题匹配 "timeout"，并且 (level = "error" OR level = "fatal")
    """
    body = (
        BodyBuilder()
        .query("match", "title", "timeout")
        .filter(
            "bool",
            lambda f: f.or_filter("term", "level", "error").or_filter(
                "term", "level", "fatal"
            ),
        )
        .build()
    )

    _print("逻辑嵌套示例 DSL", body)
    return body


# ==================== 示例 2: nested 查询 ====================
def example_nested_query():
    """示例: 查询嵌套字段 comments 中包含 "slow" 且已审核的文档."""
    body = (
        BodyBuilder()
        .query(
            "nested",
            "path",
            "comments",
            lambda q: q.query("match", "comments.text", "slow").filter(
                "term", "comments.approved", True
            ),
        )
        .build()
    )

    _print("nested 查询示例 DSL", body)
    return body


# ==================== 示例 3: filter 中的 has_child ====================
def example_has_child_in_filter():
    """示例: filter 上下文中的 has_child 仍然可以使用 query 方法."""
    body = (
        BodyBuilder()
        .filter(
            "has_child",
            "type",
            "review",
            lambda q: q.query("match", "text", "great").filter("range", "stars", {"gte": 4}),
        )
        .aggregation("terms", "category", {"size": 5})
        .sort("created_at", "desc")
        .size(20)
        .build()
    )

    _print("has_child 示例 DSL", body)
    return body


# ==================== 示例 4: 旧版格式与 Search 对象 ====================
def example_legacy_and_search():
    """示例: 同一个构建器输出旧版 filtered 格式，以及 Search 对象."""
    builder = (
        BodyBuilder()
        .query("match", "message", "disk full")
        .filter("term", "host", "web-01")
    )

    _print("旧版 filtered 格式 DSL", builder.build(BodyVersions.V1))

    search = builder.to_search(lambda: Search(index="logs"))
    _print("Search 对象 DSL", search.to_dict())
    return search


if __name__ == "__main__":
    # 运行所有示例
    example_logical_nesting()
    example_nested_query()
    example_has_child_in_filter()
    example_legacy_and_search()
