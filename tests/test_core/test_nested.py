"""嵌套子句追加单元测试."""

import pytest

from elasticbody.builders import CompoundBuilder, FilterBuilder
from elasticbody.core import FilterSet, NestedResult, push_query


class TestPushQuery:
    """push_query 测试类."""

    def test_leaf_clause(self):
        """测试不带回调的普通子句."""
        filters = FilterSet()
        push_query(filters, "and", "term", "status", "error")
        push_query(filters, "or", "range", "age", {"gte": 18})
        push_query(filters, "not", "exists", "deleted_at")

        assert filters.and_ == [{"term": {"status": "error"}}]
        assert filters.or_ == [{"range": {"age": {"gte": 18}}}]
        assert filters.not_ == [{"exists": {"field": "deleted_at"}}]

    def test_leaf_clause_with_opts(self):
        """测试带选项的子句."""
        queries = FilterSet()
        push_query(queries, "and", "match", "title", "python", {"boost": 2})
        assert queries.and_ == [{"match": {"title": "python", "boost": 2}}]

    def test_nested_type_builds_scored_sub_query(self):
        """测试 nested 类型把回调的 query / filter 组合为完整的 query."""
        queries = FilterSet()
        push_query(
            queries,
            "and",
            "nested",
            "path",
            "comments",
            lambda q: q.query("match", "comments.text", "slow").filter(
                "term", "comments.approved", True
            ),
        )

        assert queries.and_ == [
            {
                "nested": {
                    "path": "comments",
                    "query": {
                        "bool": {
                            "must": {"match": {"comments.text": "slow"}},
                            "filter": {"term": {"comments.approved": True}},
                        }
                    },
                }
            }
        ]

    def test_nested_type_in_filter_context_gets_query_methods(self):
        """测试 filter 上下文中的关联查询仍然提供 query 方法."""
        filters = FilterSet()
        received = []

        def callback(builder):
            received.append(builder)
            return builder.query("match", "text", "great")

        push_query(
            filters, "and", "hasChild", "type", "review", callback, in_filter_context=True
        )

        assert isinstance(received[0], CompoundBuilder)
        assert filters.and_ == [
            {"hasChild": {"type": "review", "query": {"match": {"text": "great"}}}}
        ]

    def test_nested_type_with_empty_callback(self):
        """测试回调没有添加任何子句时不输出 query."""
        queries = FilterSet()
        push_query(queries, "and", "has_parent", "parent_type", "blog", lambda q: q)
        assert queries.and_ == [{"has_parent": {"parent_type": "blog"}}]

    def test_bool_in_query_context(self):
        """测试 query 上下文中的 bool 子句，query 放在 must 下."""
        queries = FilterSet()
        push_query(
            queries,
            "and",
            "bool",
            lambda q: q.query("match", "title", "python").filter(
                "term", "status", "published"
            ),
        )

        assert queries.and_ == [
            {
                "bool": {
                    "must": {"match": {"title": "python"}},
                    "filter": {"term": {"status": "published"}},
                }
            }
        ]

    def test_bool_in_filter_context_unwraps_filter_bool(self):
        """测试 filter 上下文中的 bool 子句去掉多余的 filter.bool 包装."""
        filters = FilterSet()
        push_query(
            filters,
            "and",
            "bool",
            lambda f: f.or_filter("term", "tag", "a").or_filter("term", "tag", "b"),
            in_filter_context=True,
        )

        assert filters.and_ == [
            {"bool": {"should": [{"term": {"tag": "a"}}, {"term": {"tag": "b"}}]}}
        ]

    def test_bool_in_filter_context_unwraps_all_slots(self):
        """测试 filter 上下文中 bool 子句的多个槽位和 minimum_should_match 一起被展开."""
        filters = FilterSet()
        push_query(
            filters,
            "and",
            "bool",
            lambda f: f.or_filter("term", "tag", "a")
            .or_filter("term", "tag", "b")
            .not_filter("term", "status", "deleted")
            .filter_minimum_should_match(1),
            in_filter_context=True,
        )

        assert filters.and_ == [
            {
                "bool": {
                    "should": [{"term": {"tag": "a"}}, {"term": {"tag": "b"}}],
                    "must_not": [{"term": {"status": "deleted"}}],
                    "minimum_should_match": 1,
                }
            }
        ]

    def test_constant_score_single_filter_not_unwrapped(self):
        """测试 constant_score 的单个过滤子句没有 bool 包装，保持 filter 键."""
        filters = FilterSet()
        push_query(
            filters,
            "and",
            "constant_score",
            None,
            None,
            {"boost": 1.2},
            lambda f: f.filter("term", "status", "active"),
            in_filter_context=True,
        )

        assert filters.and_ == [
            {
                "constant_score": {
                    "boost": 1.2,
                    "filter": {"term": {"status": "active"}},
                }
            }
        ]

    def test_filter_context_hides_query_methods(self):
        """测试 filter 上下文中的普通子句只提供 filter 方法."""
        filters = FilterSet()
        received = []

        def callback(builder):
            received.append(builder)
            return builder.filter("term", "a", 1)

        push_query(filters, "and", "bool", callback, in_filter_context=True)

        assert type(received[0]) is FilterBuilder
        assert not hasattr(received[0], "query")

    def test_query_in_filter_context_raises(self):
        """测试在 filter 上下文的普通子句中调用 query 方法时异常向上传播."""
        filters = FilterSet()

        with pytest.raises(AttributeError, match="'query'"):
            push_query(
                filters,
                "and",
                "bool",
                lambda f: f.query("match", "title", "python"),
                in_filter_context=True,
            )
        assert filters.is_empty()

    def test_callback_error_propagates(self):
        """测试回调异常原样传播，累加器不变."""
        queries = FilterSet()

        class CallbackError(Exception):
            pass

        def callback(builder):
            raise CallbackError("boom")

        with pytest.raises(CallbackError, match="boom"):
            push_query(queries, "and", "nested", "path", "x", callback)
        assert queries.is_empty()

    def test_deep_nesting_threads_context(self):
        """测试多层嵌套时上下文逐层传递."""
        queries = FilterSet()
        push_query(
            queries,
            "and",
            "bool",
            lambda q: q.filter(
                "nested",
                "path",
                "items",
                lambda n: n.query("match", "items.name", "pen").filter(
                    "bool",
                    lambda f: f.filter("term", "items.color", "red").not_filter(
                        "term", "items.size", "xl"
                    ),
                ),
            ),
        )

        assert queries.and_ == [
            {
                "bool": {
                    "filter": {
                        "nested": {
                            "path": "items",
                            "query": {
                                "bool": {
                                    "must": {"match": {"items.name": "pen"}},
                                    "filter": {
                                        "bool": {
                                            "must": {"term": {"items.color": "red"}},
                                            "must_not": [{"term": {"items.size": "xl"}}],
                                        }
                                    },
                                }
                            },
                        }
                    }
                }
            }
        ]

    def test_builders_satisfy_nested_result(self):
        """测试两种构建器都满足 NestedResult 协议."""
        assert isinstance(FilterBuilder(), NestedResult)
        assert isinstance(CompoundBuilder(), NestedResult)
        assert FilterBuilder().has_query() is False
