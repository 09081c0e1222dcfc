"""工具函数单元测试."""

import pytest

from elasticbody.core import assoc_path, is_empty, merge_deep_right, snake_case


class TestSnakeCase:
    """snake_case 测试类."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("nested", "nested"),
            ("hasChild", "has_child"),
            ("HasParent", "has_parent"),
            ("has-parent", "has_parent"),
            ("has child", "has_child"),
            ("constant_score", "constant_score"),
        ],
    )
    def test_snake_case(self, value, expected):
        """测试各种命名形式."""
        assert snake_case(value) == expected


class TestIsEmpty:
    """is_empty 测试类."""

    def test_empty_values(self):
        """测试空值."""
        assert is_empty(None)
        assert is_empty({})
        assert is_empty([])
        assert is_empty("")

    def test_non_empty_values(self):
        """测试非空值."""
        assert not is_empty({"a": 1})
        assert not is_empty([{}])
        assert not is_empty(0)


class TestMergeDeepRight:
    """merge_deep_right 测试类."""

    def test_merges_nested_mappings(self):
        """测试递归合并字典."""
        left = {"query": {"bool": {"filter": [{"a": 1}]}}, "size": 1}
        right = {"query": {"bool": {"must": {"b": 2}}}}
        assert merge_deep_right(left, right) == {
            "query": {"bool": {"filter": [{"a": 1}], "must": {"b": 2}}},
            "size": 1,
        }

    def test_lists_are_replaced(self):
        """测试列表被右侧替换，不逐元素合并."""
        assert merge_deep_right({"a": [1, 2, 3]}, {"a": [4]}) == {"a": [4]}

    def test_inputs_not_mutated(self):
        """测试输入不被修改."""
        left = {"a": {"b": 1}}
        right = {"a": {"c": 2}}
        merge_deep_right(left, right)
        assert left == {"a": {"b": 1}}
        assert right == {"a": {"c": 2}}


class TestAssocPath:
    """assoc_path 测试类."""

    def test_creates_path(self):
        """测试创建路径."""
        assert assoc_path(["a", "b"], 1, {}) == {"a": {"b": 1}}

    def test_keeps_siblings(self):
        """测试保留同级键."""
        target = {"query": {"match_all": {}}, "size": 1}
        result = assoc_path(["query", "filtered", "filter"], {"x": 1}, target)
        assert result == {
            "query": {"match_all": {}, "filtered": {"filter": {"x": 1}}},
            "size": 1,
        }
        assert target == {"query": {"match_all": {}}, "size": 1}

    def test_replaces_non_mapping_node(self):
        """测试非字典节点被替换."""
        assert assoc_path(["a", "b"], 1, {"a": 5}) == {"a": {"b": 1}}
