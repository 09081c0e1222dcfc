"""布尔子句归约模块."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from elasticbody.core.constants import BOOL_KEYS, BoolClauseKeys
from elasticbody.exceptions import UnknownBoolKeyError
from elasticbody.typing import Clause, ClauseBucket

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class FilterSet:
    """
    布尔子句累加器.

    三个槽位始终存在（可以为空），按追加顺序保存子句。
    每个构建过程独占一个 FilterSet，不要在多个构建过程之间共享。

    Attributes:
        and_: must 子句列表
        or_: should 子句列表
        not_: must_not 子句列表
        minimum_should_match: should 至少匹配的数量，仅在 or_ 多于一个子句时输出
    """

    and_: ClauseBucket = dataclasses.field(default_factory=list)
    or_: ClauseBucket = dataclasses.field(default_factory=list)
    not_: ClauseBucket = dataclasses.field(default_factory=list)
    minimum_should_match: int | str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FilterSet:
        """从 {"and": [...], "or": [...], "not": [...]} 格式的字典创建."""
        return cls(
            and_=list(data.get("and") or []),
            or_=list(data.get("or") or []),
            not_=list(data.get("not") or []),
            minimum_should_match=data.get(BoolClauseKeys.MINIMUM_SHOULD_MATCH),
        )

    def bucket(self, bool_key: str) -> ClauseBucket:
        """
        获取布尔槽位对应的子句列表.

        Raises:
            UnknownBoolKeyError: bool_key 不是 and / or / not 时抛出
        """
        if bool_key not in BOOL_KEYS:
            raise UnknownBoolKeyError(
                f"Unknown bool key: {bool_key!r}, must be one of {BOOL_KEYS}"
            )
        return getattr(self, f"{bool_key}_")

    def append(self, bool_key: str, clause: Clause) -> None:
        """向指定槽位追加一个子句."""
        self.bucket(bool_key).append(clause)

    def is_empty(self) -> bool:
        """三个槽位是否都为空."""
        return not (self.and_ or self.or_ or self.not_)


def _unwrap(bucket: ClauseBucket) -> ClauseBucket | Clause | None:
    """多于一个子句时保持列表，否则取唯一的子句（空列表返回 None）."""
    if len(bucket) > 1:
        return list(bucket)
    return bucket[-1] if bucket else None


def to_bool(filters: FilterSet | Mapping[str, Any]) -> Clause:
    """
    将 and / or / not 三个槽位归约为一个 bool 子句.

    只有一个 must 子句且没有 should / must_not 时，直接返回该子句，
    省略多余的 {"bool": {"must": ...}} 包装。

    示例:
        >>> to_bool({"and": [{"term": {"x": 1}}], "or": [], "not": []})
        {'term': {'x': 1}}
        >>> to_bool({"and": [{"a": 1}, {"a": 2}], "or": [{"b": 1}], "not": []})
        {'bool': {'must': [{'a': 1}, {'a': 2}], 'should': [{'b': 1}]}}

    Args:
        filters: FilterSet 或等价的字典

    Returns:
        归约后的子句
    """
    if isinstance(filters, Mapping):
        filters = FilterSet.from_mapping(filters)

    must = _unwrap(filters.and_)
    should = _unwrap(filters.or_)
    must_not = _unwrap(filters.not_)

    if len(filters.and_) == 1 and should is None and must_not is None:
        logger.debug("单个 must 子句，省略 bool 包装")
        return must

    cleaned: dict[str, Any] = {}

    if must is not None:
        cleaned[BoolClauseKeys.MUST] = must
    # should / must_not 保留原始列表形式
    if should is not None:
        cleaned[BoolClauseKeys.SHOULD] = list(filters.or_)
    if must_not is not None:
        cleaned[BoolClauseKeys.MUST_NOT] = list(filters.not_)
    if filters.minimum_should_match:
        if len(filters.or_) > 1:
            cleaned[BoolClauseKeys.MINIMUM_SHOULD_MATCH] = filters.minimum_should_match
        else:
            logger.debug(
                f"should 子句不足两个，忽略 minimum_should_match={filters.minimum_should_match!r}"
            )

    return {"bool": cleaned}
