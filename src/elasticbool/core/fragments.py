"""查询片段模块.

每个条件对应一个查询片段，共四种形态:
    - TermFragment:  {"term": {key: value}}               (eq, neq)
    - TermsFragment: {"terms": {key: value}}              (in, nin)
    - MatchFragment: {"match": {key: value}}              (like, nlike)
    - RangeFragment: {"range": {key: {operator: value}}}  (lt, lte, gt, gte)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from elasticsearch.dsl import Q as ElasticsearchQ

from elasticbool.core.conditions import Condition
from elasticbool.core.operators import RANGE_OPERATORS, ComparisonOperator, lookup
from elasticbool.exceptions import (
    InvalidConditionError,
    UnsupportedComparisonOperatorError,
)


@dataclass(frozen=True)
class QueryFragment(ABC):
    """查询片段基类."""

    kind: ClassVar[str]

    @abstractmethod
    def body(self) -> dict[str, Any]:
        """片段内容，即 kind 对应的值."""
        pass

    def to_q(self) -> ElasticsearchQ:
        """
        转换为 Q 对象.

        Q 对象的字段名会作为查询类构造函数的关键字参数，
        "self"、"_expand__to_dot"、"_field" 等字段名无法表示。

        Returns:
            Q 对象

        Raises:
            InvalidConditionError: 字段名无法用 Q 对象表示时
        """
        # 使用字典形式，避免字段名按点号展开
        try:
            q = ElasticsearchQ({self.kind: self.body()})
        except TypeError as e:
            raise InvalidConditionError(
                f"field name {self.key!r} cannot be expressed as a {self.kind} Q object"
            ) from e
        if q.to_dict() != self.to_dict():
            raise InvalidConditionError(
                f"field name {self.key!r} cannot be expressed as a {self.kind} Q object"
            )
        return q

    def to_dict(self) -> dict[str, Any]:
        """转换为字典格式的 DSL."""
        return {self.kind: self.body()}


@dataclass(frozen=True)
class TermFragment(QueryFragment):
    """精确匹配."""

    kind: ClassVar[str] = "term"

    key: str
    value: Any

    def body(self) -> dict[str, Any]:
        return {self.key: self.value}


@dataclass(frozen=True)
class TermsFragment(QueryFragment):
    """多值精确匹配."""

    kind: ClassVar[str] = "terms"

    key: str
    value: Any

    def body(self) -> dict[str, Any]:
        return {self.key: self.value}


@dataclass(frozen=True)
class MatchFragment(QueryFragment):
    """全文匹配."""

    kind: ClassVar[str] = "match"

    key: str
    value: Any

    def body(self) -> dict[str, Any]:
        return {self.key: self.value}


@dataclass(frozen=True)
class RangeFragment(QueryFragment):
    """范围查询."""

    kind: ClassVar[str] = "range"

    key: str
    operator: str  # lt, lte, gt, gte
    value: Any

    def body(self) -> dict[str, Any]:
        return {self.key: {self.operator: self.value}}


def build_fragment(condition: Condition) -> QueryFragment:
    """
    根据比较操作符构建查询片段.

    Args:
        condition: 已规范化的条件

    Returns:
        查询片段

    Raises:
        UnsupportedComparisonOperatorError: 无法识别的比较操作符
    """
    operator = lookup(ComparisonOperator, condition.comparison_operator)
    key, value = condition.key, condition.value

    if operator in (ComparisonOperator.EQ, ComparisonOperator.NEQ):
        return TermFragment(key=key, value=value)
    elif operator in (ComparisonOperator.IN, ComparisonOperator.NIN):
        return TermsFragment(key=key, value=value)
    elif operator in (ComparisonOperator.LIKE, ComparisonOperator.NLIKE):
        return MatchFragment(key=key, value=value)
    elif operator in RANGE_OPERATORS:
        return RangeFragment(key=key, operator=operator.value, value=value)
    else:
        raise UnsupportedComparisonOperatorError(
            f"unsupported comparison operators: {condition.comparison_operator!r}",
            condition=condition,
        )
