"""操作符与类型定义模块."""

from enum import Enum


class ConditionType(str, Enum):
    """条件值的数据类型."""

    TEXT = "text"
    NUMBER = "number"
    ARRAY = "array"
    DATE = "date"


class ComparisonOperator(str, Enum):
    """比较操作符."""

    EQ = "eq"
    NEQ = "neq"
    LIKE = "like"  # 模糊匹配
    NLIKE = "nlike"
    LT = "lt"
    LTE = "lte"
    GT = "gt"
    GTE = "gte"
    IN = "in"
    NIN = "nin"


class LogicalOperator(str, Enum):
    """条件加入 bool 查询时的逻辑关系."""

    AND = "and"
    OR = "or"


class ClauseBucket(str, Enum):
    """bool 查询的子句."""

    MUST = "must"
    MUST_NOT = "must_not"
    SHOULD = "should"


# 每种类型允许的比较操作符
ALLOWED_OPERATORS: dict[ConditionType, frozenset[ComparisonOperator]] = {
    ConditionType.TEXT: frozenset(
        {
            ComparisonOperator.EQ,
            ComparisonOperator.NEQ,
            ComparisonOperator.LIKE,
            ComparisonOperator.NLIKE,
        }
    ),
    ConditionType.NUMBER: frozenset(
        {
            ComparisonOperator.EQ,
            ComparisonOperator.NEQ,
            ComparisonOperator.LT,
            ComparisonOperator.LTE,
            ComparisonOperator.GT,
            ComparisonOperator.GTE,
        }
    ),
    ConditionType.ARRAY: frozenset({ComparisonOperator.IN, ComparisonOperator.NIN}),
    ConditionType.DATE: frozenset(
        {
            ComparisonOperator.LT,
            ComparisonOperator.LTE,
            ComparisonOperator.GT,
            ComparisonOperator.GTE,
        }
    ),
}

# 否定操作符：无论逻辑操作符是什么，都进入 must_not
NEGATING_OPERATORS = frozenset(
    {ComparisonOperator.NEQ, ComparisonOperator.NLIKE, ComparisonOperator.NIN}
)

RANGE_OPERATORS = frozenset(
    {
        ComparisonOperator.LT,
        ComparisonOperator.LTE,
        ComparisonOperator.GT,
        ComparisonOperator.GTE,
    }
)


def lookup(enum_cls: type[Enum], value: object) -> Enum | None:
    """按值查找枚举成员，区分大小写.

    Args:
        enum_cls: 枚举类
        value: 字符串值或枚举成员

    Returns:
        对应的枚举成员，不存在时返回 None
    """
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None
