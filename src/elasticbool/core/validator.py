"""条件校验模块.

校验规则（按顺序，遇到第一个错误立即失败）:
    1. type 必须是 text、number、array、date 之一
    2. logical_operator 必须是 and 或 or
    3. comparison_operator 必须在该 type 允许的操作符范围内

校验区分大小写，大小写规范化应在校验之后进行。
"""

import logging
from collections.abc import Iterable

from elasticbool.core.conditions import Condition
from elasticbool.core.operators import (
    ALLOWED_OPERATORS,
    ComparisonOperator,
    ConditionType,
    LogicalOperator,
    lookup,
)
from elasticbool.exceptions import (
    UnsupportedComparisonOperatorError,
    UnsupportedLogicalOperatorError,
    UnsupportedTypeError,
)

logger = logging.getLogger(__name__)


def validate_condition(condition: Condition, index: int | None = None) -> None:
    """
    校验单个条件.

    Args:
        condition: 条件
        index: 条件在输入中的位置

    Raises:
        UnsupportedTypeError: type 不合法
        UnsupportedLogicalOperatorError: logical_operator 不合法
        UnsupportedComparisonOperatorError: comparison_operator 不被该 type 支持
    """
    cond_type = lookup(ConditionType, condition.type)
    if cond_type is None:
        logger.warning(
            f"Rejecting condition #{index}: unsupported data type {condition.type!r}"
        )
        raise UnsupportedTypeError(
            f"unsupported data type: {condition.type!r}",
            condition=condition,
            index=index,
        )

    if lookup(LogicalOperator, condition.logical_operator) is None:
        logger.warning(
            f"Rejecting condition #{index}: unsupported logical operator "
            f"{condition.logical_operator!r}"
        )
        raise UnsupportedLogicalOperatorError(
            f"unsupported logical operators: {condition.logical_operator!r}",
            condition=condition,
            index=index,
        )

    operator = lookup(ComparisonOperator, condition.comparison_operator)
    if operator not in ALLOWED_OPERATORS[cond_type]:
        logger.warning(
            f"Rejecting condition #{index}: comparison operator "
            f"{condition.comparison_operator!r} not allowed for {cond_type.value}"
        )
        raise UnsupportedComparisonOperatorError(
            f"unsupported comparison operators for {cond_type.value}: "
            f"{condition.comparison_operator!r}",
            condition=condition,
            index=index,
        )


def validate(conditions: Iterable[Condition]) -> None:
    """
    按输入顺序校验全部条件，第一个不合法的条件即抛出异常.

    Args:
        conditions: 条件序列

    Raises:
        ConditionError 的子类，见 validate_condition
    """
    for index, condition in enumerate(conditions):
        validate_condition(condition, index=index)
