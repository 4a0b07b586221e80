"""条件模型模块."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from elasticbool.exceptions import InvalidConditionError

# Condition 属性名 -> 外部输入中可接受的字段名
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "type": ("type",),
    "comparison_operator": ("comparisonOperator", "comparison_operator"),
    "logical_operator": ("logicalOperator", "logical_operator"),
    "key": ("key",),
    "value": ("value",),
}


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _lower(value: Any) -> Any:
    value = _plain(value)
    if isinstance(value, str):
        return value.lower()
    return value


@dataclass(frozen=True)
class Condition:
    """过滤条件.

    例如: name 等于 "dvt"
        Condition(
            type="text",
            comparison_operator="eq",
            logical_operator="and",
            key="name",
            value="dvt",
        )

    Attributes:
        type: 值的数据类型 (text, number, array, date)
        comparison_operator: 比较操作符 (eq, neq, like, nlike, lt, lte, gt, gte, in, nin)
        logical_operator: 逻辑操作符 (and, or)
        key: 字段名
        value: 条件值，in/nin 时为列表
    """

    type: str  # noqa: A003
    comparison_operator: str
    logical_operator: str
    key: str
    value: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int | None = None) -> Condition:
        """
        从字典构造条件.

        同时支持 comparisonOperator/logicalOperator 与 snake_case 字段名。
        类型与操作符缺失时保留为 None，交由校验阶段报告。

        Args:
            data: 条件字典
            index: 条件在输入中的位置，用于错误信息

        Returns:
            Condition 对象

        Raises:
            InvalidConditionError: 输入不是字典或缺少 key 字段时
        """
        if not isinstance(data, Mapping):
            raise InvalidConditionError(
                f"condition must be a mapping, got {type(data).__name__}",
                condition=data,
                index=index,
            )

        kwargs = {}
        for attr, aliases in FIELD_ALIASES.items():
            for alias in aliases:
                if alias in data:
                    kwargs[attr] = data[alias]
                    break

        if "key" not in kwargs:
            raise InvalidConditionError(
                f"missing required field 'key' in condition: {dict(data)}",
                condition=data,
                index=index,
            )

        return cls(
            type=kwargs.get("type"),
            comparison_operator=kwargs.get("comparison_operator"),
            logical_operator=kwargs.get("logical_operator"),
            key=kwargs["key"],
            value=kwargs.get("value"),
        )

    def to_dict(self) -> dict[str, Any]:
        """转换为外部字段名的字典."""
        return {
            "type": _plain(self.type),
            "comparisonOperator": _plain(self.comparison_operator),
            "logicalOperator": _plain(self.logical_operator),
            "key": self.key,
            "value": self.value,
        }

    def normalized(self) -> Condition:
        """返回类型与操作符转为小写后的新条件，key 和 value 保持不变."""
        return dataclasses.replace(
            self,
            type=_lower(self.type),
            comparison_operator=_lower(self.comparison_operator),
            logical_operator=_lower(self.logical_operator),
        )


def coerce_conditions(
    conditions: Iterable[Condition | Mapping[str, Any]],
) -> list[Condition]:
    """将输入统一转换为 Condition 列表，保持原有顺序."""
    result = []
    for index, cond in enumerate(conditions):
        if isinstance(cond, Condition):
            result.append(cond)
        else:
            result.append(Condition.from_dict(cond, index=index))
    return result


def normalize(conditions: Iterable[Condition]) -> list[Condition]:
    """对每个条件做小写规范化，返回新列表，不修改输入."""
    return [cond.normalized() for cond in conditions]
