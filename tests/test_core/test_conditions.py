"""Condition 数据模型单元测试."""

import dataclasses

import pytest

from elasticbool.core.conditions import Condition, coerce_conditions, normalize
from elasticbool.core.operators import ComparisonOperator, ConditionType, LogicalOperator
from elasticbool.exceptions import InvalidConditionError


class TestConditionFromDict:
    """Condition.from_dict 测试."""

    def test_camel_case_fields(self) -> None:
        """测试外部 camelCase 字段名."""
        cond = Condition.from_dict(
            {
                "type": "text",
                "comparisonOperator": "eq",
                "logicalOperator": "and",
                "key": "name",
                "value": "dvt",
            }
        )
        assert cond == Condition(
            type="text",
            comparison_operator="eq",
            logical_operator="and",
            key="name",
            value="dvt",
        )

    def test_snake_case_fields(self) -> None:
        """测试 snake_case 字段名."""
        cond = Condition.from_dict(
            {
                "type": "number",
                "comparison_operator": "gte",
                "logical_operator": "or",
                "key": "age",
                "value": 18,
            }
        )
        assert cond.comparison_operator == "gte"
        assert cond.logical_operator == "or"

    def test_missing_value_defaults_to_none(self) -> None:
        """测试缺少 value 时默认为 None."""
        cond = Condition.from_dict(
            {"type": "text", "comparisonOperator": "eq", "logicalOperator": "and", "key": "a"}
        )
        assert cond.value is None

    def test_missing_operator_kept_as_none(self) -> None:
        """测试缺少操作符时保留 None，交由校验阶段处理."""
        cond = Condition.from_dict({"type": "text", "key": "a", "value": 1})
        assert cond.comparison_operator is None
        assert cond.logical_operator is None

    def test_missing_key_raises(self) -> None:
        """测试缺少 key 时抛出异常."""
        with pytest.raises(InvalidConditionError, match="missing required field 'key'"):
            Condition.from_dict(
                {"type": "text", "comparisonOperator": "eq", "logicalOperator": "and"}
            )

    def test_non_mapping_raises(self) -> None:
        """测试非字典输入抛出异常."""
        with pytest.raises(InvalidConditionError, match="must be a mapping") as exc_info:
            Condition.from_dict(["text", "eq"], index=3)
        assert exc_info.value.index == 3


class TestConditionNormalize:
    """大小写规范化测试."""

    def test_normalized_lowercases_enums_only(self) -> None:
        """测试只规范化类型和操作符，key 与 value 不变."""
        cond = Condition(
            type="TEXT",
            comparison_operator="Eq",
            logical_operator="AND",
            key="FullName",
            value="DVT",
        )
        result = cond.normalized()
        assert result.type == "text"
        assert result.comparison_operator == "eq"
        assert result.logical_operator == "and"
        assert result.key == "FullName"
        assert result.value == "DVT"

    def test_normalized_returns_new_instance(self) -> None:
        """测试规范化不修改原对象."""
        cond = Condition(
            type="TEXT", comparison_operator="EQ", logical_operator="AND", key="a"
        )
        cond.normalized()
        assert cond.type == "TEXT"

    def test_condition_is_frozen(self) -> None:
        """测试条件不可变."""
        cond = Condition(type="text", comparison_operator="eq", logical_operator="and", key="a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            cond.key = "b"  # type: ignore[misc]

    def test_normalized_enum_members(self) -> None:
        """测试枚举成员规范化为字符串值."""
        cond = Condition(
            type=ConditionType.DATE,
            comparison_operator=ComparisonOperator.LT,
            logical_operator=LogicalOperator.OR,
            key="created",
        )
        result = cond.normalized()
        assert result.type == "date"
        assert result.comparison_operator == "lt"
        assert result.logical_operator == "or"

    def test_normalize_keeps_order(self) -> None:
        """测试批量规范化保持顺序."""
        conds = [
            Condition(type="TEXT", comparison_operator="EQ", logical_operator="AND", key="a"),
            Condition(type="NUMBER", comparison_operator="GT", logical_operator="OR", key="b"),
        ]
        result = normalize(conds)
        assert [c.key for c in result] == ["a", "b"]
        assert [c.type for c in result] == ["text", "number"]
        assert conds[0].type == "TEXT"

    def test_normalize_leaves_none(self) -> None:
        """测试 None 值不参与规范化."""
        cond = Condition(type=None, comparison_operator="EQ", logical_operator=None, key="a")
        result = cond.normalized()
        assert result.type is None
        assert result.logical_operator is None


class TestCoerceConditions:
    """coerce_conditions 测试."""

    def test_mixed_input(self) -> None:
        """测试 Condition 与字典混合输入."""
        existing = Condition(
            type="text", comparison_operator="eq", logical_operator="and", key="a"
        )
        result = coerce_conditions(
            [
                existing,
                {
                    "type": "array",
                    "comparisonOperator": "in",
                    "logicalOperator": "and",
                    "key": "tags",
                    "value": ["x"],
                },
            ]
        )
        assert result[0] is existing
        assert result[1].key == "tags"

    def test_error_carries_index(self) -> None:
        """测试错误信息包含条件位置."""
        with pytest.raises(InvalidConditionError) as exc_info:
            coerce_conditions(
                [
                    {"type": "text", "comparisonOperator": "eq", "logicalOperator": "and", "key": "a"},
                    {"type": "text"},
                ]
            )
        assert exc_info.value.index == 1

    def test_to_dict_uses_external_names(self) -> None:
        """测试 to_dict 使用外部字段名."""
        cond = Condition(
            type=ConditionType.TEXT,
            comparison_operator="like",
            logical_operator="or",
            key="summary",
            value="already",
        )
        assert cond.to_dict() == {
            "type": "text",
            "comparisonOperator": "like",
            "logicalOperator": "or",
            "key": "summary",
            "value": "already",
        }
