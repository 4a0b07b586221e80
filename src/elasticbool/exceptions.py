"""elasticbool 异常定义模块."""

from typing import Any


class ElasticBoolError(Exception):
    """elasticbool 基础异常类."""

    pass


class ConditionError(ElasticBoolError):
    """条件异常基类.

    Attributes:
        condition: 出错的条件（Condition 或原始字典）
        index: 条件在输入序列中的位置，未知时为 None
    """

    def __init__(self, message: str, condition: Any = None, index: int | None = None):
        super().__init__(message)
        self.condition = condition
        self.index = index


class InvalidConditionError(ConditionError):
    """无法构造为 Condition 的输入（缺少必需字段等）."""

    pass


class UnsupportedTypeError(ConditionError):
    """不支持的数据类型异常."""

    pass


class UnsupportedLogicalOperatorError(ConditionError):
    """不支持的逻辑操作符异常."""

    pass


class UnsupportedComparisonOperatorError(ConditionError):
    """不支持的比较操作符异常."""

    pass


class QuerySerializationError(ElasticBoolError):
    """查询文档序列化异常."""

    pass


class TranslatorConfigError(ElasticBoolError):
    """转换器配置异常."""

    pass
