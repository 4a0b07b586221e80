"""elasticbool 类型定义模块."""

from collections.abc import Iterable, Mapping
from typing import Any

from elasticbool.core.conditions import Condition

# 条件字典类型
# 格式: {"type": ..., "comparisonOperator": ..., "logicalOperator": ..., "key": ..., "value": ...}
ConditionDict = Mapping[str, Any]

# 转换器接受的条件输入
ConditionInput = Iterable[Condition | ConditionDict]

# 查询文档类型
# 格式: {"query": {"bool": {"must": [...], "must_not": [...], "should": [...]}}}
QueryDocument = dict[str, Any]
