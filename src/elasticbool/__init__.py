"""elasticbool - 结构化过滤条件到 Elasticsearch bool 查询的转换库.

将一组扁平的过滤条件（类型、比较操作符、逻辑操作符、字段、值）校验后转换为
Elasticsearch/OpenSearch 的 bool 查询文档。

主要功能:
    - BoolQueryTranslator: 校验、转换并序列化条件
    - Condition: 过滤条件模型
    - BoolQuery: 不可变的 bool 查询累加器

使用示例:
    from elasticbool import parse_to_query

    query = parse_to_query(
        [{"type": "number", "comparisonOperator": "gte", "logicalOperator": "and",
          "key": "age", "value": 18}]
    )
    # b'{"query":{"bool":{"must":[{"range":{"age":{"gte":18}}}]}}}'
"""

__version__ = "0.1.0"

# 导出构建器
from elasticbool.builders import BoolQueryTranslator, parse_to_query

# 导出配置
from elasticbool.config import TranslatorConfig
from elasticbool.serializer import StrictJsonSerializer

# 导出核心组件
from elasticbool.core import (
    BoolQuery,
    ClauseBucket,
    ComparisonOperator,
    Condition,
    ConditionType,
    LogicalOperator,
    MatchFragment,
    QueryFragment,
    RangeFragment,
    TermFragment,
    TermsFragment,
)

# 导出异常
from elasticbool.exceptions import (
    ConditionError,
    ElasticBoolError,
    InvalidConditionError,
    QuerySerializationError,
    TranslatorConfigError,
    UnsupportedComparisonOperatorError,
    UnsupportedLogicalOperatorError,
    UnsupportedTypeError,
)

__all__ = [
    # 版本
    "__version__",
    # 构建器
    "BoolQueryTranslator",
    "parse_to_query",
    # 配置
    "TranslatorConfig",
    "StrictJsonSerializer",
    # 枚举
    "ConditionType",
    "ComparisonOperator",
    "LogicalOperator",
    "ClauseBucket",
    # 核心组件
    "Condition",
    "BoolQuery",
    "QueryFragment",
    "TermFragment",
    "TermsFragment",
    "MatchFragment",
    "RangeFragment",
    # 异常
    "ElasticBoolError",
    "ConditionError",
    "InvalidConditionError",
    "UnsupportedTypeError",
    "UnsupportedLogicalOperatorError",
    "UnsupportedComparisonOperatorError",
    "QuerySerializationError",
    "TranslatorConfigError",
]
