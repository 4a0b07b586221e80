"""bool 查询转换器模块."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import reduce

from elasticsearch.dsl import Search
from elasticsearch.exceptions import SerializationError

from elasticbool.config import TranslatorConfig
from elasticbool.core.conditions import Condition, coerce_conditions, normalize
from elasticbool.core.fragments import build_fragment
from elasticbool.core.operators import (
    NEGATING_OPERATORS,
    ClauseBucket,
    ComparisonOperator,
    LogicalOperator,
    lookup,
)
from elasticbool.core.query import BoolQuery
from elasticbool.core.validator import validate
from elasticbool.exceptions import (
    QuerySerializationError,
    UnsupportedLogicalOperatorError,
)
from elasticbool.typing import ConditionInput, QueryDocument

logger = logging.getLogger(__name__)


def route(condition: Condition) -> ClauseBucket:
    """
    确定条件所属的子句.

    否定操作符 (neq, nlike, nin) 始终进入 must_not，忽略逻辑操作符；
    其余按逻辑操作符 and -> must，or -> should。

    Raises:
        UnsupportedLogicalOperatorError: 逻辑操作符不合法
    """
    operator = lookup(ComparisonOperator, condition.comparison_operator)
    if operator in NEGATING_OPERATORS:
        return ClauseBucket.MUST_NOT

    logical_operator = lookup(LogicalOperator, condition.logical_operator)
    if logical_operator == LogicalOperator.AND:
        return ClauseBucket.MUST
    elif logical_operator == LogicalOperator.OR:
        return ClauseBucket.SHOULD
    else:
        raise UnsupportedLogicalOperatorError(
            f"unsupported logical operators: {condition.logical_operator!r}",
            condition=condition,
        )


def add_condition(query: BoolQuery, condition: Condition) -> BoolQuery:
    """将单个条件转换为查询片段并放入对应子句，返回新的 BoolQuery."""
    fragment = build_fragment(condition)
    bucket = route(condition)
    logger.debug(f"Routing {condition.key!r} as {fragment.kind} into {bucket.value}")
    return query.add(bucket, fragment)


class BoolQueryTranslator:
    """
    结构化条件到 bool 查询的转换器.

    处理流程: 校验 -> 大小写规范化 -> 逐条折叠为 BoolQuery -> 序列化。
    任一条件不合法时立即抛出异常，不产生部分结果。

    转换器只持有不可变配置，可在多个线程间共享。

    使用示例:
        translator = BoolQueryTranslator()
        query = translator.parse_to_query(
            [
                {
                    "type": "text",
                    "comparisonOperator": "eq",
                    "logicalOperator": "and",
                    "key": "name",
                    "value": "dvt",
                }
            ]
        )
        # b'{"query":{"bool":{"must":[{"term":{"name":"dvt"}}]}}}'
    """

    def __init__(self, config: TranslatorConfig | None = None):
        """
        初始化转换器.

        Args:
            config: 转换器配置，默认 TranslatorConfig()
        """
        self._config = config or TranslatorConfig()

    @property
    def config(self) -> TranslatorConfig:
        return self._config

    def prepare(self, conditions: ConditionInput) -> list[Condition]:
        """
        校验并规范化条件.

        Args:
            conditions: 条件序列，元素可以是 Condition 或字典

        Returns:
            规范化后的新条件列表
        """
        prepared = coerce_conditions(conditions)
        if self._config.normalize_first:
            prepared = normalize(prepared)
            validate(prepared)
        else:
            validate(prepared)
            prepared = normalize(prepared)
        return prepared

    def translate(self, conditions: ConditionInput) -> BoolQuery:
        """
        转换为 BoolQuery.

        Args:
            conditions: 条件序列

        Returns:
            BoolQuery

        Raises:
            ConditionError 的子类: 条件不合法时
        """
        query = reduce(add_condition, self.prepare(conditions), BoolQuery())
        logger.debug(
            f"Built bool query: must={len(query.must)}, "
            f"must_not={len(query.must_not)}, should={len(query.should)}"
        )
        return query

    def to_dict(self, conditions: ConditionInput) -> QueryDocument:
        """转换为字典格式的查询文档."""
        return self.translate(conditions).to_dict()

    def parse_to_query(self, conditions: ConditionInput) -> bytes:
        """
        转换并序列化为查询文档.

        Args:
            conditions: 条件序列

        Returns:
            JSON 字节串，形如 {"query":{"bool":{...}}}

        Raises:
            ConditionError 的子类: 条件不合法时
            QuerySerializationError: 条件值无法序列化时
        """
        document = self.to_dict(conditions)
        try:
            return self._config.serializer.dumps(document)
        except (SerializationError, TypeError, ValueError) as e:
            raise QuerySerializationError(f"Failed to serialize query: {e}") from e

    def to_search(
        self,
        conditions: ConditionInput,
        search_factory: Callable[[], Search],
    ) -> Search:
        """
        将 bool 查询应用到 Search 对象.

        Args:
            conditions: 条件序列
            search_factory: Search 对象工厂函数

        Returns:
            设置了 query 的 Search 对象
        """
        query = self.translate(conditions)
        return search_factory().query(query.to_q())


def parse_to_query(
    conditions: ConditionInput, config: TranslatorConfig | None = None
) -> bytes:
    """使用给定配置转换并序列化条件，见 BoolQueryTranslator.parse_to_query."""
    return BoolQueryTranslator(config=config).parse_to_query(conditions)
