"""构建器模块导出."""

from elasticbool.builders.bool_query import (
    BoolQueryTranslator,
    add_condition,
    parse_to_query,
    route,
)

__all__ = [
    "BoolQueryTranslator",
    "add_condition",
    "parse_to_query",
    "route",
]
