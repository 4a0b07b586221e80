"""核心模块导出."""

from elasticbool.core.conditions import Condition, coerce_conditions, normalize
from elasticbool.core.fragments import (
    MatchFragment,
    QueryFragment,
    RangeFragment,
    TermFragment,
    TermsFragment,
    build_fragment,
)
from elasticbool.core.operators import (
    ALLOWED_OPERATORS,
    NEGATING_OPERATORS,
    ClauseBucket,
    ComparisonOperator,
    ConditionType,
    LogicalOperator,
)
from elasticbool.core.query import BoolQuery
from elasticbool.core.validator import validate, validate_condition

__all__ = [
    "ConditionType",
    "ComparisonOperator",
    "LogicalOperator",
    "ClauseBucket",
    "ALLOWED_OPERATORS",
    "NEGATING_OPERATORS",
    "Condition",
    "coerce_conditions",
    "normalize",
    "QueryFragment",
    "TermFragment",
    "TermsFragment",
    "MatchFragment",
    "RangeFragment",
    "build_fragment",
    "BoolQuery",
    "validate",
    "validate_condition",
]
