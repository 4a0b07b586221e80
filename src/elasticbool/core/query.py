"""bool 查询累加器模块."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from elasticsearch.dsl import Q as ElasticsearchQ

from elasticbool.core.fragments import QueryFragment
from elasticbool.core.operators import ClauseBucket


@dataclass(frozen=True)
class BoolQuery:
    """
    不可变的 bool 查询累加器.

    每次 add 返回新的对象，原对象不变。各子句内片段顺序与条件输入顺序一致，
    空子句在输出中省略。

    使用示例:
        query = BoolQuery()
        query = query.add(ClauseBucket.MUST, TermFragment(key="name", value="dvt"))
        query.to_dict()
        # {"query": {"bool": {"must": [{"term": {"name": "dvt"}}]}}}
    """

    must: tuple[QueryFragment, ...] = ()
    must_not: tuple[QueryFragment, ...] = ()
    should: tuple[QueryFragment, ...] = ()

    def add(self, bucket: ClauseBucket | str, fragment: QueryFragment) -> BoolQuery:
        """
        将片段追加到指定子句.

        Args:
            bucket: 子句 (must, must_not, should)
            fragment: 查询片段

        Returns:
            新的 BoolQuery
        """
        name = ClauseBucket(bucket).value
        return dataclasses.replace(self, **{name: getattr(self, name) + (fragment,)})

    def clauses(self) -> dict[str, tuple[QueryFragment, ...]]:
        """非空子句，按 must、must_not、should 顺序."""
        return {
            bucket.value: getattr(self, bucket.value)
            for bucket in ClauseBucket
            if getattr(self, bucket.value)
        }

    def is_empty(self) -> bool:
        return not (self.must or self.must_not or self.should)

    def to_q(self) -> ElasticsearchQ:
        """转换为 bool 类型的 Q 对象."""
        return ElasticsearchQ(
            "bool",
            **{
                name: [fragment.to_q() for fragment in fragments]
                for name, fragments in self.clauses().items()
            },
        )

    def to_dict(self) -> dict[str, Any]:
        """
        导出完整的查询文档.

        Returns:
            {"query": {"bool": {...}}}，空子句不出现
        """
        bool_query = {
            name: [fragment.to_dict() for fragment in fragments]
            for name, fragments in self.clauses().items()
        }
        return {"query": {"bool": bool_query}}
