"""bool 查询转换使用示例.

本文件展示了如何使用 BoolQueryTranslator 将过滤条件转换为 Elasticsearch bool 查询。
"""

from elasticsearch.dsl import Search

from elasticbool import (
    BoolQueryTranslator,
    ElasticBoolError,
    TranslatorConfig,
)

translator = BoolQueryTranslator()


# ==================== 示例1：文本条件 ====================
def example_text_conditions():
    """等于、不等于、模糊匹配、排除匹配."""
    conditions = [
        {
            "type": "text",
            "comparisonOperator": "eq",
            "logicalOperator": "and",
            "key": "fullName",
            "value": "dvt",
        },
        {
            "type": "text",
            "comparisonOperator": "neq",
            "logicalOperator": "and",
            "key": "fullName",
            "value": "nva",
        },
        {
            "type": "text",
            "comparisonOperator": "like",
            "logicalOperator": "and",
            "key": "summary",
            "value": "already",
        },
        {
            "type": "text",
            "comparisonOperator": "nlike",
            "logicalOperator": "or",  # 否定操作符忽略 or，进入 must_not
            "key": "summary",
            "value": "already",
        },
    ]

    print(translator.parse_to_query(conditions).decode("utf-8"))


# ==================== 示例2：范围与数组条件 ====================
def example_range_and_array():
    """数值范围、日期范围与多值匹配."""
    conditions = [
        {
            "type": "number",
            "comparisonOperator": "gte",
            "logicalOperator": "and",
            "key": "age",
            "value": 18,
        },
        {
            "type": "date",
            "comparisonOperator": "lt",
            "logicalOperator": "and",
            "key": "created",
            "value": "2024-01-01",
        },
        {
            "type": "array",
            "comparisonOperator": "in",
            "logicalOperator": "or",
            "key": "tags",
            "value": ["python", "elasticsearch"],
        },
    ]

    print(translator.parse_to_query(conditions).decode("utf-8"))


# ==================== 示例3：错误处理 ====================
def example_error_handling():
    """不合法的条件会立即失败，不产生部分结果."""
    conditions = [
        {
            "type": "date",
            "comparisonOperator": "eq",  # date 不支持 eq
            "logicalOperator": "and",
            "key": "created",
            "value": "2024-01-01",
        }
    ]

    try:
        translator.parse_to_query(conditions)
    except ElasticBoolError as e:
        print(f"转换失败: {type(e).__name__}: {e}")


# ==================== 示例4：大小写混合输入 ====================
def example_normalize_first():
    """先规范化再校验，接受大小写混合的类型与操作符."""
    lenient = BoolQueryTranslator(config=TranslatorConfig(normalize_first=True))
    conditions = [
        {
            "type": "TEXT",
            "comparisonOperator": "EQ",
            "logicalOperator": "AND",
            "key": "name",
            "value": "dvt",
        }
    ]

    print(lenient.parse_to_query(conditions).decode("utf-8"))


# ==================== 示例5：应用到 Search ====================
def example_to_search():
    """生成 Search 对象，可直接交给客户端执行."""
    conditions = [
        {
            "type": "number",
            "comparisonOperator": "lte",
            "logicalOperator": "and",
            "key": "level",
            "value": 3,
        }
    ]

    search = translator.to_search(conditions, search_factory=lambda: Search(index="alerts"))
    print(search.to_dict())
    # 执行查询需要客户端连接:
    # search.using(Elasticsearch(["http://localhost:9200"])).execute()


def main():
    """运行所有示例."""
    print("=" * 50)
    print("bool 查询转换示例")
    print("=" * 50)

    print("\n1. 文本条件示例")
    print("-" * 50)
    example_text_conditions()

    print("\n2. 范围与数组条件示例")
    print("-" * 50)
    example_range_and_array()

    print("\n3. 错误处理示例")
    print("-" * 50)
    example_error_handling()

    print("\n4. 大小写混合输入示例")
    print("-" * 50)
    example_normalize_first()

    print("\n5. Search 对象示例")
    print("-" * 50)
    example_to_search()


if __name__ == "__main__":
    main()
