"""查询文档序列化模块."""

import json
from typing import Any

from elasticsearch.serializer import JsonSerializer


class StrictJsonSerializer(JsonSerializer):
    """不允许 NaN 与 Infinity 的 JSON 序列化器.

    NaN、Infinity 不是合法的 JSON，Elasticsearch 无法解析，
    遇到时抛出 ValueError。其余行为与 JsonSerializer 一致:
    紧凑输出、不转义非 ASCII 字符、支持日期等类型。
    """

    def dumps(self, data: Any) -> bytes:
        if isinstance(data, str):
            return data.encode("utf-8", "surrogatepass")
        return json.dumps(
            data,
            default=self.default,
            ensure_ascii=False,
            separators=(",", ":"),
            allow_nan=False,
        ).encode("utf-8", "surrogatepass")
