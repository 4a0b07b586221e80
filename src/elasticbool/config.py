"""转换器配置模块."""

from dataclasses import dataclass, field
from typing import Any

from elasticbool.exceptions import TranslatorConfigError
from elasticbool.serializer import StrictJsonSerializer


@dataclass(frozen=True)
class TranslatorConfig:
    """转换器配置.

    Attributes:
        normalize_first: 是否在校验前做大小写规范化。默认 False，即先校验后规范化，
            此时 "EQ"、"Text" 等非小写输入会校验失败；设为 True 时可接受大小写混合的输入
        serializer: 查询文档序列化器，需提供 dumps(data) -> bytes 方法，
            默认使用 StrictJsonSerializer（紧凑 JSON，支持日期等类型，拒绝 NaN 与 Infinity）

    Raises:
        TranslatorConfigError: serializer 不提供 dumps 方法时抛出

    Examples:
        >>> config = TranslatorConfig(normalize_first=True)
        >>> translator = BoolQueryTranslator(config=config)
    """

    normalize_first: bool = False
    serializer: Any = field(default_factory=StrictJsonSerializer)

    def __post_init__(self) -> None:
        """校验配置参数."""
        if not callable(getattr(self.serializer, "dumps", None)):
            raise TranslatorConfigError(
                "serializer must provide a dumps() method, "
                f"got {type(self.serializer).__name__}"
            )
