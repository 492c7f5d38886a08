"""
图片生成配置
ModelScope调用凭证与端点配置
"""

from dataclasses import dataclass, replace
from typing import Any

from image_server.core.config import settings


@dataclass(frozen=True)
class GenerationConfig:
    """图片生成配置

    Attributes:
        api_key: API密钥，由调用方传入
        endpoint: API端点URL，留空时使用默认端点
        model_id: 模型ID，留空时使用默认模型
    """
    api_key: str = ""
    endpoint: str = ""
    model_id: str = ""

    def __post_init__(self):
        # 冻结的dataclass只能通过object.__setattr__补全默认值
        object.__setattr__(self, "api_key", (self.api_key or "").strip())
        object.__setattr__(self, "endpoint", (self.endpoint or "").strip() or settings.modelscope_endpoint)
        object.__setattr__(self, "model_id", (self.model_id or "").strip() or settings.modelscope_model_id)

    @classmethod
    def from_api_key(cls, api_key: str = "") -> "GenerationConfig":
        """使用调用方密钥构建配置，未传入时回退到环境配置的默认密钥"""
        return cls(api_key=(api_key or "").strip() or settings.modelscope_api_key)

    def merged(self, **changes: Any) -> "GenerationConfig":
        """返回逐字段更新后的新配置"""
        unknown = set(changes) - {"api_key", "endpoint", "model_id"}
        if unknown:
            raise ValueError(f"未知的配置字段: {sorted(unknown)}")
        return replace(self, **changes)

    @property
    def has_api_key(self) -> bool:
        """是否配置了API密钥"""
        return bool(self.api_key)
