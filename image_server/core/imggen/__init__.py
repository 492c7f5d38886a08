"""
图片生成模块
提供统一的图片生成接口和ModelScope提供商实现
"""

# 核心类
from .base import BaseImageProvider
from .config import GenerationConfig
from .models import ImageGenerationRequest, ImageGenerationResult

# 异常
from .exceptions import (
    ImageGenerationError,
    ApiKeyMissingError,
    ApiHTTPError,
    ApiNetworkError,
    NoImageFoundError,
    MalformedResponseError,
)

# 提供商类
from .providers.modelscope import ModelScopeImageProvider

__all__ = [
    # 核心类
    "BaseImageProvider",
    "GenerationConfig",
    "ImageGenerationRequest",
    "ImageGenerationResult",
    # 异常
    "ImageGenerationError",
    "ApiKeyMissingError",
    "ApiHTTPError",
    "ApiNetworkError",
    "NoImageFoundError",
    "MalformedResponseError",
    # 提供商类
    "ModelScopeImageProvider",
]
