"""
图片生成数据模型
定义图片生成相关的数据结构
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from image_server.core.analysis.models import ImageRequirement
from image_server.utils.datetime_utils import utc_now


@dataclass(frozen=True)
class ImageGenerationRequest:
    """图片生成请求参数

    Attributes:
        prompt: 生成图片的英文提示词
        count: 图片数量
        size: 图片尺寸
    """
    prompt: str
    count: int = 1
    size: str = "512x512"


@dataclass(frozen=True)
class ImageGenerationResult:
    """单个图片需求的生成结果

    Attributes:
        requirement: 图片需求信息
        image_url: 生成的图片URL（失败时为空字符串）
        success: 是否生成成功
        error: 错误信息（仅在失败时存在）
        generated_at: 生成时间（UTC）
    """
    requirement: ImageRequirement
    image_url: str
    success: bool
    error: Optional[str] = None
    generated_at: datetime = field(default_factory=utc_now)

    @classmethod
    def succeeded(cls, requirement: ImageRequirement, image_url: str) -> "ImageGenerationResult":
        return cls(requirement=requirement, image_url=image_url, success=True)

    @classmethod
    def failed(cls, requirement: ImageRequirement, error: str) -> "ImageGenerationResult":
        return cls(requirement=requirement, image_url="", success=False, error=error or "未知错误")
