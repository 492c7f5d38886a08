"""
内容分析数据模型
定义图片需求及分析结果的数据结构
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ImageRequirement:
    """图片需求

    Attributes:
        type: 图片类型（如 hero, banner, icon, illustration）
        description: 图片描述
        suggested_size: 建议尺寸，格式为 "WxH"
        context: 在页面或文章中的位置
        prompt: 生成用的英文提示词
    """
    type: str
    description: str
    suggested_size: str
    context: str
    prompt: str = ""


@dataclass(frozen=True)
class WebPageAnalysis:
    """网页分析结果"""
    title: str
    content: str
    image_requirements: Tuple[ImageRequirement, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ArticleAnalysis:
    """文章分析结果

    image_requirements 的长度始终等于 suggested_image_count。
    """
    title: str
    paragraphs: Tuple[str, ...]
    topic: str
    suggested_image_count: int
    image_requirements: Tuple[ImageRequirement, ...]

    def __post_init__(self):
        if len(self.image_requirements) != self.suggested_image_count:
            raise ValueError(
                f"图片需求数量({len(self.image_requirements)})与建议配图数量"
                f"({self.suggested_image_count})不一致"
            )
