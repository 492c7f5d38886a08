"""
图片生成提供商基类
定义所有图片生成提供商的统一接口
"""

from abc import ABC, abstractmethod

from .config import GenerationConfig
from .models import ImageGenerationRequest


class BaseImageProvider(ABC):
    """图片生成提供商基类"""

    def __init__(self, config: GenerationConfig):
        """初始化图片生成提供商

        Args:
            config: 图片生成配置
        """
        self.config = config

    @abstractmethod
    async def generate_image(self, request: ImageGenerationRequest) -> str:
        """
        生成图片

        Args:
            request: 图片生成请求参数

        Returns:
            str: 生成的图片URL

        Raises:
            ImageGenerationError: 生成失败时抛出，包含失败原因
        """
        ...

    @abstractmethod
    def get_provider_name(self) -> str:
        """获取Provider名称"""
        ...
