"""
图片类型检测器模块
负责根据alt文本、class名称和父元素推断图片类型与页面位置
"""

from image_server.core.log_utils import get_logger
from image_server.core.analysis.tables import (
    TYPE_KEYWORD_RULES,
    ELEMENT_TO_IMAGE_TYPE,
    DEFAULT_IMAGE_TYPE,
    ELEMENT_CONTEXTS,
    CLASS_CONTEXTS,
    DEFAULT_CONTEXT,
    ELEMENT_DESCRIPTIONS,
    DEFAULT_DESCRIPTION,
)

logger = get_logger(__name__)


class ImageTypeDetector:
    """图片类型检测器"""

    def detect_type(self, alt: str, class_name: str, parent_tag: str) -> str:
        """
        推断图片类型

        Args:
            alt: 图片alt/描述文本
            class_name: CSS类名
            parent_tag: 父元素标签名

        Returns:
            str: 图片类型
        """
        combined_text = f"{alt} {class_name} {parent_tag}".lower()

        # 优先级1：关键词匹配
        for keywords, image_type in TYPE_KEYWORD_RULES:
            if any(keyword in combined_text for keyword in keywords):
                return image_type

        # 优先级2：父元素映射
        image_type = ELEMENT_TO_IMAGE_TYPE.get(parent_tag)
        if image_type:
            return image_type

        logger.debug(
            "无法确定图片类型，使用默认值",
            operation="default_image_type",
            parent_tag=parent_tag
        )
        return DEFAULT_IMAGE_TYPE

    def describe_context(self, parent_tag: str, class_name: str) -> str:
        """
        生成图片所在位置的描述

        Args:
            parent_tag: 父元素标签名
            class_name: CSS类名

        Returns:
            str: 位置描述
        """
        context = ELEMENT_CONTEXTS.get(parent_tag)
        if context:
            return context

        for keyword, class_context in CLASS_CONTEXTS:
            if keyword in class_name:
                return class_context

        return DEFAULT_CONTEXT

    def describe_from_context(self, parent_tag: str, title: str) -> str:
        """无alt文本时，根据父元素和页面标题生成描述"""
        template = ELEMENT_DESCRIPTIONS.get(parent_tag, DEFAULT_DESCRIPTION)
        return template.format(title=title)
