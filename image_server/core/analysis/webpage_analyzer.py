"""
网页内容分析器
解析网页HTML，识别图片需求并生成对应的提示词
"""

from typing import List, Optional

from bs4 import BeautifulSoup

from image_server.core.log_utils import get_logger
from image_server.core.log_messages import log_messages
from image_server.core.html.html_utils import (
    parse_document,
    element_text,
    get_attribute,
    parent_tag_name,
    remove_elements,
    normalize_whitespace,
)
from image_server.core.html.parsers import ElementFinder, ImageTypeDetector
from .models import ImageRequirement, WebPageAnalysis
from .prompt_builder import build_prompt
from .tables import IMAGE_TYPE_SIZES, DEFAULT_IMAGE_SIZE

logger = get_logger(__name__)


class WebPageAnalyzer:
    """网页图片需求分析器"""

    UNKNOWN_TITLE = "unknown page"
    MAX_CONTENT_LENGTH = 2000

    def __init__(self):
        self.element_finder = ElementFinder()
        self.type_detector = ImageTypeDetector()

    def analyze(self, markup: str, source_url: Optional[str] = None) -> WebPageAnalysis:
        """
        分析网页HTML内容

        对残缺或无法识别的HTML不会抛出异常，而是退化为默认结果。

        Args:
            markup: 网页HTML内容
            source_url: 页面URL（可选，仅用于日志）

        Returns:
            WebPageAnalysis: 网页分析结果
        """
        logger.info(
            log_messages.WEBPAGE_ANALYSIS_START,
            operation="analyze_webpage",
            markup_length=len(markup or ""),
            source_url=source_url or ""
        )

        soup = parse_document(markup)

        title = self.extract_title(soup)
        content = self.extract_text_content(soup)
        requirements = self.identify_image_requirements(soup, title, content)

        logger.info(
            log_messages.WEBPAGE_ANALYSIS_SUCCESS,
            operation="analyze_webpage",
            requirement_count=len(requirements)
        )

        return WebPageAnalysis(
            title=title,
            content=content,
            image_requirements=tuple(requirements)
        )

    def extract_title(self, soup: BeautifulSoup) -> str:
        """提取页面标题"""
        title_element = self.element_finder.find_title_element(soup)
        if title_element is None:
            return self.UNKNOWN_TITLE
        return element_text(title_element).strip() or self.UNKNOWN_TITLE

    def extract_text_content(self, soup: BeautifulSoup) -> str:
        """
        提取页面正文

        移除脚本和样式后按优先级选取正文容器，折叠空白并截断长度。
        会修改传入的文档对象。
        """
        remove_elements(soup, ElementFinder.NON_CONTENT_SELECTOR)

        container = self.element_finder.find_content_container(soup)
        text = element_text(container) if container is not None else ""
        if not text.strip():
            text = element_text(soup)

        return normalize_whitespace(text)[:self.MAX_CONTENT_LENGTH]

    def identify_image_requirements(
        self,
        soup: BeautifulSoup,
        title: str,
        content: str
    ) -> List[ImageRequirement]:
        """
        识别网页图片需求

        每个图片元素或占位元素对应一个需求；页面中没有此类元素时生成默认需求。
        """
        requirements: List[ImageRequirement] = []

        for element in self.element_finder.find_image_elements(soup):
            alt = get_attribute(element, "alt").strip()
            class_name = get_attribute(element, "class")
            parent_tag = parent_tag_name(element)

            image_type = self.type_detector.detect_type(alt, class_name, parent_tag)

            requirements.append(ImageRequirement(
                type=image_type,
                description=alt or self.type_detector.describe_from_context(parent_tag, title),
                suggested_size=self.get_suggested_size(image_type),
                context=self.type_detector.describe_context(parent_tag, class_name),
                prompt=build_prompt(image_type, alt, title, content)
            ))

        if not requirements:
            logger.info(log_messages.WEBPAGE_DEFAULT_REQUIREMENTS, operation="default_requirements")
            requirements.extend(self.generate_default_requirements(title, content))

        return requirements

    @staticmethod
    def get_suggested_size(image_type: str) -> str:
        """获取图片类型对应的建议尺寸"""
        return IMAGE_TYPE_SIZES.get(image_type, DEFAULT_IMAGE_SIZE)

    @staticmethod
    def generate_default_requirements(title: str, content: str) -> List[ImageRequirement]:
        """为没有图片元素的页面生成默认的头图和内容配图需求"""
        return [
            ImageRequirement(
                type="hero",
                description=f"{title}'s main banner image",
                suggested_size="1920x1080",
                context="page header hero area",
                prompt=build_prompt("hero", "", title, content)
            ),
            ImageRequirement(
                type="illustration",
                description=f"{title}'s content image",
                suggested_size="800x600",
                context="main content area",
                prompt=build_prompt("illustration", "", title, content)
            ),
        ]
