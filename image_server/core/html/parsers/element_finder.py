"""
元素查找器模块
负责在网页中查找图片元素与正文容器
"""

from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from image_server.core.log_utils import get_logger
from image_server.core.html.html_utils import select, select_first

logger = get_logger(__name__)


class ElementFinder:
    """网页元素查找器"""

    # 图片标签或带占位标记的元素
    IMAGE_SELECTOR = "img, [data-placeholder], .placeholder, .image-placeholder"

    # 正文容器，按优先级排列
    CONTENT_SELECTORS = ("main", "article", ".content", ".main-content", "body")

    NON_CONTENT_SELECTOR = "script, style"

    def find_image_elements(self, soup: BeautifulSoup) -> List[Tag]:
        """
        查找所有图片需求元素

        Args:
            soup: BeautifulSoup对象

        Returns:
            List[Tag]: 按文档顺序排列的元素列表，同一元素只出现一次
        """
        elements = select(soup, self.IMAGE_SELECTOR)
        logger.debug(
            "查找图片元素",
            operation="find_image_elements",
            found_count=len(elements)
        )
        return elements

    def find_content_container(self, soup: BeautifulSoup) -> Optional[Tag]:
        """
        按优先级查找正文容器

        Args:
            soup: BeautifulSoup对象

        Returns:
            Optional[Tag]: 第一个命中的容器，全部未命中时返回None
        """
        for selector in self.CONTENT_SELECTORS:
            container = select_first(soup, selector)
            if container is not None:
                logger.debug(
                    "命中正文容器",
                    operation="find_content_container",
                    selector=selector
                )
                return container
        return None

    def find_title_element(self, soup: BeautifulSoup) -> Optional[Tag]:
        """查找标题元素：优先<title>，其次第一个<h1>"""
        for selector in ("title", "h1"):
            element = select_first(soup, selector)
            if element is not None and element.get_text().strip():
                return element
        return None
