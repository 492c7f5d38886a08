"""
文章内容分析器
根据文章文本识别主题、计算配图数量并生成配图需求
"""

import math
from typing import List, Optional, Sequence

from image_server.core.log_utils import get_logger
from image_server.core.log_messages import log_messages
from .models import ArticleAnalysis, ImageRequirement
from .tables import (
    TOPIC_KEYWORDS,
    TOPIC_PROMPT_PREFIXES,
    GENERAL_TOPIC,
    ARTICLE_QUALITY_SUFFIX,
)

logger = get_logger(__name__)


def split_paragraphs(text: str) -> List[str]:
    """按换行符切分文章，去除首尾空白并丢弃空行"""
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def identify_topic(text: str, title: str) -> str:
    """
    识别文章主题

    统计每个主题命中的关键词个数，取得分严格最高的主题；
    得分相同时按主题表顺序取第一个，全部为0时返回general。
    """
    haystack = f"{title} {text}".lower()

    best_topic, best_score = GENERAL_TOPIC, 0
    for topic, keywords in TOPIC_KEYWORDS.items():
        score = sum(1 for keyword in keywords if keyword in haystack)
        if score > best_score:
            best_topic, best_score = topic, score
    return best_topic


def calculate_suggested_image_count(paragraphs: Sequence[str]) -> int:
    """
    根据文章长度计算建议配图数量

    长度按段落以单个空格拼接后的字符数计算：
    500以下1张，1500以下2张，3000以下3张；3000及以上至少4张，
    之后每1000字符1张（向上取整），最多5张。
    """
    total_length = len(" ".join(paragraphs))

    if total_length < 500:
        return 1
    if total_length < 1500:
        return 2
    if total_length < 3000:
        return 3
    return min(5, max(4, math.ceil(total_length / 1000)))


class ArticleAnalyzer:
    """文章配图需求分析器"""

    UNKNOWN_TITLE = "unknown article"

    def analyze(self, text: str, title: Optional[str] = None) -> ArticleAnalysis:
        """
        分析文章内容

        Args:
            text: 文章文本，空文本也会返回有效结果
            title: 文章标题（可选），缺省时取第一段

        Returns:
            ArticleAnalysis: 文章分析结果
        """
        text = text or ""
        logger.info(
            log_messages.ARTICLE_ANALYSIS_START,
            operation="analyze_article",
            text_length=len(text)
        )

        paragraphs = split_paragraphs(text)
        article_title = (title or "").strip() or (paragraphs[0] if paragraphs else self.UNKNOWN_TITLE)

        topic = identify_topic(text, article_title)
        image_count = calculate_suggested_image_count(paragraphs)
        requirements = self.generate_image_requirements(article_title, topic, image_count)

        logger.info(
            log_messages.ARTICLE_ANALYSIS_SUCCESS,
            operation="analyze_article",
            topic=topic,
            image_count=image_count,
            paragraph_count=len(paragraphs)
        )

        return ArticleAnalysis(
            title=article_title,
            paragraphs=tuple(paragraphs),
            topic=topic,
            suggested_image_count=image_count,
            image_requirements=tuple(requirements)
        )

    @staticmethod
    def generate_image_requirements(title: str, topic: str, count: int) -> List[ImageRequirement]:
        """
        生成文章配图需求

        第一张为文章头图(hero)，其余为段落插图(illustration)，所有配图共用同一提示词。
        """
        topic_prefix = TOPIC_PROMPT_PREFIXES.get(topic, TOPIC_PROMPT_PREFIXES[GENERAL_TOPIC])
        prompt = f"{topic_prefix}, {title.lower()}, {ARTICLE_QUALITY_SUFFIX}"

        requirements = [
            ImageRequirement(
                type="hero",
                description=f"{title}'s main image",
                suggested_size="1200x800",
                context="article start",
                prompt=prompt
            )
        ]
        for index in range(1, count):
            requirements.append(ImageRequirement(
                type="illustration",
                description=f"{title}'s image #{index}",
                suggested_size="800x600",
                context=f"near paragraph {index + 1}",
                prompt=prompt
            ))
        return requirements
