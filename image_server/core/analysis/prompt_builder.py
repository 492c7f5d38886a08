"""
提示词生成模块
根据图片类型模板、文本关键词和质量修饰词拼装英文提示词
"""

import re
from typing import List

from .tables import (
    IMAGE_TYPE_TEMPLATES,
    GENERIC_TEMPLATE,
    STOP_WORDS,
    MAX_KEYWORDS,
    PROMPT_KEYWORD_COUNT,
    QUALITY_SUFFIX,
)

# 仅匹配ASCII字母组成、长度不少于3的单词
_WORD_RE = re.compile(r"\b[a-z]{3,}\b", re.ASCII)


def extract_keywords(*texts: str, limit: int = MAX_KEYWORDS) -> List[str]:
    """
    从文本中提取关键词

    过滤停用词，按首次出现顺序去重。

    Args:
        *texts: 任意数量的文本
        limit: 最多保留的关键词数量

    Returns:
        List[str]: 关键词列表
    """
    combined_text = " ".join(text for text in texts if text).lower()

    keywords: List[str] = []
    seen = set()
    for word in _WORD_RE.findall(combined_text):
        if word in STOP_WORDS or word in seen:
            continue
        seen.add(word)
        keywords.append(word)
        if len(keywords) >= limit:
            break
    return keywords


def build_prompt(image_type: str, description: str, title: str, content: str) -> str:
    """
    生成图片提示词

    Args:
        image_type: 图片类型
        description: 图片描述（通常为alt文本）
        title: 页面标题
        content: 页面正文

    Returns:
        str: 以质量修饰词结尾的英文提示词
    """
    parts = [IMAGE_TYPE_TEMPLATES.get(image_type, GENERIC_TEMPLATE)]

    keywords = extract_keywords(description, title, content)
    if keywords:
        parts.append(", ".join(keywords[:PROMPT_KEYWORD_COUNT]))

    parts.append(QUALITY_SUFFIX)
    return ", ".join(parts)
