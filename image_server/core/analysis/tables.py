"""
图片类型与主题的静态映射表
所有表都按声明顺序参与匹配，顺序决定优先级，不可重排
"""

from types import MappingProxyType
from typing import Mapping, Tuple

# ==================== 图片类型 ====================

DEFAULT_IMAGE_TYPE = "illustration"
DEFAULT_IMAGE_SIZE = "800x600"

# 图片类型 -> 提示词模板
IMAGE_TYPE_TEMPLATES: Mapping[str, str] = MappingProxyType({
    "hero": "professional hero banner image, modern design, clean composition",
    "banner": "website banner design, professional layout, corporate style",
    "icon": "simple icon design, minimalist style, clean lines, vector-like",
    "illustration": "digital illustration, modern art style, vibrant colors",
    "background": "subtle background pattern, professional design, clean aesthetic",
    "product": "product photography style, professional lighting, clean background",
    "avatar": "professional avatar, clean portrait style, modern design",
    "logo": "professional logo design, minimalist style, brand identity",
    "thumbnail": "engaging thumbnail image, eye-catching design, clear composition",
})

GENERIC_TEMPLATE = "professional image, modern design, clean composition"

# 图片类型 -> 建议尺寸
IMAGE_TYPE_SIZES: Mapping[str, str] = MappingProxyType({
    "hero": "1920x1080",
    "banner": "1200x400",
    "icon": "64x64",
    "logo": "200x100",
    "avatar": "128x128",
    "product": "800x600",
    "background": "1920x1080",
    "thumbnail": "300x200",
    "illustration": "800x600",
})

# 图片类型 -> 中文说明（资源接口展示用）
IMAGE_TYPE_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "hero": "英雄横幅图片",
    "banner": "网站横幅图片",
    "icon": "图标",
    "illustration": "插图",
    "product": "产品图片",
    "avatar": "头像",
    "background": "背景图片",
    "logo": "标志",
    "thumbnail": "缩略图",
})

# 关键词 -> 图片类型，按优先级排列
TYPE_KEYWORD_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("hero", "banner"), "hero"),
    (("icon",), "icon"),
    (("logo",), "logo"),
    (("avatar", "profile"), "avatar"),
    (("product",), "product"),
    (("background",), "background"),
    (("thumbnail",), "thumbnail"),
)

# 父元素标签 -> 图片类型
ELEMENT_TO_IMAGE_TYPE: Mapping[str, str] = MappingProxyType({
    "header": "hero",
    "banner": "banner",
    "nav": "logo",
    "sidebar": "thumbnail",
    "article": "illustration",
    "section": "background",
    "footer": "icon",
})

# ==================== 页面位置 ====================

DEFAULT_CONTEXT = "content area"

# 父元素标签 -> 位置描述
ELEMENT_CONTEXTS: Mapping[str, str] = MappingProxyType({
    "header": "page header",
    "footer": "page footer",
    "nav": "navigation area",
    "main": "main content area",
    "aside": "sidebar",
})

# class关键词 -> 位置描述，按优先级排列
CLASS_CONTEXTS: Tuple[Tuple[str, str], ...] = (
    ("hero", "hero area"),
    ("banner", "banner area"),
)

# 父元素标签 -> 描述模板（无alt文本时使用）
ELEMENT_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "header": "{title} page header image",
    "banner": "{title} banner image",
    "nav": "{title} navigation icon",
    "main": "{title} main content image",
    "footer": "{title} footer icon",
})

DEFAULT_DESCRIPTION = "{title} related image"

# ==================== 文章主题 ====================

GENERAL_TOPIC = "general"

# 主题 -> 关键词，主题顺序决定平分时的胜者
TOPIC_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "technology": ("tech", "software", "programming", "code", "development", "ai", "machine learning"),
    "business": ("business", "marketing", "strategy", "management", "finance", "economy"),
    "lifestyle": ("lifestyle", "health", "fitness", "food", "travel", "fashion"),
    "education": ("education", "learning", "tutorial", "guide", "how to", "course"),
    "science": ("science", "research", "study", "analysis", "experiment", "data"),
})

# 主题 -> 提示词前缀
TOPIC_PROMPT_PREFIXES: Mapping[str, str] = MappingProxyType({
    "technology": "modern technology concept, digital innovation",
    "business": "professional business concept, corporate environment",
    "lifestyle": "lifestyle concept, everyday life, human interest",
    "education": "educational concept, learning environment, knowledge",
    "science": "scientific concept, research environment, academic",
    GENERAL_TOPIC: "conceptual illustration, modern design",
})

# ==================== 提示词 ====================

QUALITY_SUFFIX = "high quality, professional, detailed"
ARTICLE_QUALITY_SUFFIX = "high quality, professional illustration"

STOP_WORDS = frozenset({
    "a", "an", "the",
    "and", "or", "but", "nor", "so", "yet",
    "in", "on", "at", "to", "for", "of", "with", "by",
    "this", "that", "these", "those",
    "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might",
})

MAX_KEYWORDS = 10
PROMPT_KEYWORD_COUNT = 3
