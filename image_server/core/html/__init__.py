"""
HTML处理模块
提供网页解析、元素查找与图片类型识别功能
"""

from .html_utils import (
    parse_document,
    select,
    select_first,
    element_text,
    get_attribute,
    parent_tag_name,
    remove_elements,
    normalize_whitespace,
)
from .parsers import ElementFinder, ImageTypeDetector

__all__ = [
    'parse_document',
    'select',
    'select_first',
    'element_text',
    'get_attribute',
    'parent_tag_name',
    'remove_elements',
    'normalize_whitespace',
    'ElementFinder',
    'ImageTypeDetector',
]
