"""
HTML处理工具模块
封装BeautifulSoup的文档解析、选择器查询与属性读取，供内容分析器使用
"""

import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

_WHITESPACE_RE = re.compile(r"\s+")


def parse_document(markup: str) -> BeautifulSoup:
    """
    解析HTML文档

    html.parser对残缺的标记做尽力解析；解析器拒绝的内容退化为空文档。

    Args:
        markup: HTML内容

    Returns:
        BeautifulSoup: 文档对象
    """
    try:
        return BeautifulSoup(markup or "", "html.parser")
    except ParserRejectedMarkup:
        return BeautifulSoup("", "html.parser")


def select(root, selector: str) -> List[Tag]:
    """按CSS选择器查询元素，结果按文档顺序排列"""
    return root.select(selector)


def select_first(root, selector: str) -> Optional[Tag]:
    """按CSS选择器查询第一个匹配元素"""
    return root.select_one(selector)


def element_text(element) -> str:
    """获取元素（含全部后代）的文本内容"""
    if element is None:
        return ""
    return element.get_text()


def get_attribute(element, name: str) -> str:
    """
    读取元素属性

    class等多值属性会被BeautifulSoup解析为列表，这里统一拼接为空格分隔的字符串。
    属性不存在时返回空字符串。
    """
    if element is None:
        return ""
    value = element.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def parent_tag_name(element) -> str:
    """
    获取直接父元素的小写标签名

    顶层元素的父节点是文档本身，返回空字符串。
    """
    parent = getattr(element, "parent", None)
    if parent is None or isinstance(parent, BeautifulSoup):
        return ""
    return (parent.name or "").lower()


def remove_elements(root, selector: str) -> int:
    """
    删除所有匹配选择器的元素

    Returns:
        int: 删除的元素数量
    """
    elements = root.select(selector)
    for element in elements:
        element.decompose()
    return len(elements)


def normalize_whitespace(text: str) -> str:
    """把连续空白折叠为单个空格并去除首尾空白"""
    return _WHITESPACE_RE.sub(" ", text or "").strip()
