"""
解析器模块初始化文件
"""

from .element_finder import ElementFinder
from .image_type_detector import ImageTypeDetector

__all__ = ['ElementFinder', 'ImageTypeDetector']
