"""图片生成提供商实现"""

from .modelscope import ModelScopeImageProvider

__all__ = ["ModelScopeImageProvider"]
