"""
图片生成异常定义
定义调用图片生成API时可能出现的所有异常类型
"""

from typing import Any, Dict, Optional


class ImageGenerationError(Exception):
    """
    图片生成基础异常

    所有图片生成相关异常的基类。

    Attributes:
        message: 错误消息
        code: 错误码
        details: 错误详情
    """

    code: str = "GENERATION_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ApiKeyMissingError(ImageGenerationError):
    """未提供API密钥"""

    code = "CONFIG_MISSING"

    def __init__(self, message: str = "未提供ModelScope API密钥", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details=details)


class ApiHTTPError(ImageGenerationError):
    """API返回非200状态码"""

    code = "HTTP_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int,
        upstream_message: str = "",
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code
        self.upstream_message = upstream_message


class ApiNetworkError(ImageGenerationError):
    """网络请求失败（连接错误、超时等）"""

    code = "NETWORK_ERROR"


class NoImageFoundError(ImageGenerationError):
    """API响应中没有生成的图片"""

    code = "NO_IMAGE_FOUND"

    def __init__(self, message: str = "API响应中没有找到生成的图片", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details=details)


class MalformedResponseError(ImageGenerationError):
    """API响应格式错误"""

    code = "MALFORMED_RESPONSE"


__all__ = [
    "ImageGenerationError",
    "ApiKeyMissingError",
    "ApiHTTPError",
    "ApiNetworkError",
    "NoImageFoundError",
    "MalformedResponseError",
]
