"""
ModelScope 图片生成提供商
基于 ModelScope API-Inference 的 images/generations 接口实现
"""

import asyncio
import json
from typing import Any, Dict, Optional, Tuple

import aiohttp

from image_server.core.config import settings
from image_server.core.log_utils import get_logger
from image_server.core.log_messages import log_messages
from image_server.core.imggen.base import BaseImageProvider
from image_server.core.imggen.config import GenerationConfig
from image_server.core.imggen.models import ImageGenerationRequest
from image_server.core.imggen.exceptions import (
    ApiKeyMissingError,
    ApiHTTPError,
    ApiNetworkError,
    NoImageFoundError,
    MalformedResponseError,
)

logger = get_logger(__name__)


class ModelScopeImageProvider(BaseImageProvider):
    """ModelScope 图片生成提供商"""

    # 错误映射
    ERROR_CODES = {
        400: "请求参数错误",
        401: "API密钥无效",
        403: "无权访问该模型",
        404: "模型或端点不存在",
        429: "API调用频率限制",
        500: "服务器内部错误",
        502: "网关错误",
        503: "服务不可用",
    }

    def __init__(self, config: GenerationConfig, timeout: Optional[int] = None):
        """
        初始化ModelScope提供商

        Args:
            config: 图片生成配置
            timeout: 请求超时秒数，None时使用配置项或aiohttp默认值
        """
        super().__init__(config)
        self.timeout = timeout if timeout is not None else settings.modelscope_timeout

    def get_provider_name(self) -> str:
        """获取Provider名称"""
        return "modelscope"

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json"
        }

    def _build_payload(self, request: ImageGenerationRequest) -> Dict[str, Any]:
        return {
            "model": self.config.model_id,
            "prompt": request.prompt
        }

    async def _post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Dict[str, str]
    ) -> Tuple[int, str]:
        """
        发送JSON POST请求

        Returns:
            Tuple[int, str]: 状态码与响应体文本

        Raises:
            aiohttp.ClientError: 网络请求失败
            asyncio.TimeoutError: 请求超时
        """
        timeout = aiohttp.ClientTimeout(total=self.timeout) if self.timeout else None
        session_kwargs = {"timeout": timeout} if timeout else {}

        async with aiohttp.ClientSession(**session_kwargs) as session:
            async with session.post(url, json=payload, headers=headers) as response:
                # 非UTF-8响应体按替换字符解码，保证状态码分支始终执行
                return response.status, await response.text(errors="replace")

    @staticmethod
    def _extract_upstream_message(body_text: str) -> str:
        """从错误响应体中提取上游错误消息"""
        try:
            data = json.loads(body_text)
        except (TypeError, ValueError):
            return body_text[:200]

        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            for key in ("message", "errors", "error"):
                if isinstance(data.get(key), str) and data[key]:
                    return data[key]
        return body_text[:200]

    @staticmethod
    def _extract_image_url(body_text: str) -> str:
        """
        从成功响应中提取第一张图片的URL

        Raises:
            MalformedResponseError: 响应不是JSON对象或图片缺少url
            NoImageFoundError: images字段缺失或为空
        """
        try:
            data = json.loads(body_text)
        except (TypeError, ValueError) as e:
            raise MalformedResponseError(
                f"JSON解析失败: {str(e)}",
                details={"response_preview": (body_text or "")[:200]}
            ) from e

        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"API响应格式错误: {str(data)[:200]}",
                details={"response_preview": str(data)[:200]}
            )

        images = data.get("images")
        if not isinstance(images, list) or not images:
            raise NoImageFoundError(details={"request_id": data.get("request_id")})

        first_image = images[0]
        image_url = first_image.get("url") if isinstance(first_image, dict) else None
        if not image_url:
            raise MalformedResponseError(
                "API响应中没有图片URL",
                details={"response_preview": str(data)[:200]}
            )
        return str(image_url)

    async def generate_image(self, request: ImageGenerationRequest) -> str:
        """
        生成图片

        Args:
            request: 图片生成请求参数，上游只接收 model 与 prompt

        Returns:
            str: 生成的图片URL

        Raises:
            ApiKeyMissingError: 未配置API密钥
            ApiHTTPError: 状态码不是200
            ApiNetworkError: 网络请求失败
            NoImageFoundError: 响应中没有图片
            MalformedResponseError: 响应格式错误
        """
        if not self.config.has_api_key:
            raise ApiKeyMissingError()

        payload = self._build_payload(request)

        logger.info(
            log_messages.IMAGE_GENERATION_START,
            operation="modelscope_generate_start",
            model=self.config.model_id,
            prompt_length=len(request.prompt),
            api_key_length=len(self.config.api_key)
        )

        try:
            status_code, body_text = await self._post_json(
                self.config.endpoint, payload, self._build_headers()
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            error_msg = f"ModelScope API调用失败 (0): {str(e) or type(e).__name__}"
            logger.error(error_msg, operation="modelscope_network_error", exception=e)
            raise ApiNetworkError(error_msg) from e

        logger.debug(
            "收到API响应",
            operation="modelscope_api_response",
            status_code=status_code
        )

        if status_code != 200:
            upstream_message = self._extract_upstream_message(body_text)
            reason = upstream_message or self.ERROR_CODES.get(status_code, f"API错误: {status_code}")
            error_msg = f"ModelScope API调用失败 ({status_code}): {reason}"
            logger.error(
                "API请求失败",
                operation="modelscope_api_error",
                status_code=status_code,
                error_response=(body_text or "")[:200]
            )
            raise ApiHTTPError(error_msg, status_code=status_code, upstream_message=upstream_message)

        image_url = self._extract_image_url(body_text)

        logger.info(
            log_messages.IMAGE_GENERATION_SUCCESS,
            operation="modelscope_generation_success",
            image_url_preview=image_url[:100]
        )
        return image_url
