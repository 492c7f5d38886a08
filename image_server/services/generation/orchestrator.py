"""
图片生成编排服务
负责按图片需求调用图片生成提供商，支持严格并发批处理与容错顺序处理
"""

import asyncio
from typing import Any, Callable, List, Optional, Sequence

from image_server.core.config import settings
from image_server.core.log_utils import get_logger
from image_server.core.log_messages import log_messages
from image_server.core.analysis.models import ImageRequirement
from image_server.core.imggen.base import BaseImageProvider
from image_server.core.imggen.config import GenerationConfig
from image_server.core.imggen.exceptions import ImageGenerationError
from image_server.core.imggen.models import ImageGenerationRequest, ImageGenerationResult
from image_server.core.imggen.providers.modelscope import ModelScopeImageProvider

logger = get_logger(__name__)

ProviderFactory = Callable[[GenerationConfig], BaseImageProvider]


class GenerationOrchestrator:
    """图片生成编排器

    每次工具调用创建一个实例，持有该次调用的生成配置。
    """

    # 严格批处理时每批的最大并发数
    CONCURRENT_LIMIT = 3

    def __init__(
        self,
        config: GenerationConfig,
        provider_factory: Optional[ProviderFactory] = None
    ):
        """
        初始化编排器

        Args:
            config: 图片生成配置
            provider_factory: 根据配置创建提供商的工厂，默认为ModelScope
        """
        self._provider_factory = provider_factory or ModelScopeImageProvider
        self._config = config
        self._provider = self._provider_factory(config)

    @property
    def config(self) -> GenerationConfig:
        return self._config

    def replace_config(self, config: GenerationConfig) -> None:
        """整体替换生成配置"""
        self._config = config
        self._provider = self._provider_factory(config)

    def update_config(self, **fields: Any) -> None:
        """逐字段更新生成配置（api_key、endpoint、model_id）"""
        self.replace_config(self._config.merged(**fields))

    async def generate_one(self, prompt: str) -> str:
        """
        根据提示词生成单张图片

        Args:
            prompt: 英文提示词

        Returns:
            str: 生成的图片URL

        Raises:
            ImageGenerationError: 生成失败
        """
        return await self._provider.generate_image(ImageGenerationRequest(prompt=prompt))

    async def _generate_requirement(self, requirement: ImageRequirement) -> ImageGenerationResult:
        image_url = await self.generate_one(requirement.prompt or requirement.description)
        return ImageGenerationResult.succeeded(requirement, image_url)

    async def generate_many(self, requirements: Sequence[ImageRequirement]) -> List[ImageGenerationResult]:
        """
        严格模式批量生成图片

        每批最多并发 CONCURRENT_LIMIT 个请求，批次之间顺序执行。
        任一请求失败时，等待当前批次全部结束后抛出该批中位置最靠前的异常，
        后续批次不再执行。

        Args:
            requirements: 图片需求列表

        Returns:
            List[ImageGenerationResult]: 与输入顺序一致的成功结果

        Raises:
            ImageGenerationError: 任一图片生成失败
        """
        requirements = list(requirements)
        batch_count = (len(requirements) + self.CONCURRENT_LIMIT - 1) // self.CONCURRENT_LIMIT
        logger.info(
            log_messages.BATCH_GENERATION_START,
            operation="generate_many",
            total=len(requirements),
            batch_count=batch_count
        )

        results: List[ImageGenerationResult] = []
        for batch_index in range(batch_count):
            start = batch_index * self.CONCURRENT_LIMIT
            batch = requirements[start:start + self.CONCURRENT_LIMIT]

            outcomes = await asyncio.gather(
                *(self._generate_requirement(requirement) for requirement in batch),
                return_exceptions=True
            )

            for outcome in outcomes:
                if isinstance(outcome, BaseException):
                    logger.error(
                        log_messages.BATCH_GENERATION_FAILED,
                        operation="generate_many",
                        batch_index=batch_index + 1,
                        error=str(outcome)
                    )
                    raise outcome
                results.append(outcome)

        return results

    async def generate_for_requirements(
        self,
        requirements: Sequence[ImageRequirement]
    ) -> List[ImageGenerationResult]:
        """
        容错模式逐个生成图片

        每个需求都会得到一个结果，单个失败不影响后续需求，本方法不抛出异常。

        Args:
            requirements: 图片需求列表

        Returns:
            List[ImageGenerationResult]: 与输入一一对应的生成结果
        """
        results: List[ImageGenerationResult] = []

        for requirement in requirements:
            try:
                results.append(await self._generate_requirement(requirement))
            except ImageGenerationError as e:
                logger.warning(
                    log_messages.IMAGE_GENERATION_FAILED,
                    operation="generate_for_requirements",
                    image_type=requirement.type,
                    error_code=e.code,
                    error=e.message
                )
                results.append(ImageGenerationResult.failed(requirement, e.message))
            except Exception as e:
                logger.error(
                    log_messages.IMAGE_GENERATION_FAILED,
                    exception=e,
                    operation="generate_for_requirements",
                    image_type=requirement.type
                )
                results.append(ImageGenerationResult.failed(requirement, str(e)))

        success_count = sum(1 for result in results if result.success)
        logger.info(
            log_messages.REQUIREMENT_GENERATION_DONE,
            operation="generate_for_requirements",
            success_count=success_count,
            total=len(results)
        )
        return results

    async def validate_api_key(self) -> bool:
        """
        验证API密钥是否有效

        通过生成一张测试图片进行验证，会消耗一次调用额度。

        Returns:
            bool: 密钥有效返回True，否则返回False
        """
        try:
            await self.generate_one(settings.validation_prompt)
        except ImageGenerationError as e:
            logger.warning(
                log_messages.API_KEY_INVALID,
                operation="validate_api_key",
                error_code=e.code,
                error=e.message
            )
            return False
        except Exception as e:
            logger.error(log_messages.API_KEY_INVALID, exception=e, operation="validate_api_key")
            return False

        logger.info(log_messages.API_KEY_VALID, operation="validate_api_key")
        return True


def build_orchestrator(api_key: str = "") -> GenerationOrchestrator:
    """根据调用方提供的API密钥创建编排器"""
    return GenerationOrchestrator(GenerationConfig.from_api_key(api_key))
