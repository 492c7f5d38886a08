"""
工具调用业务处理器
处理各工具的业务逻辑，将执行结果和异常统一转换为工具响应
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Type

from pydantic import BaseModel

from image_server.core.log_utils import get_logger
from image_server.core.log_messages import log_messages
from image_server.core.analysis.webpage_analyzer import WebPageAnalyzer
from image_server.core.analysis.article_analyzer import ArticleAnalyzer
from image_server.core.imggen.exceptions import ApiKeyMissingError, ImageGenerationError
from image_server.core.imggen.models import ImageGenerationResult
from image_server.services.generation.orchestrator import GenerationOrchestrator, build_orchestrator
from image_server.schemas.common import ToolResponse
from image_server.schemas.content_analysis import (
    ArticleAnalysisSchema,
    ImageGenerationResultSchema,
    WebPageAnalysisSchema,
)
from image_server.schemas.tools import (
    AnalyzeArticleRequest,
    AnalyzeWebpageRequest,
    GenerateArticleImagesRequest,
    GenerateSingleImageRequest,
    GenerateWebpageImagesRequest,
    ToolDefinition,
    ValidateApiKeyRequest,
)
from image_server.services.tools import formatters

logger = get_logger(__name__)

OrchestratorFactory = Callable[[str], GenerationOrchestrator]

# 工具名称、标题、说明与输入模型
TOOL_DEFINITIONS = (
    ("analyze-webpage-images", "网页图片需求分析",
     "分析网页HTML内容，识别所需的图片类型和位置，生成相应的图片需求列表", AnalyzeWebpageRequest),
    ("analyze-article-images", "文章图片需求分析",
     "分析文章内容，自动生成合适的配图需求和数量建议", AnalyzeArticleRequest),
    ("generate-single-image", "生成单张图片",
     "使用提供的提示词生成一张图片", GenerateSingleImageRequest),
    ("generate-webpage-images", "批量生成网页图片",
     "分析网页内容并批量生成所需的所有图片", GenerateWebpageImagesRequest),
    ("generate-article-images", "批量生成文章图片",
     "分析文章内容并批量生成合适的配图", GenerateArticleImagesRequest),
    ("validate-api-key", "验证ModelScope API密钥",
     "验证提供的ModelScope API密钥是否有效", ValidateApiKeyRequest),
)


def _error_text(error: Exception) -> str:
    return str(error) or "未知错误"


def _serialize(schema: Type[BaseModel], obj: Any) -> Dict[str, Any]:
    return schema.model_validate(obj).model_dump(mode="json")


def _serialize_results(results: Sequence[ImageGenerationResult]) -> List[Dict[str, Any]]:
    return [_serialize(ImageGenerationResultSchema, result) for result in results]


class ToolHandler:
    """工具调用业务处理器

    分析类工具只依赖内容分析器；生成类工具每次调用都会通过编排器工厂
    使用本次调用的API密钥创建新的编排器。
    """

    def __init__(
        self,
        orchestrator_factory: Optional[OrchestratorFactory] = None,
        webpage_analyzer: Optional[WebPageAnalyzer] = None,
        article_analyzer: Optional[ArticleAnalyzer] = None
    ):
        self.orchestrator_factory = orchestrator_factory or build_orchestrator
        self.webpage_analyzer = webpage_analyzer or WebPageAnalyzer()
        self.article_analyzer = article_analyzer or ArticleAnalyzer()

    @staticmethod
    def list_tools() -> List[ToolDefinition]:
        """列出所有工具及其输入参数结构"""
        return [
            ToolDefinition(
                name=name,
                title=title,
                description=description,
                input_schema=request_model.model_json_schema()
            )
            for name, title, description, request_model in TOOL_DEFINITIONS
        ]

    def _create_orchestrator(self, api_key: str) -> GenerationOrchestrator:
        orchestrator = self.orchestrator_factory(api_key)
        if not orchestrator.config.has_api_key:
            logger.warning(log_messages.API_KEY_MISSING, operation="create_orchestrator")
            raise ApiKeyMissingError()
        return orchestrator

    async def analyze_webpage_images(self, markup: str, source_url: Optional[str] = None) -> ToolResponse:
        """分析网页HTML中的图片需求"""
        try:
            analysis = self.webpage_analyzer.analyze(markup, source_url)
            return ToolResponse.text(
                formatters.format_webpage_analysis(analysis),
                data=_serialize(WebPageAnalysisSchema, analysis)
            )
        except Exception as e:
            logger.error("网页图片需求分析失败", exception=e, operation="analyze_webpage_images")
            return ToolResponse.error(f"分析网页时发生错误：{_error_text(e)}")

    async def analyze_article_images(self, article_text: str, title: Optional[str] = None) -> ToolResponse:
        """分析文章的配图需求"""
        try:
            analysis = self.article_analyzer.analyze(article_text, title)
            return ToolResponse.text(
                formatters.format_article_analysis(analysis),
                data=_serialize(ArticleAnalysisSchema, analysis)
            )
        except Exception as e:
            logger.error("文章图片需求分析失败", exception=e, operation="analyze_article_images")
            return ToolResponse.error(f"分析文章时发生错误：{_error_text(e)}")

    async def generate_single_image(self, prompt: str, api_key: str = "") -> ToolResponse:
        """使用提示词生成单张图片"""
        try:
            orchestrator = self._create_orchestrator(api_key)
            image_url = await orchestrator.generate_one(prompt)
            return ToolResponse.text(
                formatters.format_single_image(prompt, image_url),
                data={"prompt": prompt, "image_url": image_url}
            )
        except ImageGenerationError as e:
            logger.warning(
                log_messages.IMAGE_GENERATION_FAILED,
                operation="generate_single_image",
                error_code=e.code,
                error=e.message
            )
            return ToolResponse.error(
                f"图片生成失败：{_error_text(e)}",
                data={"error_code": e.code, "details": e.details}
            )
        except Exception as e:
            logger.error(log_messages.IMAGE_GENERATION_FAILED, exception=e, operation="generate_single_image")
            return ToolResponse.error(f"图片生成失败：{_error_text(e)}")

    async def generate_webpage_images(
        self,
        markup: str,
        api_key: str = "",
        source_url: Optional[str] = None
    ) -> ToolResponse:
        """分析网页并逐个生成所需图片"""
        try:
            orchestrator = self._create_orchestrator(api_key)
            analysis = self.webpage_analyzer.analyze(markup, source_url)
            results = await orchestrator.generate_for_requirements(analysis.image_requirements)
            return ToolResponse.text(
                formatters.format_webpage_generation(results),
                data={
                    "analysis": _serialize(WebPageAnalysisSchema, analysis),
                    "results": _serialize_results(results)
                }
            )
        except Exception as e:
            logger.error("批量生成网页图片失败", exception=e, operation="generate_webpage_images")
            return ToolResponse.error(f"批量生成网页图片失败：{_error_text(e)}")

    async def generate_article_images(
        self,
        article_text: str,
        api_key: str = "",
        title: Optional[str] = None
    ) -> ToolResponse:
        """分析文章并逐个生成配图"""
        try:
            orchestrator = self._create_orchestrator(api_key)
            analysis = self.article_analyzer.analyze(article_text, title)
            results = await orchestrator.generate_for_requirements(analysis.image_requirements)
            return ToolResponse.text(
                formatters.format_article_generation(analysis, results),
                data={
                    "analysis": _serialize(ArticleAnalysisSchema, analysis),
                    "results": _serialize_results(results)
                }
            )
        except Exception as e:
            logger.error("批量生成文章配图失败", exception=e, operation="generate_article_images")
            return ToolResponse.error(f"批量生成文章配图失败：{_error_text(e)}")

    async def validate_api_key(self, api_key: str = "") -> ToolResponse:
        """验证API密钥"""
        try:
            orchestrator = self._create_orchestrator(api_key)
            is_valid = await orchestrator.validate_api_key()
            return ToolResponse.text(formatters.format_validation(is_valid), data={"valid": is_valid})
        except Exception as e:
            logger.error("验证API密钥时发生错误", exception=e, operation="validate_api_key")
            return ToolResponse.error(f"验证API密钥时发生错误：{_error_text(e)}")
