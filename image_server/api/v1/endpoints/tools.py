"""
工具调用API端点
每个工具对应一个POST接口，工具执行失败时通过 is_error 返回，不抛出HTTP错误
"""

from fastapi import APIRouter, Depends

from image_server.services.generation.orchestrator import build_orchestrator
from image_server.services.tools.handler import OrchestratorFactory, ToolHandler
from image_server.schemas.common import StandardResponse, ToolResponse
from image_server.schemas.tools import (
    AnalyzeArticleRequest,
    AnalyzeWebpageRequest,
    GenerateArticleImagesRequest,
    GenerateSingleImageRequest,
    GenerateWebpageImagesRequest,
    ValidateApiKeyRequest,
)
from image_server.core.log_utils import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["图片工具"])


def get_orchestrator_factory() -> OrchestratorFactory:
    """获取编排器工厂（测试中可通过 dependency_overrides 替换）"""
    return build_orchestrator


def get_tool_handler(
    orchestrator_factory: OrchestratorFactory = Depends(get_orchestrator_factory)
) -> ToolHandler:
    """获取工具处理器"""
    return ToolHandler(orchestrator_factory=orchestrator_factory)


@router.get(
    "",
    response_model=StandardResponse,
    summary="工具列表",
    description="列出所有可用工具及其输入参数的JSON Schema"
)
async def list_tools() -> StandardResponse:
    tools = ToolHandler.list_tools()
    return StandardResponse(
        status="success",
        message=f"共 {len(tools)} 个工具",
        data=[tool.model_dump() for tool in tools]
    )


@router.post(
    "/analyze-webpage-images",
    response_model=ToolResponse,
    summary="网页图片需求分析",
    description="分析网页HTML内容，识别所需的图片类型和位置，生成相应的图片需求列表"
)
async def analyze_webpage_images(
    request: AnalyzeWebpageRequest,
    handler: ToolHandler = Depends(get_tool_handler)
) -> ToolResponse:
    return await handler.analyze_webpage_images(request.markup, request.source_url)


@router.post(
    "/analyze-article-images",
    response_model=ToolResponse,
    summary="文章图片需求分析",
    description="分析文章内容，自动生成合适的配图需求和数量建议"
)
async def analyze_article_images(
    request: AnalyzeArticleRequest,
    handler: ToolHandler = Depends(get_tool_handler)
) -> ToolResponse:
    return await handler.analyze_article_images(request.article_text, request.title)


@router.post(
    "/generate-single-image",
    response_model=ToolResponse,
    summary="生成单张图片",
    description="使用提供的提示词生成一张图片"
)
async def generate_single_image(
    request: GenerateSingleImageRequest,
    handler: ToolHandler = Depends(get_tool_handler)
) -> ToolResponse:
    return await handler.generate_single_image(request.prompt, request.api_key)


@router.post(
    "/generate-webpage-images",
    response_model=ToolResponse,
    summary="批量生成网页图片",
    description="分析网页内容并批量生成所需的所有图片"
)
async def generate_webpage_images(
    request: GenerateWebpageImagesRequest,
    handler: ToolHandler = Depends(get_tool_handler)
) -> ToolResponse:
    """
    批量生成网页图片

    按图片需求逐个生成，单张失败不会中断其余图片的生成，
    每张图片的结果都会出现在响应中。
    """
    return await handler.generate_webpage_images(request.markup, request.api_key, request.source_url)


@router.post(
    "/generate-article-images",
    response_model=ToolResponse,
    summary="批量生成文章图片",
    description="分析文章内容并批量生成合适的配图"
)
async def generate_article_images(
    request: GenerateArticleImagesRequest,
    handler: ToolHandler = Depends(get_tool_handler)
) -> ToolResponse:
    return await handler.generate_article_images(request.article_text, request.api_key, request.title)


@router.post(
    "/validate-api-key",
    response_model=ToolResponse,
    summary="验证ModelScope API密钥",
    description="通过生成一张测试图片验证API密钥是否有效（会消耗一次调用额度）"
)
async def validate_api_key(
    request: ValidateApiKeyRequest,
    handler: ToolHandler = Depends(get_tool_handler)
) -> ToolResponse:
    return await handler.validate_api_key(request.api_key)
