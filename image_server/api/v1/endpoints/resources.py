"""
静态资源API端点
提供图片类型模板与使用指南
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from image_server.services.tools.resources import get_image_type_templates, get_usage_guide
from image_server.schemas.common import StandardResponse

router = APIRouter(tags=["资源"])


@router.get(
    "/image-types",
    response_model=StandardResponse,
    summary="图片类型模板",
    description="提供各种图片类型的提示词模板和尺寸建议"
)
async def get_image_types() -> StandardResponse:
    return StandardResponse(
        status="success",
        message="获取图片类型模板成功",
        data=get_image_type_templates()
    )


@router.get(
    "/usage-guide",
    response_class=PlainTextResponse,
    summary="使用指南",
    description="图片生成服务的详细使用指南（Markdown）"
)
async def get_usage_guide_document() -> PlainTextResponse:
    return PlainTextResponse(get_usage_guide(), media_type="text/markdown")
