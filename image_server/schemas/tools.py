"""
工具调用相关的Pydantic数据模型
用于工具输入参数的验证及输入结构（JSON Schema）的生成
"""

from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, AliasChoices


# ============================================================================
# 请求模型
# ============================================================================

class AnalyzeWebpageRequest(BaseModel):
    """网页图片需求分析请求"""
    model_config = ConfigDict(populate_by_name=True)

    markup: str = Field(
        ...,
        validation_alias=AliasChoices("markup", "htmlContent"),
        description="网页HTML内容"
    )
    source_url: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("sourceUrl", "pageUrl"),
        description="页面URL（可选）"
    )


class AnalyzeArticleRequest(BaseModel):
    """文章图片需求分析请求"""
    model_config = ConfigDict(populate_by_name=True)

    article_text: str = Field(
        ...,
        validation_alias=AliasChoices("articleText", "article_text"),
        description="文章文本内容"
    )
    title: Optional[str] = Field(None, description="文章标题（可选）")


class GenerateSingleImageRequest(BaseModel):
    """生成单张图片请求"""
    model_config = ConfigDict(populate_by_name=True)

    prompt: str = Field(..., description="英文图片生成提示词")
    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("apiKey", "api_key"),
        description="ModelScope API密钥（留空时使用服务端默认密钥）"
    )


class GenerateWebpageImagesRequest(AnalyzeWebpageRequest):
    """批量生成网页图片请求"""

    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("apiKey", "api_key"),
        description="ModelScope API密钥（留空时使用服务端默认密钥）"
    )


class GenerateArticleImagesRequest(AnalyzeArticleRequest):
    """批量生成文章图片请求"""

    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("apiKey", "api_key"),
        description="ModelScope API密钥（留空时使用服务端默认密钥）"
    )


class ValidateApiKeyRequest(BaseModel):
    """验证API密钥请求"""
    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("apiKey", "api_key"),
        description="要验证的ModelScope API密钥"
    )


# ============================================================================
# 响应模型
# ============================================================================

class ToolDefinition(BaseModel):
    """工具定义"""
    name: str = Field(..., description="工具名称")
    title: str = Field(..., description="工具标题")
    description: str = Field(..., description="工具说明")
    input_schema: Dict[str, Any] = Field(..., description="输入参数的JSON Schema")
