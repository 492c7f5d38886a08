"""
内容分析与图片生成结果的Pydantic数据模型
用于将领域对象序列化为工具响应中的结构化数据
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ImageRequirementSchema(BaseModel):
    """图片需求"""
    model_config = ConfigDict(from_attributes=True)

    type: str = Field(..., description="图片类型")
    description: str = Field(..., description="图片描述")
    suggested_size: str = Field(..., description="建议尺寸（宽x高）")
    context: str = Field(..., description="页面位置")
    prompt: str = Field(default="", description="生成提示词")


class WebPageAnalysisSchema(BaseModel):
    """网页分析结果"""
    model_config = ConfigDict(from_attributes=True)

    title: str = Field(..., description="页面标题")
    content: str = Field(..., description="页面正文（最多2000字符）")
    image_requirements: List[ImageRequirementSchema] = Field(default_factory=list, description="图片需求列表")


class ArticleAnalysisSchema(BaseModel):
    """文章分析结果"""
    model_config = ConfigDict(from_attributes=True)

    title: str = Field(..., description="文章标题")
    paragraphs: List[str] = Field(default_factory=list, description="段落列表")
    topic: str = Field(..., description="文章主题")
    suggested_image_count: int = Field(..., ge=1, description="建议配图数量")
    image_requirements: List[ImageRequirementSchema] = Field(default_factory=list, description="图片需求列表")


class ImageGenerationResultSchema(BaseModel):
    """单个图片需求的生成结果"""
    model_config = ConfigDict(from_attributes=True)

    requirement: ImageRequirementSchema = Field(..., description="图片需求")
    image_url: str = Field(default="", description="图片URL（失败时为空）")
    success: bool = Field(..., description="是否成功")
    error: Optional[str] = Field(None, description="错误信息")
    generated_at: datetime = Field(..., description="生成时间（UTC）")
