"""
通用Pydantic模型
用于标准化API响应
"""

from typing import Optional, Any, List, Literal
from pydantic import BaseModel, Field


class StandardResponse(BaseModel):
    """标准化响应模型"""
    status: str = "success"
    message: str = ""
    data: Optional[Any] = None


class TextContent(BaseModel):
    """工具返回的文本内容块"""
    type: Literal["text"] = "text"
    text: str = Field(..., description="文本内容")


class ToolResponse(BaseModel):
    """工具调用响应模型

    工具执行失败时不会返回HTTP错误，而是通过 is_error 标记并在文本中说明原因。
    """
    content: List[TextContent] = Field(default_factory=list, description="文本内容列表")
    is_error: bool = Field(default=False, description="工具执行是否失败")
    data: Optional[Any] = Field(None, description="结构化结果数据")

    @classmethod
    def text(cls, text: str, data: Optional[Any] = None) -> "ToolResponse":
        """构建成功响应"""
        return cls(content=[TextContent(text=text)], data=data)

    @classmethod
    def error(cls, text: str, data: Optional[Any] = None) -> "ToolResponse":
        """构建失败响应"""
        return cls(content=[TextContent(text=text)], is_error=True, data=data)
