"""
静态资源
提供图片类型模板表与使用指南
"""

from typing import Any, Dict

from image_server.core.analysis.tables import (
    IMAGE_TYPE_DESCRIPTIONS,
    IMAGE_TYPE_SIZES,
    IMAGE_TYPE_TEMPLATES,
)

USAGE_GUIDE = """
# AI图片生成服务使用指南

## 概述
本服务提供智能图片生成能力，能够自动分析网页和文章内容，生成合适的占位图片。

## 主要功能

### 1. 网页图片生成
- **analyze-webpage-images**: 分析网页HTML，识别图片需求
- **generate-webpage-images**: 批量生成网页所需的所有图片

### 2. 文章配图生成
- **analyze-article-images**: 分析文章内容，生成配图建议
- **generate-article-images**: 批量生成文章配图

### 3. 单独图片生成
- **generate-single-image**: 使用自定义提示词生成单张图片

### 4. 工具功能
- **validate-api-key**: 验证ModelScope API密钥

## 使用步骤

1. 准备ModelScope API密钥
2. 通过 `GET /api/v1/tools` 查看工具及其输入参数
3. 调用 `POST /api/v1/tools/<工具名称>` 并提供相应的输入参数
4. 获取生成的图片URL

## 注意事项
- API密钥需要有效的ModelScope账户
- 图片生成可能需要一定时间
- 建议使用英文提示词以获得最佳效果
""".strip()


def get_image_type_templates() -> Dict[str, Dict[str, Any]]:
    """获取各图片类型的说明、建议尺寸与提示词模板"""
    return {
        image_type: {
            "description": IMAGE_TYPE_DESCRIPTIONS.get(image_type, image_type),
            "suggestedSize": IMAGE_TYPE_SIZES[image_type],
            "promptTemplate": template,
        }
        for image_type, template in IMAGE_TYPE_TEMPLATES.items()
    }


def get_usage_guide() -> str:
    return USAGE_GUIDE
