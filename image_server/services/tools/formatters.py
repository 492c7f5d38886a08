"""
工具结果文本格式化
将分析结果与生成结果转换为面向调用方的中文文本
"""

from typing import Sequence

from image_server.core.analysis.models import ArticleAnalysis, WebPageAnalysis
from image_server.core.imggen.models import ImageGenerationResult


def format_webpage_analysis(analysis: WebPageAnalysis) -> str:
    items = "\n\n".join(
        f"{index}. {req.type} - {req.description}\n"
        f"   位置：{req.context}\n"
        f"   尺寸：{req.suggested_size}\n"
        f"   提示词：{req.prompt}"
        for index, req in enumerate(analysis.image_requirements, start=1)
    )
    return (
        f"网页分析完成：\n\n页面标题：{analysis.title}\n\n"
        f"检测到 {len(analysis.image_requirements)} 个图片需求：\n\n{items}"
    )


def format_article_analysis(analysis: ArticleAnalysis) -> str:
    items = "\n\n".join(
        f"{index}. {req.description}\n"
        f"   类型：{req.type}\n"
        f"   尺寸：{req.suggested_size}\n"
        f"   提示词：{req.prompt}"
        for index, req in enumerate(analysis.image_requirements, start=1)
    )
    return (
        f"文章分析完成：\n\n标题：{analysis.title}\n主题：{analysis.topic}\n"
        f"建议配图数量：{analysis.suggested_image_count}\n\n图片需求：\n\n{items}"
    )


def format_single_image(prompt: str, image_url: str) -> str:
    return f"图片生成成功！\n\n提示词：{prompt}\n图片URL：{image_url}"


def _success_count(results: Sequence[ImageGenerationResult]) -> int:
    return sum(1 for result in results if result.success)


def format_webpage_generation(results: Sequence[ImageGenerationResult]) -> str:
    """格式化网页图片批量生成结果，成功项附带类型与URL"""
    lines = []
    for index, result in enumerate(results, start=1):
        if result.success:
            lines.append(
                f"✅ {index}. {result.requirement.description}\n"
                f"   类型：{result.requirement.type}\n"
                f"   URL：{result.image_url}"
            )
        else:
            lines.append(f"❌ {index}. {result.requirement.description}\n   错误：{result.error}")

    return (
        f"网页图片生成完成！\n\n成功生成 {_success_count(results)}/{len(results)} 张图片：\n\n"
        + "\n\n".join(lines)
    )


def format_article_generation(analysis: ArticleAnalysis, results: Sequence[ImageGenerationResult]) -> str:
    """格式化文章配图批量生成结果"""
    lines = []
    for index, result in enumerate(results, start=1):
        if result.success:
            lines.append(f"✅ {index}. {result.requirement.description}\n   URL：{result.image_url}")
        else:
            lines.append(f"❌ {index}. {result.requirement.description}\n   错误：{result.error}")

    return (
        f"文章配图生成完成！\n\n文章：{analysis.title}\n主题：{analysis.topic}\n"
        f"成功生成 {_success_count(results)}/{len(results)} 张配图：\n\n"
        + "\n\n".join(lines)
    )


def format_validation(is_valid: bool) -> str:
    return "✅ API密钥验证成功，可以正常使用" if is_valid else "❌ API密钥无效或权限不足"
