"""
日志消息模板模块
统一管理所有业务日志消息模板，便于维护和国际化
"""

from typing import Dict, Any


class LogMessages:
    """日志消息模板类"""

    # ==================== 通用日志消息 ====================
    OPERATION_SUCCESS = "操作成功完成: {operation_name}"

    # ==================== 内容分析相关 ====================
    WEBPAGE_ANALYSIS_START = "开始分析网页内容"
    WEBPAGE_ANALYSIS_SUCCESS = "网页分析完成，检测到 {requirement_count} 个图片需求"
    WEBPAGE_DEFAULT_REQUIREMENTS = "未找到图片元素，使用默认图片需求"
    ARTICLE_ANALYSIS_START = "开始分析文章内容"
    ARTICLE_ANALYSIS_SUCCESS = "文章分析完成，主题: {topic}，建议配图数量: {image_count}"

    # ==================== 图片生成相关 ====================
    IMAGE_GENERATION_START = "开始调用ModelScope API生成图片"
    IMAGE_GENERATION_SUCCESS = "图片生成成功"
    IMAGE_GENERATION_FAILED = "图片生成失败"
    BATCH_GENERATION_START = "开始批量生成图片，共 {total} 张，分 {batch_count} 批"
    BATCH_GENERATION_FAILED = "批次 {batch_index} 生成失败"
    REQUIREMENT_GENERATION_DONE = "图片需求生成完成，成功 {success_count}/{total}"

    # ==================== API密钥相关 ====================
    API_KEY_MISSING = "未提供ModelScope API密钥"
    API_KEY_VALID = "API密钥验证成功"
    API_KEY_INVALID = "API密钥无效或权限不足"

    @classmethod
    def format_message(cls, message_template: str, **kwargs: Any) -> str:
        """格式化日志消息模板"""
        return message_template.format(**kwargs)

    @classmethod
    def get_structured_data(cls, **kwargs: Any) -> Dict[str, Any]:
        """获取结构化日志数据"""
        return kwargs


# 全局实例
log_messages = LogMessages()
