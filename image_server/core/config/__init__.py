"""
配置模块
包含应用所有配置信息和工具
"""

from image_server.core.config.config import settings, get_settings, Settings

__all__ = ["settings", "get_settings", "Settings"]
