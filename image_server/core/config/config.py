"""
应用配置管理模块
统一管理所有配置信息，包括环境变量和文件配置
"""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator, ConfigDict

from image_server.utils.config_utils import get_workspace_path, get_config_path


class Settings(BaseSettings):
    """应用配置类 - 统一管理所有配置信息"""

    # ==================== 基础配置 ====================
    app_name: str = "AI Image Generation Server"
    app_version: str = "1.0.0"
    app_debug: bool = False

    # ==================== API配置 ====================
    api_v1_str: str = "/api/v1"
    project_name: str = "AI Image Generation API"

    # ==================== 日志配置 ====================
    log_level: str = "INFO"
    log_dir: str = "log"
    log_file: str = "image_server.log"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ==================== 应用服务配置 ====================
    app_port: int = 8080
    app_host: str = "0.0.0.0"

    # ==================== ModelScope图片生成配置 ====================
    modelscope_endpoint: str = "https://api-inference.modelscope.cn/v1/images/generations"
    modelscope_model_id: str = "MusePublic/489_ckpt_FLUX_1"
    # 默认API密钥（请求未携带密钥时使用，通常留空）
    modelscope_api_key: str = ""
    # 请求超时（秒），None表示沿用aiohttp默认值
    modelscope_timeout: Optional[int] = None

    # API密钥验证使用的测试提示词
    validation_prompt: str = "A simple test image"

    # ==================== 验证器 ====================
    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """日志级别统一为大写"""
        return value.strip().upper() or "INFO"

    @field_validator("modelscope_api_key")
    @classmethod
    def strip_api_key(cls, value: str) -> str:
        """去除密钥首尾空白"""
        return value.strip()

    # ==================== 计算属性 ====================
    @property
    def absolute_log_file(self) -> str:
        """获取绝对日志文件路径"""
        return str(get_workspace_path(self.log_dir) / self.log_file)

    @property
    def has_default_api_key(self) -> bool:
        """是否配置了默认API密钥"""
        return bool(self.modelscope_api_key)

    model_config = ConfigDict(
        env_file=get_config_path(".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
        validate_default=True
    )


def get_settings() -> Settings:
    """获取应用配置实例"""
    # 环境变量文件加载由外部环境控制（Docker Compose、launch.json等）
    return Settings()


# 全局配置实例
settings = get_settings()
