"""
日期时间工具模块
提供统一的日期时间处理函数
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """获取当前UTC时间（带时区信息）"""
    return datetime.now(timezone.utc)
