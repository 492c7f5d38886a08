"""
AI图片生成服务
分析网页与文章内容的配图需求，并调用ModelScope生成图片
"""

__version__ = "1.0.0"
