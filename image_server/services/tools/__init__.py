"""工具调用服务"""
