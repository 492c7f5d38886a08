"""API数据模型"""
