"""
内容分析模块
网页与文章的图片需求识别及提示词生成
"""
