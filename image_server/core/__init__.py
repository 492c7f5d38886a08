"""核心模块：配置、日志、内容分析与图片生成"""
