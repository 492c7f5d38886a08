"""
模块导入测试
测试所有模块的导入是否正常
"""

import pytest


@pytest.mark.unit
@pytest.mark.imports
class TestModuleImports:
    """模块导入测试类"""

    def test_config_import(self):
        """测试配置模块导入"""
        from image_server.core.config import settings
        assert settings is not None
        assert settings.api_v1_str == "/api/v1"

    def test_analysis_imports(self):
        """测试内容分析模块导入"""
        from image_server.core.analysis.webpage_analyzer import WebPageAnalyzer
        from image_server.core.analysis.article_analyzer import ArticleAnalyzer
        from image_server.core.analysis.prompt_builder import build_prompt
        assert WebPageAnalyzer is not None
        assert ArticleAnalyzer is not None
        assert build_prompt is not None

    def test_imggen_imports(self):
        """测试图片生成模块导入"""
        from image_server.core.imggen import BaseImageProvider, ModelScopeImageProvider
        assert issubclass(ModelScopeImageProvider, BaseImageProvider)

    def test_service_imports(self):
        """测试服务模块导入"""
        from image_server.services.generation import GenerationOrchestrator, build_orchestrator
        from image_server.services.tools.handler import ToolHandler
        assert GenerationOrchestrator is not None
        assert build_orchestrator is not None
        assert ToolHandler is not None

    def test_api_imports(self):
        """测试API模块导入"""
        from image_server.api.v1.router import api_router
        assert api_router is not None
