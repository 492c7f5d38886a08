"""
测试配置和fixtures
为所有测试提供共享的配置和fixtures

单元测试不依赖网络；接口测试通过FastAPI TestClient在进程内调用，
ModelScope调用全部通过依赖覆盖或mock替换
"""

import pytest

from image_server.core.config import settings


SAMPLE_WEBPAGE_HTML = """
<html>
  <head>
    <title>Acme Rockets</title>
    <style>body { color: red; }</style>
  </head>
  <body>
    <header><img src="hero.png" alt="Hero banner"></header>
    <main>
      <p>We build reusable rockets for orbital missions.</p>
      <img class="product-shot" alt="Product photo">
      <script>console.log("tracking");</script>
    </main>
    <footer><div class="placeholder"></div></footer>
  </body>
</html>
"""

SAMPLE_ARTICLE_TEXT = """Machine learning in practice

Software teams adopt new programming tools every year.

Code review keeps development quality high."""


@pytest.fixture
def sample_webpage_html() -> str:
    """带有三个图片元素的示例网页"""
    return SAMPLE_WEBPAGE_HTML


@pytest.fixture
def sample_article_text() -> str:
    """技术主题的示例文章"""
    return SAMPLE_ARTICLE_TEXT


@pytest.fixture
def no_default_api_key(monkeypatch):
    """确保环境中没有配置默认API密钥"""
    monkeypatch.setattr(settings, "modelscope_api_key", "")


# 测试标记配置
def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "integration: 集成测试")
    config.addinivalue_line("markers", "interface: 接口测试")
    config.addinivalue_line("markers", "basic: 基础功能测试")
    config.addinivalue_line("markers", "logging: 日志相关测试")
    config.addinivalue_line("markers", "analysis: 内容分析测试")
    config.addinivalue_line("markers", "generation: 图片生成测试")
    config.addinivalue_line("markers", "imports: 模块导入测试")
    config.addinivalue_line("markers", "html: HTML解析测试")
