"""
日志系统单元测试
遵循项目测试规范：快速执行，无外部依赖

测试 UnifiedLogger 的核心功能：模板格式化、结构化字段与异常信息
"""

import pytest
import logging
from unittest.mock import patch

from image_server.core.log_utils import UnifiedLogger, get_logger, setup_logging
from image_server.core.log_messages import LogMessages, log_messages


@pytest.mark.unit
@pytest.mark.logging
class TestUnifiedLogger:
    """UnifiedLogger 单元测试类"""

    def setup_method(self):
        """每个测试方法执行前的设置"""
        self.logger_name = "test_logger"
        self.unified_logger = UnifiedLogger(self.logger_name)

    def test_init(self):
        """测试 UnifiedLogger 初始化"""
        assert self.unified_logger.name == self.logger_name
        assert isinstance(self.unified_logger.logger, logging.Logger)
        assert self.unified_logger.logger.name == self.logger_name

    def test_info_with_simple_message(self):
        """测试记录简单消息（无格式化参数）"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            message = "简单的日志消息"
            self.unified_logger.info(message)

            mock_info.assert_called_once()
            call_args = mock_info.call_args
            assert call_args[0][0] == message
            assert call_args[1]['extra']['log_module'] == self.logger_name

    def test_info_with_formatted_string(self):
        """测试记录已经通过 f-string 格式化的消息（包含字典）"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            result = {"image_type": "hero", "size": "1920x1080"}
            message = f"需求识别完成: {result}"

            # 不应该抛出 KeyError
            self.unified_logger.info(message)

            mock_info.assert_called_once()
            assert "image_type" in mock_info.call_args[0][0]

    def test_info_with_template_parameters(self):
        """测试使用消息模板与格式化参数"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            self.unified_logger.info(
                log_messages.ARTICLE_ANALYSIS_SUCCESS,
                operation="analyze_article",
                topic="science",
                image_count=3
            )

            call_args = mock_info.call_args
            assert call_args[0][0] == "文章分析完成，主题: science，建议配图数量: 3"
            assert call_args[1]['extra']['operation'] == "analyze_article"
            assert call_args[1]['extra']['image_count'] == 3

    def test_info_with_invalid_format(self):
        """测试格式化失败时的降级处理"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            template = "操作 {operation_name} 完成"

            self.unified_logger.info(template, wrong_param="测试")

            assert mock_info.call_args[0][0] == template

    def test_reserved_record_keys_are_prefixed(self):
        """测试与LogRecord属性同名的字段会加上前缀"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            self.unified_logger.info("消息", module="webpage", filename="a.html")

            extra = mock_info.call_args[1]['extra']
            assert extra['field_module'] == "webpage"
            assert extra['field_filename'] == "a.html"
            assert 'module' not in extra

    def test_error_with_exception(self):
        """测试记录带异常的错误日志"""
        with patch.object(self.unified_logger.logger, 'error') as mock_error:
            test_exception = ValueError("测试异常")

            self.unified_logger.error("发生错误", exception=test_exception)

            call_args = mock_error.call_args
            assert call_args[0][0] == "发生错误"
            assert call_args[1]['extra']['exception_type'] == 'ValueError'
            assert call_args[1]['extra']['exception_message'] == '测试异常'
            assert call_args[1]['exc_info'] == test_exception

    def test_error_without_exception(self):
        """测试记录不带异常的错误日志"""
        with patch.object(self.unified_logger.logger, 'error') as mock_error:
            self.unified_logger.error("错误消息")

            call_args = mock_error.call_args
            assert call_args[0][0] == "错误消息"
            assert 'exc_info' not in call_args[1]

    def test_warning(self):
        """测试记录警告日志"""
        with patch.object(self.unified_logger.logger, 'warning') as mock_warning:
            self.unified_logger.warning("警告消息")

            mock_warning.assert_called_once()
            assert mock_warning.call_args[0][0] == "警告消息"

    @patch('image_server.core.log_utils.settings')
    def test_debug_when_debug_enabled(self, mock_settings):
        """测试在调试模式开启时记录调试日志"""
        mock_settings.app_debug = True

        with patch.object(self.unified_logger.logger, 'debug') as mock_debug:
            self.unified_logger.debug("调试消息")

            mock_debug.assert_called_once()

    @patch('image_server.core.log_utils.settings')
    def test_debug_when_debug_disabled(self, mock_settings):
        """测试在调试模式关闭时不记录调试日志"""
        mock_settings.app_debug = False

        with patch.object(self.unified_logger.logger, 'debug') as mock_debug:
            self.unified_logger.debug("调试消息")

            mock_debug.assert_not_called()

    def test_critical(self):
        """测试记录严重错误日志"""
        with patch.object(self.unified_logger.logger, 'critical') as mock_critical:
            self.unified_logger.critical("严重错误")

            assert mock_critical.call_args[0][0] == "严重错误"


@pytest.mark.unit
@pytest.mark.logging
class TestGetLogger:
    """测试 get_logger 工厂函数"""

    def test_get_logger_returns_unified_logger(self):
        logger = get_logger("test_module")

        assert isinstance(logger, UnifiedLogger)
        assert logger.name == "test_module"

    def test_get_logger_caching(self):
        assert get_logger("test_module") is get_logger("test_module")

    def test_get_logger_different_names(self):
        assert get_logger("module1") is not get_logger("module2")


@pytest.mark.unit
@pytest.mark.logging
class TestSetupLogging:
    """测试全局日志配置"""

    def test_setup_logging_without_file(self):
        setup_logging(log_to_file=False)

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], logging.StreamHandler)
        assert logging.getLogger("aiohttp").level == logging.WARNING


@pytest.mark.unit
@pytest.mark.logging
class TestLogMessages:
    """测试 LogMessages 类"""

    def test_format_message(self):
        result = LogMessages.format_message(
            LogMessages.BATCH_GENERATION_START,
            total=7,
            batch_count=3
        )
        assert result == "开始批量生成图片，共 7 张，分 3 批"

    def test_get_structured_data(self):
        data = LogMessages.get_structured_data(operation="test_action", count=5)
        assert data == {"operation": "test_action", "count": 5}
