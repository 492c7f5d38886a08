"""
图片生成编排器单元测试
使用预设结果的提供商替代ModelScope
"""

import asyncio

import pytest

from image_server.core.config import settings
from image_server.core.imggen.config import GenerationConfig
from image_server.core.imggen.exceptions import (
    ApiHTTPError,
    ApiNetworkError,
    NoImageFoundError,
)
from image_server.core.imggen.providers.modelscope import ModelScopeImageProvider
from image_server.services.generation.orchestrator import GenerationOrchestrator, build_orchestrator
from tests.utils.mock_utils import MockBuilder, ScriptedImageProvider


@pytest.mark.unit
@pytest.mark.generation
class TestGenerateForRequirements:
    """容错模式批量生成测试"""

    async def test_one_result_per_requirement_in_order(self):
        orchestrator = MockBuilder.create_scripted_orchestrator({
            "first": "https://cdn.test/first.png",
            "second": NoImageFoundError(),
            "third": "https://cdn.test/third.png",
        })
        requirements = MockBuilder.create_requirements(["first", "second", "third"])

        results = await orchestrator.generate_for_requirements(requirements)

        assert [result.requirement for result in results] == requirements
        assert [result.success for result in results] == [True, False, True]
        assert results[0].image_url == "https://cdn.test/first.png"
        assert results[1].image_url == ""
        assert results[1].error == "API响应中没有找到生成的图片"
        assert results[2].error is None

    async def test_unexpected_errors_are_captured(self):
        orchestrator = MockBuilder.create_scripted_orchestrator({"bad": RuntimeError("unexpected")})

        results = await orchestrator.generate_for_requirements(MockBuilder.create_requirements(["bad"]))

        assert results[0].success is False
        assert results[0].error == "unexpected"

    async def test_falls_back_to_description_when_prompt_empty(self):
        orchestrator = MockBuilder.create_scripted_orchestrator()
        requirement = MockBuilder.create_requirement(prompt="", description="a quiet lake")

        await orchestrator.generate_for_requirements([requirement])

        assert orchestrator._provider.prompts == ["a quiet lake"]

    async def test_empty_requirements(self):
        orchestrator = MockBuilder.create_scripted_orchestrator()
        assert await orchestrator.generate_for_requirements([]) == []


@pytest.mark.unit
@pytest.mark.generation
class TestGenerateMany:
    """严格模式并发批量生成测试"""

    async def test_all_success_preserves_order(self):
        orchestrator = MockBuilder.create_scripted_orchestrator()
        prompts = [f"prompt {index}" for index in range(7)]

        results = await orchestrator.generate_many(MockBuilder.create_requirements(prompts))

        assert len(results) == 7
        assert all(result.success for result in results)
        assert [result.requirement.prompt for result in results] == prompts

    async def test_failure_aborts_remaining_batches(self):
        orchestrator = MockBuilder.create_scripted_orchestrator({
            "p1": ApiHTTPError("ModelScope API调用失败 (500): boom", status_code=500),
        })
        prompts = ["p0", "p1", "p2", "p3", "p4"]

        with pytest.raises(ApiHTTPError) as exc_info:
            await orchestrator.generate_many(MockBuilder.create_requirements(prompts))

        assert exc_info.value.status_code == 500
        # 第一批全部执行完毕，第二批不再执行
        assert sorted(orchestrator._provider.prompts) == ["p0", "p1", "p2"]

    async def test_first_failure_by_position_is_raised(self):
        orchestrator = MockBuilder.create_scripted_orchestrator({
            "p1": ApiNetworkError("network down"),
            "p2": NoImageFoundError(),
        })

        with pytest.raises(ApiNetworkError):
            await orchestrator.generate_many(MockBuilder.create_requirements(["p0", "p1", "p2"]))

    async def test_at_most_three_concurrent_calls(self):
        active = 0
        peak = 0

        class SlowProvider(ScriptedImageProvider):
            async def generate_image(self, request):
                nonlocal active, peak
                active += 1
                peak = max(peak, active)
                await asyncio.sleep(0.01)
                active -= 1
                return "https://cdn.test/slow.png"

        orchestrator = GenerationOrchestrator(GenerationConfig(api_key="k"), provider_factory=SlowProvider)
        await orchestrator.generate_many(MockBuilder.create_requirements([str(i) for i in range(8)]))

        assert peak == GenerationOrchestrator.CONCURRENT_LIMIT


@pytest.mark.unit
@pytest.mark.generation
class TestValidateApiKey:
    """API密钥验证测试"""

    async def test_valid_key(self):
        orchestrator = MockBuilder.create_scripted_orchestrator()

        assert await orchestrator.validate_api_key() is True
        assert orchestrator._provider.prompts == [settings.validation_prompt]

    async def test_invalid_key(self):
        orchestrator = MockBuilder.create_scripted_orchestrator({
            settings.validation_prompt: ApiHTTPError("ModelScope API调用失败 (401): invalid", status_code=401),
        })
        assert await orchestrator.validate_api_key() is False

    async def test_unexpected_error_returns_false(self):
        orchestrator = MockBuilder.create_scripted_orchestrator({
            settings.validation_prompt: ValueError("bad"),
        })
        assert await orchestrator.validate_api_key() is False


@pytest.mark.unit
@pytest.mark.generation
class TestOrchestratorConfig:
    """编排器配置管理测试"""

    def test_update_config_rebuilds_provider(self):
        orchestrator = MockBuilder.create_scripted_orchestrator(api_key="old")
        old_provider = orchestrator._provider

        orchestrator.update_config(api_key="new", model_id="other/model")

        assert orchestrator.config.api_key == "new"
        assert orchestrator.config.model_id == "other/model"
        assert orchestrator._provider is not old_provider
        assert orchestrator._provider.config is orchestrator.config

    def test_replace_config(self):
        orchestrator = MockBuilder.create_scripted_orchestrator(api_key="old")
        config = GenerationConfig(api_key="replaced", endpoint="https://example.test/gen")

        orchestrator.replace_config(config)

        assert orchestrator.config is config
        assert orchestrator._provider.config is config

    def test_build_orchestrator_uses_modelscope(self):
        orchestrator = build_orchestrator("caller-key")

        assert orchestrator.config.api_key == "caller-key"
        assert isinstance(orchestrator._provider, ModelScopeImageProvider)
