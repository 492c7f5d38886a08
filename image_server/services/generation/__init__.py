"""图片生成编排服务"""

from .orchestrator import GenerationOrchestrator, build_orchestrator

__all__ = ["GenerationOrchestrator", "build_orchestrator"]
