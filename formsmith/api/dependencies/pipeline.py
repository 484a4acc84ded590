"""
Accessors for objects created in the application lifespan.
"""

from formsmith.models.manager import ModelManager
from formsmith.pipeline.generation.config import PipelineConfig
from formsmith.pipeline.generation.orchestrator import GenerationPipeline


def get_pipeline() -> GenerationPipeline:
    """FastAPI dependency to get the generation pipeline from app state."""
    from ..main import app_state
    return app_state["pipeline"]


def get_model_manager() -> ModelManager:
    """FastAPI dependency to get the model manager from app state."""
    from ..main import app_state
    return app_state["model_manager"]


def get_pipeline_config() -> PipelineConfig:
    from ..main import app_state
    return app_state["config"]
