"""
Health check endpoints for monitoring and diagnostics.
"""

import time
from fastapi import APIRouter, Depends

from ..models.common import HealthStatus
from ..dependencies.pipeline import get_model_manager, get_pipeline_config
from formsmith import __version__
from formsmith.models.manager import ModelManager
from formsmith.pipeline.generation.config import PipelineConfig

router = APIRouter()

# Track server start time for uptime calculation
_server_start_time = time.time()


@router.get("/", response_model=HealthStatus)
async def health_check(
    config: PipelineConfig = Depends(get_pipeline_config),
    model_manager: ModelManager = Depends(get_model_manager)
):
    """
    Basic health check endpoint.

    Reports configuration of the external collaborators without calling them.
    """
    dependencies = {
        "openai": "configured" if config.has_api_key else "missing OPENAI_API_KEY",
        "supabase": "configured" if config.has_supabase else "missing SUPABASE_URL/SUPABASE_ANON_KEY",
    }

    return HealthStatus(
        status="healthy" if config.has_api_key and config.has_supabase else "degraded",
        version=__version__,
        uptime=time.time() - _server_start_time,
        dependencies=dependencies,
        model_stats=model_manager.get_stats()
    )


@router.get("/ready")
async def readiness_check(config: PipelineConfig = Depends(get_pipeline_config)):
    """
    Readiness probe for container deployments.

    Ready only when generation requests can get past the configuration checks.
    """
    if not config.has_api_key:
        return {"ready": False, "reason": "OPENAI_API_KEY not configured"}
    if not config.has_supabase:
        return {"ready": False, "reason": "Supabase settings not configured"}
    return {"ready": True, "message": "Service ready to handle requests"}
