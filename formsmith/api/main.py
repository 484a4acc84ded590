"""
FastAPI application entry point.

Wires the generation pipeline and its collaborators once at startup and
exposes them to the routers.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx

from .routers import forms, health
from formsmith import __version__
from formsmith.models.manager import ModelManager
from formsmith.models.services.supabase import SupabaseAuth, SupabaseStore
from formsmith.pipeline.generation.config import PipelineConfig
from formsmith.pipeline.generation.generator import FormGenerator
from formsmith.pipeline.generation.orchestrator import GenerationPipeline

logger = logging.getLogger(__name__)

# Global application state
app_state = {}


def build_pipeline(config: PipelineConfig, model_manager: ModelManager, http_client: httpx.Client) -> GenerationPipeline:
    settings = model_manager.service_settings("supabase")
    timeout = float(settings.get("timeout", 20.0))
    supabase_url = config.supabase_url or ""
    anon_key = config.supabase_anon_key or ""

    return GenerationPipeline(
        config=config,
        auth=SupabaseAuth(supabase_url, anon_key, timeout=timeout, client=http_client),
        generator=FormGenerator(model_manager),
        store=SupabaseStore(supabase_url, anon_key, timeout=timeout, client=http_client),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Secrets are read from the environment exactly once here.
    """
    logger.info("Starting formsmith API server...")

    config = PipelineConfig.from_env()
    model_manager = ModelManager(api_keys={"openai": config.openai_api_key})
    http_client = httpx.Client()

    app_state["config"] = config
    app_state["model_manager"] = model_manager
    app_state["pipeline"] = build_pipeline(config, model_manager, http_client)

    if not config.has_api_key or not config.has_supabase:
        logger.warning("Server started with incomplete configuration, generation requests will fail with 500")
    logger.info("API server ready to accept requests")

    yield

    logger.info("Shutting down formsmith API server...")
    model_manager.cleanup()
    http_client.close()
    app_state.clear()


def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.
    """
    app = FastAPI(
        title="formsmith API",
        description="AI-assisted generation of conversational forms",
        version=__version__,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(forms.router, prefix="/api", tags=["forms"])

    @app.get("/")
    async def root():
        """Root endpoint with basic API information."""
        return {
            "name": "formsmith API",
            "version": __version__,
            "status": "operational",
            "endpoints": {
                "health": "/health",
                "generate_form": "/api/generate-form",
                "docs": "/docs",
                "redoc": "/redoc"
            }
        }

    return app


# Create the FastAPI app instance
app = create_app()
