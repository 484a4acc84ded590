import pytest

from fakes import FakeAuth, FakeStore
from formsmith.pipeline.generation.config import PipelineConfig


@pytest.fixture
def config():
    return PipelineConfig(
        openai_api_key="sk-test",
        supabase_url="https://project.supabase.co",
        supabase_anon_key="anon-key",
    )


@pytest.fixture
def auth():
    return FakeAuth()


@pytest.fixture
def store():
    return FakeStore()
