from dataclasses import dataclass
from os import getenv
from typing import Optional


@dataclass(frozen=True)
class PipelineConfig:
    """Secrets and endpoints, read once at startup and handed to the pipeline."""
    openai_api_key: Optional[str] = None
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        return cls(
            openai_api_key=getenv("OPENAI_API_KEY") or None,
            supabase_url=getenv("SUPABASE_URL") or None,
            supabase_anon_key=getenv("SUPABASE_ANON_KEY") or None,
        )

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def has_supabase(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)
