from __future__ import annotations
from typing import Optional, Dict, Any, Type, Union
from pathlib import Path
from enum import Enum
import yaml
import time
import logging
import threading
from contextlib import contextmanager

from pydantic import BaseModel

from .prompts import PromptManager
from .providers.base import ChatRequest, ModelResponse, ModelError
from .providers.openai_sdk import OpenAIProvider

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parents[1] / "config" / "config.yaml"


class Provider(Enum):
    OPENAI = "openai"


class ModelManager:
    def __init__(self, config_path: Union[Path, str] = DEFAULT_CONFIG_PATH, prompts_dir: Optional[Path] = None, api_keys: Optional[Dict[str, Optional[str]]] = None):
        self.config_path = Path(config_path)
        self.config = self._load_config()
        self.api_keys = {name: key for name, key in (api_keys or {}).items() if key}
        self._providers = {}
        self._stats = {} #performance tracking
        self._lock = threading.Lock() #providers and stats are shared by worker threads

        if prompts_dir:
            self.prompts = PromptManager(prompts_dir)
        else:
            self.prompts = PromptManager(Path(__file__).parents[1] / "prompts")

    def _load_config(self) -> Dict:
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config not found: {self.config_path}")
        with open(self.config_path) as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict) or 'providers' not in config:
            raise ValueError("Config missing 'providers'")
        if 'tasks' not in config:
            raise ValueError("Config missing 'tasks'")

        for task_name, task_cfg in config['tasks'].items():
            if 'provider' not in task_cfg:
                raise ValueError(f"Task '{task_name}' missing provider")
            if 'model' not in task_cfg:
                raise ValueError(f"Task '{task_name}' missing model")
            if task_cfg['provider'] not in config['providers']:
                raise ValueError(f"Task '{task_name}' references unknown provider '{task_cfg['provider']}'")

        return config

    def service_settings(self, service_name: str) -> Dict[str, Any]:
        """Settings block for a non-LLM service, empty when not configured."""
        services = self.config.get('services') or {}
        service_cfg = services.get(service_name) or {}
        settings = service_cfg.get('settings')
        return settings if isinstance(settings, dict) else {}

    def _get_provider(self, provider_name: str):
        with self._lock:
            if provider_name not in self._providers:
                self._providers[provider_name] = self._create_provider(provider_name)
            return self._providers[provider_name]

    def _create_provider(self, provider_name: str):
        if provider_name not in self.config['providers']:
            raise ValueError(f"Unknown provider: {provider_name}")

        provider_cfg = self.config["providers"][provider_name]
        provider_type = provider_cfg["type"]
        settings = dict(provider_cfg.get("settings") or {})
        if provider_name in self.api_keys:
            settings["api_key"] = self.api_keys[provider_name]

        if provider_type == Provider.OPENAI.value:
            provider = OpenAIProvider(**settings)
        else:
            raise ValueError(f"Unknown provider type: {provider_type}")
        logger.info(f"initialized provider: {provider_name}")
        return provider

    def call(self, task: str, prompt_ref: str, variables: Dict[str, Any], schema: Optional[Type[BaseModel]] = None, schema_name: Optional[str] = None, **params_override) -> ModelResponse:
        start_time = time.perf_counter()

        if task not in self.config["tasks"]:
            raise ValueError(f"Unknown task: {task}")

        task_cfg = self.config["tasks"][task]
        rendered = self.prompts.render(prompt_ref, variables)
        stop_sequences = self.prompts.load_prompt(prompt_ref).stop_sequences

        params = {**(task_cfg.get("params") or {}), **params_override}
        if stop_sequences:
            params.setdefault("stop", list(stop_sequences))
        task_timeout = task_cfg.get("timeout")
        if task_timeout:
            params.setdefault("timeout", task_timeout)

        request = ChatRequest(
            model=task_cfg["model"],
            messages=rendered,
            params=params,
            schema=schema,
            schema_name=schema_name,
        )

        provider = self._get_provider(task_cfg["provider"])
        try:
            response = provider.chat(request)
        except ModelError:
            self._track_stats(task, (time.perf_counter() - start_time) * 1000, success=False)
            raise
        self._track_stats(task, (time.perf_counter() - start_time) * 1000, success=True)
        return response

    def _track_stats(self, task: str, latency_ms: float, success: bool):
        with self._lock:
            stats = self._stats.setdefault(task, {
                'total_calls': 0,
                'successful_calls': 0,
                'total_latency_ms': 0
            })
            stats['total_calls'] += 1
            if success:
                stats['successful_calls'] += 1
                stats['total_latency_ms'] += latency_ms

    def get_stats(self, task: Optional[str] = None) -> Dict:
        if task:
            return self._stats.get(task, {})
        return self._stats

    def cleanup(self):
        with self._lock:
            providers = list(self._providers.items())
            self._providers.clear()

        for name, provider in providers:
            if hasattr(provider, 'cleanup'):
                try:
                    provider.cleanup()
                    logger.info(f"Cleaned up provider: {name}")
                except Exception as e:
                    logger.error(f"Cleanup failed for {name}: {e}")

    @contextmanager
    def session(self):
        try:
            yield self
        finally:
            self.cleanup()
