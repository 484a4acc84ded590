from __future__ import annotations
from typing import Dict, Any, Optional
import json
import time

from openai import OpenAI
from openai import APIStatusError, APITimeoutError, APIConnectionError

from .base import ModelProvider, ChatRequest, ModelResponse, ModelError, ModelTimeout, ModelStatusError, ModelEmptyResponse


def extract_output_text(payload: Any) -> Optional[str]:
    """Return choices[0].message.content when it is a non-empty string, else None."""
    if not isinstance(payload, dict):
        return None
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if isinstance(content, str) and content:
        return content
    return None


class OpenAIProvider(ModelProvider):
    def __init__(self, base_url: Optional[str] = None, api_key: Optional[str] = None, default_headers: Optional[Dict[str, str]] = None, timeout: float = 60.0, **kwargs):
        if not api_key:
            raise ModelError("OpenAI provider requires an explicit api_key")
        # one request per call, failures surface to the caller untouched
        kwargs.setdefault("max_retries", 0)
        self.client = OpenAI(
            base_url=base_url,
            api_key=api_key,
            default_headers=default_headers or {},
            timeout=timeout,
            **kwargs
        )
        self.base_url = base_url
        self.timeout = timeout

    def chat(self, req: ChatRequest) -> ModelResponse:
        params = dict(req.params or {})

        completion_params = {
            "model": req.model,
            "messages": req.messages,
            **params
        }

        if req.schema is not None:
            completion_params["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": req.schema_name or req.schema.__name__,
                    "schema": req.schema.model_json_schema(),
                    "strict": True
                }
            }

        t0 = time.perf_counter()
        try:
            raw = self.client.chat.completions.with_raw_response.create(**completion_params)
        except APITimeoutError as e:
            raise ModelTimeout(f"OpenAI timeout: {e}") from e
        except APIStatusError as e:
            raise ModelStatusError(e.status_code, e.response.text) from e
        except APIConnectionError as e:
            raise ModelError(f"OpenAI connection error: {e}") from e

        dt = time.perf_counter() - t0
        body = raw.text

        try:
            payload = json.loads(body) if body else None
        except ValueError as e:
            raise ModelError(f"Unparseable response from OpenAI API: {e}") from e

        content = extract_output_text(payload)
        if content is None:
            raise ModelEmptyResponse(payload)

        meta = {
            "provider": "openai",
            "model": payload.get("model", req.model),
            "latency": dt,
            "base_url": self.base_url or "https://api.openai.com/v1",
            "timeout": self.timeout,
            "finish_reason": payload["choices"][0].get("finish_reason"),
        }
        if isinstance(payload.get("usage"), dict):
            meta["usage"] = payload["usage"]
        if "id" in payload:
            meta["id"] = payload["id"]

        return ModelResponse(content=content, raw=payload, meta=meta)

    def cleanup(self):
        self.client.close()
