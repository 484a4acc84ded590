from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, Optional, List, Type
from pydantic import BaseModel

#unified model errors
class ModelError(RuntimeError): ...
class ModelTimeout(ModelError): ...

class ModelStatusError(ModelError):
    """Provider answered with a non-success HTTP status."""
    def __init__(self, status_code: int, body: str):
        super().__init__(f"Provider returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body

class ModelEmptyResponse(ModelError):
    """Provider answered but no completion text could be extracted."""
    def __init__(self, payload: Any):
        super().__init__("No completion text in provider response")
        self.payload = payload

@dataclass(frozen=True)
class ChatRequest:
    model: str
    messages: List[Dict[str, Any]]
    params: Dict[str, Any] | None = None
    schema: Optional[Type[BaseModel]] = None #pydantic model -> json schema
    schema_name: Optional[str] = None #name sent with the json schema, defaults to the model class name

@dataclass(frozen=True)
class ModelResponse:
    content: str
    raw: Any #decoded provider payload
    meta: Dict[str, Any] #latency, model, usage, finish_reason, etc.

class ModelProvider(ABC):
    @abstractmethod
    def chat(self, req: ChatRequest) -> ModelResponse:
        raise NotImplementedError
