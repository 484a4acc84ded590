"""
Structured-output contract sent with every generation request.

The provider is asked to honour this schema strictly, but adherence is not
guaranteed, so the sanitizer re-checks everything that comes back.
"""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict

SCHEMA_NAME = "form_schema"


class QuestionPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    type: Literal["text", "mcq"]


class FormPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    questions: List[QuestionPayload]


def form_json_schema() -> Dict[str, Any]:
    return FormPayload.model_json_schema()
