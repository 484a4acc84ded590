"""
Form generation endpoint.

POST /api/generate-form turns a free-text prompt into a stored form owned by
the caller. Every pipeline failure maps to a status code and an APIError body.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ..models.common import APIError
from ..models.forms import GenerateFormRequest, GenerateFormResponse
from ..dependencies.pipeline import get_pipeline
from formsmith.pipeline.generation.orchestrator import GenerationPipeline
from formsmith.pipeline.generation.types import GenerationFailure

router = APIRouter()


async def _read_prompt(request: Request):
    try:
        body = await request.json()
    except ValueError:
        return None
    return body.get("prompt") if isinstance(body, dict) else None


@router.post(
    "/generate-form",
    response_model=GenerateFormResponse,
    responses={
        400: {"model": APIError}, 401: {"model": APIError}, 422: {"model": APIError},
        500: {"model": APIError}, 502: {"model": APIError},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": GenerateFormRequest.model_json_schema()}},
        }
    },
)
async def generate_form(
    request: Request,
    authorization: Optional[str] = Header(None),
    pipeline: GenerationPipeline = Depends(get_pipeline),
):
    """
    Generate a form from a prompt.

    1. Verifies the bearer credential
    2. Asks the LLM for a schema-constrained form
    3. Sanitizes the output and stores the form, then its questions

    A 500 with error_code persistence_failure and details.formId means the form
    row exists but its questions were not stored.
    """
    prompt = await _read_prompt(request)
    result = await run_in_threadpool(pipeline.run, prompt, authorization)

    if isinstance(result, GenerationFailure):
        body = APIError(error=result.message, error_code=result.kind.value, details=result.details)
        return JSONResponse(status_code=result.status_code, content=body.model_dump(exclude_none=True))

    return JSONResponse(content=GenerateFormResponse(form_id=result.form_id).model_dump(by_alias=True))
