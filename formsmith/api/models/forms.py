"""
API models for the form generation endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field


class GenerateFormRequest(BaseModel):
    """Documented request body. The endpoint parses the body itself so a bad body maps to 400."""
    prompt: str = Field(..., description="Free-text description of the form to generate")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"prompt": "Customer onboarding survey for a B2B analytics product"}
        }
    )


class GenerateFormResponse(BaseModel):
    """Response after a form and all of its questions were stored."""
    form_id: str = Field(..., alias="formId", description="Identifier of the created form")

    model_config = ConfigDict(populate_by_name=True)
