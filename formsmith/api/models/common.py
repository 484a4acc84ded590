"""
Common API models used across different endpoints.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class APIError(BaseModel):
    """Standard error response format."""
    error: str = Field(..., description="Error message")
    error_code: str = Field(..., description="Machine-readable error kind")
    details: Optional[Any] = Field(None, description="Diagnostics for operators (raw service body, raw output, form id)")


class HealthStatus(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    uptime: float = Field(..., description="Uptime in seconds")
    dependencies: Dict[str, str] = Field(..., description="Status of external dependencies")
    model_stats: Dict[str, Any] = Field(default_factory=dict, description="Per-task model call statistics")
