"""
Pydantic models for API request/response schemas.

They are separate from the internal pipeline types to keep the HTTP contract stable.
"""
