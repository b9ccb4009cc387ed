"""
app/schemas/weight_upload.py

Response schemas for bulk weight upload endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class WeightUploadResultResponse(BaseModel):
    """
    API response model for one bulk weight upload.
    """

    success_count: int = Field(..., ge=0)
    error_count: int = Field(..., ge=0)
    total_rows: int = Field(..., ge=0)
    errors: list[str] = Field(default_factory=list)
