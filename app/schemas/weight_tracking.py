"""
app/schemas/weight_tracking.py

Response schemas for weight standards and weight tracking endpoints.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class WeightStandardResponse(BaseModel):
    age_in_days: int = Field(..., ge=0)
    expected_weight_kg: float = Field(..., gt=0)


class WeightClassificationResponse(BaseModel):
    """
    Deviation label plus the standard it was measured against.
    """

    status: str
    expected_weight_kg: float | None = None
    standard_age_in_days: int | None = None


class ChickenProfileResponse(BaseModel):
    id: int
    breed: str
    age: int | None = None
    health_status: str | None = None
    date_added: date | None = None
    age_in_days: int | None = None


class TrackedWeightResponse(BaseModel):
    id: int
    date_recorded: date
    weight_kg: float
    age_at_recording: int | None = None
    classification: WeightClassificationResponse


class ChickenWeightReportResponse(BaseModel):
    """
    API response model for one chicken's weight history.
    """

    chicken: ChickenProfileResponse
    weights: list[TrackedWeightResponse] = Field(default_factory=list)
