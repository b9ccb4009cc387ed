"""
app/api/routers/weight_standards.py

Weight standards and ad-hoc classification HTTP endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.schemas.weight_tracking import WeightClassificationResponse, WeightStandardResponse
from app.services.weight_tracking_service import (
    WeightTrackingService,
    get_weight_tracking_service,
)
from db.session import get_db
from growth.base import WeightClassification

router = APIRouter(tags=["weight-standards"])


def to_classification_response(
    classification: WeightClassification,
) -> WeightClassificationResponse:
    return WeightClassificationResponse(
        status=classification.status,
        expected_weight_kg=classification.expected_weight_kg,
        standard_age_in_days=classification.standard_age_in_days,
    )


@router.get("/weight-standards", response_model=list[WeightStandardResponse])
def list_weight_standards(
    db: Session = Depends(get_db),
    tracking_service: WeightTrackingService = Depends(get_weight_tracking_service),
) -> list[WeightStandardResponse]:
    return [
        WeightStandardResponse(
            age_in_days=standard.age_in_days,
            expected_weight_kg=standard.expected_weight_kg,
        )
        for standard in tracking_service.list_standards(db=db)
    ]


@router.get("/weight-standards/classify", response_model=WeightClassificationResponse)
def classify_weight(
    weight_kg: float = Query(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Recorded weight in kilograms",
    ),
    age_in_days: int = Query(..., ge=0, description="Age of the bird when weighed"),
    db: Session = Depends(get_db),
    tracking_service: WeightTrackingService = Depends(get_weight_tracking_service),
) -> WeightClassificationResponse:
    """
    Classify a reading against the nearest age standard without storing it.
    """

    classification = tracking_service.classify_reading(
        weight_kg=weight_kg,
        age_in_days=age_in_days,
        db=db,
    )
    return to_classification_response(classification)
