"""
app/api/routers/weight_tracking.py

Per-chicken weight history HTTP endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.dependencies import get_farm_scope
from app.api.routers.weight_standards import to_classification_response
from app.domain.weight_records import FarmScope
from app.repositories.errors import ChickenNotFoundError
from app.schemas.weight_tracking import (
    ChickenProfileResponse,
    ChickenWeightReportResponse,
    TrackedWeightResponse,
)
from app.services.weight_tracking_service import (
    WeightTrackingService,
    get_weight_tracking_service,
)
from db.session import get_db

router = APIRouter(tags=["weights"])


@router.get(
    "/farms/{farm_id}/chickens/{chicken_id}/weights",
    response_model=ChickenWeightReportResponse,
)
def get_chicken_weights(
    chicken_id: int,
    scope: FarmScope = Depends(get_farm_scope),
    db: Session = Depends(get_db),
    tracking_service: WeightTrackingService = Depends(get_weight_tracking_service),
) -> ChickenWeightReportResponse:
    """
    Return a chicken's weighings, newest first, each with its deviation label.
    """

    try:
        report = tracking_service.build_report(scope=scope, chicken_id=chicken_id, db=db)
    except ChickenNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Chicken not found",
        ) from exc

    chicken = report.chicken
    return ChickenWeightReportResponse(
        chicken=ChickenProfileResponse(
            id=chicken.id,
            breed=chicken.breed,
            age=chicken.age,
            health_status=chicken.health_status,
            date_added=chicken.date_added,
            age_in_days=chicken.age_in_days,
        ),
        weights=[
            TrackedWeightResponse(
                id=weight.id,
                date_recorded=weight.date_recorded,
                weight_kg=weight.weight_kg,
                age_at_recording=weight.age_at_recording,
                classification=to_classification_response(weight.classification),
            )
            for weight in report.weights
        ],
    )
