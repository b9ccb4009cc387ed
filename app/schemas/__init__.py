"""
app/schemas package marker.
"""

from app.schemas.weight_tracking import (
    ChickenProfileResponse,
    ChickenWeightReportResponse,
    TrackedWeightResponse,
    WeightClassificationResponse,
    WeightStandardResponse,
)
from app.schemas.weight_upload import WeightUploadResultResponse

__all__ = [
    "ChickenProfileResponse",
    "ChickenWeightReportResponse",
    "TrackedWeightResponse",
    "WeightClassificationResponse",
    "WeightStandardResponse",
    "WeightUploadResultResponse",
]
