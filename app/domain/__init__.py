"""
app/domain package marker.
"""

from app.domain.weight_records import (
    CandidateRow,
    FarmScope,
    RowError,
    UploadResult,
    WeightRecordInput,
)
from app.domain.weight_tracking import ChickenProfile, ChickenWeightReport, TrackedWeight

__all__ = [
    "CandidateRow",
    "ChickenProfile",
    "ChickenWeightReport",
    "FarmScope",
    "RowError",
    "TrackedWeight",
    "UploadResult",
    "WeightRecordInput",
]
