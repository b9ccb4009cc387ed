"""
app/services package marker.
"""

from app.services.weight_tracking_service import (
    WeightTrackingService,
    get_weight_tracking_service,
)
from app.services.weight_upload_service import (
    WeightUploadPersistenceError,
    WeightUploadService,
    get_weight_upload_service,
)

__all__ = [
    "WeightTrackingService",
    "get_weight_tracking_service",
    "WeightUploadPersistenceError",
    "WeightUploadService",
    "get_weight_upload_service",
]
