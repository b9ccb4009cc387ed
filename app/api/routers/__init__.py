"""
app/api/routers package marker.
"""

from app.api.routers.weight_standards import router as weight_standards_router
from app.api.routers.weight_tracking import router as weight_tracking_router
from app.api.routers.weight_upload import router as weight_upload_router

__all__ = [
    "weight_standards_router",
    "weight_tracking_router",
    "weight_upload_router",
]
