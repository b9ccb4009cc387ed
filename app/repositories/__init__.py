"""
app/repositories package marker.
"""

from app.repositories.chicken_inventory_repository import ChickenInventoryRepository
from app.repositories.chicken_weight_repository import ChickenWeightRepository
from app.repositories.errors import (
    ChickenNotFoundError,
    FarmRepositoryError,
    WeightRecordConflictError,
)
from app.repositories.weight_standard_repository import WeightStandardRepository

__all__ = [
    "ChickenInventoryRepository",
    "ChickenNotFoundError",
    "ChickenWeightRepository",
    "FarmRepositoryError",
    "WeightRecordConflictError",
    "WeightStandardRepository",
]
