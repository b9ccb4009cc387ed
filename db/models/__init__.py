"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.chicken import Chicken
from db.models.chicken_weight import ChickenWeight
from db.models.farm import Farm
from db.models.weight_standard import WeightStandardRecord

__all__ = [
    "Chicken",
    "ChickenWeight",
    "Farm",
    "WeightStandardRecord",
]
