"""
app/validators package marker.
"""

from app.validators.weight_row_validator import WeightRowValidator

__all__ = [
    "WeightRowValidator",
]
