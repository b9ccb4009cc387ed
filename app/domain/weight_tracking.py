"""
app/domain/weight_tracking.py

Read models for a chicken's weight history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from growth.base import WeightClassification


@dataclass(frozen=True)
class ChickenProfile:
    id: int
    breed: str
    age: int | None
    health_status: str | None
    date_added: date | None
    age_in_days: int | None


@dataclass(frozen=True)
class TrackedWeight:
    """
    One stored weighing with the age it was taken at and its deviation label.
    """

    id: int
    date_recorded: date
    weight_kg: float
    age_at_recording: int | None
    classification: WeightClassification


@dataclass(frozen=True)
class ChickenWeightReport:
    chicken: ChickenProfile
    weights: list[TrackedWeight] = field(default_factory=list)
