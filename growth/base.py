"""
growth/base.py

Value types shared by the weight deviation classifier and its callers.
No I/O, no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass


class WeightStatus:
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class WeightStandard:
    """
    Expected weight of a bird at a given age.
    """

    age_in_days: int
    expected_weight_kg: float


@dataclass(frozen=True)
class WeightClassification:
    """
    Result of comparing one recorded weight against the standards.

    ``expected_weight_kg`` and ``standard_age_in_days`` are None when the
    status is ``unknown``.
    """

    status: str
    expected_weight_kg: float | None = None
    standard_age_in_days: int | None = None

    @property
    def is_known(self) -> bool:
        return self.status != WeightStatus.UNKNOWN
