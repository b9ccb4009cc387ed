"""
growth/classifier.py

Classifies a recorded weight against the nearest age standard.
No persistence, no I/O, no side effects.
"""

from __future__ import annotations

from collections.abc import Iterable

from growth.base import WeightClassification, WeightStandard, WeightStatus

DEFAULT_TOLERANCE_RATIO = 0.10


class WeightDeviationClassifier:
    """
    Maps a (weight, age) reading to a deviation label.

    The standard used for comparison is the one whose ``age_in_days`` is
    closest to the query age. Standards are scanned in the order given,
    which callers load ascending by age; on equal distance the first
    candidate wins, so a query exactly between two standards resolves to
    the younger one.

    With ``expected`` the chosen standard's weight and
    ``tolerance = expected * tolerance_ratio``:

        weight                          |  label
        --------------------------------|-------------
        < expected - tolerance          |  underweight
        > expected + tolerance          |  overweight
        otherwise (bounds inclusive)    |  normal

    An empty standards table, or an unknown age, yields ``unknown``.
    """

    def __init__(
        self,
        standards: Iterable[WeightStandard],
        *,
        tolerance_ratio: float = DEFAULT_TOLERANCE_RATIO,
    ) -> None:
        if tolerance_ratio < 0:
            raise ValueError("tolerance_ratio must not be negative.")
        self._standards: tuple[WeightStandard, ...] = tuple(standards)
        self._tolerance_ratio = tolerance_ratio

    @property
    def standards(self) -> tuple[WeightStandard, ...]:
        return self._standards

    @property
    def tolerance_ratio(self) -> float:
        return self._tolerance_ratio

    def nearest_standard(self, age_in_days: int) -> WeightStandard | None:
        """
        Return the standard closest in age, or None when there are none.
        """
        nearest: WeightStandard | None = None
        nearest_distance: int | None = None
        for standard in self._standards:
            distance = abs(standard.age_in_days - age_in_days)
            if nearest_distance is None or distance < nearest_distance:
                nearest = standard
                nearest_distance = distance
        return nearest

    def classify(self, weight_kg: float, age_in_days: int | None) -> WeightClassification:
        """
        Classify *weight_kg* recorded at *age_in_days*.

        Parameters
        ----------
        weight_kg:
            Recorded weight in kilograms.
        age_in_days:
            Age of the bird on the day it was weighed, or None when the
            bird's intake date is unknown.

        Returns
        -------
        WeightClassification
            The label plus the expected weight and standard age used.
        """
        if age_in_days is None:
            return WeightClassification(status=WeightStatus.UNKNOWN)

        standard = self.nearest_standard(age_in_days)
        if standard is None:
            return WeightClassification(status=WeightStatus.UNKNOWN)

        expected = standard.expected_weight_kg
        tolerance = expected * self._tolerance_ratio

        if weight_kg < expected - tolerance:
            status = WeightStatus.UNDERWEIGHT
        elif weight_kg > expected + tolerance:
            status = WeightStatus.OVERWEIGHT
        else:
            status = WeightStatus.NORMAL

        return WeightClassification(
            status=status,
            expected_weight_kg=expected,
            standard_age_in_days=standard.age_in_days,
        )
