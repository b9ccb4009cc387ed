"""
tests/test_weight_classifier.py

Pytest unit tests for WeightDeviationClassifier.

Coverage
--------
- Tolerance band boundaries (inclusive)
- Nearest-age standard selection and tie-breaking
- Empty standards / unknown age
- Custom tolerance ratio
"""

from __future__ import annotations

import pytest

from growth.base import WeightClassification, WeightStandard, WeightStatus
from growth.classifier import WeightDeviationClassifier


@pytest.fixture()
def single_standard() -> WeightDeviationClassifier:
    return WeightDeviationClassifier([WeightStandard(age_in_days=30, expected_weight_kg=2.0)])


@pytest.fixture()
def two_standards() -> WeightDeviationClassifier:
    return WeightDeviationClassifier(
        [
            WeightStandard(age_in_days=10, expected_weight_kg=0.3),
            WeightStandard(age_in_days=30, expected_weight_kg=2.0),
        ]
    )


class TestToleranceBand:
    @pytest.mark.parametrize(
        "weight, expected_status",
        [
            (1.8, WeightStatus.NORMAL),
            (1.79, WeightStatus.UNDERWEIGHT),
            (2.0, WeightStatus.NORMAL),
            (2.2, WeightStatus.NORMAL),
            (2.21, WeightStatus.OVERWEIGHT),
        ],
    )
    def test_boundaries_are_inclusive(
        self,
        single_standard: WeightDeviationClassifier,
        weight: float,
        expected_status: str,
    ) -> None:
        result = single_standard.classify(weight, 30)
        assert result.status == expected_status
        assert result.expected_weight_kg == pytest.approx(2.0)

    def test_standard_age_is_reported(self, single_standard: WeightDeviationClassifier) -> None:
        assert single_standard.classify(2.0, 42).standard_age_in_days == 30

    def test_custom_tolerance_ratio(self) -> None:
        classifier = WeightDeviationClassifier(
            [WeightStandard(age_in_days=30, expected_weight_kg=2.0)],
            tolerance_ratio=0.25,
        )
        assert classifier.classify(1.6, 30).status == WeightStatus.NORMAL
        assert classifier.classify(1.4, 30).status == WeightStatus.UNDERWEIGHT

    def test_negative_tolerance_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            WeightDeviationClassifier([], tolerance_ratio=-0.1)


class TestNearestStandard:
    def test_closer_older_standard_is_used(self, two_standards: WeightDeviationClassifier) -> None:
        assert two_standards.nearest_standard(25) == WeightStandard(30, 2.0)

    def test_closer_younger_standard_is_used(self, two_standards: WeightDeviationClassifier) -> None:
        assert two_standards.nearest_standard(19) == WeightStandard(10, 0.3)

    def test_equidistant_age_resolves_to_first_in_order(self, two_standards: WeightDeviationClassifier) -> None:
        assert two_standards.nearest_standard(20) == WeightStandard(10, 0.3)

    def test_ages_beyond_the_table_use_the_edge_standards(
        self, two_standards: WeightDeviationClassifier
    ) -> None:
        assert two_standards.nearest_standard(-3) == WeightStandard(10, 0.3)
        assert two_standards.nearest_standard(400) == WeightStandard(30, 2.0)

    def test_classification_uses_the_nearest_standard(self, two_standards: WeightDeviationClassifier) -> None:
        result = two_standards.classify(0.3, 12)
        assert result == WeightClassification(
            status=WeightStatus.NORMAL,
            expected_weight_kg=0.3,
            standard_age_in_days=10,
        )


class TestUnknown:
    def test_empty_standards(self) -> None:
        result = WeightDeviationClassifier([]).classify(2.0, 30)
        assert result.status == WeightStatus.UNKNOWN
        assert result.expected_weight_kg is None
        assert not result.is_known

    def test_unknown_age(self, single_standard: WeightDeviationClassifier) -> None:
        result = single_standard.classify(2.0, None)
        assert result == WeightClassification(status=WeightStatus.UNKNOWN)
