"""
app/services/weight_tracking_service.py

Builds a chicken's weight history with each weighing classified against
the weight standards. Read-only.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from functools import lru_cache

from sqlalchemy.orm import Session

from app.config import get_growth_settings
from app.domain.weight_records import FarmScope
from app.domain.weight_tracking import ChickenProfile, ChickenWeightReport, TrackedWeight
from app.repositories.chicken_inventory_repository import ChickenInventoryRepository
from app.repositories.chicken_weight_repository import ChickenWeightRepository
from app.repositories.weight_standard_repository import WeightStandardRepository
from growth.base import WeightClassification, WeightStandard
from growth.classifier import WeightDeviationClassifier

logger = logging.getLogger(__name__)


def days_between(start: date | None, end: date) -> int | None:
    """Whole days from *start* to *end*, or None when *start* is unknown."""
    if start is None:
        return None
    return (end - start).days


class WeightTrackingService:
    """
    Coordinates standards loading, weight history lookup and classification.

    Standards are loaded once per call and shared by every weighing in it.
    """

    def __init__(
        self,
        *,
        tolerance_ratio: float,
        today: Callable[[], date] = date.today,
        inventory_repository_factory: Callable[[Session], ChickenInventoryRepository] = ChickenInventoryRepository,
        weight_repository_factory: Callable[[Session], ChickenWeightRepository] = ChickenWeightRepository,
        standard_repository_factory: Callable[[Session], WeightStandardRepository] = WeightStandardRepository,
    ) -> None:
        self._tolerance_ratio = tolerance_ratio
        self._today = today
        self._inventory_repository_factory = inventory_repository_factory
        self._weight_repository_factory = weight_repository_factory
        self._standard_repository_factory = standard_repository_factory

    def list_standards(self, *, db: Session) -> list[WeightStandard]:
        return self._standard_repository_factory(db).list_standards()

    def classify_reading(
        self,
        *,
        weight_kg: float,
        age_in_days: int,
        db: Session,
    ) -> WeightClassification:
        """
        Classify an ad-hoc reading that is not stored anywhere.
        """
        return self._build_classifier(db).classify(weight_kg, age_in_days)

    def build_report(
        self,
        *,
        scope: FarmScope,
        chicken_id: int,
        db: Session,
    ) -> ChickenWeightReport:
        """
        Return the chicken's profile and classified weights, newest first.

        Raises ChickenNotFoundError when the chicken is not on the farm.
        """
        chicken = self._inventory_repository_factory(db).get_chicken(scope.farm_id, chicken_id)
        weights = self._weight_repository_factory(db).list_for_chicken(scope.farm_id, chicken_id)
        classifier = self._build_classifier(db)

        tracked: list[TrackedWeight] = []
        for weight in weights:
            age_at_recording = days_between(chicken.date_added, weight.date_recorded)
            tracked.append(
                TrackedWeight(
                    id=weight.id,
                    date_recorded=weight.date_recorded,
                    weight_kg=weight.weight_kg,
                    age_at_recording=age_at_recording,
                    classification=classifier.classify(weight.weight_kg, age_at_recording),
                )
            )

        logger.debug(
            "Weight report built farm_id=%s chicken_id=%s weights=%s standards=%s",
            scope.farm_id,
            chicken_id,
            len(tracked),
            len(classifier.standards),
        )
        return ChickenWeightReport(
            chicken=ChickenProfile(
                id=chicken.id,
                breed=chicken.breed,
                age=chicken.age,
                health_status=chicken.health_status,
                date_added=chicken.date_added,
                age_in_days=days_between(chicken.date_added, self._today()),
            ),
            weights=tracked,
        )

    def _build_classifier(self, db: Session) -> WeightDeviationClassifier:
        return WeightDeviationClassifier(
            self.list_standards(db=db),
            tolerance_ratio=self._tolerance_ratio,
        )


@lru_cache(maxsize=1)
def get_weight_tracking_service() -> WeightTrackingService:
    """
    Build and cache the tracking service with env-driven settings.
    """
    return WeightTrackingService(tolerance_ratio=get_growth_settings().tolerance_ratio)
