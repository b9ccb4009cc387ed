"""
app/repositories/weight_standard_repository.py

Read access to the weight standards reference table.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.models.weight_standard import WeightStandardRecord
from growth.base import WeightStandard


class WeightStandardRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_standards(self) -> list[WeightStandard]:
        """
        Return every standard ordered by age, youngest first.

        The classifier breaks nearest-age ties by this order.
        """

        stmt = select(WeightStandardRecord).order_by(
            WeightStandardRecord.age_in_days.asc(),
            WeightStandardRecord.id.asc(),
        )
        return [
            WeightStandard(
                age_in_days=record.age_in_days,
                expected_weight_kg=record.expected_weight_kg,
            )
            for record in self._session.scalars(stmt).all()
        ]
