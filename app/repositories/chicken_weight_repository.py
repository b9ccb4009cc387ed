"""
app/repositories/chicken_weight_repository.py

Persistence layer for recorded chicken weights.
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.weight_records import WeightRecordInput
from app.repositories.errors import WeightRecordConflictError
from db.models.chicken_weight import ChickenWeight

UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """
    True when the driver reports SQLSTATE 23505 (unique_violation).
    """

    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return sqlstate == UNIQUE_VIOLATION_SQLSTATE


class ChickenWeightRepository:
    """
    Repository for chicken weight rows.

    The caller owns the transaction; nothing here commits or rolls back.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def insert_batch(
        self,
        farm_id: uuid.UUID,
        records: Sequence[WeightRecordInput],
    ) -> int:
        """
        Insert every record in one INSERT statement and return the row count.

        The statement either inserts all rows or none. A duplicate
        (chicken_id, date_recorded), whether already stored or repeated
        within the batch, raises WeightRecordConflictError.
        """

        if not records:
            return 0

        payloads: list[dict[str, Any]] = [
            {
                "farm_id": farm_id,
                "chicken_id": record.chicken_id,
                "date_recorded": record.date_recorded,
                "weight_kg": record.weight_kg,
            }
            for record in records
        ]
        stmt = insert(ChickenWeight).values(payloads).returning(ChickenWeight.id)
        try:
            return len(self._session.scalars(stmt).all())
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise WeightRecordConflictError(
                    "Duplicate chicken_id and date_recorded in weight batch."
                ) from exc
            raise

    def list_for_chicken(
        self,
        farm_id: uuid.UUID,
        chicken_id: int,
    ) -> list[ChickenWeight]:
        """
        Return the chicken's weight rows, newest first.
        """

        stmt = (
            select(ChickenWeight)
            .where(
                ChickenWeight.farm_id == farm_id,
                ChickenWeight.chicken_id == chicken_id,
            )
            .order_by(ChickenWeight.date_recorded.desc())
        )
        return list(self._session.scalars(stmt).all())
