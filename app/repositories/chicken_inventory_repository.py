"""
app/repositories/chicken_inventory_repository.py

Read access to the chicken inventory, always scoped to one farm.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.repositories.errors import ChickenNotFoundError
from db.models.chicken import Chicken

_DEFAULT_LOOKUP_BATCH_SIZE = 1000


class ChickenInventoryRepository:
    """
    Repository for chicken lookups. Never writes.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_existing_ids(
        self,
        farm_id: uuid.UUID,
        chicken_ids: Iterable[int],
        *,
        batch_size: int = _DEFAULT_LOOKUP_BATCH_SIZE,
    ) -> set[int]:
        """
        Return the subset of *chicken_ids* that exist on the farm.
        """

        unique_ids = sorted(set(chicken_ids))
        if not unique_ids:
            return set()

        size = max(1, batch_size)
        found: set[int] = set()
        for start in range(0, len(unique_ids), size):
            chunk = unique_ids[start : start + size]
            stmt = select(Chicken.id).where(
                Chicken.farm_id == farm_id,
                Chicken.id.in_(chunk),
            )
            found.update(self._session.scalars(stmt).all())
        return found

    def get_chicken(self, farm_id: uuid.UUID, chicken_id: int) -> Chicken:
        stmt = select(Chicken).where(
            Chicken.farm_id == farm_id,
            Chicken.id == chicken_id,
        )
        chicken = self._session.scalars(stmt).first()
        if chicken is None:
            raise ChickenNotFoundError(f"Chicken not found: {chicken_id}")
        return chicken
