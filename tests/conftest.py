"""
Shared fakes for service and router tests.

Nothing here talks to a database: repositories are replaced by in-memory
fakes and the session only records commit/rollback calls.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Sequence
from datetime import date
from types import SimpleNamespace

import pytest

from app.domain.weight_records import FarmScope, WeightRecordInput
from app.repositories.errors import ChickenNotFoundError, WeightRecordConflictError
from growth.base import WeightStandard

FARM_ID = uuid.UUID("6f1c2b0e-1d7a-4c55-9a59-3f1f0b7d2a10")


class FakeSession:
    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


class FakeInventoryRepository:
    def __init__(
        self,
        chickens: dict[int, SimpleNamespace] | None = None,
        *,
        error: Exception | None = None,
    ) -> None:
        self.chickens = chickens or {}
        self.error = error
        self.lookups: list[list[int]] = []

    def find_existing_ids(
        self,
        farm_id: uuid.UUID,
        chicken_ids: Iterable[int],
        *,
        batch_size: int = 1000,
    ) -> set[int]:
        ids = list(chicken_ids)
        self.lookups.append(ids)
        if self.error is not None:
            raise self.error
        return {
            chicken_id
            for chicken_id in ids
            if chicken_id in self.chickens and self.chickens[chicken_id].farm_id == farm_id
        }

    def get_chicken(self, farm_id: uuid.UUID, chicken_id: int) -> SimpleNamespace:
        chicken = self.chickens.get(chicken_id)
        if chicken is None or chicken.farm_id != farm_id:
            raise ChickenNotFoundError(f"Chicken not found: {chicken_id}")
        return chicken


class FakeWeightRepository:
    def __init__(
        self,
        *,
        conflict: bool = False,
        error: Exception | None = None,
        stored: list[SimpleNamespace] | None = None,
    ) -> None:
        self.conflict = conflict
        self.error = error
        self.stored = stored or []
        self.batches: list[list[WeightRecordInput]] = []

    def insert_batch(self, farm_id: uuid.UUID, records: Sequence[WeightRecordInput]) -> int:
        self.batches.append(list(records))
        if self.conflict:
            raise WeightRecordConflictError("duplicate")
        if self.error is not None:
            raise self.error
        return len(records)

    def list_for_chicken(self, farm_id: uuid.UUID, chicken_id: int) -> list[SimpleNamespace]:
        rows = [row for row in self.stored if row.chicken_id == chicken_id]
        return sorted(rows, key=lambda row: row.date_recorded, reverse=True)


class FakeStandardRepository:
    def __init__(self, standards: list[WeightStandard] | None = None) -> None:
        self.standards = standards or []
        self.calls = 0

    def list_standards(self) -> list[WeightStandard]:
        self.calls += 1
        return list(self.standards)


def make_chicken(chicken_id: int, *, farm_id: uuid.UUID = FARM_ID, date_added: date | None = None) -> SimpleNamespace:
    return SimpleNamespace(
        id=chicken_id,
        farm_id=farm_id,
        breed="Broiler",
        age=1,
        health_status="Healthy",
        date_added=date_added,
        date_removed=None,
    )


@pytest.fixture()
def scope() -> FarmScope:
    return FarmScope(farm_id=FARM_ID)


@pytest.fixture()
def session() -> FakeSession:
    return FakeSession()
