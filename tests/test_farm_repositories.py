from __future__ import annotations

import unittest
import uuid
from datetime import date
from types import SimpleNamespace

from sqlalchemy.exc import IntegrityError

from app.domain.weight_records import WeightRecordInput
from app.repositories.chicken_inventory_repository import ChickenInventoryRepository
from app.repositories.chicken_weight_repository import ChickenWeightRepository, is_unique_violation
from app.repositories.errors import WeightRecordConflictError
from app.repositories.weight_standard_repository import WeightStandardRepository
from growth.base import WeightStandard

FARM_ID = uuid.uuid4()


class _DriverError(Exception):
    def __init__(self, sqlstate: str) -> None:
        super().__init__(sqlstate)
        self.sqlstate = sqlstate


class _ScalarResult:
    def __init__(self, values: list) -> None:
        self._values = values

    def all(self) -> list:
        return list(self._values)


class _RecordingSession:
    """Session stand-in that records statements and replays canned results."""

    def __init__(self, results: list | None = None, error: Exception | None = None) -> None:
        self.statements: list = []
        self._results = list(results or [])
        self._error = error

    def scalars(self, stmt):
        self.statements.append(stmt)
        if self._error is not None:
            raise self._error
        return _ScalarResult(self._results.pop(0) if self._results else [])


def _records(count: int) -> list[WeightRecordInput]:
    return [
        WeightRecordInput(
            chicken_id=30 + index,
            chicken_id_raw=str(30 + index),
            date_recorded=date(2025, 8, 3),
            weight_kg=2.5,
            line_number=index + 2,
        )
        for index in range(count)
    ]


class TestChickenWeightRepository(unittest.TestCase):
    def test_unique_violation_detection(self) -> None:
        self.assertTrue(is_unique_violation(IntegrityError("INSERT", {}, _DriverError("23505"))))
        self.assertFalse(is_unique_violation(IntegrityError("INSERT", {}, _DriverError("23503"))))

    def test_insert_batch_returns_inserted_count_in_one_statement(self) -> None:
        session = _RecordingSession(results=[[1, 2, 3]])

        inserted = ChickenWeightRepository(session).insert_batch(FARM_ID, _records(3))

        self.assertEqual(inserted, 3)
        self.assertEqual(len(session.statements), 1)

    def test_empty_batch_does_not_touch_the_session(self) -> None:
        session = _RecordingSession()

        self.assertEqual(ChickenWeightRepository(session).insert_batch(FARM_ID, []), 0)
        self.assertEqual(session.statements, [])

    def test_duplicate_raises_conflict(self) -> None:
        session = _RecordingSession(error=IntegrityError("INSERT", {}, _DriverError("23505")))

        with self.assertRaises(WeightRecordConflictError):
            ChickenWeightRepository(session).insert_batch(FARM_ID, _records(2))

    def test_other_integrity_errors_propagate(self) -> None:
        session = _RecordingSession(error=IntegrityError("INSERT", {}, _DriverError("23503")))

        with self.assertRaises(IntegrityError):
            ChickenWeightRepository(session).insert_batch(FARM_ID, _records(2))


class TestChickenInventoryRepository(unittest.TestCase):
    def test_lookup_is_chunked_and_deduplicated(self) -> None:
        session = _RecordingSession(results=[[1, 2], [3]])

        found = ChickenInventoryRepository(session).find_existing_ids(
            FARM_ID,
            [3, 1, 2, 1, 4],
            batch_size=2,
        )

        self.assertEqual(found, {1, 2, 3})
        self.assertEqual(len(session.statements), 2)

    def test_no_ids_skips_query(self) -> None:
        session = _RecordingSession()

        self.assertEqual(ChickenInventoryRepository(session).find_existing_ids(FARM_ID, []), set())
        self.assertEqual(session.statements, [])


class TestWeightStandardRepository(unittest.TestCase):
    def test_rows_are_returned_as_domain_standards(self) -> None:
        session = _RecordingSession(
            results=[
                [
                    SimpleNamespace(id=1, age_in_days=7, expected_weight_kg=0.18),
                    SimpleNamespace(id=2, age_in_days=14, expected_weight_kg=0.45),
                ]
            ]
        )

        standards = WeightStandardRepository(session).list_standards()

        self.assertEqual(
            standards,
            [
                WeightStandard(age_in_days=7, expected_weight_kg=0.18),
                WeightStandard(age_in_days=14, expected_weight_kg=0.45),
            ],
        )
        self.assertEqual(len(session.statements), 1)


if __name__ == "__main__":
    unittest.main()
