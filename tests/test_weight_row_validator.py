from __future__ import annotations

import unittest
from datetime import date

from app.domain.weight_records import CandidateRow, RowError, WeightRecordInput
from app.validators.weight_row_validator import WeightRowValidator


def _row(chicken_id: str = "33", date_recorded: str = "2025-08-03", weight_kg: str = "2.5", line: int = 2) -> CandidateRow:
    return CandidateRow(
        chicken_id_raw=chicken_id,
        date_recorded_raw=date_recorded,
        weight_kg_raw=weight_kg,
        line_number=line,
    )


class TestWeightRowValidator(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = WeightRowValidator()

    def test_valid_row_is_normalized(self) -> None:
        record, error = self.validator.validate(_row())

        self.assertIsNone(error)
        self.assertEqual(
            record,
            WeightRecordInput(
                chicken_id=33,
                chicken_id_raw="33",
                date_recorded=date(2025, 8, 3),
                weight_kg=2.5,
                line_number=2,
            ),
        )
        self.assertEqual(record.date_recorded_iso, "2025-08-03")

    def test_chicken_id_keeps_its_written_form(self) -> None:
        record, error = self.validator.validate(_row(chicken_id="+033"))

        self.assertIsNone(error)
        self.assertEqual(record.chicken_id, 33)
        self.assertEqual(record.chicken_id_raw, "+033")

    def test_slash_dates_are_normalized_to_iso(self) -> None:
        record, error = self.validator.validate(_row(date_recorded="2025/08/03"))

        self.assertIsNone(error)
        self.assertEqual(record.date_recorded_iso, "2025-08-03")

    def test_invalid_chicken_ids(self) -> None:
        for raw in ("", "abc", "12.5", "3_3", "33abc"):
            with self.subTest(raw=raw):
                record, error = self.validator.validate(_row(chicken_id=raw, line=5))
                self.assertIsNone(record)
                self.assertEqual(str(error), "Line 5: Invalid chicken_id")

    def test_invalid_dates(self) -> None:
        for raw in ("", "bad-date", "2025-02-30", "03-08-2025"):
            with self.subTest(raw=raw):
                _, error = self.validator.validate(_row(date_recorded=raw, line=3))
                self.assertEqual(str(error), "Line 3: Invalid date_recorded format (use YYYY-MM-DD)")

    def test_invalid_weights(self) -> None:
        for raw in ("", "0", "0.0", "-1.2", "heavy", "nan", "inf", "1e400"):
            with self.subTest(raw=raw):
                _, error = self.validator.validate(_row(weight_kg=raw, line=4))
                self.assertEqual(str(error), "Line 4: Invalid weight_kg (must be a positive number)")

    def test_first_failure_wins(self) -> None:
        _, error = self.validator.validate(_row(chicken_id="x", date_recorded="never", weight_kg="-1"))

        self.assertEqual(error, RowError(line_number=2, message="Invalid chicken_id"))

    def test_date_checked_before_weight(self) -> None:
        _, error = self.validator.validate(_row(date_recorded="never", weight_kg="-1"))

        self.assertEqual(error.message, "Invalid date_recorded format (use YYYY-MM-DD)")

    def test_repeated_calls_return_identical_results(self) -> None:
        for row in (_row(), _row(weight_kg="0")):
            with self.subTest(row=row):
                self.assertEqual(self.validator.validate(row), self.validator.validate(row))


if __name__ == "__main__":
    unittest.main()
