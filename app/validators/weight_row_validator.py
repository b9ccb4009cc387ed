"""
app/validators/weight_row_validator.py

Row-level validation and type parsing for bulk weight uploads.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime

from app.domain.weight_records import CandidateRow, RowError, WeightRecordInput

DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y/%m/%d",
)

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DECIMAL_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

INVALID_CHICKEN_ID = "Invalid chicken_id"
INVALID_DATE_RECORDED = "Invalid date_recorded format (use YYYY-MM-DD)"
INVALID_WEIGHT_KG = "Invalid weight_kg (must be a positive number)"


class WeightRowValidator:
    """
    Validates one candidate row and normalizes its values.

    Checks run in a fixed order (chicken_id, date_recorded, weight_kg) and
    stop at the first failure, so a row reports at most one error. The
    validator never touches storage: whether the chicken exists is decided
    by the caller.
    """

    def validate(
        self,
        row: CandidateRow,
    ) -> tuple[WeightRecordInput | None, RowError | None]:
        chicken_id = self._parse_chicken_id(row.chicken_id_raw)
        if chicken_id is None:
            return None, RowError(line_number=row.line_number, message=INVALID_CHICKEN_ID)

        date_recorded = self._parse_date(row.date_recorded_raw)
        if date_recorded is None:
            return None, RowError(line_number=row.line_number, message=INVALID_DATE_RECORDED)

        weight_kg = self._parse_weight(row.weight_kg_raw)
        if weight_kg is None:
            return None, RowError(line_number=row.line_number, message=INVALID_WEIGHT_KG)

        return (
            WeightRecordInput(
                chicken_id=chicken_id,
                chicken_id_raw=row.chicken_id_raw.strip(),
                date_recorded=date_recorded,
                weight_kg=weight_kg,
                line_number=row.line_number,
            ),
            None,
        )

    @staticmethod
    def _parse_chicken_id(raw: str) -> int | None:
        value = raw.strip()
        if not _INTEGER_RE.match(value):
            return None
        return int(value)

    @staticmethod
    def _parse_date(raw: str) -> date | None:
        value = raw.strip()
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(value, fmt).date()
            except ValueError:
                continue
        return None

    @staticmethod
    def _parse_weight(raw: str) -> float | None:
        value = raw.strip()
        if not _DECIMAL_RE.match(value):
            return None
        weight = float(value)
        if not math.isfinite(weight) or weight <= 0:
            return None
        return weight
