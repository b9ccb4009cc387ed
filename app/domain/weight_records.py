"""
app/domain/weight_records.py

Domain models used by the bulk weight upload flow.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class FarmScope:
    """
    The farm every read and write of one operation is restricted to.
    """

    farm_id: uuid.UUID


@dataclass(frozen=True)
class CandidateRow:
    """
    One raw CSV data line, before validation.
    """

    chicken_id_raw: str
    date_recorded_raw: str
    weight_kg_raw: str
    line_number: int


@dataclass(frozen=True)
class WeightRecordInput:
    """
    Validated weight row ready for the existence check and insert.

    ``chicken_id_raw`` keeps the id as written in the file for error messages.
    """

    chicken_id: int
    chicken_id_raw: str
    date_recorded: date
    weight_kg: float
    line_number: int

    @property
    def date_recorded_iso(self) -> str:
        return self.date_recorded.isoformat()


@dataclass(frozen=True)
class RowError:
    """
    One line-numbered upload error.
    """

    line_number: int
    message: str

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.message}"


@dataclass
class UploadResult:
    """
    Outcome of one upload attempt.

    ``errors`` holds the rendered messages in the order they are reported.
    ``rejected`` is set when the file was refused before any row was read
    (unreadable text or a bad header).
    """

    success_count: int = 0
    errors: list[str] = field(default_factory=list)
    total_rows: int = 0
    rejected: bool = False

    @property
    def error_count(self) -> int:
        return len(self.errors)
