"""
app/parsers/weight_csv_parser.py

Splits uploaded weight CSV text into candidate rows.

The format is deliberately plain: one record per line, fields separated by
commas, no quoting or escaping. The header line is mandatory and must name
every column in REQUIRED_HEADERS; column order is free and extra columns
are ignored.
"""

from __future__ import annotations

from collections.abc import Iterator

from app.domain.weight_records import CandidateRow

REQUIRED_HEADERS: tuple[str, ...] = ("chicken_id", "date_recorded", "weight_kg")

_BOM = "\ufeff"


class WeightCSVHeaderError(ValueError):
    """
    Raised when the header line is missing or lacks a required column.
    """


class WeightCSVParser:
    """
    Parses weight CSV text. Stateless; one instance can be shared.
    """

    def parse(self, text: str) -> Iterator[CandidateRow]:
        """
        Validate the header eagerly and return a lazy iterator over data rows.

        Raises WeightCSVHeaderError before any row is produced when the
        header is unusable.
        """

        lines = text.lstrip(_BOM).rstrip().splitlines()
        if not lines:
            raise WeightCSVHeaderError(self._header_error_message())

        headers = [header.strip() for header in lines[0].split(",")]
        if not all(required in headers for required in REQUIRED_HEADERS):
            raise WeightCSVHeaderError(self._header_error_message())

        positions = {name: headers.index(name) for name in REQUIRED_HEADERS}
        return self._iter_rows(lines[1:], positions)

    def _iter_rows(
        self,
        data_lines: list[str],
        positions: dict[str, int],
    ) -> Iterator[CandidateRow]:
        # Line 1 is the header, so data starts at line 2.
        for line_number, line in enumerate(data_lines, start=2):
            values = [value.strip() for value in line.split(",")]
            yield CandidateRow(
                chicken_id_raw=self._value_at(values, positions["chicken_id"]),
                date_recorded_raw=self._value_at(values, positions["date_recorded"]),
                weight_kg_raw=self._value_at(values, positions["weight_kg"]),
                line_number=line_number,
            )

    @staticmethod
    def _value_at(values: list[str], index: int) -> str:
        if index < len(values):
            return values[index]
        return ""

    @staticmethod
    def _header_error_message() -> str:
        return f"Invalid CSV format. Expected headers: {', '.join(REQUIRED_HEADERS)}"


TEMPLATE_FILENAME = "weight_upload_template.csv"


def build_template_csv() -> str:
    """
    Return the downloadable upload template: the header plus two sample rows.
    """

    sample_rows = (
        ("33", "2025-08-03", "2.5"),
        ("34", "2025-08-03", "2.8"),
    )
    lines = [",".join(REQUIRED_HEADERS)]
    lines.extend(",".join(row) for row in sample_rows)
    return "\n".join(lines)
