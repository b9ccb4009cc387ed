"""
app/parsers package marker.
"""

from app.parsers.weight_csv_parser import (
    REQUIRED_HEADERS,
    TEMPLATE_FILENAME,
    WeightCSVHeaderError,
    WeightCSVParser,
    build_template_csv,
)

__all__ = [
    "REQUIRED_HEADERS",
    "TEMPLATE_FILENAME",
    "WeightCSVHeaderError",
    "WeightCSVParser",
    "build_template_csv",
]
