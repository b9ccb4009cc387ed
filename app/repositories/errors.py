"""
app/repositories/errors.py

Repository-layer exceptions for farm record persistence.
"""

from __future__ import annotations


class FarmRepositoryError(Exception):
    """Base exception for farm record repository failures."""


class WeightRecordConflictError(FarmRepositoryError):
    """Raised when a batch repeats a (chicken_id, date_recorded) already on file."""


class ChickenNotFoundError(FarmRepositoryError):
    """Raised when a chicken does not exist within the requested farm."""
