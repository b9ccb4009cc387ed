"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from db.config import load_env_files


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


@dataclass(frozen=True)
class WeightUploadSettings:
    """
    Runtime settings for bulk weight CSV uploads.
    """

    lookup_batch_size: int = 1000
    log_row_errors: bool = True


@dataclass(frozen=True)
class GrowthSettings:
    """
    Settings for weight deviation classification.
    """

    tolerance_ratio: float = 0.10


@lru_cache(maxsize=1)
def get_weight_upload_settings() -> WeightUploadSettings:
    """
    Return cached weight upload settings from environment variables.
    """

    return WeightUploadSettings(
        lookup_batch_size=max(1, _get_int_env("WEIGHT_UPLOAD_LOOKUP_BATCH_SIZE", 1000)),
        log_row_errors=_get_bool_env("WEIGHT_UPLOAD_LOG_ERRORS", True),
    )


@lru_cache(maxsize=1)
def get_growth_settings() -> GrowthSettings:
    """
    Return cached classification settings from environment variables.
    """

    return GrowthSettings(
        tolerance_ratio=max(0.0, _get_float_env("WEIGHT_TOLERANCE_RATIO", 0.10)),
    )
