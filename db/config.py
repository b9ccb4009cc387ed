"""
db/config.py

Environment-driven database settings shared by the API and Alembic.

The weight records store is PostgreSQL only. URLs may use either the
``postgres://`` or ``postgresql://`` scheme; both are rewritten to the
psycopg 3 driver before SQLAlchemy sees them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_FILENAMES: tuple[str, ...] = (".env", ".env.local")
PSYCOPG_SCHEME = "postgresql+psycopg://"

_POSTGRES_SCHEMES: tuple[str, ...] = ("postgres://", "postgresql://")
_CLOUD_ENVIRONMENTS = frozenset({"prod", "production", "staging", "cloud"})


@dataclass(frozen=True)
class DatabaseSettings:
    """
    Connection settings for the farm records database.
    """

    url: str
    echo: bool = False
    pool_size: int = 5
    max_overflow: int = 10


def load_env_files(root: Path = PROJECT_ROOT) -> None:
    """
    Copy KEY=VALUE lines from `.env` then `.env.local` into os.environ.

    Variables already set in the process are left alone, so the first
    file to define a key wins over the second.
    """

    for filename in ENV_FILENAMES:
        env_path = root / filename
        if not env_path.is_file():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            key, sep, value = raw_line.strip().partition("=")
            key = key.strip()
            if not sep or not key or key.startswith("#"):
                continue
            os.environ.setdefault(key, value.strip().strip("'\""))


def normalize_postgres_url(url: str) -> str:
    """Return *url* with its postgres scheme swapped for the psycopg driver."""
    for scheme in _POSTGRES_SCHEMES:
        if url.startswith(scheme):
            return PSYCOPG_SCHEME + url[len(scheme):]
    return url


def resolve_database_url() -> str:
    """
    Pick the weight records database URL.

    DATABASE_URL always wins. Otherwise CLOUD_DATABASE_URL is used when
    ENVIRONMENT names a deployed environment, and LOCAL_DATABASE_URL
    everywhere else.
    """

    load_env_files()

    candidates = [os.getenv("DATABASE_URL")]
    environment = os.getenv("ENVIRONMENT", "local").strip().lower()
    if environment in _CLOUD_ENVIRONMENTS:
        candidates.append(os.getenv("CLOUD_DATABASE_URL"))
    candidates.append(os.getenv("LOCAL_DATABASE_URL"))

    for candidate in candidates:
        if candidate and candidate.strip():
            return normalize_postgres_url(candidate.strip())

    raise RuntimeError(
        "Weight records database is not configured "
        f"(ENVIRONMENT={environment!r}). Set DATABASE_URL, or "
        "LOCAL_DATABASE_URL for local runs and CLOUD_DATABASE_URL for deployments."
    )


def _env_int(name: str, default: int) -> int:
    raw_value = os.getenv(name, "").strip()
    return int(raw_value) if raw_value.isdigit() else default


def load_database_settings() -> DatabaseSettings:
    """
    Build DatabaseSettings from the environment.

    Raises RuntimeError when no URL is configured or the URL is not
    PostgreSQL.
    """

    url = resolve_database_url()
    if not url.startswith("postgresql"):
        raise RuntimeError(
            "Weight records database must be PostgreSQL; got a "
            f"{url.split(':', 1)[0]!r} URL."
        )

    return DatabaseSettings(
        url=url,
        echo=os.getenv("SQL_ECHO", "").strip().lower() in {"1", "true", "yes", "on"},
        pool_size=_env_int("DB_POOL_SIZE", 5),
        max_overflow=_env_int("DB_MAX_OVERFLOW", 10),
    )
