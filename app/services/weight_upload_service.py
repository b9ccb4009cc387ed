"""
app/services/weight_upload_service.py

Service layer for bulk chicken weight uploads.

One upload runs these steps in order:

    1. Parse the CSV text (a bad header rejects the whole file).
    2. Validate every data row; invalid rows are reported and dropped.
    3. Check that each remaining row's chicken exists on the farm.
    4. Insert the surviving rows in a single batch.

Row errors are collected, not raised. The batch insert is all or nothing:
when any (chicken_id, date_recorded) pair is already on file, no row from
the upload is stored and one aggregate error is reported instead. Storage
failures other than that conflict abort the upload with
WeightUploadPersistenceError.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_weight_upload_settings
from app.domain.weight_records import FarmScope, RowError, UploadResult, WeightRecordInput
from app.parsers.weight_csv_parser import WeightCSVHeaderError, WeightCSVParser
from app.repositories.chicken_inventory_repository import ChickenInventoryRepository
from app.repositories.chicken_weight_repository import ChickenWeightRepository
from app.repositories.errors import WeightRecordConflictError
from app.validators.weight_row_validator import WeightRowValidator

logger = logging.getLogger(__name__)

DUPLICATE_BATCH_MESSAGE = (
    "Some weight records already exist for the specified chicken and date combinations"
)
NOT_UTF8_MESSAGE = "CSV must be UTF-8 encoded."


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class WeightUploadPersistenceError(RuntimeError):
    """
    Raised when the row store fails for a reason other than a duplicate.
    """


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class WeightUploadService:
    """
    Coordinates weight CSV parsing, validation, existence checks and insert.
    """

    def __init__(
        self,
        *,
        lookup_batch_size: int,
        log_row_errors: bool,
        parser: WeightCSVParser | None = None,
        validator: WeightRowValidator | None = None,
        inventory_repository_factory: Callable[[Session], ChickenInventoryRepository] = ChickenInventoryRepository,
        weight_repository_factory: Callable[[Session], ChickenWeightRepository] = ChickenWeightRepository,
    ) -> None:
        self._lookup_batch_size = max(1, lookup_batch_size)
        self._log_row_errors = log_row_errors
        self._parser = parser or WeightCSVParser()
        self._validator = validator or WeightRowValidator()
        self._inventory_repository_factory = inventory_repository_factory
        self._weight_repository_factory = weight_repository_factory

    def upload_file(
        self,
        *,
        upload_file: UploadFile,
        scope: FarmScope,
        db: Session,
    ) -> UploadResult:
        """
        Decode an uploaded file as UTF-8 and run upload_weights on it.
        """

        raw_file = upload_file.file
        raw_file.seek(0)
        try:
            text = raw_file.read().decode("utf-8-sig")
        except UnicodeDecodeError:
            logger.warning(
                "Weight upload rejected farm_id=%s filename=%r: not UTF-8",
                scope.farm_id,
                upload_file.filename,
            )
            return UploadResult(errors=[NOT_UTF8_MESSAGE], rejected=True)

        return self.upload_weights(text=text, scope=scope, db=db)

    def upload_weights(
        self,
        *,
        text: str,
        scope: FarmScope,
        db: Session,
    ) -> UploadResult:
        """
        Ingest weight CSV text for one farm and report what happened.

        Args:
            text:   Full CSV text, header line first.
            scope:  Farm the chickens and new weight rows belong to.
            db:     Active SQLAlchemy session (caller owns lifecycle).
        """

        try:
            rows = self._parser.parse(text)
        except WeightCSVHeaderError as exc:
            logger.warning("Weight upload rejected farm_id=%s: %s", scope.farm_id, exc)
            return UploadResult(errors=[str(exc)], rejected=True)

        result = UploadResult()
        row_errors: list[RowError] = []
        validated: list[WeightRecordInput] = []

        for row in rows:
            result.total_rows += 1
            record, error = self._validator.validate(row)
            if error is not None:
                self._record_error(row_errors, error, scope)
                continue
            if record is not None:
                validated.append(record)

        accepted = self._drop_unknown_chickens(
            records=validated,
            scope=scope,
            db=db,
            row_errors=row_errors,
        )

        # Existence errors are found after all validation errors; report by line.
        row_errors.sort(key=lambda error: error.line_number)
        result.errors.extend(str(error) for error in row_errors)

        if accepted:
            result.success_count = self._insert_batch(
                records=accepted,
                scope=scope,
                db=db,
                result=result,
            )

        logger.info(
            "Weight upload finished farm_id=%s total_rows=%s inserted=%s errors=%s",
            scope.farm_id,
            result.total_rows,
            result.success_count,
            result.error_count,
        )
        return result

    # ------------------------------------------------------------------
    # Upload internals
    # ------------------------------------------------------------------

    def _drop_unknown_chickens(
        self,
        *,
        records: list[WeightRecordInput],
        scope: FarmScope,
        db: Session,
        row_errors: list[RowError],
    ) -> list[WeightRecordInput]:
        if not records:
            return []

        repository = self._inventory_repository_factory(db)
        try:
            existing_ids = repository.find_existing_ids(
                scope.farm_id,
                (record.chicken_id for record in records),
                batch_size=self._lookup_batch_size,
            )
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Chicken lookup failed farm_id=%s: %s", scope.farm_id, exc)
            raise WeightUploadPersistenceError("Failed to look up chickens for weight upload.") from exc

        accepted: list[WeightRecordInput] = []
        for record in records:
            if record.chicken_id in existing_ids:
                accepted.append(record)
                continue
            self._record_error(
                row_errors,
                RowError(
                    line_number=record.line_number,
                    message=f"Chicken ID {record.chicken_id_raw} not found",
                ),
                scope,
            )
        return accepted

    def _insert_batch(
        self,
        *,
        records: list[WeightRecordInput],
        scope: FarmScope,
        db: Session,
        result: UploadResult,
    ) -> int:
        repository = self._weight_repository_factory(db)
        try:
            inserted = repository.insert_batch(scope.farm_id, records)
            db.commit()
            return inserted
        except WeightRecordConflictError:
            db.rollback()
            logger.warning(
                "Weight batch rejected as duplicate farm_id=%s rows=%s",
                scope.farm_id,
                len(records),
            )
            result.errors.append(DUPLICATE_BATCH_MESSAGE)
            return 0
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Weight batch insert failed farm_id=%s: %s", scope.farm_id, exc)
            raise WeightUploadPersistenceError("Failed to persist weight records.") from exc

    def _record_error(
        self,
        row_errors: list[RowError],
        error: RowError,
        scope: FarmScope,
    ) -> None:
        if self._log_row_errors:
            logger.warning(
                "Weight upload row error farm_id=%s line=%s message=%s",
                scope.farm_id,
                error.line_number,
                error.message,
            )
        row_errors.append(error)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_weight_upload_service() -> WeightUploadService:
    """
    Build and cache the upload service with env-driven settings.
    """
    settings = get_weight_upload_settings()
    return WeightUploadService(
        lookup_batch_size=settings.lookup_batch_size,
        log_row_errors=settings.log_row_errors,
    )
