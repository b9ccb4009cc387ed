"""
app/api/routers/weight_upload.py

Bulk weight upload HTTP endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, UploadFile, status
from sqlalchemy.orm import Session

from app.api.dependencies import get_csv_upload, get_farm_scope
from app.domain.weight_records import FarmScope
from app.parsers.weight_csv_parser import TEMPLATE_FILENAME, build_template_csv
from app.schemas.weight_upload import WeightUploadResultResponse
from app.services.weight_upload_service import (
    WeightUploadPersistenceError,
    WeightUploadService,
    get_weight_upload_service,
)
from db.session import get_db

router = APIRouter(tags=["weights"])


@router.post(
    "/farms/{farm_id}/weights/upload",
    response_model=WeightUploadResultResponse,
)
def upload_weights(
    file: UploadFile = Depends(get_csv_upload),
    scope: FarmScope = Depends(get_farm_scope),
    db: Session = Depends(get_db),
    upload_service: WeightUploadService = Depends(get_weight_upload_service),
) -> WeightUploadResultResponse:
    """
    Ingest one weight CSV for a farm.

    Row-level problems come back in ``errors`` with a 200. A file whose
    header is unusable is refused with a 400.
    """

    try:
        result = upload_service.upload_file(upload_file=file, scope=scope, db=db)
    except WeightUploadPersistenceError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to store weight records.",
        ) from exc
    finally:
        file.file.close()

    if result.rejected:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.errors[0],
        )

    return WeightUploadResultResponse(
        success_count=result.success_count,
        error_count=result.error_count,
        total_rows=result.total_rows,
        errors=list(result.errors),
    )


@router.get("/weights/template")
def download_template() -> Response:
    """
    Serve the CSV template users fill in for bulk uploads.
    """

    return Response(
        content=build_template_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{TEMPLATE_FILENAME}"'},
    )
