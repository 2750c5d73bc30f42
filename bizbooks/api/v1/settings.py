"""GET/PUT /api/settings - Business profile singleton"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bizbooks.api.v1.schemas import SettingsResponse, SettingsUpdate
from bizbooks.api.dependencies import get_request_id, get_settings_repository
from bizbooks.infrastructure.database.session import get_db
from bizbooks.infrastructure.database.repositories import SettingsRepository

router = APIRouter()


@router.get("/settings", response_model=SettingsResponse)
def get_settings(
    request: Request,
    db: Session = Depends(get_db),
    repo: SettingsRepository = Depends(get_settings_repository),
):
    """Return current settings, creating the default row on first access"""
    try:
        row = repo.get_or_create_default()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Database error: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=500, detail="Failed to fetch settings")

    return SettingsResponse.model_validate(row)


@router.put("/settings", response_model=SettingsResponse)
def update_settings(
    patch: SettingsUpdate,
    request: Request,
    db: Session = Depends(get_db),
    repo: SettingsRepository = Depends(get_settings_repository),
):
    """Merge the provided fields into the existing settings"""
    request_id = get_request_id(request)

    try:
        row = repo.update(patch.model_dump(exclude_unset=True))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Database error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Failed to update settings")

    logging.info(
        "Settings updated",
        extra={"request_id": request_id, "fields": sorted(patch.model_fields_set)},
    )
    return SettingsResponse.model_validate(row)
