"""Dependency injection for FastAPI endpoints"""

from datetime import date
from typing import Optional

from fastapi import Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session
from bizbooks.domain.exceptions import InvalidPeriodError
from bizbooks.domain.models import TransactionFilter, TransactionType
from bizbooks.infrastructure.database.session import get_db
from bizbooks.infrastructure.database.repositories import SettingsRepository, TransactionRepository
from bizbooks.infrastructure.storage.photos import PhotoStore
from bizbooks.utils.date_utils import validate_period


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_today() -> date:
    """Calendar date used for "today" aggregates"""
    return date.today()


def get_photo_store() -> PhotoStore:
    """Provide receipt photo storage"""
    return PhotoStore()


def get_transaction_repository(db: Session = Depends(get_db)) -> TransactionRepository:
    return TransactionRepository(db)


def get_settings_repository(db: Session = Depends(get_db)) -> SettingsRepository:
    return SettingsRepository(db)


def get_transaction_filter(
    type: Optional[TransactionType] = Query(None, description="income or expense"),
    category: Optional[str] = Query(None, description="Exact category match"),
    search: Optional[str] = Query(None, description="Substring of description or category"),
    date_from: Optional[date] = Query(None, alias="from", description="Earliest date (inclusive)"),
    date_to: Optional[date] = Query(None, alias="to", description="Latest date (inclusive)"),
) -> TransactionFilter:
    """Validate list/export query parameters into a TransactionFilter"""
    if date_from and date_to:
        try:
            validate_period(date_from, date_to)
        except InvalidPeriodError as e:
            raise HTTPException(status_code=400, detail=str(e))

    return TransactionFilter(
        type=type.value if type else None,
        category=category or None,
        search=search or None,
        date_from=date_from,
        date_to=date_to,
    )
