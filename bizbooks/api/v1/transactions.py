"""CRUD endpoints for /api/transactions"""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, Response, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bizbooks.api.v1.schemas import TransactionResponse, TransactionUpdate
from bizbooks.api.dependencies import (
    get_photo_store,
    get_request_id,
    get_transaction_filter,
    get_transaction_repository,
)
from bizbooks.infrastructure.database.session import get_db
from bizbooks.infrastructure.database.repositories import TransactionRepository
from bizbooks.infrastructure.storage.photos import PhotoStore
from bizbooks.domain.exceptions import InvalidPhotoError, PhotoTooLargeError, TransactionNotFoundError
from bizbooks.domain.ledger import filter_transactions
from bizbooks.domain.models import TransactionFilter, TransactionType
from bizbooks.infrastructure.observability.metrics import photo_rejections_counter, record_transaction
from bizbooks.infrastructure.observability.logging import log_transaction_event

router = APIRouter()


@router.get("/transactions", response_model=List[TransactionResponse])
def list_transactions(
    filters: TransactionFilter = Depends(get_transaction_filter),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """
    List transactions matching the optional filters.

    Returns:
        Matches ordered by date, newest first; equal dates newest id first
    """
    matches = filter_transactions(repo.list_all(), filters)
    return [TransactionResponse.from_domain(t) for t in matches]


@router.get("/transactions/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int,
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    txn = repo.get(transaction_id)
    if txn is None:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return TransactionResponse.from_domain(txn)


@router.post("/transactions", response_model=TransactionResponse, status_code=201)
async def create_transaction(
    request: Request,
    type: TransactionType = Form(...),
    amount: Decimal = Form(..., gt=0, max_digits=10, decimal_places=2),
    description: str = Form(..., min_length=1),
    category: str = Form(..., min_length=1),
    date: date = Form(...),
    photo_url: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    repo: TransactionRepository = Depends(get_transaction_repository),
    photo_store: PhotoStore = Depends(get_photo_store),
):
    """
    Record a new income or expense.

    Flow:
    1. Store the receipt photo, if one was uploaded
    2. Persist the transaction (store assigns id and created_at)
    3. Commit, record metrics and log
    """
    request_id = get_request_id(request)
    stored_photo_url = None

    try:
        # 1. Receipt photo overrides any photo_url field; read one byte past the
        # limit so oversized uploads are rejected without buffering the rest
        if photo is not None and photo.filename:
            data = await photo.read(photo_store.max_bytes + 1)
            stored_photo_url = photo_store.save(photo.filename, photo.content_type, data)
            photo_url = stored_photo_url

        # 2. Persist
        txn = repo.create(
            type=type,
            amount=amount,
            description=description,
            category=category,
            date=date,
            photo_url=photo_url,
        )
        db.commit()

    except PhotoTooLargeError as e:
        photo_rejections_counter.labels(reason="too_large").inc()
        logging.warning(f"Rejected photo: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=413, detail=str(e))

    except InvalidPhotoError as e:
        photo_rejections_counter.labels(reason="invalid_type").inc()
        logging.warning(f"Rejected photo: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except SQLAlchemyError as e:
        db.rollback()
        if stored_photo_url:
            photo_store.delete(stored_photo_url)
        logging.error(f"Database error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Failed to create transaction")

    # 3. Metrics and logs
    record_transaction("created", txn.type.value, txn.amount)
    log_transaction_event(request_id, "created", txn.id, txn.type.value)

    return TransactionResponse.from_domain(txn)


@router.put("/transactions/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: int,
    updates: TransactionUpdate,
    request: Request,
    db: Session = Depends(get_db),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """Apply a partial update; id and created_at never change"""
    request_id = get_request_id(request)

    try:
        txn = repo.update(transaction_id, updates.model_dump(exclude_unset=True))
        if txn is None:
            raise TransactionNotFoundError(transaction_id)
        db.commit()

    except TransactionNotFoundError:
        db.rollback()
        raise HTTPException(status_code=404, detail="Transaction not found")

    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Database error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Failed to update transaction")

    record_transaction("updated", txn.type.value)
    log_transaction_event(request_id, "updated", txn.id, txn.type.value)

    return TransactionResponse.from_domain(txn)


@router.delete("/transactions/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: int,
    request: Request,
    db: Session = Depends(get_db),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    request_id = get_request_id(request)

    existing = repo.get(transaction_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Transaction not found")

    try:
        repo.delete(transaction_id)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Database error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Failed to delete transaction")

    record_transaction("deleted", existing.type.value)
    log_transaction_event(request_id, "deleted", transaction_id, existing.type.value)

    return Response(status_code=204)
