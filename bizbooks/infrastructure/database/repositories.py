"""Data access layer for ledger entities"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from bizbooks.infrastructure.database.models import TransactionRecord, BusinessSettings
from bizbooks.domain.models import Transaction, TransactionType

IMMUTABLE_FIELDS = {"id", "created_at"}

DEFAULT_SETTINGS: Dict[str, Any] = {
    "business_name": "My Business",
    "owner_name": "Business Owner",
    "email": "owner@business.com",
    "currency": "USD",
    "voice_input_enabled": True,
    "auto_save_photos": False,
    "dark_mode_enabled": False,
    "notifications_enabled": True,
    "auto_backup_enabled": True,
}


def to_domain(record: TransactionRecord) -> Transaction:
    """Detach an ORM row into an immutable domain snapshot"""
    return Transaction(
        id=record.id,
        type=TransactionType(record.type),
        amount=Decimal(record.amount),
        description=record.description,
        category=record.category,
        date=record.date,
        created_at=record.created_at,
        photo_url=record.photo_url,
    )


class TransactionRepository:
    """Repository for ledger transactions"""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Transaction]:
        """Snapshot of every transaction, newest id first"""
        records = self.db.query(TransactionRecord).order_by(TransactionRecord.id.desc()).all()
        return [to_domain(r) for r in records]

    def get(self, transaction_id: int) -> Optional[Transaction]:
        record = self.db.get(TransactionRecord, transaction_id)
        return to_domain(record) if record else None

    def create(
        self,
        type: TransactionType,
        amount: Decimal,
        description: str,
        category: str,
        date: date,
        photo_url: Optional[str] = None,
    ) -> Transaction:
        """Persist a new transaction; id and created_at are assigned here"""
        record = TransactionRecord(
            type=type,
            amount=amount,
            description=description,
            category=category,
            date=date,
            photo_url=photo_url or None,
        )
        self.db.add(record)
        self.db.flush()  # Get ID without committing
        self.db.refresh(record)
        return to_domain(record)

    def update(self, transaction_id: int, updates: Dict[str, Any]) -> Optional[Transaction]:
        """Apply a partial update; returns None when the id does not exist"""
        record = self.db.get(TransactionRecord, transaction_id)
        if record is None:
            return None

        for name, value in updates.items():
            if name in IMMUTABLE_FIELDS:
                continue
            if name == "photo_url":
                value = value or None
            setattr(record, name, value)

        self.db.flush()
        self.db.refresh(record)
        return to_domain(record)

    def delete(self, transaction_id: int) -> bool:
        record = self.db.get(TransactionRecord, transaction_id)
        if record is None:
            return False
        self.db.delete(record)
        self.db.flush()
        return True


class SettingsRepository:
    """Repository for the business settings singleton"""

    def __init__(self, db: Session):
        self.db = db

    def get_or_create_default(self) -> BusinessSettings:
        """Return the active settings row, inserting defaults on first access"""
        row = self.db.query(BusinessSettings).order_by(BusinessSettings.id).first()
        if row is None:
            row = BusinessSettings(**DEFAULT_SETTINGS)
            self.db.add(row)
            self.db.flush()
        return row

    def update(self, patch: Dict[str, Any]) -> BusinessSettings:
        """Merge a partial patch into the existing row"""
        row = self.get_or_create_default()
        for name, value in patch.items():
            if name == "id":
                continue
            setattr(row, name, value)
        self.db.flush()
        return row
