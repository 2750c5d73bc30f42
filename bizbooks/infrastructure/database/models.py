"""SQLAlchemy ORM models for the transactions and settings tables"""

from datetime import datetime, timezone
from sqlalchemy import Column, String, Boolean, Date, DateTime, Integer, Numeric, Text, Enum
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

from bizbooks.domain.models import TransactionType

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TransactionRecord(Base):
    """Income or expense entry"""

    __tablename__ = "transactions"
    __table_args__ = {"sqlite_autoincrement": True}  # ids are never reused

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(
        Enum(TransactionType, name="transaction_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(Text, nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    photo_url = Column(Text, nullable=True)
    # Python-side default keeps sub-second ordering on databases whose now() is coarse
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, server_default=func.now())


class BusinessSettings(Base):
    """Business profile and feature toggles; a single row is ever active"""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    business_name = Column(Text, nullable=False, default="My Business")
    owner_name = Column(Text, nullable=False, default="Business Owner")
    email = Column(Text, nullable=False, default="owner@business.com")
    currency = Column(String(3), nullable=False, default="USD")
    voice_input_enabled = Column(Boolean, nullable=False, default=True)
    auto_save_photos = Column(Boolean, nullable=False, default=False)
    dark_mode_enabled = Column(Boolean, nullable=False, default=False)
    notifications_enabled = Column(Boolean, nullable=False, default=True)
    auto_backup_enabled = Column(Boolean, nullable=False, default=True)
