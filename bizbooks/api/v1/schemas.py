"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from bizbooks.domain.models import Transaction, TransactionType

# Alias for fields that are themselves named "date"
CalendarDate = date


class TransactionResponse(BaseModel):
    """Single ledger entry"""

    id: int
    type: TransactionType
    amount: Decimal
    description: str
    category: str
    date: date
    photo_url: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_domain(cls, txn: Transaction) -> "TransactionResponse":
        return cls(
            id=txn.id,
            type=txn.type,
            amount=txn.amount,
            description=txn.description,
            category=txn.category,
            date=txn.date,
            photo_url=txn.photo_url,
            created_at=txn.created_at,
        )


class TransactionUpdate(BaseModel):
    """Request body for PUT /api/transactions/{id}; every field optional"""

    model_config = ConfigDict(extra="forbid")

    type: Optional[TransactionType] = None
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    date: Optional[CalendarDate] = None
    photo_url: Optional[str] = None

    @model_validator(mode="after")
    def _reject_null_required(self):
        # Only photo_url may be cleared explicitly
        for name in ("type", "amount", "description", "category", "date"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class DashboardStatsResponse(BaseModel):
    """Response for GET /api/dashboard/stats"""

    today_revenue: Decimal
    today_expenses: Decimal
    net_profit: Decimal
    transaction_count: int
    recent_transactions: List[TransactionResponse]


class CategoryTotal(BaseModel):
    """Category line in a report breakdown"""

    category: str
    total: Decimal


class DailyTotalSchema(BaseModel):
    """One day of the report series"""

    date: date
    revenue: Decimal
    expenses: Decimal
    net: Decimal


class PeriodSummarySchema(BaseModel):
    """Profit & loss totals over the report period"""

    total_revenue: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    income_count: int
    expense_count: int
    margin: Decimal


class ReportResponse(BaseModel):
    """Response for GET /api/reports/summary"""

    date_from: date
    date_to: date
    summary: PeriodSummarySchema
    categories: List[CategoryTotal]
    daily: List[DailyTotalSchema]


class SuggestedCategory(BaseModel):
    """Entry-form category suggestion"""

    value: str
    label: str
    type: TransactionType


class SettingsResponse(BaseModel):
    """Business profile and feature toggles"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    business_name: str
    owner_name: str
    email: str
    currency: str
    voice_input_enabled: bool
    auto_save_photos: bool
    dark_mode_enabled: bool
    notifications_enabled: bool
    auto_backup_enabled: bool


class SettingsUpdate(BaseModel):
    """Request body for PUT /api/settings; every field optional"""

    model_config = ConfigDict(extra="forbid")

    business_name: Optional[str] = Field(None, min_length=1)
    owner_name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    voice_input_enabled: Optional[bool] = None
    auto_save_photos: Optional[bool] = None
    dark_mode_enabled: Optional[bool] = None
    notifications_enabled: Optional[bool] = None
    auto_backup_enabled: Optional[bool] = None

    @model_validator(mode="after")
    def _reject_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self
