"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


class TransactionType(str, Enum):
    """Direction of a ledger entry; amounts are always positive"""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Transaction:
    """Single ledger entry as read from the transaction store"""

    id: int
    type: TransactionType
    amount: Decimal  # always > 0, sign comes from type
    description: str
    category: str
    date: date  # when it happened, not when it was recorded
    created_at: datetime
    photo_url: Optional[str] = None


@dataclass(frozen=True)
class TransactionFilter:
    """Optional predicates applied by filter_transactions, combined with AND"""

    type: Optional[str] = None
    category: Optional[str] = None
    search: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None


@dataclass(frozen=True)
class DashboardStats:
    """Today's totals plus the latest recorded entries"""

    today_revenue: Decimal
    today_expenses: Decimal
    net_profit: Decimal
    transaction_count: int
    recent_transactions: Tuple[Transaction, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PeriodSummary:
    """Profit & loss totals over an inclusive date range"""

    date_from: date
    date_to: date
    total_revenue: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    income_count: int
    expense_count: int
    margin: Decimal  # 0 when there is no revenue


@dataclass(frozen=True)
class DailyTotal:
    """One point of the per-day report series"""

    date: date
    revenue: Decimal
    expenses: Decimal

    @property
    def net(self) -> Decimal:
        return self.revenue - self.expenses
