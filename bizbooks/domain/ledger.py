"""Ledger query engine - filtering and aggregation over transaction snapshots"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Sequence

from bizbooks.domain.models import (
    DailyTotal,
    DashboardStats,
    PeriodSummary,
    Transaction,
    TransactionFilter,
    TransactionType,
)
from bizbooks.utils.date_utils import generate_date_range

CENTS = Decimal("0.01")
MARGIN_PRECISION = Decimal("0.0001")
ZERO = Decimal("0")


def _money(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def _sum_amounts(transactions: Iterable[Transaction], txn_type: TransactionType) -> Decimal:
    return _money(sum((t.amount for t in transactions if t.type == txn_type), ZERO))


def _matches(txn: Transaction, filters: TransactionFilter) -> bool:
    if filters.type and txn.type != filters.type:
        return False
    if filters.category and txn.category != filters.category:
        return False
    if filters.search:
        needle = filters.search.lower()
        if needle not in txn.description.lower() and needle not in txn.category.lower():
            return False
    if filters.date_from and txn.date < filters.date_from:
        return False
    if filters.date_to and txn.date > filters.date_to:
        return False
    return True


def filter_transactions(
    transactions: Sequence[Transaction],
    filters: Optional[TransactionFilter] = None,
) -> List[Transaction]:
    """
    Apply the list-view filters and sort newest calendar date first.

    Requirements:
    - type and category are exact matches
    - search is a case-insensitive substring of description OR category
    - every provided predicate must hold (AND)
    - an unrecognised type matches nothing instead of raising

    Sorting is stable, so records sharing a date keep their input order.
    """
    filters = filters or TransactionFilter()
    matched = [t for t in transactions if _matches(t, filters)]
    return sorted(matched, key=lambda t: t.date, reverse=True)


def restrict_to_period(
    transactions: Iterable[Transaction],
    date_from: date,
    date_to: date,
) -> List[Transaction]:
    """Keep transactions dated within [date_from, date_to] (inclusive)"""
    return [t for t in transactions if date_from <= t.date <= date_to]


def recent_transactions(transactions: Sequence[Transaction], limit: int = 4) -> List[Transaction]:
    """
    Return the `limit` most recently recorded transactions, oldest first.

    Recency is by created_at, not by the transaction date. Equal timestamps
    fall back to the higher id as the newer record.
    """
    if limit <= 0:
        return []
    newest = sorted(transactions, key=lambda t: (t.created_at, t.id), reverse=True)[:limit]
    return list(reversed(newest))


def compute_dashboard_stats(
    transactions: Sequence[Transaction],
    today: date,
    recent_limit: int = 4,
) -> DashboardStats:
    """
    Summarise today's activity for the dashboard.

    Requirements:
    - "today" is exact calendar-date equality on Transaction.date
    - net_profit = today_revenue - today_expenses (may be negative)
    - recent window is independent of today's partition
    """
    todays = [t for t in transactions if t.date == today]

    today_revenue = _sum_amounts(todays, TransactionType.INCOME)
    today_expenses = _sum_amounts(todays, TransactionType.EXPENSE)

    return DashboardStats(
        today_revenue=today_revenue,
        today_expenses=today_expenses,
        net_profit=today_revenue - today_expenses,
        transaction_count=len(todays),
        recent_transactions=tuple(recent_transactions(transactions, recent_limit)),
    )


def aggregate_by_category(transactions: Iterable[Transaction]) -> Dict[str, Decimal]:
    """
    Total amount per category.

    Income and expense amounts land in the same bucket when they share a
    category name. Keys appear in order of first occurrence.
    """
    totals: Dict[str, Decimal] = {}
    for txn in transactions:
        totals[txn.category] = totals.get(txn.category, ZERO) + txn.amount
    return {category: _money(total) for category, total in totals.items()}


def compute_margin(net_profit: Decimal, total_revenue: Decimal) -> Decimal:
    """Net profit as a fraction of revenue; 0 when there is no revenue"""
    if total_revenue == 0:
        return ZERO
    return (net_profit / total_revenue).quantize(MARGIN_PRECISION, rounding=ROUND_HALF_UP)


def compute_period_summary(
    transactions: Sequence[Transaction],
    date_from: date,
    date_to: date,
) -> PeriodSummary:
    """
    Profit & loss over an inclusive calendar-date range.

    An inverted range (date_from > date_to) simply contains no transactions;
    rejecting it is left to the request boundary.
    """
    in_period = restrict_to_period(transactions, date_from, date_to)

    total_revenue = _sum_amounts(in_period, TransactionType.INCOME)
    total_expenses = _sum_amounts(in_period, TransactionType.EXPENSE)
    net_profit = total_revenue - total_expenses

    return PeriodSummary(
        date_from=date_from,
        date_to=date_to,
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        net_profit=net_profit,
        income_count=sum(1 for t in in_period if t.type == TransactionType.INCOME),
        expense_count=sum(1 for t in in_period if t.type == TransactionType.EXPENSE),
        margin=compute_margin(net_profit, total_revenue),
    )


def compute_daily_totals(
    transactions: Sequence[Transaction],
    date_from: date,
    date_to: date,
) -> List[DailyTotal]:
    """
    Per-day revenue and expenses across the period.

    Days without activity are included with zero totals so charts get a
    continuous axis.
    """
    by_day: Dict[date, List[Transaction]] = {}
    for txn in restrict_to_period(transactions, date_from, date_to):
        by_day.setdefault(txn.date, []).append(txn)

    return [
        DailyTotal(
            date=day,
            revenue=_sum_amounts(by_day.get(day, []), TransactionType.INCOME),
            expenses=_sum_amounts(by_day.get(day, []), TransactionType.EXPENSE),
        )
        for day in generate_date_range(date_from, date_to)
    ]
