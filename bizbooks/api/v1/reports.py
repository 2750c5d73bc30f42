"""Period reports: profit & loss, category breakdown, daily series, CSV"""

import time
from datetime import date
from typing import Optional, Tuple
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from bizbooks.api.v1.schemas import (
    CategoryTotal,
    DailyTotalSchema,
    PeriodSummarySchema,
    ReportResponse,
)
from bizbooks.api.dependencies import get_request_id, get_today, get_transaction_repository
from bizbooks.config import settings
from bizbooks.domain.exceptions import InvalidPeriodError
from bizbooks.domain.export import render_transactions_csv
from bizbooks.domain.ledger import (
    aggregate_by_category,
    compute_daily_totals,
    compute_period_summary,
    filter_transactions,
)
from bizbooks.domain.models import TransactionFilter
from bizbooks.infrastructure.database.repositories import TransactionRepository
from bizbooks.infrastructure.observability.logging import log_report_generated
from bizbooks.infrastructure.observability.metrics import csv_export_counter, report_duration_histogram
from bizbooks.utils.date_utils import trailing_window, validate_period

router = APIRouter()


def resolve_period(
    date_from: Optional[date] = Query(None, alias="from", description="Period start (inclusive)"),
    date_to: Optional[date] = Query(None, alias="to", description="Period end (inclusive)"),
    today: date = Depends(get_today),
) -> Tuple[date, date]:
    """Fill a missing bound from the default trailing window ending at `to`, or today"""
    default_from, default_to = trailing_window(date_to or today, settings.report_default_days)
    start, end = date_from or default_from, date_to or default_to

    try:
        validate_period(start, end)
    except InvalidPeriodError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return start, end


@router.get("/reports/summary", response_model=ReportResponse)
def get_report_summary(
    request: Request,
    period: Tuple[date, date] = Depends(resolve_period),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """
    Build the report page for a period.

    Returns:
        Totals and margin, per-category totals (largest first) and a
        zero-filled daily series
    """
    start_time = time.time()
    date_from, date_to = period

    with report_duration_histogram.labels(report="period_summary").time():
        in_period = filter_transactions(
            repo.list_all(), TransactionFilter(date_from=date_from, date_to=date_to)
        )
        summary = compute_period_summary(in_period, date_from, date_to)
        by_category = aggregate_by_category(in_period)
        daily = compute_daily_totals(in_period, date_from, date_to)

    duration_ms = (time.time() - start_time) * 1000
    log_report_generated(get_request_id(request), "period_summary", len(in_period), duration_ms)

    return ReportResponse(
        date_from=date_from,
        date_to=date_to,
        summary=PeriodSummarySchema(
            total_revenue=summary.total_revenue,
            total_expenses=summary.total_expenses,
            net_profit=summary.net_profit,
            income_count=summary.income_count,
            expense_count=summary.expense_count,
            margin=summary.margin,
        ),
        categories=[
            CategoryTotal(category=category, total=total)
            for category, total in sorted(by_category.items(), key=lambda kv: kv[1], reverse=True)
        ],
        daily=[
            DailyTotalSchema(date=d.date, revenue=d.revenue, expenses=d.expenses, net=d.net)
            for d in daily
        ],
    )


@router.get("/reports/export")
def export_report(
    period: Tuple[date, date] = Depends(resolve_period),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """Download the period's transactions as CSV"""
    date_from, date_to = period
    in_period = filter_transactions(
        repo.list_all(), TransactionFilter(date_from=date_from, date_to=date_to)
    )

    csv_export_counter.labels(source="report").inc()
    filename = f"report-{date_from.isoformat()}-{date_to.isoformat()}.csv"
    return Response(
        content=render_transactions_csv(in_period),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
