"""GET /api/dashboard/stats - Today's totals and recent activity"""

import time
from datetime import date
from fastapi import APIRouter, Depends, Request

from bizbooks.api.v1.schemas import DashboardStatsResponse, TransactionResponse
from bizbooks.api.dependencies import get_request_id, get_today, get_transaction_repository
from bizbooks.config import settings
from bizbooks.domain.ledger import compute_dashboard_stats
from bizbooks.infrastructure.database.repositories import TransactionRepository
from bizbooks.infrastructure.observability.logging import log_report_generated
from bizbooks.infrastructure.observability.metrics import report_duration_histogram

router = APIRouter()


@router.get("/dashboard/stats", response_model=DashboardStatsResponse)
def get_dashboard_stats(
    request: Request,
    today: date = Depends(get_today),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """
    Compute dashboard figures fresh from the full ledger.

    Returns:
        Today's revenue, expenses, net profit and count, plus the most
        recently recorded transactions
    """
    start_time = time.time()

    with report_duration_histogram.labels(report="dashboard").time():
        snapshot = repo.list_all()
        stats = compute_dashboard_stats(snapshot, today, settings.recent_transactions_limit)

    duration_ms = (time.time() - start_time) * 1000
    log_report_generated(get_request_id(request), "dashboard", len(snapshot), duration_ms)

    return DashboardStatsResponse(
        today_revenue=stats.today_revenue,
        today_expenses=stats.today_expenses,
        net_profit=stats.net_profit,
        transaction_count=stats.transaction_count,
        recent_transactions=[TransactionResponse.from_domain(t) for t in stats.recent_transactions],
    )
