"""GET /api/export/transactions - CSV download of the filtered list"""

from fastapi import APIRouter, Depends, Response

from bizbooks.api.dependencies import get_transaction_filter, get_transaction_repository
from bizbooks.domain.export import render_transactions_csv
from bizbooks.domain.ledger import filter_transactions
from bizbooks.domain.models import TransactionFilter
from bizbooks.infrastructure.database.repositories import TransactionRepository
from bizbooks.infrastructure.observability.metrics import csv_export_counter

router = APIRouter()


@router.get("/export/transactions")
def export_transactions(
    filters: TransactionFilter = Depends(get_transaction_filter),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """Same filters and order as GET /api/transactions, rendered as CSV"""
    matches = filter_transactions(repo.list_all(), filters)

    csv_export_counter.labels(source="transactions").inc()
    return Response(
        content=render_transactions_csv(matches),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="transactions.csv"'},
    )
