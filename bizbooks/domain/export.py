"""CSV rendering of transaction lists"""

import csv
import io
from typing import Iterable

from bizbooks.domain.models import Transaction

CSV_COLUMNS = ["Date", "Description", "Category", "Type", "Amount"]


def render_transactions_csv(transactions: Iterable[Transaction]) -> str:
    """
    Render transactions as CSV in the order given.

    Fields containing a comma, quote or newline are quoted by the csv module;
    embedded quotes are doubled.
    """
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")

    # Header row
    writer.writerow(CSV_COLUMNS)

    # Data rows
    for txn in transactions:
        writer.writerow([
            txn.date.isoformat(),
            txn.description,
            txn.category,
            txn.type.value,
            f"{txn.amount:.2f}",
        ])

    return output.getvalue()
