"""Unit tests for CSV export"""

import csv
import io
from datetime import date
from bizbooks.domain.export import CSV_COLUMNS, render_transactions_csv
from bizbooks.domain.models import TransactionType


def test_csv_header_only_for_empty_list():
    assert render_transactions_csv([]) == "Date,Description,Category,Type,Amount\n"


def test_csv_row_layout(make_transaction):
    txn = make_transaction(1, TransactionType.EXPENSE, "45.5", date(2024, 1, 12), "Courier", "shipping")

    lines = render_transactions_csv([txn]).splitlines()

    assert lines[0] == ",".join(CSV_COLUMNS)
    assert lines[1] == "2024-01-12,Courier,shipping,expense,45.50"


def test_csv_quotes_delimiters_and_quotes(make_transaction):
    txn = make_transaction(1, description='Paper, pens and "premium" ink', category="office, misc")

    output = render_transactions_csv([txn])

    assert '"Paper, pens and ""premium"" ink"' in output
    assert '"office, misc"' in output

    # Round trip through a CSV reader recovers the original values
    rows = list(csv.reader(io.StringIO(output)))
    assert rows[1][1] == 'Paper, pens and "premium" ink'
    assert rows[1][2] == "office, misc"


def test_csv_preserves_given_order(sample_transactions):
    rows = list(csv.reader(io.StringIO(render_transactions_csv(sample_transactions))))

    assert [r[1] for r in rows[1:]] == [t.description for t in sample_transactions]
