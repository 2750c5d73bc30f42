"""Suggested categories offered by the entry form"""

from typing import Dict, List, Optional

from bizbooks.domain.models import TransactionType

SUGGESTED_CATEGORIES: Dict[TransactionType, List[Dict[str, str]]] = {
    TransactionType.INCOME: [
        {"value": "sales", "label": "Product Sales"},
        {"value": "services", "label": "Services"},
        {"value": "refunds", "label": "Refunds Received"},
        {"value": "other-income", "label": "Other Income"},
    ],
    TransactionType.EXPENSE: [
        {"value": "inventory", "label": "Inventory"},
        {"value": "shipping", "label": "Shipping"},
        {"value": "marketing", "label": "Marketing"},
        {"value": "rent", "label": "Rent"},
        {"value": "utilities", "label": "Utilities"},
        {"value": "other-expense", "label": "Other Expense"},
    ],
}


def suggested_categories(txn_type: Optional[TransactionType] = None) -> List[Dict[str, str]]:
    """Suggestions for one transaction type, or for both when type is None"""
    if txn_type is not None:
        return [dict(c, type=txn_type.value) for c in SUGGESTED_CATEGORIES[txn_type]]
    return [
        dict(c, type=t.value)
        for t, categories in SUGGESTED_CATEGORIES.items()
        for c in categories
    ]
