"""GET /api/categories - Suggested categories for the entry form"""

from typing import List, Optional
from fastapi import APIRouter, Query

from bizbooks.api.v1.schemas import SuggestedCategory
from bizbooks.domain.categories import suggested_categories
from bizbooks.domain.models import TransactionType

router = APIRouter()


@router.get("/categories", response_model=List[SuggestedCategory])
def list_categories(type: Optional[TransactionType] = Query(None, description="income or expense")):
    return [SuggestedCategory(**c) for c in suggested_categories(type)]
