"""Intent category listing."""

from fastapi import APIRouter

from src.api.models import CategoriesResponse
from src.config.constants import IntentCategory

router = APIRouter()


@router.get("/categories", response_model=CategoriesResponse)
async def categories() -> CategoriesResponse:
    """List the intent categories the classifier can return."""
    values = IntentCategory.values()
    return CategoriesResponse(categories=values, count=len(values))
