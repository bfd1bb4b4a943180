from fastapi import APIRouter, Depends

from app.api import get_catalog
from app.models.schemas import CitySuggestionsResponse
from app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("", response_model=CitySuggestionsResponse)
def suggest_cities(
    q: str = "", catalog: CatalogService = Depends(get_catalog)
) -> CitySuggestionsResponse:
    if not q.strip():
        return CitySuggestionsResponse(query=q, suggestions=[])
    return CitySuggestionsResponse(query=q, suggestions=catalog.search_city_names(q))
