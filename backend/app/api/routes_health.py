from fastapi import APIRouter, Depends

from app.api import get_catalog
from app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/health")
def healthcheck(catalog: CatalogService = Depends(get_catalog)) -> dict:
    return {"status": "ok", "hotels": len(catalog.repository.hotels())}
