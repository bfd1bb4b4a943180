from fastapi import HTTPException
from starlette.requests import Request

from app.services.catalog_service import CatalogService


def get_catalog(request: Request) -> CatalogService:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=500, detail="Catalog not initialized")
    return catalog
