from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import routes_cities, routes_health, routes_hotels, routes_search
from app.core.config import Settings, settings as default_settings
from app.core.logging import configure_logging
from app.services.catalog_service import CatalogService
from app.services.images import FallbackImageCache
from app.storage.repository import StaticHotelRepository


def create_app(settings: Settings = default_settings) -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    repository = StaticHotelRepository.from_files(
        settings.hotels_path, settings.cities_path
    )
    catalog = CatalogService(repository=repository, image_cache=FallbackImageCache())

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(routes_hotels.router, prefix="/hotels", tags=["hotels"])
    app.include_router(routes_cities.router, prefix="/cities", tags=["cities"])
    app.include_router(routes_search.router, prefix="/search", tags=["search"])

    # Inject catalog into state for dependencies
    app.state.catalog = catalog
    app.state.settings = settings
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
