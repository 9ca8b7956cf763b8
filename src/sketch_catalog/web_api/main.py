"""
FastAPI Application
===================
Main entry point for the Sketch Catalog API.

Run with:
    uvicorn sketch_catalog.web_api.main:app --reload
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sketch_catalog import __version__
from sketch_catalog.assets import ThumbnailAssets
from sketch_catalog.catalog import CatalogAggregator
from sketch_catalog.web_api.config import Settings, settings
from sketch_catalog.web_api.routers import curation, health, sketches


def create_app(
    catalog: Optional[CatalogAggregator] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the application.

    An injected *catalog* is used as-is and left open on shutdown; otherwise
    one is built from *app_settings* and closed with the app.
    """
    cfg = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = catalog is None
        app.state.catalog = catalog or CatalogAggregator(
            cfg.catalog_config(),
            assets=ThumbnailAssets.from_directory(cfg.THUMBNAIL_DIR),
        )
        try:
            yield
        finally:
            if owned:
                await app.state.catalog.aclose()

    application = FastAPI(
        title="Sketch Catalog API",
        description="Curated OpenProcessing sketch metadata",
        version=__version__,
        docs_url="/docs" if cfg.DEBUG else None,
        redoc_url="/redoc" if cfg.DEBUG else None,
        lifespan=lifespan,
    )

    # CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    application.include_router(health.router, tags=["Health"])
    application.include_router(curation.router, prefix="/curation", tags=["Curation"])
    application.include_router(sketches.router, prefix="/sketches", tags=["Sketches"])

    @application.get("/")
    async def root():
        """Root endpoint - API info"""
        return {
            "name": "Sketch Catalog API",
            "version": __version__,
            "docs": "/docs" if cfg.DEBUG else "disabled",
        }

    return application


app = create_app()


# For running directly: python -m sketch_catalog.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
