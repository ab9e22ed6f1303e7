"""
This module creates and configures the main FastAPI application for the
Thai Agricultural Price API. It serves the commodity catalog and per-product
price analytics to the dashboard front end.

Tags:
    - fastapi
    - agricultural-prices
    - data-analysis
    - rest-api
    - mvc-architecture

Features:
    - Category overview and product catalog
    - Category listings with latest prices
    - Per-product summary statistics (latest, average, lowest, highest)
    - Calendar-windowed, down-sampled chart series
    - CORS-enabled for web applications

API Categories:
    - System Information: Health and API metadata
    - Catalog: Dashboard and category listings
    - Products: Product lookup, price summary and charts
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .controllers import agri_price_controller
from .config import app_config


def configure_logging() -> None:
    """Configure root logging from application settings."""
    logging.basicConfig(
        level=getattr(logging, app_config.logging.level.upper(), logging.INFO),
        format=app_config.logging.format
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application with CORS and all controllers mounted
        under /api.

    Routes:
        - /docs: Interactive Swagger UI documentation
        - /redoc: Alternative ReDoc documentation
        - /api/*: All agricultural price endpoints
    """
    configure_logging()

    app = FastAPI(
        title=app_config.api.title,
        description=app_config.api.description,
        version=app_config.api.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "System Information",
                "description": "API health, version info, and system status endpoints"
            },
            {
                "name": "Catalog",
                "description": "Dashboard overview, categories and category listings with latest prices"
            },
            {
                "name": "Products",
                "description": "Product lookup, summary statistics and chart-ready price history"
            }
        ]
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.api.allow_origins,
        allow_credentials=app_config.api.allow_credentials,
        allow_methods=app_config.api.allow_methods,
        allow_headers=app_config.api.allow_headers,
    )

    app.include_router(
        agri_price_controller.router,
        prefix="/api",
    )

    logging.getLogger(__name__).info(
        f"{app_config.api.title} v{app_config.api.version} serving data from {app_config.data_dir}")

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=app_config.api.host,
        port=app_config.api.port,
        reload=app_config.api.reload
    )
