from fastapi import FastAPI

from autorent.entrypoints.http.exception_handlers import register_exception_handlers
from autorent.entrypoints.http.routes.cars import router as cars_router
from autorent.entrypoints.http.routes.cart import router as cart_router
from autorent.entrypoints.http.routes.health import router as health_router
from autorent.entrypoints.http.routes.preferences import router as preferences_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="AutoRent API",
        description="""
        Storefront API for a car rental fleet.

        ## Features
        - Browse the catalog with search, filters, sorting and pagination
        - Car details
        - Cart with locked daily prices and checkout
        - Catalog page state kept per browsing session

        ## Identity
        No accounts. The cart belongs to the browser profile sent in
        `X-Profile-Id`; catalog state belongs to the session in `X-Session-Id`.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")
    app.include_router(cart_router, prefix="/v1")
    app.include_router(preferences_router, prefix="/v1")

    return app


app = build_app()
