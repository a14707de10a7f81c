import logging

from fastapi import FastAPI

from financing_core.entrypoints.http.exception_handlers import register_exception_handlers
from financing_core.entrypoints.http.routes.financing import router as financing_router
from financing_core.entrypoints.http.routes.health import router as health_router
from financing_core.infra.config import log_level


def build_app() -> FastAPI:
    logging.getLogger("financing_core").setLevel(log_level())

    app = FastAPI(
        title="Financing Core API",
        description="""
        Loan financing calculator: coefficient, direct rate, effective annual
        rate, total financial cost and installment values.

        ## Features
        - Uniform-rate (French amortization) method
        - Day-count (28/30 days over a 360-day year) method with per-installment detail
        - Side-by-side comparison of both methods

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(financing_router, prefix="/v1")

    return app


app = build_app()
