"""FastAPI application setup."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from folio.api.deps import limiter
from folio.api.routes import brokers, portfolio
from folio.config import PRODUCT_NAME, PRODUCT_TAGLINE, PRODUCT_VERSION, PRODUCT_DESCRIPTION
from folio.core.brokers import BrokerNotFoundError, BrokerValidationError
from folio.db.database import init_db

logger = logging.getLogger(__name__)

app = FastAPI(
    title=f"{PRODUCT_NAME} API",
    description=PRODUCT_DESCRIPTION,
    version=PRODUCT_VERSION,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


# Error responses all share the {"error": ..., "details": ...} shape

@app.exception_handler(BrokerValidationError)
def handle_validation_error(request: Request, exc: BrokerValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request", "details": str(exc.errors())},
    )


@app.exception_handler(BrokerNotFoundError)
def handle_not_found_error(request: Request, exc: BrokerNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})


@app.exception_handler(Exception)
def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "details": str(exc)},
    )


@app.on_event("startup")
def startup():
    """Initialize database on startup."""
    init_db()


@app.get("/api/health")
def health():
    """Health check endpoint."""
    return {
        "name": PRODUCT_NAME,
        "version": PRODUCT_VERSION,
        "status": "ok",
        "tagline": PRODUCT_TAGLINE,
    }


# Mount API routers
app.include_router(brokers.router, prefix="/api", tags=["brokers"])
app.include_router(portfolio.router, prefix="/api/portfolio", tags=["portfolio"])
