"""
FastAPI application initialization
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from api.routes import health, customers, orders, products, users
from api.middleware import RequestContextMiddleware
from core.config import settings
from core.exceptions import DataAccessError
from core.logging import setup_logging
from schemas.api import ErrorResponse
import logging

setup_logging()

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Storefront SQL API",
    description="Customers, orders, products and users over plain SQL",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(RequestContextMiddleware)


# Include routers
app.include_router(health.router)
app.include_router(customers.router)
app.include_router(orders.router)
app.include_router(products.router)
app.include_router(users.router)


@app.exception_handler(DataAccessError)
async def data_access_error_handler(request: Request, exc: DataAccessError):
    """Any failed statement becomes a generic 500; details stay in the log."""
    request_id = getattr(request.state, "request_id", None)
    logger.error(f"[{request_id}] {request.method} {request.url.path} failed: {exc.to_dict()}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(request_id=request_id).model_dump(),
    )


@app.on_event("startup")
async def startup_event():
    """Application startup event"""
    logger.info("Starting Storefront SQL API")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Database: {settings.DATABASE_URL.split('@')[1] if '@' in settings.DATABASE_URL else 'configured'}")


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown event"""
    logger.info("Shutting down Storefront SQL API")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Storefront SQL API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
        "endpoints": {
            "customers": "/api/customers",
            "orders": "/api/orders",
            "products": "/api/products",
            "users": "/api/users"
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=settings.API_HOST, port=settings.API_PORT)
