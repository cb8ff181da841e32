"""
Accounts API - application entry point
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from accounts.common.config import settings
from accounts.common.database import db_manager
from accounts.common.exceptions import ServiceError, ValidationError
from accounts.common.logging_config import setup_logging
from accounts.common.responses import internal_error_response, service_error_response
from accounts.domains.user.api import router as user_router
from accounts.domains.user.validation import errors_to_dict, from_request_errors

setup_logging(log_level=settings.log_level, log_dir=settings.log_dir)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database and make sure the tables exist"""
    logger.info(f"🚀 {settings.app_name} starting ({settings.environment})...")
    await db_manager.initialize()
    await db_manager.create_tables()
    logger.info("✅ Database initialization completed")

    yield

    logger.info("Application shutting down...")
    await db_manager.dispose()


app = FastAPI(
    title=settings.app_name,
    description="User account management: create, update, delete, list, authenticate",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Errors raised outside a route body, e.g. by the bearer auth dependency"""
    return service_error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = errors_to_dict(from_request_errors(exc.errors()))
    logger.info(f"Rejected {request.method} {request.url.path}: {errors}")
    return service_error_response(ValidationError(errors))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Failures outside a route body, e.g. the database going away mid-auth"""
    logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=True)
    return internal_error_response(exc)


@app.get("/health")
async def health_check():
    """Health check"""
    return {
        "status": "healthy",
        "database": "connected" if db_manager.available else "disconnected",
    }


app.include_router(user_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
