"""
FastAPI Application: Hexagonal Architecture
Main entry point for Bank Account Service API
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from api.v1.routes import health, bank_accounts
from api.v1.dependencies import get_repository, close_repository
from api.v1.schemas import ErrorResponse, ValidationErrorResponse, ViolationSchema
from api.v1.validation import violations_from_errors
from application.exceptions import BankAccountNotFoundError
from config import settings


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title="Bank Account Service API",
    description="Hexagonal architecture for bank account creation",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report constraint violations as (message, path) pairs"""
    violations = violations_from_errors(exc.errors())
    logger.info(
        "Rejected %s %s: %s",
        request.method,
        request.url.path,
        ", ".join(v.message for v in violations)
    )
    body = ValidationErrorResponse(
        errors=[ViolationSchema(message=v.message, path=v.property_path) for v in violations]
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


@app.exception_handler(BankAccountNotFoundError)
async def bank_account_not_found_handler(request: Request, exc: BankAccountNotFoundError):
    body = ErrorResponse(error="Bank account not found", detail=str(exc))
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump())


@app.on_event("startup")
async def startup_event():
    """Initialize repository on startup"""
    repository = await get_repository()
    if not await repository.health_check():
        logger.warning("Repository health check failed; requests may fail")


@app.on_event("shutdown")
async def shutdown_event():
    """Close repository on shutdown"""
    await close_repository()
    logger.info("Repository closed")


# Include routers
app.include_router(health.router, prefix="/api/v1", tags=["Health"])
app.include_router(bank_accounts.router, prefix="/api/v1", tags=["Bank Accounts"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Bank Account Service API",
        "version": "1.0.0",
        "architecture": "Hexagonal (Ports & Adapters)",
        "docs": "/docs",
        "health": "/api/v1/health"
    }


if __name__ == "__main__":
    # Run with uvicorn
    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=True,
        log_level=settings.LOG_LEVEL.lower()
    )
