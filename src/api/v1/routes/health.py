"""
API Routes: Health Check
"""

from fastapi import APIRouter, Depends

from api.v1.schemas import HealthResponse
from api.v1.dependencies import get_repository
from application.ports.bank_account_repository import IBankAccountRepository
from config import settings


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    repository: IBankAccountRepository = Depends(get_repository)
):
    """Health check endpoint"""
    
    repository_ok = await repository.health_check()
    
    return HealthResponse(
        status="healthy" if repository_ok else "degraded",
        service="bank-account-service",
        version="1.0.0",
        repository_backend=settings.REPOSITORY_BACKEND,
        repository_status="connected" if repository_ok else "unavailable"
    )
