"""
API Dependencies: Dependency Injection Container
"""

import logging

from fastapi import Depends

from application.ports.bank_account_repository import IBankAccountRepository
from application.use_cases import CreateBankAccountUseCase, GetBankAccountUseCase
from infrastructure.database.in_memory_adapter import InMemoryBankAccountRepository
from infrastructure.database.postgres_adapter import PostgresBankAccountRepository
from config import settings

logger = logging.getLogger(__name__)


# Global repository instance for connection pooling
_repository_instance: IBankAccountRepository | None = None


async def get_repository() -> IBankAccountRepository:
    """Get repository implementation selected by REPOSITORY_BACKEND"""
    global _repository_instance
    
    if _repository_instance is None:
        if settings.REPOSITORY_BACKEND == "postgres":
            repository = PostgresBankAccountRepository(
                connection_string=settings.DATABASE_URL,
                min_pool_size=settings.DATABASE_MIN_SIZE,
                max_pool_size=settings.DATABASE_MAX_SIZE
            )
            await repository.connect()
        elif settings.REPOSITORY_BACKEND == "memory":
            repository = InMemoryBankAccountRepository()
        else:
            raise ValueError(
                f"Invalid REPOSITORY_BACKEND: {settings.REPOSITORY_BACKEND}. Must be 'memory' or 'postgres'"
            )
        
        logger.info("Using %s bank account repository", settings.REPOSITORY_BACKEND)
        _repository_instance = repository
    
    return _repository_instance


async def close_repository():
    """Close repository and release backend resources"""
    global _repository_instance
    
    if _repository_instance is not None:
        await _repository_instance.close()
        _repository_instance = None


def get_create_bank_account_use_case(
    repository: IBankAccountRepository = Depends(get_repository)
) -> CreateBankAccountUseCase:
    """Get create bank account use case with injected repository"""
    return CreateBankAccountUseCase(repository=repository)


def get_get_bank_account_use_case(
    repository: IBankAccountRepository = Depends(get_repository)
) -> GetBankAccountUseCase:
    """Get bank account lookup use case with injected repository"""
    return GetBankAccountUseCase(repository=repository)
