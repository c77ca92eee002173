"""
Application Use Case: Get Bank Account
"""

import logging
from uuid import UUID

from application.exceptions import BankAccountNotFoundError
from application.ports.bank_account_repository import IBankAccountRepository
from domain.entities import BankAccount

logger = logging.getLogger(__name__)


class GetBankAccountUseCase:
    """Use case for looking up a bank account by ID"""
    
    def __init__(self, repository: IBankAccountRepository):
        self.repository = repository
    
    async def execute(self, bank_account_id: UUID) -> BankAccount:
        bank_account = await self.repository.find_by_id(bank_account_id)
        
        if bank_account is None:
            logger.warning("Bank account not found: %s", bank_account_id)
            raise BankAccountNotFoundError(bank_account_id)
        
        return bank_account
