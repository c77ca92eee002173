"""
Application Use Case: Create Bank Account
Opens a bank account for a single primary account holder
"""

import logging
import uuid
from datetime import date, datetime, timezone

from application.ports.bank_account_repository import IBankAccountRepository
from domain.entities import AccountHolder, BankAccount
from domain.enums import AccountHolderType

logger = logging.getLogger(__name__)


class CreateBankAccountUseCase:
    """Use case for opening bank accounts"""
    
    def __init__(self, repository: IBankAccountRepository):
        """Initialize use case with dependencies"""
        
        self.repository = repository
    
    async def execute(
        self,
        account_holder_name: str,
        date_of_birth: date,
        passport_number: str
    ) -> BankAccount:
        """
        Create and persist a bank account
        
        Input is expected to be validated already; see api.v1.schemas.
        
        Args:
            account_holder_name: Full name of the primary account holder
            date_of_birth: Date of birth of the primary account holder
            passport_number: Passport number of the primary account holder
        
        Returns:
            The stored bank account
        """
        
        bank_account_id = uuid.uuid4()
        date_of_opening = datetime.now(timezone.utc)
        
        bank_account = BankAccount(
            bank_account_id=bank_account_id,
            date_of_opening=date_of_opening
        )
        bank_account.add_account_holder(
            AccountHolder(
                account_holder_id=uuid.uuid4(),
                bank_account_id=bank_account_id,
                account_holder_name=account_holder_name,
                date_of_birth=date_of_birth,
                passport_number=passport_number,
                account_holder_type=AccountHolderType.PRIMARY,
                created_at=date_of_opening
            )
        )
        
        await self.repository.save(bank_account)
        logger.info("Bank account created: %s", bank_account_id)
        
        return bank_account
