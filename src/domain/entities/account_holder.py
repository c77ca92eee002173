"""
Domain Entity: AccountHolder
Represents a person holding a bank account
"""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from domain.enums import AccountHolderType


@dataclass
class AccountHolder:
    """Account holder entity"""
    
    account_holder_id: UUID
    bank_account_id: UUID
    account_holder_name: str
    date_of_birth: date
    passport_number: str
    account_holder_type: AccountHolderType
    created_at: datetime
    
    def is_primary(self) -> bool:
        """Check if this holder opened the account"""
        return self.account_holder_type == AccountHolderType.PRIMARY
    
    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "account_holder_id": str(self.account_holder_id),
            "bank_account_id": str(self.bank_account_id),
            "account_holder_name": self.account_holder_name,
            "date_of_birth": self.date_of_birth.isoformat(),
            "passport_number": self.passport_number,
            "account_holder_type": self.account_holder_type.value,
            "created_at": self.created_at.isoformat()
        }
