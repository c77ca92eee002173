"""
Domain Entity: BankAccount
Represents a bank account and the people holding it
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from .account_holder import AccountHolder


@dataclass
class BankAccount:
    """Bank account entity"""
    
    bank_account_id: UUID
    date_of_opening: datetime
    account_holders: list[AccountHolder] = field(default_factory=list)
    
    def add_account_holder(self, account_holder: AccountHolder):
        """Attach an account holder to this bank account"""
        if account_holder.bank_account_id != self.bank_account_id:
            raise ValueError(
                f"Account holder {account_holder.account_holder_id} belongs to "
                f"bank account {account_holder.bank_account_id}"
            )
        self.account_holders.append(account_holder)
    
    def primary_account_holder(self) -> Optional[AccountHolder]:
        """Get the holder who opened the account"""
        return next((h for h in self.account_holders if h.is_primary()), None)
    
    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "bank_account_id": str(self.bank_account_id),
            "date_of_opening": self.date_of_opening.isoformat(),
            "account_holders": [h.to_dict() for h in self.account_holders]
        }
