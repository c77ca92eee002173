"""
In-Memory Repository Adapter
Implements IBankAccountRepository with a process-local dict
"""

import copy
from typing import Dict, Optional
from uuid import UUID

from application.ports.bank_account_repository import IBankAccountRepository
from domain.entities import BankAccount


class InMemoryBankAccountRepository(IBankAccountRepository):
    """
    Dict-backed adapter for local development and tests
    Stored entities are copied so callers cannot mutate repository state
    """
    
    def __init__(self):
        self._bank_accounts: Dict[UUID, BankAccount] = {}
    
    async def save(self, bank_account: BankAccount) -> None:
        self._bank_accounts[bank_account.bank_account_id] = copy.deepcopy(bank_account)
    
    async def find_by_id(self, bank_account_id: UUID) -> Optional[BankAccount]:
        bank_account = self._bank_accounts.get(bank_account_id)
        if bank_account is None:
            return None
        return copy.deepcopy(bank_account)
    
    async def health_check(self) -> bool:
        return True
    
    async def close(self):
        self._bank_accounts.clear()
    
    def __len__(self) -> int:
        return len(self._bank_accounts)
