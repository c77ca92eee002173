"""
Port: Bank Account Repository Interface
Defines contract for bank account persistence (in-memory, PostgreSQL, etc.)
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import BankAccount


class IBankAccountRepository(ABC):
    """
    Port interface for bank account persistence
    Following Hexagonal Architecture - this is the application layer port
    """
    
    @abstractmethod
    async def save(self, bank_account: BankAccount) -> None:
        """
        Persist a bank account together with its account holders
        
        Args:
            bank_account: Bank account entity to store
        """
        pass
    
    @abstractmethod
    async def find_by_id(self, bank_account_id: UUID) -> Optional[BankAccount]:
        """
        Retrieve a bank account by ID
        
        Args:
            bank_account_id: Bank account identifier
            
        Returns:
            Bank account with its account holders, or None if not stored
        """
        pass
    
    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check repository health
        
        Returns:
            True if the backend is reachable, False otherwise
        """
        pass
    
    @abstractmethod
    async def close(self):
        """
        Release backend resources
        """
        pass
