"""
Application errors raised by use cases
"""

from uuid import UUID


class BankAccountNotFoundError(Exception):
    """Raised when a bank account id has no stored bank account"""
    
    def __init__(self, bank_account_id: UUID):
        self.bank_account_id = bank_account_id
        super().__init__(f"Bank account {bank_account_id} not found")
