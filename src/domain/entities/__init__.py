from .account_holder import AccountHolder
from .bank_account import BankAccount

__all__ = ["AccountHolder", "BankAccount"]
