from .create_bank_account import CreateBankAccountUseCase
from .get_bank_account import GetBankAccountUseCase

__all__ = ["CreateBankAccountUseCase", "GetBankAccountUseCase"]
