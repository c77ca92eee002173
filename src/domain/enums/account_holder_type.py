"""Account Holder Type Enumeration

Defines the role an account holder plays on a bank account.
"""

from enum import Enum


class AccountHolderType(str, Enum):
    """Account holder classification
    
    PRIMARY: Holder who opened the account
    JOINT: Holder added to an existing account
    """
    
    PRIMARY = "PRIMARY"
    JOINT = "JOINT"
    
    def __str__(self) -> str:
        return self.value
