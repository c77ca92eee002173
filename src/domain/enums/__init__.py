from .account_holder_type import AccountHolderType

__all__ = ["AccountHolderType"]
