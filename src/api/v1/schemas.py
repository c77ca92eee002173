"""
API Schemas: Pydantic models for request/response validation

Request constraint violations carry a machine-readable message key
(e.g. ``accountHolder.passportNumber.invalidLength``) instead of prose,
so clients can localise them.
"""

from datetime import date, datetime
from typing import Optional, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from config import ACCOUNT_HOLDER_NAME_MAX_LENGTH, PASSPORT_NUMBER_LENGTH
from domain.entities import AccountHolder, BankAccount


class AccountHolderRequest(BaseModel):
    """Account holder details for a new bank account"""
    
    # Absent fields count as null, so validators must also run on defaults
    model_config = ConfigDict(frozen=True, validate_default=True)
    
    accountHolderName: Optional[str] = Field(None, description="Full name (max 255 characters)")
    dateOfBirth: Optional[date] = Field(None, description="Date of birth (YYYY-MM-DD), strictly in the past")
    passportNumber: Optional[str] = Field(None, description="Passport number (exactly 8 characters)")
    
    @field_validator("accountHolderName")
    @classmethod
    def check_account_holder_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            raise PydanticCustomError("not_blank", "accountHolder.accountHolderName.notBlank")
        if len(value) > ACCOUNT_HOLDER_NAME_MAX_LENGTH:
            raise PydanticCustomError("too_long", "accountHolder.accountHolderName.tooLong")
        return value
    
    @field_validator("dateOfBirth")
    @classmethod
    def check_date_of_birth(cls, value: Optional[date]) -> Optional[date]:
        if value is None:
            raise PydanticCustomError("not_null", "accountHolder.dateOfBirth.notNull")
        if value >= date.today():
            raise PydanticCustomError("past", "accountHolder.dateOfBirth.past")
        return value
    
    @field_validator("passportNumber")
    @classmethod
    def check_passport_number(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            raise PydanticCustomError("not_null", "accountHolder.passportNumber.notNull")
        if len(value) != PASSPORT_NUMBER_LENGTH:
            raise PydanticCustomError("invalid_length", "accountHolder.passportNumber.invalidLength")
        return value


class CreateBankAccountRequest(BaseModel):
    """Request schema for bank account creation"""
    
    model_config = ConfigDict(frozen=True, validate_default=True)
    
    accountHolder: Optional[AccountHolderRequest] = Field(None, description="Primary account holder")
    
    @field_validator("accountHolder")
    @classmethod
    def check_account_holder(cls, value: Optional[AccountHolderRequest]) -> Optional[AccountHolderRequest]:
        if value is None:
            raise PydanticCustomError("not_null", "bankAccount.accountHolder.notNull")
        return value


class AccountHolderResponse(BaseModel):
    """Account holder schema"""
    
    accountHolderId: UUID
    accountHolderName: str
    dateOfBirth: date
    passportNumber: str
    accountHolderType: str
    createdAt: datetime
    
    @classmethod
    def from_entity(cls, account_holder: AccountHolder) -> "AccountHolderResponse":
        return cls(
            accountHolderId=account_holder.account_holder_id,
            accountHolderName=account_holder.account_holder_name,
            dateOfBirth=account_holder.date_of_birth,
            passportNumber=account_holder.passport_number,
            accountHolderType=account_holder.account_holder_type.value,
            createdAt=account_holder.created_at
        )


class BankAccountResponse(BaseModel):
    """Response schema for bank account endpoints"""
    
    bankAccountId: UUID
    dateOfOpening: datetime
    accountHolders: List[AccountHolderResponse] = Field(default_factory=list)
    
    @classmethod
    def from_entity(cls, bank_account: BankAccount) -> "BankAccountResponse":
        return cls(
            bankAccountId=bank_account.bank_account_id,
            dateOfOpening=bank_account.date_of_opening,
            accountHolders=[AccountHolderResponse.from_entity(h) for h in bank_account.account_holders]
        )


class ViolationSchema(BaseModel):
    """Single constraint violation"""
    
    message: str = Field(..., description="Message key, e.g. accountHolder.dateOfBirth.past")
    path: str = Field(..., description="Dotted property path, e.g. accountHolder.dateOfBirth")


class ValidationErrorResponse(BaseModel):
    """Response schema for rejected requests"""
    
    errors: List[ViolationSchema]


class HealthResponse(BaseModel):
    """Health check response"""
    
    status: str
    service: str
    version: str
    repository_backend: str
    repository_status: str


class ErrorResponse(BaseModel):
    """Error response schema"""
    
    success: bool = False
    error: str
    detail: Optional[str] = None
