"""
API Routes: Bank Accounts
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from api.v1.schemas import (
    BankAccountResponse,
    CreateBankAccountRequest,
    ErrorResponse,
    ValidationErrorResponse,
)
from api.v1.dependencies import get_create_bank_account_use_case, get_get_bank_account_use_case
from application.use_cases import CreateBankAccountUseCase, GetBankAccountUseCase


router = APIRouter()


@router.post(
    "/bank-accounts",
    response_model=BankAccountResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}}
)
async def create_bank_account(
    request: CreateBankAccountRequest,
    response: Response,
    use_case: CreateBankAccountUseCase = Depends(get_create_bank_account_use_case)
):
    """
    Open a bank account for a primary account holder
    
    Constraint violations are returned as 400 with one entry per field:
    - accountHolder: bankAccount.accountHolder.notNull
    - accountHolder.accountHolderName: notBlank, tooLong (max 255)
    - accountHolder.dateOfBirth: notNull, past
    - accountHolder.passportNumber: notNull, invalidLength (exactly 8)
    """
    
    account_holder = request.accountHolder
    bank_account = await use_case.execute(
        account_holder_name=account_holder.accountHolderName,
        date_of_birth=account_holder.dateOfBirth,
        passport_number=account_holder.passportNumber
    )
    
    response.headers["Location"] = f"/api/v1/bank-accounts/{bank_account.bank_account_id}"
    return BankAccountResponse.from_entity(bank_account)


@router.get(
    "/bank-accounts/{bank_account_id}",
    response_model=BankAccountResponse,
    responses={404: {"model": ErrorResponse}}
)
async def get_bank_account(
    bank_account_id: UUID,
    use_case: GetBankAccountUseCase = Depends(get_get_bank_account_use_case)
):
    """Look up a bank account and its account holders"""
    
    bank_account = await use_case.execute(bank_account_id)
    return BankAccountResponse.from_entity(bank_account)
