"""
Tests for the in-memory repository adapter.
"""
import uuid
from datetime import datetime, timezone

import pytest

from domain.entities import AccountHolder, BankAccount
from domain.enums import AccountHolderType
from tests.helpers import JEFFERSON


@pytest.fixture
def bank_account() -> BankAccount:
    bank_account_id = uuid.uuid4()
    opened_at = datetime.now(timezone.utc)
    return BankAccount(
        bank_account_id=bank_account_id,
        date_of_opening=opened_at,
        account_holders=[
            AccountHolder(
                account_holder_id=uuid.uuid4(),
                bank_account_id=bank_account_id,
                account_holder_name=JEFFERSON.account_holder_name,
                date_of_birth=JEFFERSON.date_of_birth,
                passport_number=JEFFERSON.passport_number,
                account_holder_type=AccountHolderType.PRIMARY,
                created_at=opened_at,
            )
        ],
    )


class TestInMemoryBankAccountRepository:
    """Test InMemoryBankAccountRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, repository, bank_account):
        await repository.save(bank_account)

        assert await repository.find_by_id(bank_account.bank_account_id) == bank_account
        assert len(repository) == 1

    @pytest.mark.asyncio
    async def test_find_missing(self, repository):
        assert await repository.find_by_id(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_stored_copy_is_isolated(self, repository, bank_account):
        """Test that mutating returned or saved objects leaves storage intact."""
        await repository.save(bank_account)
        bank_account.account_holders.clear()

        found = await repository.find_by_id(bank_account.bank_account_id)
        found.account_holders.clear()

        stored = await repository.find_by_id(bank_account.bank_account_id)
        assert len(stored.account_holders) == 1

    @pytest.mark.asyncio
    async def test_health_check(self, repository):
        assert await repository.health_check() is True

    @pytest.mark.asyncio
    async def test_close_clears_storage(self, repository, bank_account):
        await repository.save(bank_account)

        await repository.close()

        assert len(repository) == 0
