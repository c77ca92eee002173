"""
PostgreSQL Repository Adapter
Implements IBankAccountRepository port using asyncpg
"""

import logging
from typing import Optional
from uuid import UUID

import asyncpg
from asyncpg.pool import Pool

from application.ports.bank_account_repository import IBankAccountRepository
from domain.entities import AccountHolder, BankAccount
from domain.enums import AccountHolderType

logger = logging.getLogger(__name__)


class PostgresBankAccountRepository(IBankAccountRepository):
    """
    PostgreSQL adapter implementing IBankAccountRepository port
    Uses asyncpg for async database operations
    """
    
    def __init__(self, connection_string: str, min_pool_size: int = 5, max_pool_size: int = 20):
        """
        Initialize PostgreSQL adapter
        
        Args:
            connection_string: PostgreSQL connection string
            min_pool_size: Minimum connection pool size
            max_pool_size: Maximum connection pool size
        """
        self.connection_string = connection_string
        self.min_pool_size = min_pool_size
        self.max_pool_size = max_pool_size
        self.pool: Optional[Pool] = None
    
    async def connect(self):
        """
        Establish database connection pool
        Must be called before using the adapter
        """
        if self.pool is None:
            self.pool = await asyncpg.create_pool(
                self.connection_string,
                min_size=self.min_pool_size,
                max_size=self.max_pool_size,
                command_timeout=60
            )
            logger.info("PostgreSQL pool created (min=%d, max=%d)", self.min_pool_size, self.max_pool_size)
    
    async def save(self, bank_account: BankAccount) -> None:
        """
        Insert bank account and account holders in one transaction
        """
        if self.pool is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        
        account_query = """
            INSERT INTO bank_accounts (bank_account_id, date_of_opening)
            VALUES ($1, $2)
        """
        holder_query = """
            INSERT INTO account_holders (
                account_holder_id, bank_account_id, account_holder_name,
                date_of_birth, passport_number, account_holder_type, created_at
            ) VALUES (
                $1, $2, $3, $4, $5, $6, $7
            )
        """
        
        async with self.pool.acquire() as conn:
            async with conn.transaction():
                await conn.execute(
                    account_query,
                    bank_account.bank_account_id,
                    bank_account.date_of_opening
                )
                await conn.executemany(
                    holder_query,
                    [
                        (
                            holder.account_holder_id,
                            holder.bank_account_id,
                            holder.account_holder_name,
                            holder.date_of_birth,
                            holder.passport_number,
                            holder.account_holder_type.value,
                            holder.created_at
                        )
                        for holder in bank_account.account_holders
                    ]
                )
    
    async def find_by_id(self, bank_account_id: UUID) -> Optional[BankAccount]:
        """
        Retrieve bank account by ID
        """
        if self.pool is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        
        account_query = """
            SELECT bank_account_id, date_of_opening
            FROM bank_accounts
            WHERE bank_account_id = $1
        """
        holders_query = """
            SELECT 
                account_holder_id, bank_account_id, account_holder_name,
                date_of_birth, passport_number, account_holder_type, created_at
            FROM account_holders
            WHERE bank_account_id = $1
            ORDER BY created_at ASC
        """
        
        async with self.pool.acquire() as conn:
            account_row = await conn.fetchrow(account_query, bank_account_id)
            if account_row is None:
                return None
            holder_rows = await conn.fetch(holders_query, bank_account_id)
        
        return BankAccount(
            bank_account_id=account_row["bank_account_id"],
            date_of_opening=account_row["date_of_opening"],
            account_holders=[
                AccountHolder(
                    account_holder_id=row["account_holder_id"],
                    bank_account_id=row["bank_account_id"],
                    account_holder_name=row["account_holder_name"],
                    date_of_birth=row["date_of_birth"],
                    passport_number=row["passport_number"],
                    account_holder_type=AccountHolderType(row["account_holder_type"]),
                    created_at=row["created_at"]
                )
                for row in holder_rows
            ]
        )
    
    async def health_check(self) -> bool:
        """
        Check database connection health
        """
        if self.pool is None:
            return False
        
        try:
            async with self.pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except (asyncpg.PostgresError, OSError) as e:
            logger.warning("PostgreSQL health check failed: %s", e)
            return False
    
    async def close(self):
        """
        Close database connection pool
        """
        if self.pool is not None:
            await self.pool.close()
            self.pool = None
