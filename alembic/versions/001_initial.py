"""Initial database schema for Bank Account Service.

Revision ID: 001_initial
Revises: 
Create Date: 2026-10-19

This migration creates the core tables:
- bank_accounts: One row per opened bank account
- account_holders: People holding a bank account (PRIMARY or JOINT)
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create initial schema with bank_accounts and account_holders tables."""
    
    op.create_table(
        'bank_accounts',
        sa.Column('bank_account_id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('date_of_opening', sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.text('NOW()')),
    )
    
    op.create_table(
        'account_holders',
        sa.Column('account_holder_id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('bank_account_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('account_holder_name', sa.String(255), nullable=False),
        sa.Column('date_of_birth', sa.Date, nullable=False),
        sa.Column('passport_number', sa.String(8), nullable=False),
        sa.Column('account_holder_type', sa.String(20), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.ForeignKeyConstraint(['bank_account_id'], ['bank_accounts.bank_account_id'], ondelete='CASCADE'),
        sa.CheckConstraint("account_holder_type IN ('PRIMARY', 'JOINT')", name='account_holders_type_check'),
        sa.CheckConstraint("char_length(passport_number) = 8", name='account_holders_passport_length_check')
    )
    
    op.create_index('idx_account_holders_bank_account_id', 'account_holders', ['bank_account_id'])
    op.create_index('idx_account_holders_passport_number', 'account_holders', ['passport_number'])
    
    op.execute("""
        COMMENT ON COLUMN account_holders.passport_number IS 'Fixed-length (8) passport number'
    """)


def downgrade() -> None:
    """Drop all tables."""
    
    op.drop_index('idx_account_holders_passport_number', table_name='account_holders')
    op.drop_index('idx_account_holders_bank_account_id', table_name='account_holders')
    
    op.drop_table('account_holders')
    op.drop_table('bank_accounts')
