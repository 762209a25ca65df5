"""create_firm_isolation_schema

Revision ID: 3f1c9a7e2b40
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7e2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create users, firms, assignments and the firm-owned entities."""
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('user_type', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('preferred_language', sa.String(), nullable=False, server_default='en'),
        sa.Column('timezone', sa.String(), nullable=False, server_default='UTC'),
        *_timestamps(),
    )
    op.create_index('ix_user_id', 'user', ['id'])
    op.create_index('ix_user_username', 'user', ['username'], unique=True)
    op.create_index('ix_user_email', 'user', ['email'], unique=True)

    op.create_table(
        'firm',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('contact_email', sa.String(), nullable=True),
        sa.Column('contact_phone', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_firm_id', 'firm', ['id'])

    op.create_table(
        'firm_assignment',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user.id', ondelete='CASCADE'), nullable=False),
        sa.Column('firm_id', sa.Integer(), sa.ForeignKey('firm.id'), nullable=False),
        sa.Column('role', sa.String(), nullable=False),
        sa.Column('access_level', sa.String(), nullable=False, server_default='standard'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('assigned_by', sa.Integer(), sa.ForeignKey('user.id'), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('user_id', 'firm_id', name='uq_firm_assignment_user_firm'),
    )
    op.create_index('ix_firm_assignment_id', 'firm_assignment', ['id'])
    op.create_index('ix_firm_assignment_user_id', 'firm_assignment', ['user_id'])
    op.create_index('ix_firm_assignment_firm_id', 'firm_assignment', ['firm_id'])

    op.create_table(
        'owner',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('firm_id', sa.Integer(), sa.ForeignKey('firm.id'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user.id'), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_owner_id', 'owner', ['id'])
    op.create_index('ix_owner_firm_id', 'owner', ['firm_id'])

    op.create_table(
        'property',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('firm_id', sa.Integer(), sa.ForeignKey('firm.id'), nullable=False),
        sa.Column('owner_id', sa.Integer(), sa.ForeignKey('owner.id'), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('property_type', sa.String(), nullable=True),
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('city', sa.String(), nullable=True),
        sa.Column('total_units', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_property_id', 'property', ['id'])
    op.create_index('ix_property_firm_id', 'property', ['firm_id'])

    op.create_table(
        'tenant',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('firm_id', sa.Integer(), sa.ForeignKey('firm.id'), nullable=False),
        sa.Column('property_id', sa.Integer(), sa.ForeignKey('property.id'), nullable=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user.id'), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_tenant_id', 'tenant', ['id'])
    op.create_index('ix_tenant_firm_id', 'tenant', ['firm_id'])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table('tenant')
    op.drop_table('property')
    op.drop_table('owner')
    op.drop_table('firm_assignment')
    op.drop_table('firm')
    op.drop_table('user')
