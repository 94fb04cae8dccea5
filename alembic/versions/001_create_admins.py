"""create admins table

Revision ID: 001
Revises:
Create Date: 2023-10-30 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None

ADMIN_ROLES = ('SUPER_ADMIN', 'ADMIN', 'SUPPORT')
ADMIN_STATUSES = ('ACTIVE', 'SUSPENDED', 'INACTIVE')


def upgrade() -> None:
    bind = op.get_bind()
    is_sqlite = bind.dialect.name == 'sqlite'

    timestamp_default = sa.text("(datetime('now'))") if is_sqlite else sa.text('now()')

    op.create_table(
        'admins',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('role', sa.Enum(*ADMIN_ROLES, name='admin_role'), nullable=False, server_default='ADMIN'),
        sa.Column('status', sa.Enum(*ADMIN_STATUSES, name='admin_status'), nullable=False, server_default='ACTIVE'),
        sa.Column('permissions', sa.JSON(), nullable=True),
        sa.Column('login_attempts', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('locked_until', sa.DateTime(), nullable=True),
        sa.Column('last_login_at', sa.DateTime(), nullable=True),
        sa.Column('last_login_ip', sa.String(length=45), nullable=True),
        sa.Column('refresh_token', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=timestamp_default),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    # Login looks admins up by email on every attempt
    op.create_index('ix_admins_email', 'admins', ['email'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_admins_email', table_name='admins')
    op.drop_table('admins')

    bind = op.get_bind()
    if bind.dialect.name == 'postgresql':
        sa.Enum(name='admin_status').drop(bind, checkfirst=True)
        sa.Enum(name='admin_role').drop(bind, checkfirst=True)
