"""
Initial schema: one table per service.

customers, tenants, licenses, notifications, users and payments, with the
lookup indexes each service queries by.
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'initial_schema_20261018'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_date', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_date', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'customers',
        sa.Column('customer_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        'tenants',
        sa.Column('tenant_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('name', name='uq_tenants_name'),
    )
    op.create_table(
        'licenses',
        sa.Column('license_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('name', name='uq_licenses_name'),
    )
    op.create_table(
        'notifications',
        sa.Column('notification_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False, server_default='Unread'),
        *_timestamps(),
    )
    op.create_index('idx_notifications_status', 'notifications', ['status'])

    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=50), nullable=False, server_default='User'),
        sa.Column('tenant_id', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('username', name='uq_users_username'),
    )
    op.create_index('idx_users_tenant_id', 'users', ['tenant_id'])

    op.create_table(
        'payments',
        sa.Column('payment_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('license_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(18, 2), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False, server_default='USD'),
        sa.Column('payment_date', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('status', sa.String(length=50), nullable=False, server_default='Pending'),
        sa.Column('payment_method', sa.String(length=50), nullable=False),
        sa.Column('transaction_reference', sa.String(length=100), nullable=True),
        sa.Column('description', sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('amount > 0', name='ck_payments_amount_positive'),
    )
    op.create_index('idx_payments_license_id', 'payments', ['license_id'])
    op.create_index('idx_payments_status', 'payments', ['status'])
    op.create_index('idx_payments_payment_date', 'payments', ['payment_date'])
    op.create_index('idx_payments_transaction_reference', 'payments', ['transaction_reference'])
    # Idempotency: a non-null reference identifies at most one payment
    op.create_index(
        'uq_payments_transaction_reference',
        'payments',
        ['transaction_reference'],
        unique=True,
        postgresql_where=sa.text('transaction_reference IS NOT NULL'),
        sqlite_where=sa.text('transaction_reference IS NOT NULL'),
    )


def downgrade() -> None:
    op.drop_index('uq_payments_transaction_reference', table_name='payments')
    op.drop_index('idx_payments_transaction_reference', table_name='payments')
    op.drop_index('idx_payments_payment_date', table_name='payments')
    op.drop_index('idx_payments_status', table_name='payments')
    op.drop_index('idx_payments_license_id', table_name='payments')
    op.drop_table('payments')
    op.drop_index('idx_users_tenant_id', table_name='users')
    op.drop_table('users')
    op.drop_index('idx_notifications_status', table_name='notifications')
    op.drop_table('notifications')
    op.drop_table('licenses')
    op.drop_table('tenants')
    op.drop_table('customers')
