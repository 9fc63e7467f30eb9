"""initial schema: roles, users, repair requests, catalog, support requests

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-10-01
"""
from __future__ import annotations
from alembic import op
import sqlalchemy as sa

revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def _soft_delete():
    return sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True)


def upgrade():
    op.create_table('roles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=64), nullable=False, unique=True),
        sa.Column('is_system', sa.Boolean(), nullable=True),
        sa.Column('description_i18n', sa.JSON(), nullable=True),
        *_timestamps(),
    )

    op.create_table('users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('last_name', sa.String(length=128), nullable=False),
        sa.Column('email', sa.String(length=128), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('locale', sa.String(length=8), nullable=True),
        *_timestamps(),
        _soft_delete(),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_deleted_at', 'users', ['deleted_at'])

    op.create_table('user_roles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('role_id', sa.Integer(), sa.ForeignKey('roles.id', ondelete='CASCADE'), nullable=False),
        sa.UniqueConstraint('user_id', 'role_id', name='uq_user_role'),
    )

    op.create_table('repair_requests',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('receipt_number', sa.String(length=15), nullable=False, unique=True),
        sa.Column('customer_name', sa.String(length=255), nullable=False),
        sa.Column('customer_phone', sa.String(length=64), nullable=False),
        sa.Column('customer_email', sa.String(length=255), nullable=False),
        sa.Column('article_name', sa.String(length=255), nullable=False),
        sa.Column('article_type', sa.String(length=255), nullable=False),
        sa.Column('article_brand', sa.String(length=255), nullable=False),
        sa.Column('article_model', sa.String(length=255), nullable=False),
        sa.Column('article_serialnumber', sa.String(length=255), nullable=True),
        sa.Column('article_accesories', sa.String(length=255), nullable=True),
        sa.Column('article_problem', sa.Text(), nullable=False),
        sa.Column('repair_status', sa.String(length=32), nullable=False),
        sa.Column('repair_details', sa.Text(), nullable=True),
        sa.Column('repair_price', sa.Numeric(10, 2), nullable=True),
        sa.Column('received_at', sa.Date(), nullable=False),
        sa.Column('repaired_at', sa.Date(), nullable=True),
        *_timestamps(),
        _soft_delete(),
    )
    op.create_index('ix_repair_requests_customer_name', 'repair_requests', ['customer_name'])
    op.create_index('ix_repair_requests_repair_status', 'repair_requests', ['repair_status'])
    op.create_index('ix_repair_requests_deleted_at', 'repair_requests', ['deleted_at'])

    op.create_table('categories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        _soft_delete(),
    )
    op.create_index('ix_categories_name', 'categories', ['name'])
    op.create_index('ix_categories_deleted_at', 'categories', ['deleted_at'])

    op.create_table('subcategories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id'), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        _soft_delete(),
    )
    op.create_index('ix_subcategories_category_id', 'subcategories', ['category_id'])
    op.create_index('ix_subcategories_deleted_at', 'subcategories', ['deleted_at'])

    op.create_table('articles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id'), nullable=False),
        sa.Column('subcategory_id', sa.Integer(), sa.ForeignKey('subcategories.id'), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        _soft_delete(),
    )
    op.create_index('ix_articles_category_id', 'articles', ['category_id'])
    op.create_index('ix_articles_subcategory_id', 'articles', ['subcategory_id'])
    op.create_index('ix_articles_name', 'articles', ['name'])
    op.create_index('ix_articles_deleted_at', 'articles', ['deleted_at'])

    op.create_table('support_requests',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('detail', sa.Text(), nullable=False),
        *_timestamps(),
        _soft_delete(),
    )
    op.create_index('ix_support_requests_user_id', 'support_requests', ['user_id'])
    op.create_index('ix_support_requests_deleted_at', 'support_requests', ['deleted_at'])


def downgrade():
    for tbl in ['support_requests', 'articles', 'subcategories', 'categories', 'repair_requests', 'user_roles', 'users', 'roles']:
        op.drop_table(tbl)
