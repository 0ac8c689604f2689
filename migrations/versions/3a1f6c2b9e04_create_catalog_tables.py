"""Create catalog tables

Revision ID: 3a1f6c2b9e04
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a1f6c2b9e04'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'products',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('image', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('old_price', sa.Float(), nullable=True),
        sa.Column('credit', sa.Float(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('advantages', sa.Text(), nullable=False),
        sa.Column('dis_advantages', sa.Text(), nullable=False),
        sa.Column('categories', sa.JSON(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('characteristics', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'reviews',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('author_name', sa.String(length=30), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.String(length=24), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_reviews_product_id', 'reviews', ['product_id'])

    op.create_table(
        'top_pages',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('first_category', sa.Integer(), nullable=False),
        sa.Column('second_category', sa.String(), nullable=False),
        sa.Column('alias', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('meta_title', sa.String(), nullable=False),
        sa.Column('meta_description', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('hh', sa.JSON(), nullable=True),
        sa.Column('advantages', sa.JSON(), nullable=False),
        sa.Column('seo_text', sa.Text(), nullable=True),
        sa.Column('tags_title', sa.String(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_top_pages_alias', 'top_pages', ['alias'], unique=True)
    op.create_index('ix_top_pages_first_category', 'top_pages', ['first_category'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_top_pages_first_category', table_name='top_pages')
    op.drop_index('ix_top_pages_alias', table_name='top_pages')
    op.drop_table('top_pages')
    op.drop_index('ix_reviews_product_id', table_name='reviews')
    op.drop_table('reviews')
    op.drop_table('products')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
