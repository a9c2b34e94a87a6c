"""initial_schema

Revision ID: 5f2c8a1d9e30
Revises:
Create Date: 2026-10-19 10:12:31.402117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5f2c8a1d9e30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def _exactly_one(*columns: str) -> str:
    return " + ".join(f"(CASE WHEN {c} IS NOT NULL THEN 1 ELSE 0 END)" for c in columns) + " = 1"


def upgrade() -> None:
    op.create_table('users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=32), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
        sa.UniqueConstraint('email'),
    )
    op.create_table('user_profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('profile_image_url', sa.String(length=512), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('gender', sa.String(length=32), nullable=False),
        sa.Column('biography', sa.String(length=256), nullable=False),
        sa.Column('location', sa.String(length=64), nullable=False),
        sa.Column('occupation', sa.String(length=64), nullable=True),
        sa.Column('education', sa.String(length=64), nullable=True),
        sa.Column('interests', sa.String(length=512), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )
    op.create_table('books',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('author', sa.String(length=255), nullable=False),
        sa.Column('isbn', sa.String(length=13), nullable=False),
        sa.Column('page_count', sa.Integer(), nullable=False),
        sa.Column('publish_date', sa.Date(), nullable=False),
        sa.Column('genre', sa.String(length=32), nullable=False),
        sa.Column('summary', sa.Text(), nullable=True),
        sa.Column('cover_image_url', sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('page_count > 0', name='ck_books_page_count_positive'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('isbn'),
    )
    op.create_table('book_sales',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('book_id', sa.Uuid(), nullable=False),
        sa.Column('sales_code', sa.String(length=7), nullable=False),
        sa.Column('publisher', sa.String(length=64), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('stock_quantity', sa.Integer(), nullable=False),
        sa.Column('currency', sa.String(length=8), nullable=False),
        sa.Column('discount', sa.Float(), nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('price > 0', name='ck_book_sales_price_positive'),
        sa.CheckConstraint('stock_quantity >= 0', name='ck_book_sales_stock_non_negative'),
        sa.CheckConstraint('discount >= 0 AND discount <= 100', name='ck_book_sales_discount_range'),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('sales_code'),
    )
    op.create_index('ix_book_sales_book_id', 'book_sales', ['book_id'])
    op.create_table('book_interactions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('book_id', sa.Uuid(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        sa.Column('is_liked', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('is_read OR NOT is_liked', name='ck_book_interactions_liked_requires_read'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_book_interactions_user_id', 'book_interactions', ['user_id'])
    op.create_index('ix_book_interactions_book_id', 'book_interactions', ['book_id'])
    op.create_table('reviews',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('book_id', sa.Uuid(), nullable=False),
        sa.Column('review_text', sa.Text(), nullable=False),
        sa.Column('rating', sa.Numeric(precision=2, scale=1), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('rating >= 1.0 AND rating <= 5.0', name='ck_reviews_rating_range'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_reviews_user_id', 'reviews', ['user_id'])
    op.create_index('ix_reviews_book_id', 'reviews', ['book_id'])
    op.create_table('quotes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('book_id', sa.Uuid(), nullable=False),
        sa.Column('quote_text', sa.Text(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_quotes_user_id', 'quotes', ['user_id'])
    op.create_index('ix_quotes_book_id', 'quotes', ['book_id'])
    op.create_table('messages',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('sender_id', sa.Uuid(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('message_type', sa.String(length=32), nullable=False),
        sa.Column('receiver_id', sa.Uuid(), nullable=True),
        sa.Column('book_interaction_id', sa.Uuid(), nullable=True),
        sa.Column('review_id', sa.Uuid(), nullable=True),
        sa.Column('quote_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "(message_type = 'PERSONAL' AND receiver_id IS NOT NULL AND book_interaction_id IS NULL"
            " AND review_id IS NULL AND quote_id IS NULL)"
            " OR (message_type = 'BOOK' AND book_interaction_id IS NOT NULL AND receiver_id IS NULL"
            " AND review_id IS NULL AND quote_id IS NULL)"
            " OR (message_type = 'REVIEW' AND review_id IS NOT NULL AND receiver_id IS NULL"
            " AND book_interaction_id IS NULL AND quote_id IS NULL)"
            " OR (message_type = 'QUOTE' AND quote_id IS NOT NULL AND receiver_id IS NULL"
            " AND book_interaction_id IS NULL AND review_id IS NULL)",
            name='ck_messages_single_target',
        ),
        sa.ForeignKeyConstraint(['sender_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['receiver_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['book_interaction_id'], ['book_interactions.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['review_id'], ['reviews.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['quote_id'], ['quotes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_messages_sender_id', 'messages', ['sender_id'])
    op.create_table('follows',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('follower_id', sa.Uuid(), nullable=False),
        sa.Column('followed_user_id', sa.Uuid(), nullable=True),
        sa.Column('followed_book_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(_exactly_one('followed_user_id', 'followed_book_id'), name='ck_follows_single_target'),
        sa.CheckConstraint('followed_user_id IS NULL OR followed_user_id <> follower_id', name='ck_follows_not_self'),
        sa.ForeignKeyConstraint(['follower_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['followed_user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['followed_book_id'], ['books.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('follower_id', 'followed_user_id', name='uq_follows_follower_user'),
        sa.UniqueConstraint('follower_id', 'followed_book_id', name='uq_follows_follower_book'),
    )
    op.create_index('ix_follows_follower_id', 'follows', ['follower_id'])
    op.create_index('ix_follows_followed_user_id', 'follows', ['followed_user_id'])
    op.create_index('ix_follows_followed_book_id', 'follows', ['followed_book_id'])
    op.create_table('likes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('message_id', sa.Uuid(), nullable=True),
        sa.Column('book_interaction_id', sa.Uuid(), nullable=True),
        sa.Column('review_id', sa.Uuid(), nullable=True),
        sa.Column('quote_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            _exactly_one('message_id', 'book_interaction_id', 'review_id', 'quote_id'),
            name='ck_likes_single_target',
        ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['message_id'], ['messages.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['book_interaction_id'], ['book_interactions.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['review_id'], ['reviews.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['quote_id'], ['quotes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'message_id', name='uq_likes_user_message'),
        sa.UniqueConstraint('user_id', 'book_interaction_id', name='uq_likes_user_book_interaction'),
        sa.UniqueConstraint('user_id', 'review_id', name='uq_likes_user_review'),
        sa.UniqueConstraint('user_id', 'quote_id', name='uq_likes_user_quote'),
    )
    op.create_index('ix_likes_user_id', 'likes', ['user_id'])
    op.create_table('repost_saves',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('action_type', sa.String(length=16), nullable=False),
        sa.Column('review_id', sa.Uuid(), nullable=True),
        sa.Column('quote_id', sa.Uuid(), nullable=True),
        sa.Column('book_interaction_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            _exactly_one('review_id', 'quote_id', 'book_interaction_id'),
            name='ck_repost_saves_single_target',
        ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['review_id'], ['reviews.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['quote_id'], ['quotes.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['book_interaction_id'], ['book_interactions.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'review_id', 'action_type', name='uq_repost_saves_user_review_action'),
        sa.UniqueConstraint('user_id', 'quote_id', 'action_type', name='uq_repost_saves_user_quote_action'),
        sa.UniqueConstraint(
            'user_id', 'book_interaction_id', 'action_type', name='uq_repost_saves_user_book_interaction_action'
        ),
    )
    op.create_index('ix_repost_saves_user_id', 'repost_saves', ['user_id'])


def downgrade() -> None:
    op.drop_index('ix_repost_saves_user_id', table_name='repost_saves')
    op.drop_table('repost_saves')
    op.drop_index('ix_likes_user_id', table_name='likes')
    op.drop_table('likes')
    op.drop_index('ix_follows_followed_book_id', table_name='follows')
    op.drop_index('ix_follows_followed_user_id', table_name='follows')
    op.drop_index('ix_follows_follower_id', table_name='follows')
    op.drop_table('follows')
    op.drop_index('ix_messages_sender_id', table_name='messages')
    op.drop_table('messages')
    op.drop_index('ix_quotes_book_id', table_name='quotes')
    op.drop_index('ix_quotes_user_id', table_name='quotes')
    op.drop_table('quotes')
    op.drop_index('ix_reviews_book_id', table_name='reviews')
    op.drop_index('ix_reviews_user_id', table_name='reviews')
    op.drop_table('reviews')
    op.drop_index('ix_book_interactions_book_id', table_name='book_interactions')
    op.drop_index('ix_book_interactions_user_id', table_name='book_interactions')
    op.drop_table('book_interactions')
    op.drop_index('ix_book_sales_book_id', table_name='book_sales')
    op.drop_table('book_sales')
    op.drop_table('books')
    op.drop_table('user_profiles')
    op.drop_table('users')
