"""init schema

Revision ID: 0001_init_schema
Revises:
Create Date: 2026-10-18
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


revision: str = "0001_init_schema"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.current_timestamp()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.current_timestamp()),
    ]


def _money(name: str, nullable: bool = False) -> sa.Column:
    if nullable:
        return sa.Column(name, sa.Numeric(12, 2), nullable=True)
    return sa.Column(name, sa.Numeric(12, 2), nullable=False, server_default="0")


def _text(name: str, length: int) -> sa.Column:
    return sa.Column(name, sa.String(length=length), nullable=False, server_default="")


def upgrade() -> None:
    op.create_table(
        "forms",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("data", sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "blogs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "blog_images",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("blog_id", sa.Integer(), nullable=False),
        sa.Column("image_key", sa.String(length=512), nullable=False),
        sa.Column("image_url", sa.String(length=1024), nullable=False),
        sa.Column("alt_text", sa.String(length=512), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.current_timestamp()),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_blog_images_blog_id", "blog_images", ["blog_id"], unique=False)

    op.create_table(
        "api_keys",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("key_hash", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.current_timestamp()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_api_keys_key_hash", "api_keys", ["key_hash"], unique=True)

    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("event_type", sa.String(length=64), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="draft"),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        _text("venue_name", 255),
        _text("venue_address", 512),
        sa.Column("is_virtual", sa.Boolean(), nullable=False, server_default=sa.false()),
        _text("virtual_link", 1024),
        sa.Column("timezone", sa.String(length=64), nullable=False, server_default="UTC"),
        sa.Column("capacity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("expected_guests", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("registered_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("actual_guests", sa.Integer(), nullable=True),
        sa.Column("waitlist_enabled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("allow_walkins", sa.Boolean(), nullable=False, server_default=sa.true()),
        _money("ticket_price"),
        _money("early_bird_price", nullable=True),
        _money("organization_budget"),
        _money("expenses"),
        _money("revenue"),
        sa.Column("registration_open_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("registration_close_date", sa.DateTime(timezone=True), nullable=True),
        _text("registration_form_url", 1024),
        sa.Column("requires_approval", sa.Boolean(), nullable=False, server_default=sa.false()),
        _text("featured_image", 1024),
        sa.Column("gallery_images", sa.Text(), nullable=False, server_default="[]"),
        _text("video_url", 1024),
        _text("livestream_url", 1024),
        sa.Column("organizer_name", sa.String(length=255), nullable=False),
        sa.Column("organizer_email", sa.String(length=255), nullable=False),
        _text("organizer_phone", 64),
        sa.Column("speakers", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("sponsors", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("tags", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.true()),
        _text("created_by", 255),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_events_start_date", "events", ["start_date"], unique=False)
    op.create_index("ix_events_status", "events", ["status"], unique=False)

    op.create_table(
        "books",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        _text("subtitle", 255),
        sa.Column("author", sa.String(length=255), nullable=False),
        _text("isbn", 32),
        sa.Column("description", sa.Text(), nullable=False),
        _text("publisher", 255),
        sa.Column("publication_date", sa.Date(), nullable=True),
        sa.Column("pages", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("language", sa.String(length=64), nullable=False, server_default="English"),
        sa.Column("category", sa.String(length=64), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        _money("sale_price", nullable=True),
        sa.Column("stock_quantity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="available"),
        _text("cover_image", 1024),
        sa.Column("gallery_images", sa.Text(), nullable=False, server_default="[]"),
        _text("preview_url", 1024),
        sa.Column("purchase_links", sa.Text(), nullable=False, server_default="{}"),
        sa.Column("tags", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("total_sales", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("average_rating", sa.Float(), nullable=False, server_default="0"),
        sa.Column("review_count", sa.Integer(), nullable=False, server_default="0"),
        _text("created_by", 255),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_books_category", "books", ["category"], unique=False)
    op.create_index("ix_books_status", "books", ["status"], unique=False)

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("blog_id", sa.Integer(), nullable=False),
        sa.Column("blog_slug", sa.String(length=255), nullable=True),
        sa.Column("author_name", sa.String(length=255), nullable=False),
        sa.Column("author_email", sa.String(length=255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="pending"),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_comments_blog_id", "comments", ["blog_id"], unique=False)
    op.create_index("ix_comments_blog_slug", "comments", ["blog_slug"], unique=False)
    op.create_index("ix_comments_status", "comments", ["status"], unique=False)
    op.create_index("ix_comments_parent_id", "comments", ["parent_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_comments_parent_id", table_name="comments")
    op.drop_index("ix_comments_status", table_name="comments")
    op.drop_index("ix_comments_blog_slug", table_name="comments")
    op.drop_index("ix_comments_blog_id", table_name="comments")
    op.drop_table("comments")

    op.drop_index("ix_books_status", table_name="books")
    op.drop_index("ix_books_category", table_name="books")
    op.drop_table("books")

    op.drop_index("ix_events_status", table_name="events")
    op.drop_index("ix_events_start_date", table_name="events")
    op.drop_table("events")

    op.drop_index("ix_api_keys_key_hash", table_name="api_keys")
    op.drop_table("api_keys")

    op.drop_index("ix_blog_images_blog_id", table_name="blog_images")
    op.drop_table("blog_images")

    op.drop_table("blogs")
    op.drop_table("forms")
