"""Initial schema with all tables.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

This migration creates the complete StudyShare database schema:
- Tables: users, notes, assignments, old_questions, blogs
- Indexes: lowercased unique email, author lookups, list filters and default sort
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", postgresql.TIMESTAMP(timezone=True), server_default=sa.text("NOW()"), nullable=False),
        sa.Column("updated_at", postgresql.TIMESTAMP(timezone=True), server_default=sa.text("NOW()"), nullable=False),
    ]


def _publication() -> list[sa.Column]:
    return [
        sa.Column("file_url", sa.String(2048), nullable=False),
        sa.Column("image_url", sa.String(2048), nullable=True),
        sa.Column("seo_keywords", sa.JSON(), server_default=sa.text("'[]'"), nullable=False),
        sa.Column("seo_description", sa.Text(), nullable=True),
        sa.Column("is_published", sa.Boolean(), server_default=sa.true(), nullable=False),
    ]


def _classification(subject_nullable: bool = True) -> list[sa.Column]:
    return [
        sa.Column("subject", sa.String(255), nullable=subject_nullable),
        sa.Column("semester", sa.String(100), nullable=True),
        sa.Column("faculty", sa.String(255), nullable=True),
        sa.Column("year", sa.Integer(), nullable=True),
    ]


def _content_indexes(table: str, classified: bool = True) -> None:
    op.create_index(f"ix_{table}_author_id", table, ["author_id"])
    op.create_index(f"ix_{table}_created_at", table, ["created_at"])
    op.create_index(f"ix_{table}_is_published", table, ["is_published"])
    if classified:
        op.create_index(f"ix_{table}_subject", table, ["subject"])


def upgrade() -> None:
    # ==========================================================================
    # USERS TABLE
    # ==========================================================================
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), server_default="student", nullable=False),
        sa.Column("phone_number", sa.String(50), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("profile_image_url", sa.String(2048), nullable=True),
        sa.Column("profile_file_url", sa.String(2048), server_default="", nullable=False),
        sa.Column("institution", sa.String(255), nullable=True),
        sa.Column("department", sa.String(255), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("role IN ('student', 'admin')", name="valid_role"),
        sa.CheckConstraint("email = lower(email)", name="lowercase_email"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_created_at", "users", ["created_at"])

    # ==========================================================================
    # NOTES TABLE
    # ==========================================================================
    op.create_table(
        "notes",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("author_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("views", sa.Integer(), server_default="0", nullable=False),
        sa.Column("likes", sa.Integer(), server_default="0", nullable=False),
        *_classification(),
        *_publication(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
    )
    _content_indexes("notes")

    # ==========================================================================
    # ASSIGNMENTS TABLE
    # ==========================================================================
    op.create_table(
        "assignments",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("author_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("instructions", sa.Text(), nullable=True),
        sa.Column("due_date", postgresql.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("total_marks", sa.Integer(), nullable=True),
        sa.Column("difficulty", sa.String(10), nullable=True),
        *_classification(),
        *_publication(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.CheckConstraint("total_marks IS NULL OR total_marks >= 0", name="valid_total_marks"),
        sa.CheckConstraint("difficulty IS NULL OR difficulty IN ('easy', 'medium', 'hard')", name="valid_assignment_difficulty"),
    )
    _content_indexes("assignments")
    op.create_index("idx_assignments_due_date", "assignments", ["due_date"])

    # ==========================================================================
    # OLD_QUESTIONS TABLE
    # ==========================================================================
    op.create_table(
        "old_questions",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("author_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("difficulty", sa.String(10), nullable=True),
        *_classification(subject_nullable=False),
        *_publication(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.CheckConstraint("difficulty IS NULL OR difficulty IN ('easy', 'medium', 'hard')", name="valid_question_difficulty"),
    )
    _content_indexes("old_questions")

    # ==========================================================================
    # BLOGS TABLE
    # ==========================================================================
    op.create_table(
        "blogs",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("author_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("sections", sa.JSON(), server_default=sa.text("'[]'"), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_featured", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("read_time_minutes", sa.Integer(), nullable=True),
        sa.Column("views", sa.Integer(), server_default="0", nullable=False),
        sa.Column("likes", sa.Integer(), server_default="0", nullable=False),
        *_publication(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
    )
    _content_indexes("blogs", classified=False)
    op.create_index("ix_blogs_category", "blogs", ["category"])
    op.create_index("ix_blogs_is_featured", "blogs", ["is_featured"])


def downgrade() -> None:
    # Drop tables in reverse dependency order
    op.drop_table("blogs")
    op.drop_table("old_questions")
    op.drop_table("assignments")
    op.drop_table("notes")
    op.drop_table("users")
