"""create_identity_tables

Revision ID: 4f1c2a9d7e3b
Revises:
Create Date: 2026-10-17 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4f1c2a9d7e3b"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Uuid(), primary_key=True, nullable=False)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def _updated_at() -> sa.Column:
    return sa.Column(
        "updated_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def upgrade() -> None:
    """Create companies, users, sessions, verification and settings tables."""
    op.create_table(
        "companies",
        _id(),
        _created_at(),
        _updated_at(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("slug", sa.String(length=100), nullable=False, unique=True),
        sa.Column("logo_url", sa.String(length=500), nullable=True),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "company_domains",
        _id(),
        _created_at(),
        sa.Column(
            "company_id",
            sa.Uuid(),
            sa.ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("domain", sa.String(length=255), nullable=False, unique=True),
    )
    op.create_index("ix_company_domains_company_id", "company_domains", ["company_id"])

    op.create_table(
        "users",
        _id(),
        _created_at(),
        _updated_at(),
        sa.Column(
            "nickname",
            sa.String(length=50),
            nullable=False,
            comment="Login handle, stored lowercase",
        ),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("email_hash", sa.String(length=64), nullable=True, unique=True),
        sa.Column("email_salt", sa.String(length=64), nullable=True),
        sa.Column(
            "company_id",
            sa.Uuid(),
            sa.ForeignKey("companies.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column(
            "company_verified", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="USER"),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="ACTIVE"),
        sa.Column("last_active_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_users_nickname", "users", ["nickname"], unique=True)
    op.create_index("ix_users_company_id", "users", ["company_id"])
    op.create_index("idx_users_status_email", "users", ["status", "email_hash"])

    op.create_table(
        "sessions",
        _id(),
        _created_at(),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("token", sa.Text(), nullable=False),
        sa.Column("user_agent", sa.String(length=500), nullable=True),
        sa.Column("ip_address", sa.String(length=45), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_used_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("idx_sessions_user_id", "sessions", ["user_id"])
    op.create_index("idx_sessions_expires_at", "sessions", ["expires_at"])

    op.create_table(
        "email_verifications",
        _id(),
        _created_at(),
        _updated_at(),
        sa.Column("email_hash", sa.String(length=64), nullable=False, unique=True),
        sa.Column("email_salt", sa.String(length=64), nullable=False),
        sa.Column("kind", sa.String(length=20), nullable=False, comment="COMPANY or GENERAL"),
        sa.Column(
            "company_id",
            sa.Uuid(),
            sa.ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("code", sa.String(length=6), nullable=False),
        sa.Column("code_expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("continuation_token", sa.String(length=128), nullable=True, unique=True),
        sa.Column("token_expires_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(
        "idx_email_verifications_pending",
        "email_verifications",
        ["kind", "company_id", "code", "verified"],
    )

    op.create_table(
        "password_resets",
        _id(),
        _created_at(),
        _updated_at(),
        sa.Column("email_hash", sa.String(length=64), nullable=False, unique=True),
        sa.Column("email_salt", sa.String(length=64), nullable=False),
        sa.Column("code", sa.String(length=6), nullable=False),
        sa.Column("code_expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("continuation_token", sa.String(length=128), nullable=True, unique=True),
        sa.Column("token_expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("used_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(
        "idx_password_resets_pending", "password_resets", ["code", "verified"]
    )

    op.create_table(
        "communities",
        _id(),
        _created_at(),
        _updated_at(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("slug", sa.String(length=100), nullable=False, unique=True),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column(
            "company_id",
            sa.Uuid(),
            sa.ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("member_count", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_communities_company_id", "communities", ["company_id"])

    op.create_table(
        "community_members",
        _id(),
        _created_at(),
        sa.Column(
            "community_id",
            sa.Uuid(),
            sa.ForeignKey("communities.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.UniqueConstraint("community_id", "user_id", name="uq_community_members"),
    )
    op.create_index("ix_community_members_user_id", "community_members", ["user_id"])

    op.create_table(
        "app_settings",
        _id(),
        _created_at(),
        _updated_at(),
        sa.Column("key", sa.String(length=100), nullable=False, unique=True),
        sa.Column("value", sa.Text(), nullable=False),
    )


def downgrade() -> None:
    """Drop all identity tables."""
    op.drop_table("app_settings")
    op.drop_index("ix_community_members_user_id", table_name="community_members")
    op.drop_table("community_members")
    op.drop_index("ix_communities_company_id", table_name="communities")
    op.drop_table("communities")
    op.drop_index("idx_password_resets_pending", table_name="password_resets")
    op.drop_table("password_resets")
    op.drop_index("idx_email_verifications_pending", table_name="email_verifications")
    op.drop_table("email_verifications")
    op.drop_index("idx_sessions_expires_at", table_name="sessions")
    op.drop_index("idx_sessions_user_id", table_name="sessions")
    op.drop_table("sessions")
    op.drop_index("idx_users_status_email", table_name="users")
    op.drop_index("ix_users_company_id", table_name="users")
    op.drop_index("ix_users_nickname", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_company_domains_company_id", table_name="company_domains")
    op.drop_table("company_domains")
    op.drop_table("companies")
