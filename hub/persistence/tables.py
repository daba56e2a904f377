"""SQLAlchemy table definitions for InsightHub.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the identity service, read here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),
    Column("name", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False),
    Column(
        "owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_projects_owner_id", projects_table.c.owner_id)

# ============================================================================
# PROJECT MEMBERS TABLE
# ============================================================================
# user_id is NULL while the member is only known by email
project_members_table = Table(
    "project_members",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=True),
    Column("email", String(255), nullable=False),
    Column(
        "role",
        Enum("admin", "member", name="member_role", create_type=False),
        nullable=False,
        server_default="member",
    ),
    Column(
        "status",
        Enum("pending", "accepted", name="member_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("project_id", "user_id", name="uq_project_members_user"),
    UniqueConstraint("project_id", "email", name="uq_project_members_email"),
)

Index("idx_project_members_user_id", project_members_table.c.user_id)

# ============================================================================
# TOKENS TABLE
# ============================================================================
tokens_table = Table(
    "tokens",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("value", String(255), nullable=False, unique=True),
    Column(
        "kind",
        Enum("invite", "password_reset", "other", name="token_kind", create_type=False),
        nullable=False,
    ),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "target_user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("target_email", String(255), nullable=True),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "kind <> 'invite' OR "
        "(project_id IS NOT NULL AND "
        "(target_user_id IS NULL) <> (target_email IS NULL))",
        name="invite_has_single_target",
    ),
)

# One live token per (project, target, kind); a racing re-invite fails here
Index(
    "idx_tokens_unique_project_user_kind",
    tokens_table.c.project_id,
    tokens_table.c.target_user_id,
    tokens_table.c.kind,
    unique=True,
    postgresql_where=tokens_table.c.target_user_id.isnot(None),
)
Index(
    "idx_tokens_unique_project_email_kind",
    tokens_table.c.project_id,
    tokens_table.c.target_email,
    tokens_table.c.kind,
    unique=True,
    postgresql_where=tokens_table.c.target_email.isnot(None),
)
