"""initial_schema

Create the schema for InsightHub project collaboration:
- Users (read-only profiles owned by the identity service)
- Projects
- Project members (registered users or email-only invitees)
- Tokens (single-use invite tokens, one live per project and target)

Revision ID: 3f2c9a71d4e8
Revises:
Create Date: 2026-10-18 10:12:44.517203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a71d4e8"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE member_role AS ENUM ('admin', 'member');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE member_status AS ENUM ('pending', 'accepted');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE token_kind AS ENUM ('invite', 'password_reset', 'other');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.execute("CREATE INDEX idx_users_email_lower ON users (lower(email))")

    # ========================================================================
    # PROJECTS table
    # ========================================================================
    op.create_table(
        "projects",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_projects_owner_id", "projects", ["owner_id"])

    # ========================================================================
    # PROJECT_MEMBERS table
    # ========================================================================
    op.create_table(
        "project_members",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("project_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),  # NULL until registered
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column(
            "role",
            postgresql.ENUM("admin", "member", name="member_role", create_type=False),
            nullable=False,
            server_default="member",
        ),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending", "accepted", name="member_status", create_type=False
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("accepted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("project_id", "user_id", name="uq_project_members_user"),
        sa.UniqueConstraint("project_id", "email", name="uq_project_members_email"),
    )
    op.create_index("idx_project_members_user_id", "project_members", ["user_id"])

    # ========================================================================
    # TOKENS table
    # ========================================================================
    op.create_table(
        "tokens",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("value", sa.String(255), nullable=False),
        sa.Column(
            "kind",
            postgresql.ENUM(
                "invite",
                "password_reset",
                "other",
                name="token_kind",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("project_id", sa.UUID(), nullable=True),
        sa.Column("target_user_id", sa.UUID(), nullable=True),
        sa.Column("target_email", sa.String(255), nullable=True),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["target_user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("value", name="uq_tokens_value"),
        sa.CheckConstraint(
            "kind <> 'invite' OR "
            "(project_id IS NOT NULL AND "
            "(target_user_id IS NULL) <> (target_email IS NULL))",
            name="invite_has_single_target",
        ),
    )

    # Partial unique indexes: one live token per project, target and kind
    op.execute("""
        CREATE UNIQUE INDEX idx_tokens_unique_project_user_kind
        ON tokens (project_id, target_user_id, kind)
        WHERE target_user_id IS NOT NULL
    """)
    op.execute("""
        CREATE UNIQUE INDEX idx_tokens_unique_project_email_kind
        ON tokens (project_id, target_email, kind)
        WHERE target_email IS NOT NULL
    """)


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("tokens")
    op.drop_table("project_members")
    op.drop_table("projects")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS token_kind")
    op.execute("DROP TYPE IF EXISTS member_status")
    op.execute("DROP TYPE IF EXISTS member_role")
