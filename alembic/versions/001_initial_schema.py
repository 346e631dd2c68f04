"""Initial schema - role defaults, subject overrides, memberships, audit log.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ROLES = ("collaborator", "admin", "owner")


def upgrade() -> None:
    op.create_table(
        "role_permission_default",
        sa.Column("role", sa.String(32), primary_key=True),
        sa.Column("permission_id", sa.String(128), primary_key=True),
        sa.Column("granted", sa.Boolean(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(f"role IN {ROLES}", name="ck_role_permission_default_role"),
    )

    op.create_table(
        "tenant_membership",
        sa.Column("subject_id", sa.String(255), primary_key=True),
        sa.Column("tenant_id", sa.String(255), primary_key=True),
        sa.Column("role", sa.String(32), nullable=False),
        sa.Column("wildcard", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("joined_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint(f"role IN {ROLES}", name="ck_tenant_membership_role"),
    )
    op.create_index("ix_tenant_membership_tenant_id", "tenant_membership", ["tenant_id"])

    # One live override per key; writes upsert.
    op.create_table(
        "subject_permission_override",
        sa.Column("subject_id", sa.String(255), primary_key=True),
        sa.Column("tenant_id", sa.String(255), primary_key=True),
        sa.Column("permission_id", sa.String(128), primary_key=True),
        sa.Column("granted", sa.Boolean(), nullable=False),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column("changed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("changed_by", sa.String(255), nullable=False),
    )
    op.create_index(
        "ix_subject_permission_override_tenant_id",
        "subject_permission_override",
        ["tenant_id"],
    )

    op.create_table(
        "permission_audit_log",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("type", sa.String(64), nullable=False),
        sa.Column("actor", sa.String(255), nullable=True),
        sa.Column("subject_id", sa.String(255), nullable=True),
        sa.Column("tenant_id", sa.String(255), nullable=True),
        sa.Column("role", sa.String(32), nullable=True),
        sa.Column("permission_id", sa.String(128), nullable=False),
        sa.Column("granted", sa.Boolean(), nullable=True),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        "ix_permission_audit_log_subject",
        "permission_audit_log",
        ["tenant_id", "subject_id"],
    )


def downgrade() -> None:
    op.drop_table("permission_audit_log")
    op.drop_table("subject_permission_override")
    op.drop_table("tenant_membership")
    op.drop_table("role_permission_default")
