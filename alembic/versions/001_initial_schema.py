"""Initial schema - role, permission, role_permission, user_role.

Revision ID: 001
Revises:
Create Date: 2025-03-04

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("id", sa.UUID(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("workspace_id", sa.UUID(), nullable=True),
    )
    op.create_index("ix_role_name", "role", ["name"], unique=True)

    op.create_table(
        "permission",
        sa.Column("id", sa.UUID(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("resource", sa.String(100), nullable=False),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
    )
    op.create_index(
        "ix_permission_resource_action", "permission", ["resource", "action"], unique=True
    )

    op.create_table(
        "role_permission",
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
        sa.Column(
            "permission_id",
            sa.UUID(),
            sa.ForeignKey("permission.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "user_role",
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id", ondelete="CASCADE"), nullable=False),
        sa.Column("workspace_id", sa.UUID(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("created_by", sa.String(255), nullable=True),
    )
    # One global binding per (user, role); NULL workspace is not distinct.
    op.execute(
        "CREATE UNIQUE INDEX ix_user_role_user_role_workspace "
        "ON user_role (user_id, role_id, workspace_id) NULLS NOT DISTINCT"
    )
    op.create_index("ix_user_role_user_id", "user_role", ["user_id"])

    op.execute("""
        CREATE FUNCTION has_permission(
            p_user_id text, p_resource text, p_action text, p_workspace_id uuid
        ) RETURNS boolean
        LANGUAGE sql STABLE AS $$
            SELECT EXISTS (
                SELECT 1
                FROM user_role ur
                JOIN role_permission rp ON rp.role_id = ur.role_id
                JOIN permission p ON p.id = rp.permission_id
                WHERE ur.user_id = p_user_id
                  AND p.resource = p_resource
                  AND p.action = p_action
                  AND (
                    p_workspace_id IS NULL
                    OR ur.workspace_id IS NULL
                    OR ur.workspace_id = p_workspace_id
                  )
            )
        $$
    """)

    op.execute("""
        INSERT INTO role (name, description) VALUES
        ('admin', 'Full access including user management'),
        ('user', 'Default role for signed-up users'),
        ('premium', 'Paid tier with export and analysis')
    """)
    op.execute("""
        INSERT INTO permission (resource, action, description) VALUES
        ('proposal', 'create', 'Create proposals'),
        ('proposal', 'read', 'Read proposals'),
        ('proposal', 'update', 'Update proposals'),
        ('proposal', 'delete', 'Delete proposals'),
        ('proposal', 'export', 'Export proposals'),
        ('ai_analysis', 'create', 'Run AI analysis'),
        ('workspace', 'manage', 'Manage workspaces'),
        ('user', 'manage', 'Assign and remove roles'),
        ('billing', 'manage', 'Manage billing')
    """)
    op.execute("""
        INSERT INTO role_permission (role_id, permission_id)
        SELECT r.id, p.id FROM role r CROSS JOIN permission p WHERE r.name = 'admin'
    """)
    op.execute("""
        INSERT INTO role_permission (role_id, permission_id)
        SELECT r.id, p.id FROM role r JOIN permission p
          ON (p.resource, p.action) IN (
            ('proposal', 'create'), ('proposal', 'read'),
            ('proposal', 'update'), ('proposal', 'delete')
          )
        WHERE r.name = 'user'
    """)
    op.execute("""
        INSERT INTO role_permission (role_id, permission_id)
        SELECT r.id, p.id FROM role r JOIN permission p
          ON (p.resource, p.action) IN (
            ('proposal', 'create'), ('proposal', 'read'), ('proposal', 'update'),
            ('proposal', 'delete'), ('proposal', 'export'), ('ai_analysis', 'create')
          )
        WHERE r.name = 'premium'
    """)


def downgrade() -> None:
    op.execute(
        "DROP FUNCTION IF EXISTS has_permission(text, text, text, uuid)"
    )
    op.drop_table("user_role")
    op.drop_table("role_permission")
    op.drop_table("permission")
    op.drop_table("role")
