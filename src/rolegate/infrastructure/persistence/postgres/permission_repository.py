"""PostgreSQL permission repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from rolegate.domain.entities import Permission


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_for_role(self, role_id: UUID) -> list[Permission]:
        """List permissions granted by role."""
        cur = await self._conn.execute(
            "SELECT p.id, p.resource, p.action, p.description "
            "FROM role_permission rp JOIN permission p ON p.id = rp.permission_id "
            "WHERE rp.role_id = %s ORDER BY p.resource, p.action",
            (role_id,),
        )
        rows = await cur.fetchall()
        return [
            Permission(id=r[0], resource=r[1], action=r[2], description=r[3] or "")
            for r in rows
        ]

    async def check_server_side(
        self,
        user_id: str,
        resource: str,
        action: str,
        workspace_id: UUID | None = None,
    ) -> bool:
        """Evaluate has_permission() inside the database."""
        cur = await self._conn.execute(
            "SELECT has_permission(%s, %s, %s, %s)",
            (user_id, resource, action, workspace_id),
        )
        r = await cur.fetchone()
        return bool(r and r[0] is True)
