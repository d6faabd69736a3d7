"""PostgreSQL role binding repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from rolegate.domain.entities import RoleBinding

_COLUMNS = "user_id, role_id, workspace_id, created_at, created_by"


def _row_to_binding(r: tuple) -> RoleBinding:
    return RoleBinding(
        user_id=r[0],
        role_id=r[1],
        workspace_id=r[2],
        created_at=r[3],
        created_by=r[4],
    )


class PostgresRoleBindingRepository:
    """user_role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_for_user(self, user_id: str) -> list[RoleBinding]:
        """List bindings of user."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM user_role WHERE user_id = %s ORDER BY created_at",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_binding(r) for r in rows]

    async def get(
        self, user_id: str, role_id: UUID, workspace_id: UUID | None
    ) -> RoleBinding | None:
        """Get binding; NULL workspace matches only the global binding."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM user_role "
            "WHERE user_id = %s AND role_id = %s AND workspace_id IS NOT DISTINCT FROM %s",
            (user_id, role_id, workspace_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_binding(r)

    async def create(self, binding: RoleBinding) -> RoleBinding:
        """Insert binding; a concurrent duplicate is absorbed by the unique index."""
        await self._conn.execute(
            f"INSERT INTO user_role ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s) "
            "ON CONFLICT DO NOTHING",
            (
                binding.user_id,
                binding.role_id,
                binding.workspace_id,
                binding.created_at,
                binding.created_by,
            ),
        )
        stored = await self.get(binding.user_id, binding.role_id, binding.workspace_id)
        return stored or binding

    async def delete(
        self, user_id: str, role_id: UUID, workspace_id: UUID | None
    ) -> bool:
        """Delete binding."""
        cur = await self._conn.execute(
            "DELETE FROM user_role "
            "WHERE user_id = %s AND role_id = %s AND workspace_id IS NOT DISTINCT FROM %s",
            (user_id, role_id, workspace_id),
        )
        return cur.rowcount > 0
