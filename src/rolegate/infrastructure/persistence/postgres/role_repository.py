"""PostgreSQL role repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from rolegate.domain.entities import Role

_COLUMNS = "r.id, r.name, r.description, r.workspace_id"


def _row_to_role(r: tuple) -> Role:
    return Role(id=r[0], name=r[1], description=r[2] or "", workspace_id=r[3])


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role r WHERE r.id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_role(r)

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role r WHERE r.name = %s",
            (name,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_role(r)

    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM role r ORDER BY r.name")
        rows = await cur.fetchall()
        return [_row_to_role(r) for r in rows]

    async def list_for_user(self, user_id: str) -> list[tuple[Role, UUID | None]]:
        """List roles bound to user with the binding's workspace."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS}, ur.workspace_id FROM user_role ur "
            "JOIN role r ON r.id = ur.role_id "
            "WHERE ur.user_id = %s ORDER BY r.name",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [(_row_to_role(r), r[4]) for r in rows]
