from __future__ import annotations

from typing import Any, Optional, Sequence

import mysql.connector

from ..core.enums import Role
from ..core.exceptions import DuplicateEmail
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import User
from .repository import UserRepository

_COLUMNS = "id, email, password_hash, name, role, employee_id, department, created_at"


def _to_user(row: dict[str, Any]) -> User:
    return User(
        id=str(row["id"]),
        email=row["email"],
        password_hash=row["password_hash"],
        name=row["name"],
        role=Role(row["role"]),
        employee_id=row.get("employee_id") or "",
        department=row.get("department") or "",
        created_at=row["created_at"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE id=%s", (user_id,))
            row = cur.fetchone()
            return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        # email column uses a binary collation, so this is an exact match
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=%s", (email,))
            row = cur.fetchone()
            return _to_user(row) if row else None

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY seq")
            return [_to_user(r) for r in cur.fetchall()]

    def add(self, user: User) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO users(id, email, password_hash, name, role, employee_id, department, created_at)
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        user.id,
                        user.email,
                        user.password_hash,
                        user.name,
                        user.role.value,
                        user.employee_id,
                        user.department,
                        user.created_at,
                    ),
                )
        except mysql.connector.IntegrityError as e:
            raise DuplicateEmail() from e
