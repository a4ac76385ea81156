from __future__ import annotations

import re
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from werkzeug.security import generate_password_hash

from ..common.datetime_utils import now_local
from ..core.enums import Role
from ..core.exceptions import DuplicateEmail
from ..users.model import User
from ..users.repository import UserRepository
from .connection import DatabaseConnection


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_database_exists(conn_factory)

    sql = Path(schema_path).read_text(encoding="utf-8")
    sql = _strip_create_db_and_use(_strip_comments(sql))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def build_bootstrap_admin(admin: dict[str, Any], *, now: Optional[datetime] = None) -> User:
    return User(
        id=str(uuid.uuid4()),
        email=admin["email"],
        password_hash=generate_password_hash(admin["password"]),
        name=admin.get("name", "System Administrator"),
        role=Role.ADMIN,
        employee_id=admin.get("employee_id", "EMP001"),
        department=admin.get("department", "IT"),
        created_at=now or now_local(),
    )


def ensure_bootstrap_admin(
    users: UserRepository,
    admin: dict[str, Any],
    *,
    clock: Callable[[], datetime] = now_local,
) -> bool:
    """Seed the bootstrap admin account if its email is not taken yet.

    Returns True when the account was created.
    """

    if users.get_by_email(admin["email"]):
        return False
    try:
        users.add(build_bootstrap_admin(admin, now=clock()))
    except DuplicateEmail:
        # another worker seeded it first
        return False
    return True
