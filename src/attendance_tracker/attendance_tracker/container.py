from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

from .attendance.document_attendance_repository import DocumentAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.tokens import TokenIssuer
from .common.datetime_utils import now_local
from .core.constants import ATTENDANCE_DOCUMENT, DEFAULT_TOKEN_TTL_HOURS, USERS_DOCUMENT
from .core.enums import StorageBackend
from .dashboard.service import DashboardService
from .database.bootstrap import build_bootstrap_admin, ensure_bootstrap_admin
from .database.connection import DatabaseConnection, DBConfig
from .database.document_store import JsonFileDocument, MemoryDocument
from .users.document_user_repository import DocumentUserRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    backend: StorageBackend

    users_repo: UserRepository
    attendance_repo: AttendanceRepository

    tokens: TokenIssuer
    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    dashboard_service: DashboardService


def _build_stores(
    backend: StorageBackend,
    *,
    data_dir: Optional[str | Path],
    db_config: Optional[dict[str, Any]],
    bootstrap_admin: Optional[dict[str, Any]],
    clock: Callable[[], datetime],
) -> tuple[UserRepository, AttendanceRepository]:
    if backend == StorageBackend.MEMORY:
        seed = [build_bootstrap_admin(bootstrap_admin, now=clock()).to_document()] if bootstrap_admin else []
        return DocumentUserRepository(MemoryDocument(seed)), DocumentAttendanceRepository(MemoryDocument())

    if backend == StorageBackend.JSON:
        root = Path(data_dir or "data")
        users_doc = JsonFileDocument(root / USERS_DOCUMENT)
        attendance_doc = JsonFileDocument(root / ATTENDANCE_DOCUMENT)
        if not users_doc.exists():
            seed = [build_bootstrap_admin(bootstrap_admin, now=clock()).to_document()] if bootstrap_admin else []
            users_doc.ensure(seed)
        attendance_doc.ensure([])
        return DocumentUserRepository(users_doc), DocumentAttendanceRepository(attendance_doc)

    conn = DatabaseConnection(DBConfig.from_dict(db_config or {}))
    users_repo = MySQLUserRepository(conn)
    if bootstrap_admin:
        ensure_bootstrap_admin(users_repo, bootstrap_admin, clock=clock)
    return users_repo, MySQLAttendanceRepository(conn)


def build_container(
    *,
    backend: str | StorageBackend = StorageBackend.MEMORY,
    jwt_secret: str,
    data_dir: Optional[str | Path] = None,
    db_config: Optional[dict[str, Any]] = None,
    bootstrap_admin: Optional[dict[str, Any]] = None,
    token_ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS,
    dashboard_admin_only: bool = False,
    clock: Callable[[], datetime] = now_local,
    token_clock: Optional[Callable[[], datetime]] = None,
) -> Container:
    backend = StorageBackend(backend)
    users_repo, attendance_repo = _build_stores(
        backend,
        data_dir=data_dir,
        db_config=db_config,
        bootstrap_admin=bootstrap_admin,
        clock=clock,
    )

    tokens = TokenIssuer(secret=jwt_secret, ttl_hours=int(token_ttl_hours))
    if token_clock is not None:
        tokens.clock = token_clock

    auth_service = AuthService(users_repo, tokens)
    user_service = UserService(users_repo, clock=clock)
    attendance_service = AttendanceService(attendance_repo, users_repo, clock=clock)
    dashboard_service = DashboardService(
        attendance_repo,
        users_repo,
        clock=clock,
        admin_only=dashboard_admin_only,
    )

    return Container(
        backend=backend,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        tokens=tokens,
        auth_service=auth_service,
        user_service=user_service,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
    )
