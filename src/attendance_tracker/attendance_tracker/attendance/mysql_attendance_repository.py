from __future__ import annotations

from typing import Any, Optional, Sequence

import mysql.connector

from ..common.datetime_utils import day_key
from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyCheckedIn
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "id, user_id, work_date, check_in_time, check_out_time, total_hours, status"


def _to_record(row: dict[str, Any]) -> AttendanceRecord:
    total = row.get("total_hours")
    return AttendanceRecord(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        date=day_key(row["work_date"]),
        check_in=row.get("check_in_time"),
        check_out=row.get("check_out_time"),
        total_hours=float(total) if total is not None else None,
        status=AttendanceStatus(row["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    """Attendance table with a unique key on (user_id, work_date)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user_and_date(self, user_id: str, work_date: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE user_id=%s AND work_date=%s",
                (user_id, work_date),
            )
            row = cur.fetchone()
            return _to_record(row) if row else None

    def list_records(
        self,
        *,
        user_id: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        where = []
        params: list[Any] = []
        if user_id:
            where.append("user_id=%s")
            params.append(user_id)
        if start_date:
            where.append("work_date >= %s")
            params.append(start_date)
        if end_date:
            where.append("work_date <= %s")
            params.append(end_date)

        sql = f"SELECT {_COLUMNS} FROM attendance"
        if where:
            sql += " WHERE " + " AND ".join(where)
        sql += " ORDER BY seq"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_record(r) for r in cur.fetchall()]

    def list_for_date_prefix(self, prefix: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE CAST(work_date AS CHAR) LIKE %s ORDER BY seq",
                (prefix + "%",),
            )
            return [_to_record(r) for r in cur.fetchall()]

    def create_checkin(self, record: AttendanceRecord) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance(id, user_id, work_date, check_in_time, check_out_time, total_hours, status)
                    VALUES(%s,%s,%s,%s,NULL,NULL,%s)
                    """,
                    (record.id, record.user_id, record.date, record.check_in, record.status.value),
                )
        except mysql.connector.IntegrityError as e:
            raise AlreadyCheckedIn() from e

    def update_checkout(self, record: AttendanceRecord) -> bool:
        # Guarded on check_out_time IS NULL so a record is closed at most once.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET check_out_time=%s, total_hours=%s
                WHERE id=%s AND check_out_time IS NULL
                """,
                (record.check_out, record.total_hours, record.id),
            )
            return cur.rowcount > 0
