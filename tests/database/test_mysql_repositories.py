from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import mysql.connector
import pytest

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceRecord
from src.attendance_tracker.attendance_tracker.attendance.mysql_attendance_repository import (
    MySQLAttendanceRepository,
)
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus, Role
from src.attendance_tracker.attendance_tracker.core.exceptions import AlreadyCheckedIn, DuplicateEmail
from src.attendance_tracker.attendance_tracker.main import SCHEMA_PATH
from src.attendance_tracker.attendance_tracker.users.model import User
from src.attendance_tracker.attendance_tracker.users.mysql_user_repository import MySQLUserRepository


class FakeCursor:
    def __init__(self, rows=None, rowcount=0, error=None):
        self.rows = list(rows or [])
        self.rowcount = rowcount
        self.error = error
        self.executed = []
        self.closed = False

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))
        if self.error is not None:
            raise self.error

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return list(self.rows)

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    """Hands out one FakeConnection per connect() over a shared cursor."""

    def __init__(self, cursor: FakeCursor):
        self.cursor = cursor
        self.connections: list[FakeConnection] = []

    def connect(self, with_database: bool = True):
        conn = FakeConnection(self.cursor)
        self.connections.append(conn)
        return conn


def _user(email="alice@company.com") -> User:
    return User(
        id="u-1",
        email=email,
        password_hash="hash",
        name="Alice",
        role=Role.EMPLOYEE,
        employee_id="EMP002",
        department="Sales",
        created_at=datetime(2026, 2, 2, 9, 0, 0),
    )


def _record(**overrides) -> AttendanceRecord:
    fields = dict(
        id="r-1",
        user_id="u-1",
        date="2026-02-02",
        check_in=datetime(2026, 2, 2, 9, 0, 0),
        check_out=None,
        total_hours=None,
        status=AttendanceStatus.PRESENT,
    )
    fields.update(overrides)
    return AttendanceRecord(**fields)


def test_duplicate_email_insert_maps_to_domain_error_and_rolls_back():
    factory = FakeConnectionFactory(FakeCursor(error=mysql.connector.IntegrityError("Duplicate entry")))
    repo = MySQLUserRepository(factory)

    with pytest.raises(DuplicateEmail):
        repo.add(_user())

    conn = factory.connections[0]
    assert conn.rolled_back is True
    assert conn.committed is False
    assert conn.closed is True


def test_user_insert_commits_and_passes_role_value():
    factory = FakeConnectionFactory(FakeCursor())
    MySQLUserRepository(factory).add(_user())

    sql, params = factory.cursor.executed[0]
    assert sql.startswith("INSERT INTO users")
    assert params[1] == "alice@company.com"
    assert params[4] == "employee"
    assert factory.connections[0].committed is True


def test_get_by_email_maps_row_to_user():
    row = {
        "id": "u-1",
        "email": "alice@company.com",
        "password_hash": "hash",
        "name": "Alice",
        "role": "admin",
        "employee_id": None,
        "department": "IT",
        "created_at": datetime(2026, 1, 1, 8, 0, 0),
    }
    factory = FakeConnectionFactory(FakeCursor(rows=[row]))

    user = MySQLUserRepository(factory).get_by_email("alice@company.com")

    assert user.role is Role.ADMIN
    assert user.employee_id == ""
    assert factory.cursor.executed[0][1] == ("alice@company.com",)


def test_get_by_email_returns_none_when_no_row():
    factory = FakeConnectionFactory(FakeCursor())

    assert MySQLUserRepository(factory).get_by_email("nobody@company.com") is None


def test_duplicate_checkin_insert_maps_to_already_checked_in():
    factory = FakeConnectionFactory(FakeCursor(error=mysql.connector.IntegrityError("Duplicate entry")))

    with pytest.raises(AlreadyCheckedIn):
        MySQLAttendanceRepository(factory).create_checkin(_record())

    assert factory.connections[0].rolled_back is True


def test_update_checkout_reports_false_when_record_already_closed():
    factory = FakeConnectionFactory(FakeCursor(rowcount=0))
    closed = _record(check_out=datetime(2026, 2, 2, 18, 0, 0), total_hours=9.0)

    assert MySQLAttendanceRepository(factory).update_checkout(closed) is False

    sql, params = factory.cursor.executed[0]
    assert "check_out_time IS NULL" in sql
    assert params == (datetime(2026, 2, 2, 18, 0, 0), 9.0, "r-1")


def test_update_checkout_reports_true_when_a_row_changed():
    factory = FakeConnectionFactory(FakeCursor(rowcount=1))
    closed = _record(check_out=datetime(2026, 2, 2, 17, 0, 0), total_hours=8.0)

    assert MySQLAttendanceRepository(factory).update_checkout(closed) is True


def test_list_for_date_prefix_matches_month_and_maps_rows():
    row = {
        "id": "r-1",
        "user_id": "u-1",
        "work_date": date(2026, 2, 2),
        "check_in_time": datetime(2026, 2, 2, 9, 0, 0),
        "check_out_time": datetime(2026, 2, 2, 17, 15, 0),
        "total_hours": Decimal("8.25"),
        "status": "present",
    }
    factory = FakeConnectionFactory(FakeCursor(rows=[row]))

    records = MySQLAttendanceRepository(factory).list_for_date_prefix("2026-02")

    assert factory.cursor.executed[0][1] == ("2026-02%",)
    assert records[0].date == "2026-02-02"
    assert records[0].total_hours == 8.25
    assert records[0].status is AttendanceStatus.PRESENT


def test_list_records_builds_filters_in_order():
    factory = FakeConnectionFactory(FakeCursor())

    MySQLAttendanceRepository(factory).list_records(user_id="u-1", start_date="2026-02-01", end_date="2026-02-28")

    sql, params = factory.cursor.executed[0]
    assert "WHERE user_id=%s AND work_date >= %s AND work_date <= %s ORDER BY seq" in sql
    assert params == ("u-1", "2026-02-01", "2026-02-28")


def test_schema_ships_inside_the_package():
    assert SCHEMA_PATH.parent.name == "database"
    sql = SCHEMA_PATH.read_text(encoding="utf-8")
    assert "uq_users_email" in sql
    assert "uq_attendance_user_date" in sql
