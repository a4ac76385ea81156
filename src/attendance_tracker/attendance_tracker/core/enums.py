from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Coarse authorization tier."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Status stored on every attendance record."""

    PRESENT = "present"


class StorageBackend(str, Enum):
    MEMORY = "memory"
    JSON = "json"
    MYSQL = "mysql"
