from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..common.datetime_utils import from_iso, to_iso
from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account in the Credential Store.

    Note: plain data object, no storage access. `password_hash` never leaves the
    service boundary; use `public_view()` for anything sent to a client.
    """

    id: str
    email: str
    password_hash: str
    name: str
    role: Role
    employee_id: str
    department: str
    created_at: datetime

    def public_view(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "employeeId": self.employee_id,
            "department": self.department,
            "createdAt": to_iso(self.created_at),
        }

    def to_document(self) -> dict[str, Any]:
        doc = self.public_view()
        doc["passwordHash"] = self.password_hash
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "User":
        return cls(
            id=str(doc["id"]),
            email=doc["email"],
            password_hash=doc["passwordHash"],
            name=doc.get("name") or "",
            role=Role(doc.get("role", Role.EMPLOYEE.value)),
            employee_id=doc.get("employeeId") or "",
            department=doc.get("department") or "",
            created_at=from_iso(doc.get("createdAt")) or datetime.min,
        )


@dataclass(frozen=True)
class CurrentUser:
    """Identity attached to a request after token verification."""

    id: str
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
