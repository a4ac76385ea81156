from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import from_iso, hours_between, to_iso
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one user's attendance for one calendar day."""

    id: str
    user_id: str
    date: str
    check_in: Optional[datetime]
    check_out: Optional[datetime] = None
    total_hours: Optional[float] = None
    status: AttendanceStatus = AttendanceStatus.PRESENT

    @property
    def has_checked_in(self) -> bool:
        return self.check_in is not None

    @property
    def has_checked_out(self) -> bool:
        return self.check_out is not None

    def closed_at(self, check_out: datetime) -> "AttendanceRecord":
        total = hours_between(self.check_in, check_out) if self.check_in else None
        return replace(self, check_out=check_out, total_hours=total)

    def to_document(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "date": self.date,
            "checkIn": to_iso(self.check_in),
            "checkOut": to_iso(self.check_out),
            "totalHours": self.total_hours,
            "status": self.status.value,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "AttendanceRecord":
        total = doc.get("totalHours")
        return cls(
            id=str(doc["id"]),
            user_id=str(doc["userId"]),
            date=doc["date"],
            check_in=from_iso(doc.get("checkIn")),
            check_out=from_iso(doc.get("checkOut")),
            total_hours=float(total) if total is not None else None,
            status=AttendanceStatus(doc.get("status", AttendanceStatus.PRESENT.value)),
        )
