from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_user_and_date(self, user_id: str, work_date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_records(
        self,
        *,
        user_id: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records in insertion order; date bounds are inclusive."""

        raise NotImplementedError

    def list_for_date_prefix(self, prefix: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(self, record: AttendanceRecord) -> None:
        """Append a record. Raises AlreadyCheckedIn if (user_id, date) is taken."""

        raise NotImplementedError

    def update_checkout(self, record: AttendanceRecord) -> bool:
        raise NotImplementedError
