from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import AlreadyCheckedIn
from ..database.document_store import JsonFileDocument, MemoryDocument
from .model import AttendanceRecord
from .repository import AttendanceRepository


class DocumentAttendanceRepository(AttendanceRepository):
    """Attendance kept as one JSON array (in memory or in attendance.json)."""

    def __init__(self, document: MemoryDocument | JsonFileDocument):
        self._doc = document

    def _load(self) -> list[AttendanceRecord]:
        return [AttendanceRecord.from_document(d) for d in self._doc.read()]

    def get_for_user_and_date(self, user_id: str, work_date: str) -> Optional[AttendanceRecord]:
        return next((r for r in self._load() if r.user_id == user_id and r.date == work_date), None)

    def list_records(
        self,
        *,
        user_id: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        rows = self._load()
        if user_id:
            rows = [r for r in rows if r.user_id == user_id]
        # Zero-padded YYYY-MM-DD compares correctly as plain strings.
        if start_date:
            rows = [r for r in rows if r.date >= start_date]
        if end_date:
            rows = [r for r in rows if r.date <= end_date]
        return rows

    def list_for_date_prefix(self, prefix: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._load() if r.date.startswith(prefix)]

    def create_checkin(self, record: AttendanceRecord) -> None:
        with self._doc.lock:
            items = self._doc.read()
            for d in items:
                if d.get("userId") == record.user_id and d.get("date") == record.date:
                    raise AlreadyCheckedIn()
            items.append(record.to_document())
            self._doc.write(items)

    def update_checkout(self, record: AttendanceRecord) -> bool:
        with self._doc.lock:
            items = self._doc.read()
            for i, d in enumerate(items):
                if d.get("id") == record.id:
                    if d.get("checkOut"):
                        # already closed by an earlier request
                        return False
                    items[i] = record.to_document()
                    self._doc.write(items)
                    return True
            return False
