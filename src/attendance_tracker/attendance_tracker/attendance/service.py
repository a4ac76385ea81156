from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Callable, Optional

from ..common.datetime_utils import day_key, now_local
from ..core.constants import UNKNOWN_USER_LABEL
from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyCheckedIn, AlreadyCheckedOut, NoCheckInRecord
from ..users.model import CurrentUser
from ..users.repository import UserRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    """Check-in/check-out with "once per user per day" semantics.

    "Today" is the local calendar day of the injected clock; every method also
    accepts an explicit `now` so callers and tests can pin the time.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._users = users
        self._clock = clock

    def check_in(self, caller: CurrentUser, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or self._clock()
        today = day_key(now)

        existing = self._attendance.get_for_user_and_date(caller.id, today)
        if existing and existing.has_checked_in:
            raise AlreadyCheckedIn()

        record = AttendanceRecord(
            id=str(uuid.uuid4()),
            user_id=caller.id,
            date=today,
            check_in=now,
            status=AttendanceStatus.PRESENT,
        )
        self._attendance.create_checkin(record)
        return record

    def check_out(self, caller: CurrentUser, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or self._clock()
        today = day_key(now)

        record = self._attendance.get_for_user_and_date(caller.id, today)
        if not record:
            raise NoCheckInRecord()
        if record.has_checked_out:
            raise AlreadyCheckedOut()

        closed = record.closed_at(now)
        if not self._attendance.update_checkout(closed):
            # lost a race with a concurrent check-out
            raise AlreadyCheckedOut()
        return closed

    def list_attendance(
        self,
        caller: CurrentUser,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        # Employees only ever see their own records, whatever user_id they pass.
        owner = user_id if caller.is_admin else caller.id

        rows = self._attendance.list_records(user_id=owner or None, start_date=start_date, end_date=end_date)
        users = {u.id: u for u in self._users.list_all()}

        out: list[dict[str, Any]] = []
        for r in rows:
            doc = r.to_document()
            user = users.get(r.user_id)
            doc["userName"] = user.name if user else UNKNOWN_USER_LABEL
            doc["employeeId"] = user.employee_id if user else UNKNOWN_USER_LABEL
            out.append(doc)
        return out

    def today_status(self, caller: CurrentUser, *, now: datetime | None = None) -> dict[str, Any]:
        now = now or self._clock()
        record = self._attendance.get_for_user_and_date(caller.id, day_key(now))
        return {
            "hasCheckedIn": bool(record and record.has_checked_in),
            "hasCheckedOut": bool(record and record.has_checked_out),
            "record": record.to_document() if record else None,
        }
