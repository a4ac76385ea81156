"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_TTL_HOURS = 24
JWT_ALGORITHM = "HS256"

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

UNKNOWN_USER_LABEL = "Unknown"

USERS_DOCUMENT = "users.json"
ATTENDANCE_DOCUMENT = "attendance.json"
