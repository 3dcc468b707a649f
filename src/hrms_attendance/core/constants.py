"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EMPLOYEE_ID_COLUMN = "Employee ID"
DATE_COLUMN = "Date"
TIMES_COLUMN = "Times"

# Punch values start at this column index in the device export.
DEFAULT_PUNCH_COLUMN_OFFSET = 5

# Values of the "Times" column meaning "no punches recorded".
NO_PUNCH_SENTINELS = frozenset({"", "0"})

DEFAULT_MAX_SAVE_RETRIES = 3
MAX_ROWS_PER_PAGE = 500

LEAVE_DATE_FORMAT = "%d/%m/%Y"
UPLOAD_COMPLETE_MESSAGE = "Attendance Uploaded"
