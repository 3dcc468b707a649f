from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account roles used for authorization."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    LEAVE = "Leave"
    HALF_DAY = "Half Day"


class LeaveType(str, Enum):
    SICK = "Sick Leave"
    PERSONAL = "Personal Leave"
    OTHERS = "Others"


class LeaveStatus(str, Enum):
    """Leave application workflow states."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class DuplicatePolicy(str, Enum):
    """What the writer does when a record for (employee, date) already exists."""

    APPEND = "append"
    UPSERT = "upsert"
