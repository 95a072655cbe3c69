from __future__ import annotations

from enum import Enum


class WorkStatus(str, Enum):
    """Lifecycle of a pending work item."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class WorkType(str, Enum):
    MEMBERSHIP = "membership"
    INDIVIDUAL = "individual"


class AttendanceStatus(str, Enum):
    """Status values stored on attendance documents."""

    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half-day"
    LEAVE = "leave"


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
