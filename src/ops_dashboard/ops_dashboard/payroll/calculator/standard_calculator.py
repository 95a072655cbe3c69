from __future__ import annotations

from typing import Optional

from ...core.constants import DEFAULT_DAY_RATE
from ...core.enums import AttendanceStatus
from .base import SalaryCalculator


class DayRateSalaryCalculator(SalaryCalculator):
    """Standard rule: present earns the day rate, half-day half of it, absent/leave nothing."""

    def __init__(self, day_rate: float = DEFAULT_DAY_RATE):
        self.day_rate = day_rate

    def amount_for(self, status: Optional[AttendanceStatus]) -> float:
        if status == AttendanceStatus.PRESENT:
            return self.day_rate
        if status == AttendanceStatus.HALF_DAY:
            return self.day_rate / 2
        return 0
