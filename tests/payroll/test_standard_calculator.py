from src.ops_dashboard.ops_dashboard.core.enums import AttendanceStatus
from src.ops_dashboard.ops_dashboard.payroll.calculator.standard_calculator import DayRateSalaryCalculator


def test_day_rate_per_status():
    calc = DayRateSalaryCalculator(400)

    assert calc.amount_for(AttendanceStatus.PRESENT) == 400
    assert calc.amount_for(AttendanceStatus.HALF_DAY) == 200
    assert calc.amount_for(AttendanceStatus.ABSENT) == 0
    assert calc.amount_for(AttendanceStatus.LEAVE) == 0
    assert calc.amount_for(None) == 0


def test_half_day_is_not_rounded():
    assert DayRateSalaryCalculator(401).amount_for(AttendanceStatus.HALF_DAY) == 200.5
