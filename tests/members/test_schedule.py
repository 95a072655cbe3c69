from datetime import date

from src.ops_dashboard.ops_dashboard.members.schedule import member_schedule, next_due_date, parse_duration


def test_parse_duration():
    assert parse_duration("30days") == (30, "day")
    assert parse_duration("3month") == (3, "month")
    assert parse_duration("12 Months") == (12, "month")
    assert parse_duration("weekly") is None
    assert parse_duration(None) is None


def test_next_due_date_days_and_months():
    assert next_due_date("2025-01-01", "30days") == date(2025, 1, 31)
    assert next_due_date("2025-01-01", "3month") == date(2025, 4, 1)


def test_month_end_is_clamped():
    assert next_due_date("2025-01-31", "1month") == date(2025, 2, 28)


def test_unparseable_inputs_have_no_due_date():
    assert next_due_date("", "3month") is None
    assert next_due_date("01/01/2025", "3month") is None
    assert next_due_date("2025-01-01", "forever") is None


def test_schedule_flags():
    due = member_schedule("2025-01-01", "30days", today=date(2025, 1, 31))
    assert due.days_remaining == 0
    assert due.is_work_day
    assert not due.is_overdue

    late = member_schedule("2025-01-01", "30days", today=date(2025, 2, 2))
    assert late.days_remaining == -2
    assert late.is_overdue

    assert member_schedule("2025-01-01", None, today=date(2025, 1, 1)).to_dict() == {
        "nextDate": None,
        "daysRemaining": None,
        "isWorkDay": False,
        "isOverdue": False,
    }
