from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from conftest import BARBER_ID
from barberbook.core.clock import day_of_week, format_minutes, normalize_time, to_minutes
from barberbook.schemas.schedule_schema import WeeklyScheduleUpdate, WorkingSchedule
from barberbook.services import schedule_service


def _week(overrides: dict | None = None) -> list[dict]:
    days = []
    for day in range(7):
        item = {"day_of_week": day, "start_time": "09:00", "end_time": "18:00", "is_active": 1 <= day <= 5}
        item.update((overrides or {}).get(day, {}))
        days.append(item)
    return days


# ==================== Time helpers ====================

def test_time_conversion() -> None:
    assert to_minutes("09:30") == 570
    assert to_minutes("09:30:00") == 570
    assert format_minutes(570) == "09:30"
    assert normalize_time("7:05:00") == "07:05"


@pytest.mark.parametrize("value", ["9h30", "25:00", "10:75", ""])
def test_invalid_time_rejected(value) -> None:
    with pytest.raises(ValueError):
        to_minutes(value)


def test_day_of_week_starts_on_sunday() -> None:
    assert day_of_week(date(2026, 10, 18)) == 0  # Chủ nhật
    assert day_of_week(date(2026, 10, 19)) == 1
    assert day_of_week(date(2026, 10, 24)) == 6


# ==================== Schedule validation ====================

def test_schedule_normalizes_database_times() -> None:
    schedule = WorkingSchedule(
        day_of_week=1, start_time="09:00:00", end_time="18:00:00",
        has_break=None, break_tolerance_enabled=None, break_tolerance_minutes=None,
    )

    assert schedule.start_time == "09:00"
    assert schedule.has_break is False
    assert schedule.break_window is None
    assert schedule.tolerance_minutes == 0


def test_schedule_requires_start_before_end() -> None:
    with pytest.raises(ValidationError):
        WorkingSchedule(day_of_week=1, start_time="18:00", end_time="09:00")


def test_break_must_lie_within_working_hours() -> None:
    with pytest.raises(ValidationError):
        WorkingSchedule(day_of_week=1, start_time="09:00", end_time="18:00",
                        has_break=True, break_start="08:00", break_end="09:30")


def test_break_requires_both_bounds() -> None:
    with pytest.raises(ValidationError):
        WorkingSchedule(day_of_week=1, start_time="09:00", end_time="18:00",
                        has_break=True, break_start="12:00")


def test_break_fields_ignored_without_has_break() -> None:
    schedule = WorkingSchedule(day_of_week=1, start_time="09:00", end_time="18:00",
                               break_start="20:00", break_end="21:00")
    assert schedule.break_window is None


def test_weekly_update_requires_all_seven_days() -> None:
    with pytest.raises(ValidationError):
        WeeklyScheduleUpdate(days=_week()[:6])

    duplicated = _week()
    duplicated[6]["day_of_week"] = 5
    with pytest.raises(ValidationError):
        WeeklyScheduleUpdate(days=duplicated)


# ==================== Schedule service ====================

def test_weekly_schedule_fills_defaults(repository) -> None:
    week = schedule_service.get_weekly_schedule(repository, BARBER_ID)

    assert [d.day_of_week for d in week] == list(range(7))
    assert week[0].is_active is False
    assert week[2].is_active is True
    assert week[2].start_time == "09:00"


def test_replace_weekly_schedule_overwrites_every_day(repository) -> None:
    data = WeeklyScheduleUpdate(days=_week({
        1: {"start_time": "10:00", "end_time": "16:00", "has_break": True,
            "break_start": "12:00", "break_end": "12:30",
            "break_tolerance_enabled": True, "break_tolerance_minutes": 10},
    }))

    result = schedule_service.replace_weekly_schedule(repository, BARBER_ID, data)

    assert len(result["schedules"]) == 7
    monday = repository.get_schedule(BARBER_ID, 1)
    assert monday.start_time == "10:00"
    assert monday.break_window == (720, 750)
    assert monday.tolerance_minutes == 10
    assert repository.get_schedule(BARBER_ID, 0) is None
