"""日历聚合测试。"""
from datetime import date, datetime

from petcare.care.calendar_days import (
    CalendarFilter,
    calendar_day,
    month_grid,
    month_view,
    shift_month,
)
from petcare.care.due import CalendarMarkKind
from petcare.care.models import CareSnapshot, Pet, Record
from petcare.store import default_task_types

MIMI = Pet(id="p1", name="咪咪", birthday=date(2019, 3, 10), theme_color="#FCA5A5")
WANGCAI = Pet(id="p2", name="旺财", type="狗", birthday=date(2020, 7, 1), theme_color="#93C5FD")
ALL = CalendarFilter()


def _snapshot() -> CareSnapshot:
    records = (
        Record(id="r1", pet_id="p1", task_type_id="3", date=datetime(2024, 1, 1, 9, 0)),
        Record(id="r2", pet_id="p2", task_type_id="3", date=datetime(2024, 1, 1, 18, 0)),
        Record(id="r3", pet_id="p1", task_type_id="1", date=datetime(2024, 1, 1, 10, 0), value=4.2),
        Record(id="r8", pet_id="p1", task_type_id="99", date=datetime(2024, 1, 1, 11, 0)),
        Record(id="r9", pet_id="ghost", task_type_id="3", date=datetime(2024, 1, 1, 12, 0)),
    )
    return CareSnapshot(pets=(MIMI, WANGCAI), task_types=tuple(default_task_types()), records=records)


def test_month_grid_leading_blanks() -> None:
    grid = month_grid(2024, 9)  # 2024-09-01 是周日
    assert grid[0] == 1
    assert len(grid) == 30
    grid = month_grid(2024, 2)  # 2024-02-01 是周四
    assert grid[:5] == [None, None, None, None, 1]
    assert grid[-1] == 29


def test_shift_month_keeps_day_when_possible() -> None:
    assert shift_month(2024, 3, 15, -1) == (2024, 2, 15)
    assert shift_month(2024, 12, 5, 1) == (2025, 1, 5)
    assert shift_month(2024, 1, 10, -1) == (2023, 12, 10)
    assert shift_month(2024, 1, 31, 1) == (2024, 2, None)


def test_nonexistent_day_is_empty() -> None:
    now = datetime(2024, 2, 1)
    day = calendar_day(2024, 2, 30, _snapshot(), ALL, now)
    assert day.day is None
    assert day.is_empty
    assert calendar_day(2024, 2, None, _snapshot(), ALL, now).is_empty


def test_day_records_with_filters() -> None:
    now = datetime(2024, 1, 5)
    day = calendar_day(2024, 1, 1, _snapshot(), ALL, now)
    assert {r.id for r in day.records} == {"r1", "r2", "r3"}
    assert set(day.record_colors) == {"#FCA5A5", "#93C5FD"}
    assert len(day.record_colors) == 2

    only_mimi = calendar_day(2024, 1, 1, _snapshot(), CalendarFilter(pet_id="p1"), now)
    assert {r.id for r in only_mimi.records} == {"r1", "r3"}
    assert only_mimi.record_colors == ("#FCA5A5",)

    deworm = calendar_day(2024, 1, 1, _snapshot(), CalendarFilter(task_type_id="3"), now)
    assert {r.id for r in deworm.records} == {"r1", "r2"}


def test_due_day_marks() -> None:
    now = datetime(2024, 2, 5, 8, 0)
    day = calendar_day(2024, 1, 31, _snapshot(), ALL, now)
    assert [m.kind for m in day.reminders] == [CalendarMarkKind.DUE, CalendarMarkKind.DUE]
    assert {m.reminder.pet.id for m in day.reminders} == {"p1", "p2"}
    assert day.reminder_colors == ("#10b981",)
    assert day.reminders[0].reminder.days_offset == -5


def test_still_overdue_marks_today_only() -> None:
    now = datetime(2024, 2, 5, 8, 0)
    today = calendar_day(2024, 2, 5, _snapshot(), ALL, now)
    assert [m.kind for m in today.reminders] == [CalendarMarkKind.STILL_OVERDUE] * 2
    yesterday = calendar_day(2024, 2, 4, _snapshot(), ALL, now)
    assert yesterday.reminders == ()

    only_wangcai = calendar_day(2024, 2, 5, _snapshot(), CalendarFilter(pet_id="p2"), now)
    assert [m.reminder.pet.id for m in only_wangcai.reminders] == ["p2"]
    bath = calendar_day(2024, 2, 5, _snapshot(), CalendarFilter(task_type_id="4"), now)
    assert bath.reminders == ()


def test_upcoming_due_day_is_marked() -> None:
    now = datetime(2024, 1, 10)
    day = calendar_day(2024, 1, 31, _snapshot(), ALL, now)
    assert len(day.reminders) == 2
    assert calendar_day(2024, 1, 10, _snapshot(), ALL, now).reminders == ()


def test_birthday_ignores_year() -> None:
    now = datetime(2024, 1, 1)
    for year in (2019, 2024, 2031):
        day = calendar_day(year, 3, 10, _snapshot(), ALL, now)
        assert [p.id for p in day.birthdays] == ["p1"]
        assert day.birthday_colors == ("#FCA5A5",)
    assert calendar_day(2024, 3, 10, _snapshot(), CalendarFilter(pet_id="p2"), now).birthdays == ()


def test_month_view_matches_single_day() -> None:
    now = datetime(2024, 2, 5)
    days = month_view(2024, 1, _snapshot(), ALL, now)
    assert len(days) == 31
    assert days[0] == calendar_day(2024, 1, 1, _snapshot(), ALL, now)
    assert days[30] == calendar_day(2024, 1, 31, _snapshot(), ALL, now)
    assert days[1].is_empty
